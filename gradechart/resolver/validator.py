"""
Input validation module.

Classifies caller input into a flat sequence, a table, or nothing, and
normalizes the chart type and force-scheme arguments. Missing and
malformed arguments abort the call; everything else is recoverable.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, NamedTuple

import numpy as np
import pandas as pd

from gradechart.models import ChartType, SchemeId

logger = logging.getLogger(__name__)

DATA_ARGUMENT = "data"
CHART_TYPE_ARGUMENT = "chart_type"

# Text used for missing observations (None, NaN, pd.NA)
MISSING_LABEL = "NA"

# Accepted spellings of each chart type (case-sensitive)
CHART_TYPE_SYNONYMS: MappingProxyType[str, ChartType] = MappingProxyType(
    {
        **{
            name: ChartType.PERCENTAGE
            for name in (
                "Percentage", "percentage", "percent", "Percent", "perc", "Perc", "p",
                "Percentages", "percentages", "percents", "Percents", "percs", "Percs", "ps",
            )
        },
        **{
            name: ChartType.FREQUENCY
            for name in (
                "Frequency", "frequency", "freq", "Freq", "F", "f",
                "Frequencies", "frequencies", "freqs", "Freqs", "Fs", "fs",
            )
        },
    }
)

# Schemes a caller may force to break ties
FORCEABLE_SCHEMES: tuple[SchemeId, ...] = (
    SchemeId.USE,
    SchemeId.UBS,
    SchemeId.PF,
    SchemeId.CIDK,
    SchemeId.CNINC,
)


class ChartInputError(Exception):
    """Base class for errors that abort a chart request."""

    def __init__(self, message: str, arguments: list[str]):
        self.arguments = arguments
        super().__init__(message)


class MissingInputError(ChartInputError):
    """Raised when one or more required arguments were not supplied."""

    def __init__(self, arguments: list[str]):
        noun = "Argument" if len(arguments) == 1 else "Arguments"
        super().__init__(
            f"Function aborted. {noun} missing - {', '.join(arguments)}", arguments
        )


class WrongFormatError(ChartInputError):
    """Raised when an argument was supplied in a shape or value that can't be used."""

    def __init__(self, arguments: list[str], details: list[str] | None = None):
        self.details = details or []
        noun = "Input" if len(arguments) == 1 else "Inputs"
        message = (
            f"Function aborted. {noun} in incorrect format - {', '.join(arguments)}. "
            "Data must be a single flat sequence of values and chart_type one of "
            "'Frequency' or 'Percentage'."
        )
        if self.details:
            message += "\n" + "\n".join(f"  - {d}" for d in self.details)
        super().__init__(message, arguments)


class InputShape(str, Enum):
    """Shape of the data argument."""

    ABSENT = "absent"
    FLAT = "flat"  # One value per observation
    TABULAR = "tabular"  # Several columns or nested sequences


class ClassifiedInput(NamedTuple):
    """Data argument with its shape and materialized values."""

    shape: InputShape
    values: tuple[Any, ...]


def _is_scalar(value: Any) -> bool:
    """Check if a value is a single observation rather than a collection."""
    return isinstance(value, (str, bytes)) or not isinstance(value, Iterable)


def classify_data(data: Any) -> ClassifiedInput:
    """
    Classify the data argument.

    Args:
        data: Caller-supplied data; None means not supplied.

    Returns:
        The shape and, for flat input, its values in order.
    """
    if data is None:
        return ClassifiedInput(InputShape.ABSENT, ())

    if isinstance(data, (pd.DataFrame, Mapping)):
        return ClassifiedInput(InputShape.TABULAR, ())

    if isinstance(data, np.ndarray):
        if data.ndim == 0:
            return ClassifiedInput(InputShape.FLAT, (data.item(),))
        if data.ndim > 1:
            return ClassifiedInput(InputShape.TABULAR, ())

    if _is_scalar(data):
        return ClassifiedInput(InputShape.FLAT, (data,))

    # Series, Categorical, Index, arrays, lists, tuples and other iterables
    values = tuple(data)
    if not all(_is_scalar(v) for v in values):
        return ClassifiedInput(InputShape.TABULAR, ())

    return ClassifiedInput(InputShape.FLAT, values)


def coerce_label(value: Any) -> str:
    """
    Convert a single observation to the text used for catalog matching.

    Whole numbers lose their decimal part so 1.0 matches "1"; missing
    values become "NA".
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if value is None or value is pd.NA or value is pd.NaT:
        return MISSING_LABEL
    if isinstance(value, (bool, np.bool_)):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        number = float(value)
        if math.isnan(number):
            return MISSING_LABEL
        if number.is_integer():
            return str(int(number))
        if isinstance(value, np.floating):
            return np.format_float_positional(value, trim="-")
        return str(number)
    return str(value)


def normalize_chart_type(chart_type: Any) -> ChartType | None:
    """
    Map a chart type argument to a ChartType.

    Args:
        chart_type: ChartType instance or one of the accepted spellings.

    Returns:
        The chart type, or None if the value isn't recognised.
    """
    if isinstance(chart_type, ChartType):
        return chart_type
    if isinstance(chart_type, str):
        return CHART_TYPE_SYNONYMS.get(chart_type)
    return None


def parse_force_scheme(force_scheme: Any) -> SchemeId | None:
    """
    Interpret the force-scheme argument.

    Only USE, UBS, PF, CIDK and CNINC have an effect; any other value is
    treated as not supplied.
    """
    if force_scheme is None:
        return None
    if isinstance(force_scheme, SchemeId):
        scheme = force_scheme
    elif isinstance(force_scheme, str) and force_scheme in {s.value for s in FORCEABLE_SCHEMES}:
        scheme = SchemeId(force_scheme)
    else:
        scheme = None

    if scheme not in FORCEABLE_SCHEMES:
        logger.debug("Ignoring force scheme %r", force_scheme)
        return None
    return scheme


class InputValidator:
    """
    Validates the arguments of a chart request.

    Checks:
    1. Required arguments are present
    2. Data is a non-empty flat sequence of scalar values
    3. Chart type is a recognised spelling of Frequency or Percentage

    All missing arguments are reported together, before any format problem.
    """

    def validate_data(self, data: Any) -> tuple[Any, ...]:
        """
        Validate the data argument on its own.

        Args:
            data: Caller-supplied data.

        Returns:
            The observations in input order.

        Raises:
            MissingInputError: If data was not supplied.
            WrongFormatError: If data is tabular or empty.
        """
        classified = classify_data(data)
        if classified.shape == InputShape.ABSENT:
            raise MissingInputError([DATA_ARGUMENT])

        issues = self._data_issues(classified)
        if issues:
            raise WrongFormatError([DATA_ARGUMENT], issues)
        return classified.values

    def validate(self, data: Any, chart_type: Any) -> tuple[tuple[Any, ...], ChartType]:
        """
        Validate data and chart type together.

        Args:
            data: Caller-supplied data.
            chart_type: Caller-supplied chart type.

        Returns:
            Tuple of (observations, chart type).

        Raises:
            MissingInputError: If either argument was not supplied.
            WrongFormatError: If either argument has the wrong shape or value.
        """
        classified = classify_data(data)

        missing: list[str] = []
        if classified.shape == InputShape.ABSENT:
            missing.append(DATA_ARGUMENT)
        if chart_type is None:
            missing.append(CHART_TYPE_ARGUMENT)
        if missing:
            raise MissingInputError(missing)

        malformed: list[str] = []
        issues = self._data_issues(classified)
        if issues:
            malformed.append(DATA_ARGUMENT)

        resolved_type = normalize_chart_type(chart_type)
        if resolved_type is None:
            malformed.append(CHART_TYPE_ARGUMENT)
            issues.append(f"Unrecognised chart type: {chart_type!r}")

        if malformed:
            raise WrongFormatError(malformed, issues)

        return classified.values, resolved_type  # type: ignore[return-value]

    def _data_issues(self, classified: ClassifiedInput) -> list[str]:
        """Describe what is wrong with a supplied data argument."""
        issues: list[str] = []

        if classified.shape == InputShape.TABULAR:
            issues.append(
                "Data looks like a table or nested sequence; pass a single column instead"
            )
        elif not classified.values:
            issues.append("Data contains no values")

        return issues
