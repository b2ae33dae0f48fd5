"""
Scheme Resolver Module.

Infers which scheme a sequence of raw labels belongs to and
normalizes the labels to that scheme's canonical levels.
"""

from gradechart.resolver.engine import SchemeResolver
from gradechart.resolver.scorer import CoverageScorer
from gradechart.resolver.validator import (
    ChartInputError,
    InputShape,
    InputValidator,
    MissingInputError,
    WrongFormatError,
    classify_data,
    normalize_chart_type,
)

__all__ = [
    "ChartInputError",
    "CoverageScorer",
    "InputShape",
    "InputValidator",
    "MissingInputError",
    "SchemeResolver",
    "WrongFormatError",
    "classify_data",
    "normalize_chart_type",
]
