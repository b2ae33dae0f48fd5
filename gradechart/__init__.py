"""
gradechart - bar charts of grades and responses with scheme inference.

Recognises which grading or response scheme a set of labels uses,
normalizes inconsistent spellings to canonical labels, and plots
frequencies or percentages with a fixed level order and colours.
"""

from gradechart.api import bar_chart
from gradechart.catalog import SchemeCatalog, get_catalog
from gradechart.chart import Chart, aggregate
from gradechart.models import ChartType, ResolutionResult, SchemeId
from gradechart.resolver import (
    ChartInputError,
    MissingInputError,
    SchemeResolver,
    WrongFormatError,
)

__version__ = "1.0.0"

__all__ = [
    "Chart",
    "ChartInputError",
    "ChartType",
    "MissingInputError",
    "ResolutionResult",
    "SchemeCatalog",
    "SchemeId",
    "SchemeResolver",
    "WrongFormatError",
    "aggregate",
    "bar_chart",
    "get_catalog",
]
