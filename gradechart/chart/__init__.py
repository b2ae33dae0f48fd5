"""
Chart Module.

Aggregates normalized labels per level and renders them as bar charts.
"""

from gradechart.chart.aggregate import aggregate, count_levels
from gradechart.chart.base import BarChartRenderer, Chart, RenderError
from gradechart.chart.matplotlib_renderer import MatplotlibBarChartRenderer

__all__ = [
    "BarChartRenderer",
    "Chart",
    "MatplotlibBarChartRenderer",
    "RenderError",
    "aggregate",
    "count_levels",
]
