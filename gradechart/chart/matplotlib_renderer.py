"""
Bar chart renderer using matplotlib.

Builds figures through the object-oriented Figure API rather than
pyplot, so no global figure state is shared between calls.
"""

import logging
from typing import ClassVar

from matplotlib.figure import Figure

from gradechart.chart.base import BarChartRenderer, RenderError
from gradechart.config import Settings, get_settings
from gradechart.models import ChartData, ChartType

logger = logging.getLogger(__name__)


class MatplotlibBarChartRenderer(BarChartRenderer):
    """
    Renders bar charts on a light, minimal theme.

    Every category stays on the axis even with a zero value, and
    percentage charts always span 0-100.
    """

    BORDER_COLOUR: ClassVar[str] = "#D3D3D3"
    MAJOR_GRID_COLOUR: ClassVar[str] = "#D3D3D3"
    MINOR_GRID_COLOUR: ClassVar[str] = "#F5F5F5"
    AXIS_LINE_COLOUR: ClassVar[str] = "#000000"

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the renderer.

        Args:
            settings: Configuration settings. Uses global settings if not provided.
        """
        self._settings = settings or get_settings()

    def render(self, data: ChartData) -> Figure:
        """
        Draw one bar per category in axis order.

        Args:
            data: Aggregated chart data.

        Returns:
            The rendered matplotlib Figure.

        Raises:
            RenderError: If matplotlib rejects the data (e.g. a bad colour).
        """
        try:
            figure = Figure(figsize=(self._settings.figure_width, self._settings.figure_height))
            axes = figure.add_subplot()

            positions = range(len(data.categories))
            axes.bar(positions, data.values, color=list(data.colours), width=0.9)
            axes.set_xticks(list(positions), labels=list(data.categories))
            axes.set_xlim(-0.6, len(data.categories) - 0.4)

            if data.chart_type == ChartType.PERCENTAGE:
                axes.set_ylim(0, 100)
            else:
                axes.set_ylim(bottom=0)

            axes.set_xlabel(data.x_label)
            axes.set_ylabel(data.y_label)
            self._apply_theme(axes)
        except ValueError as e:
            raise RenderError(f"Could not render chart: {e}", cause=e) from e

        logger.debug("Rendered %s chart with %d categories", data.y_label, len(data.categories))
        return figure

    def _apply_theme(self, axes) -> None:
        """Apply text sizes, grid and borders to an Axes."""
        size = self._settings.font_size

        axes.xaxis.label.set_fontsize(size)
        axes.xaxis.label.set_fontweight("bold")
        axes.yaxis.label.set_fontsize(size)
        axes.yaxis.label.set_fontweight("bold")
        axes.tick_params(axis="both", labelsize=size, colors="black")

        axes.set_axisbelow(True)
        axes.minorticks_on()
        axes.tick_params(axis="x", which="minor", bottom=False)
        axes.grid(which="major", color=self.MAJOR_GRID_COLOUR)
        axes.grid(which="minor", axis="y", color=self.MINOR_GRID_COLOUR)

        for side in ("top", "right"):
            axes.spines[side].set_color(self.BORDER_COLOUR)
        for side in ("bottom", "left"):
            axes.spines[side].set_color(self.AXIS_LINE_COLOUR)
