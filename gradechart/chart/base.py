"""
Base classes for chart rendering.

Defines the interface a renderer implements: turn aggregated chart
data into a figure, keeping the category order and colours given.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import NamedTuple

from matplotlib.figure import Figure

from gradechart.models import ChartData, ResolutionResult


class RenderError(Exception):
    """
    Raised when a chart cannot be rendered or saved.

    Contains the underlying cause when there is one.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class Chart(NamedTuple):
    """A rendered bar chart and the data behind it."""

    figure: Figure
    data: ChartData
    resolution: ResolutionResult


class BarChartRenderer(ABC):
    """
    Abstract base class for bar chart renderers.

    Implementations draw one bar per category, in the order given,
    using the colour aligned with each category.
    """

    @abstractmethod
    def render(self, data: ChartData) -> Figure:
        """
        Render chart data as a figure.

        Args:
            data: Aggregated values with categories, colours and axis labels.

        Returns:
            The rendered figure.

        Raises:
            RenderError: If rendering fails.
        """
        ...

    def save(self, chart: Chart, path: Path, dpi: int | None = None) -> Path:
        """
        Save a rendered chart to disk.

        Args:
            chart: Chart to save.
            path: Destination file; the suffix picks the image format.
            dpi: Resolution override.

        Returns:
            The path written.

        Raises:
            RenderError: If the file can't be written.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if dpi is None:
                chart.figure.savefig(path, bbox_inches="tight", facecolor="white")
            else:
                chart.figure.savefig(path, dpi=dpi, bbox_inches="tight", facecolor="white")
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to save chart to '{path}': {e}", cause=e) from e
        return path
