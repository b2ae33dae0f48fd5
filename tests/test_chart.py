"""
Unit tests for chart aggregation and rendering.

Tests frequency and percentage aggregation, the matplotlib renderer,
and saving charts to disk.
"""

from pathlib import Path

import pytest
from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from gradechart.chart import (
    Chart,
    MatplotlibBarChartRenderer,
    RenderError,
    aggregate,
    count_levels,
)
from gradechart.models import ChartData, ChartType, ResolutionResult, SchemeId
from gradechart.resolver import SchemeResolver


class TestCountLevels:
    """Tests for count_levels()."""

    def test_zero_levels_kept(self, resolver: SchemeResolver, use_like_grades: list[str]) -> None:
        """Test levels nobody was awarded are counted as zero."""
        counts = count_levels(resolver.resolve(use_like_grades))

        assert list(counts.index) == ["Unsatisfactory", "Borderline", "Satisfactory", "Excellent"]
        assert list(counts) == [1, 0, 3, 2]

    def test_unknown_levels(self, resolver: SchemeResolver) -> None:
        """Test unknown schemes count in order of appearance."""
        counts = count_levels(resolver.resolve(["W", "U", "W"]))

        assert list(counts.index) == ["W", "U"]
        assert list(counts) == [2, 1]


class TestAggregate:
    """Tests for aggregate()."""

    def test_frequency(self, resolver: SchemeResolver, use_like_grades: list[str]) -> None:
        """Test frequency values are counts summing to the number of observations."""
        data = aggregate(resolver.resolve(use_like_grades), ChartType.FREQUENCY)

        assert data.values == (1.0, 0.0, 3.0, 2.0)
        assert data.total_value == len(use_like_grades)
        assert data.total_observations == 6
        assert data.y_label == "Frequency"
        assert data.x_label == "Grade"

    def test_percentage(self, resolver: SchemeResolver, use_like_grades: list[str]) -> None:
        """Test percentage values sum to 100 and keep zero levels."""
        data = aggregate(resolver.resolve(use_like_grades), ChartType.PERCENTAGE)

        assert data.values == pytest.approx((100 / 6, 0.0, 50.0, 200 / 6))
        assert data.total_value == pytest.approx(100.0)
        assert data.y_label == "Percentage"

    def test_colours_follow_levels(self, resolver: SchemeResolver, ubse_grades: list[str]) -> None:
        """Test categories and colours come from the resolution."""
        result = resolver.resolve(ubse_grades)
        data = aggregate(result, ChartType.FREQUENCY)

        assert data.categories == result.levels
        assert data.colours == result.colours

    def test_response_axis(self, resolver: SchemeResolver) -> None:
        """Test CIDK charts are labelled as responses."""
        data = aggregate(resolver.resolve(["C", "I", "DK"]), ChartType.PERCENTAGE)

        assert data.x_label == "Response"


class TestMatplotlibRenderer:
    """Tests for MatplotlibBarChartRenderer."""

    def test_render_bars(
        self,
        renderer: MatplotlibBarChartRenderer,
        resolver: SchemeResolver,
        use_like_grades: list[str],
    ) -> None:
        """Test one bar per category, in order, with its colour."""
        data = aggregate(resolver.resolve(use_like_grades), ChartType.FREQUENCY)
        figure = renderer.render(data)

        assert isinstance(figure, Figure)
        axes = figure.axes[0]
        bars = axes.patches
        assert len(bars) == 4
        assert [bar.get_height() for bar in bars] == [1.0, 0.0, 3.0, 2.0]
        assert [to_hex(bar.get_facecolor()) for bar in bars] == [
            c.lower() for c in data.colours
        ]
        assert [t.get_text() for t in axes.get_xticklabels()] == list(data.categories)
        assert axes.get_xlabel() == "Grade"
        assert axes.get_ylabel() == "Frequency"

    def test_percentage_axis_range(
        self, renderer: MatplotlibBarChartRenderer, resolver: SchemeResolver
    ) -> None:
        """Test percentage charts always span 0 to 100."""
        data = aggregate(resolver.resolve(["U", "U", "U"]), ChartType.PERCENTAGE)
        axes = renderer.render(data).axes[0]

        assert axes.get_ylim() == (0.0, 100.0)

    def test_frequency_axis_starts_at_zero(
        self, renderer: MatplotlibBarChartRenderer, resolver: SchemeResolver
    ) -> None:
        """Test frequency charts start at zero."""
        data = aggregate(resolver.resolve(["U", "B", "S", "E"]), ChartType.FREQUENCY)
        axes = renderer.render(data).axes[0]

        assert axes.get_ylim()[0] == 0.0

    def test_figure_size(
        self, renderer: MatplotlibBarChartRenderer, resolver: SchemeResolver
    ) -> None:
        """Test the figure uses the configured size."""
        data = aggregate(resolver.resolve(["U"]), ChartType.FREQUENCY)
        figure = renderer.render(data)

        assert tuple(figure.get_size_inches()) == (4.0, 3.0)

    def test_bad_colour(self, renderer: MatplotlibBarChartRenderer) -> None:
        """Test matplotlib errors are wrapped."""
        data = ChartData(
            chart_type=ChartType.FREQUENCY,
            categories=("A",),
            values=(1.0,),
            colours=("not-a-colour",),
            x_label="Grade",
            y_label="Frequency",
            total_observations=1,
        )

        with pytest.raises(RenderError) as exc_info:
            renderer.render(data)

        assert exc_info.value.cause is not None


class TestSave:
    """Tests for saving rendered charts."""

    @pytest.fixture
    def chart(
        self, renderer: MatplotlibBarChartRenderer, resolver: SchemeResolver
    ) -> Chart:
        """Render a small UBSE chart."""
        resolution: ResolutionResult = resolver.resolve(["U", "B", "S", "E"])
        data = aggregate(resolution, ChartType.PERCENTAGE)
        return Chart(figure=renderer.render(data), data=data, resolution=resolution)

    def test_save_png(
        self, renderer: MatplotlibBarChartRenderer, chart: Chart, temp_dir: Path
    ) -> None:
        """Test saving creates parent directories and writes the file."""
        path = temp_dir / "charts" / "grades.png"
        saved = renderer.save(chart, path, dpi=72)

        assert saved == path
        assert path.exists()
        assert path.stat().st_size > 0
        assert chart.resolution.scheme == SchemeId.UBSE

    def test_save_unwritable(
        self, renderer: MatplotlibBarChartRenderer, chart: Chart, temp_dir: Path
    ) -> None:
        """Test a path under a regular file fails with RenderError."""
        blocker = temp_dir / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(RenderError):
            renderer.save(chart, blocker / "grades.png")

    def test_save_unknown_format(
        self, renderer: MatplotlibBarChartRenderer, chart: Chart, temp_dir: Path
    ) -> None:
        """Test an unsupported suffix fails with RenderError."""
        with pytest.raises(RenderError):
            renderer.save(chart, temp_dir / "grades.unknownformat")
