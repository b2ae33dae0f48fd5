"""
gradechart CLI Application.

Provides a command-line interface for inferring the scheme of grade or
response labels and plotting their frequencies or percentages.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gradechart.api import bar_chart
from gradechart.catalog import get_catalog
from gradechart.chart import MatplotlibBarChartRenderer, RenderError, count_levels
from gradechart.config import get_settings
from gradechart.models import ChartData, ChartType, ResolutionResult, SchemeId, axis_label_for
from gradechart.resolver import ChartInputError, SchemeResolver

# Create Typer app
app = typer.Typer(
    name="gradechart",
    help="Bar charts of grades and responses with automatic scheme detection",
    add_completion=False,
)

console = Console()

ValuesArgument = Annotated[
    Optional[list[str]],
    typer.Argument(help="Grade or response values, e.g. U B S S E"),
]

ForceSchemeOption = Annotated[
    Optional[str],
    typer.Option(
        "--force-scheme",
        "-s",
        help="Scheme to use when the values are ambiguous: USE, UBS, PF, CIDK or CNINC",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show detailed output"),
]


def _configure_logging(verbose: bool) -> None:
    """Send log records to the console through rich."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def plot(
    values: ValuesArgument = None,
    chart_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Frequency or Percentage (or e.g. 'perc', 'f')"),
    ] = None,
    force_scheme: ForceSchemeOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Image file to save the chart to"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Plot a bar chart of grade or response values.

    The scheme is inferred from the values. Relative output paths are
    placed in the configured output directory.
    """
    _configure_logging(verbose)

    try:
        settings = get_settings()
        chart = bar_chart(values or None, chart_type, force_scheme, settings=settings)

        _display_resolution(chart.resolution, verbose)
        _display_chart_data(chart.data)

        if output:
            path = output if output.is_absolute() else settings.output_directory / output
            renderer = MatplotlibBarChartRenderer(settings)
            saved_path = renderer.save(chart, path, settings.figure_dpi)
            console.print(f"\n[green]Chart saved to:[/green] {saved_path}")

    except ChartInputError as e:
        console.print(f"[red]Input Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except RenderError as e:
        console.print(f"[red]Render Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def resolve(
    values: ValuesArgument = None,
    force_scheme: ForceSchemeOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Infer the scheme of grade or response values without plotting.

    Shows the coverage of every scheme and the normalized counts.
    """
    _configure_logging(verbose)

    try:
        resolver = SchemeResolver(get_settings())
        result = resolver.resolve(values or None, force_scheme)
    except ChartInputError as e:
        console.print(f"[red]Input Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _display_resolution(result, verbose=True)

    counts = count_levels(result)
    table = Table(title="Normalized Counts")
    table.add_column("Level", style="cyan")
    table.add_column("Count", justify="right")
    for level, count in counts.items():
        table.add_row(escape(str(level)), str(int(count)))
    console.print(table)


@app.command()
def schemes() -> None:
    """
    List every known scheme with its levels and colours.
    """
    catalog = get_catalog()

    table = Table(title="Known Schemes")
    table.add_column("Scheme", style="cyan")
    table.add_column("Axis")
    table.add_column("Levels")
    table.add_column("Colours")

    for scheme in SchemeId:
        if scheme == SchemeId.UNKNOWN:
            continue
        levels = catalog.levels_of(scheme)
        colours = catalog.colours_of(scheme)
        swatches = " ".join(f"[{c}]■[/] {c}" for c in colours)
        table.add_row(scheme.value, axis_label_for(scheme), escape(", ".join(levels)), swatches)

    console.print(table)


def _display_resolution(result: ResolutionResult, verbose: bool = False) -> None:
    """Display the inferred scheme and any warnings."""

    colour = "yellow" if result.warnings else "green"
    console.print(
        Panel(
            f"[{colour}][bold]{result.scheme.value}[/bold][/{colour}] "
            f"({result.axis_label}, {len(result.normalized)} values)",
            title="Scheme",
        )
    )

    if verbose and result.scores:
        table = Table(title="Scheme Coverage")
        table.add_column("Scheme", style="cyan")
        table.add_column("Matched", justify="right")
        table.add_column("Coverage", justify="right")
        table.add_column("Candidate")

        for score in result.scores:
            table.add_row(
                score.scheme.value,
                str(score.matched_count),
                f"{score.coverage_percent:.1f}%",
                "✅" if score.scheme in result.candidates else "",
            )

        console.print(table)

    if result.warnings:
        console.print("\n[yellow]⚠ Warnings:[/yellow]")
        for message in result.warnings:
            console.print(f"  • {escape(message)}")


def _display_chart_data(data: ChartData) -> None:
    """Display the bar values in a table."""

    table = Table(title=f"{data.y_label} by {data.x_label}")
    table.add_column(data.x_label, style="cyan")
    table.add_column(data.y_label, justify="right")
    table.add_column("Colour")

    for category, value, colour in zip(data.categories, data.values, data.colours):
        shown = f"{value:.1f}%" if data.chart_type == ChartType.PERCENTAGE else f"{value:.0f}"
        table.add_row(escape(category), shown, f"[{colour}]■[/] {colour}")

    console.print(table)


if __name__ == "__main__":
    app()
