"""
Public entry point for bar charts of grades and responses.
"""

import logging
from typing import Any

from gradechart.chart import BarChartRenderer, Chart, MatplotlibBarChartRenderer, aggregate
from gradechart.config import Settings, get_settings
from gradechart.resolver import InputValidator, SchemeResolver

logger = logging.getLogger(__name__)


def bar_chart(
    data: Any = None,
    chart_type: Any = None,
    force_scheme: Any = None,
    *,
    renderer: BarChartRenderer | None = None,
    settings: Settings | None = None,
) -> Chart:
    """
    Plot frequencies or percentages of grades or responses.

    The scheme (UBSE, USE, UBS, CIDK, CNINC, PFE, PF, Gender, Ethnicity
    or Disability) is inferred from the values, which may mix casing,
    abbreviations and full-text labels, e.g. ["U", "b", "Satisfactory", "E"].

    Args:
        data: Flat sequence of values, e.g. a list or a pandas Series.
        chart_type: "Frequency" or "Percentage", or a variant such as "perc" or "f".
        force_scheme: USE, UBS, PF, CIDK or CNINC, used when the values alone
            can't tell two schemes apart. Ignored when the scheme is clear.
        renderer: Renderer to draw with. Defaults to matplotlib.
        settings: Configuration settings. Uses global settings if not provided.

    Returns:
        Chart holding the figure, the aggregated data and the resolution,
        whose warnings explain any uncertainty in the inferred scheme.

    Raises:
        MissingInputError: If data or chart_type was not supplied.
        WrongFormatError: If data is tabular or empty, or chart_type is unrecognised.
        RenderError: If the renderer fails.
    """
    settings = settings or get_settings()
    values, resolved_type = InputValidator().validate(data, chart_type)

    resolution = SchemeResolver(settings).resolve(values, force_scheme)
    chart_data = aggregate(resolution, resolved_type)

    renderer = renderer or MatplotlibBarChartRenderer(settings)
    figure = renderer.render(chart_data)

    logger.info(
        "Plotted %d observations as %s (%s)",
        chart_data.total_observations,
        resolution.scheme.value,
        resolved_type.value,
    )
    return Chart(figure=figure, data=chart_data, resolution=resolution)
