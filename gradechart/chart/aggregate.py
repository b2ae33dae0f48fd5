"""
Frequency and percentage aggregation of normalized labels.

Counts are taken over the resolution's fixed level order so that
levels nobody was awarded still appear on the chart with a zero bar.
"""

import pandas as pd

from gradechart.models import ChartData, ChartType, ResolutionResult


def count_levels(result: ResolutionResult) -> pd.Series:
    """
    Count observations per level.

    Args:
        result: A resolution result.

    Returns:
        Integer counts indexed by level, in axis order, zeros included.
    """
    levels = list(result.levels)
    labels = pd.Categorical(result.normalized, categories=levels)
    counts = pd.Series(labels).value_counts(sort=False)
    return counts.reindex(levels, fill_value=0)


def aggregate(result: ResolutionResult, chart_type: ChartType) -> ChartData:
    """
    Build chart data for a resolution result.

    Args:
        result: A resolution result.
        chart_type: Whether bars show counts or percentages.

    Returns:
        ChartData with one value per level.
    """
    counts = count_levels(result)
    total = len(result.normalized)

    if chart_type == ChartType.PERCENTAGE:
        values = counts * 100.0 / total
    else:
        values = counts.astype(float)

    return ChartData(
        chart_type=chart_type,
        categories=result.levels,
        values=tuple(float(v) for v in values),
        colours=result.colours,
        x_label=result.axis_label,
        y_label=chart_type.value,
        total_observations=total,
    )
