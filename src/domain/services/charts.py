"""Chart segment construction for value and income distributions."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    ASSET_CLASS_COLORS,
    FULL_CIRCLE_DEGREES,
    FULL_CIRCLE_THRESHOLD,
)
from src.domain.models import (
    AssetClassAmount,
    ChartData,
    ChartSegment,
    PortfolioTotals,
)

VALUE_CHART_TITLE = "Value distribution"
INCOME_CHART_TITLE = "Monthly income distribution"
DEFAULT_COLOR = "#9e9e9e"


def build_chart_data(
    title: str,
    items: Iterable[tuple[str, Decimal, str]],
) -> ChartData:
    """Build pie chart segments from ``(label, value, color)`` items.

    Non-positive values are dropped. Angles accumulate in input order from
    0 degrees. A lone segment holding at least 99.9% of the total is drawn
    as a full circle.

    Args:
        title: Chart title.
        items: Labelled amounts with their colors.

    Returns:
        ChartData: Segments, or an empty chart when the total is 0.
    """
    positive = [
        (label, value, color) for label, value, color in items if value > 0
    ]
    total = sum((value for _, value, _ in positive), Decimal("0"))
    if total == 0:
        return ChartData(title=title, segments=[], total=Decimal("0"))

    segments: list[ChartSegment] = []
    current_angle = Decimal("0")
    for label, value, color in positive:
        percentage = value / total * Decimal("100")
        sweep = percentage / Decimal("100") * FULL_CIRCLE_DEGREES
        end_angle = current_angle + sweep
        segments.append(
            ChartSegment(
                label=label,
                value=value,
                color=color,
                percentage=percentage,
                start_angle=current_angle,
                end_angle=end_angle,
            )
        )
        current_angle = end_angle

    is_full_circle = (
        len(segments) == 1 and segments[0].percentage >= FULL_CIRCLE_THRESHOLD
    )
    return ChartData(
        title=title,
        segments=segments,
        total=total,
        is_full_circle=is_full_circle,
    )


def build_value_chart(totals: PortfolioTotals) -> ChartData:
    """Return the value distribution chart for portfolio totals."""
    return build_chart_data(
        VALUE_CHART_TITLE,
        _chart_items(totals.value_by_class),
    )


def build_income_chart(totals: PortfolioTotals) -> ChartData:
    """Return the monthly income distribution chart for portfolio totals."""
    return build_chart_data(
        INCOME_CHART_TITLE,
        _chart_items(totals.income_by_class),
    )


def _chart_items(
    amounts: list[AssetClassAmount],
) -> list[tuple[str, Decimal, str]]:
    return [
        (
            item.label,
            item.amount,
            ASSET_CLASS_COLORS.get(item.asset_class, DEFAULT_COLOR),
        )
        for item in amounts
    ]


__all__ = [
    "build_chart_data",
    "build_value_chart",
    "build_income_chart",
    "VALUE_CHART_TITLE",
    "INCOME_CHART_TITLE",
]
