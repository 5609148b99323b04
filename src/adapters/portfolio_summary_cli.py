"""CLI adapter printing the portfolio summary in the reporting currency."""

from datetime import date
import os

from src.domain.models import ChartData
from src.infrastructure.container import build_portfolio_summary_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import PortfolioSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _print_chart(chart: ChartData, currency_code: str) -> None:
    print(chart.title)
    if chart.is_empty:
        print("  no data")
        return
    if chart.is_full_circle:
        print("  (full circle)")
    for segment in chart.segments:
        print(
            f"  {segment.label}: {segment.value:,.2f} {currency_code} "
            f"({segment.percentage:.1f}%, "
            f"{segment.start_angle:.1f}-{segment.end_angle:.1f} deg)"
        )


def main() -> None:
    """Compute and print the configured owner's portfolio summary."""
    logger = get_app_logger()
    settings = PortfolioSettings.from_env()
    as_of = (
        _parse_date(os.getenv("PORTFOLIO_AS_OF"), logger) or date.today()
    )

    use_case = build_portfolio_summary_use_case(settings=settings)
    try:
        summary = use_case.execute(settings.owner_id, as_of=as_of)
    except RuntimeError as exc:
        logger.error(str(exc))
        return
    get_usage_logger().info(f"summary owner={settings.owner_id}")

    totals = summary.totals
    currency = totals.currency_code
    print(f"Portfolio summary (owner={settings.owner_id}, as_of={as_of})")
    print(
        f"Rates: 1 USD = {summary.rates.usd_rate:.2f} {currency}, "
        f"1 EUR = {summary.rates.eur_rate:.2f} {currency}"
    )
    print(f"Total value: {totals.total_value:,.2f} {currency}")
    print(
        f"Monthly income: {totals.total_monthly_income:,.2f} {currency}"
    )
    _print_chart(summary.value_chart, currency)
    _print_chart(summary.income_chart, currency)
    for issue in summary.issues:
        print(f"Warning: {issue}")


if __name__ == "__main__":  # pragma: no cover
    main()
