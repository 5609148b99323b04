"""Use case computing the portfolio summary in the reporting currency."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.application.use_cases.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from src.domain.models import (
    ChartData,
    ExchangeRateSnapshot,
    Portfolio,
    PortfolioHoldings,
    PortfolioTotals,
)
from src.domain.services.charts import build_income_chart, build_value_chart
from src.domain.services.finance import compute_portfolio_totals
from src.domain.services.holdings import build_holdings
from src.domain.services.validation import validate_portfolio
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PortfolioSummary:
    """Everything the reporting layer displays for a portfolio.

    Attributes:
        totals: Total value and monthly income with per-class amounts.
        holdings: Per-asset computed fields.
        value_chart: Value distribution chart.
        income_chart: Monthly income distribution chart.
        rates: Exchange rates the figures were converted with.
        issues: Validation messages for out-of-contract records.
    """

    totals: PortfolioTotals
    holdings: PortfolioHoldings
    value_chart: ChartData
    income_chart: ChartData
    rates: ExchangeRateSnapshot
    issues: list[str]


def build_portfolio_summary(
    portfolio: Portfolio,
    rates: ExchangeRateSnapshot,
    *,
    as_of: date | None = None,
    logger=None,
) -> PortfolioSummary:
    """Compute the summary of a portfolio snapshot.

    Args:
        portfolio: Portfolio snapshot.
        rates: Exchange rates into the reporting currency.
        as_of: Valuation date for deposit accrual, today by default.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        PortfolioSummary: Totals, holdings, and both charts.
    """
    resolved_logger = logger or get_app_logger()
    valuation_date = as_of or date.today()
    issues = validate_portfolio(portfolio, resolved_logger)
    totals = compute_portfolio_totals(portfolio, rates, as_of=valuation_date)
    resolved_logger.info(
        f"Portfolio computed: value={totals.total_value:.2f}, "
        f"monthly_income={totals.total_monthly_income:.2f} "
        f"{totals.currency_code}"
    )
    return PortfolioSummary(
        totals=totals,
        holdings=build_holdings(portfolio, as_of=valuation_date),
        value_chart=build_value_chart(totals),
        income_chart=build_income_chart(totals),
        rates=rates,
        issues=issues,
    )


class GetPortfolioSummaryUseCase:
    """Load a stored portfolio and compute its summary."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        rates_use_case: GetExchangeRatesUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing portfolio snapshots.
            rates_use_case: Use case resolving exchange rates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._rates_use_case = rates_use_case
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        as_of: date | None = None,
    ) -> PortfolioSummary:
        """Return the summary of an owner's portfolio.

        Args:
            owner_id: Identifier of the portfolio owner.
            as_of: Optional valuation date, today by default.

        Returns:
            PortfolioSummary: Computed figures for display.
        """
        portfolio = self._repository.fetch_portfolio(owner_id)
        rates = self._rates_use_case.execute()
        return build_portfolio_summary(
            portfolio,
            rates,
            as_of=as_of,
            logger=self._logger,
        )


__all__ = [
    "GetPortfolioSummaryUseCase",
    "PortfolioSummary",
    "build_portfolio_summary",
]
