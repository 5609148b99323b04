"""Tests for the GetPortfolioSummaryUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
    build_portfolio_summary,
)
from src.domain.models import (
    Crypto,
    Deposit,
    ExchangeRateSnapshot,
    Portfolio,
    RealEstate,
)

RATES = ExchangeRateSnapshot(
    usd_rate=Decimal("90"),
    eur_rate=Decimal("100"),
    timestamp=datetime(2024, 1, 1),
)


class FakePortfolioRepository(PortfolioRepositoryPort):
    """In-memory repository keyed by owner id."""

    def __init__(self, portfolios: dict[int, Portfolio]) -> None:
        self._portfolios = portfolios
        self.requested: list[int] = []

    def fetch_portfolio(self, owner_id: int) -> Portfolio:
        self.requested.append(owner_id)
        return self._portfolios.get(owner_id, Portfolio())


def _portfolio() -> Portfolio:
    return Portfolio(
        real_estate=(
            RealEstate(
                id="1",
                name="Flat",
                location="Moscow",
                kind="apartment",
                current_value=Decimal("5000000"),
                monthly_rent=Decimal("30000"),
            ),
        ),
        deposits=(
            Deposit(
                id="1",
                name="Deposit",
                bank="Bank",
                amount=Decimal("100000"),
                interest_rate=Decimal("12"),
                currency="RUB",
                opening_date=date(2023, 6, 1),
                capitalization="monthly",
                type="term",
            ),
        ),
        cryptocurrencies=(
            Crypto(
                id="1",
                symbol="BTC",
                name="Bitcoin",
                amount=Decimal("0.5"),
                current_price=Decimal("50000"),
                previous_price=Decimal("45000"),
            ),
        ),
    )


def test_execute_loads_portfolio_and_rates() -> None:
    repository = FakePortfolioRepository({7: _portfolio()})
    rates_use_case = MagicMock()
    rates_use_case.execute.return_value = RATES

    use_case = GetPortfolioSummaryUseCase(
        repository=repository,
        rates_use_case=rates_use_case,
        logger=MagicMock(),
    )

    summary = use_case.execute(7, as_of=date(2024, 6, 1))

    assert repository.requested == [7]
    assert summary.rates is RATES
    assert summary.issues == []
    assert float(summary.totals.total_value) == pytest.approx(
        5000000 + 112682.50 + 2250000,
        abs=0.01,
    )
    assert float(summary.totals.total_monthly_income) == pytest.approx(31000)
    assert [s.label for s in summary.value_chart.segments] == [
        "Real estate",
        "Deposits",
        "Cryptocurrencies",
    ]
    assert [s.label for s in summary.income_chart.segments] == [
        "Rental income",
        "Deposit interest",
    ]
    assert len(summary.holdings.deposits) == 1


def test_empty_portfolio_produces_empty_charts() -> None:
    logger = MagicMock()

    summary = build_portfolio_summary(
        Portfolio(),
        RATES,
        as_of=date(2024, 6, 1),
        logger=logger,
    )

    assert summary.totals.total_value == 0
    assert summary.totals.total_monthly_income == 0
    assert summary.value_chart.is_empty
    assert summary.income_chart.is_empty
    logger.info.assert_called_once()
