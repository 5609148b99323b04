"""Tests for the SQL-backed portfolio repository."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.infrastructure.portfolio_repository import (
    SELECT_CRYPTOCURRENCIES_SQL,
    SELECT_DEPOSITS_SQL,
    SELECT_REAL_ESTATE_SQL,
    SELECT_SECURITIES_SQL,
    SqlAlchemyPortfolioRepository,
)


class _FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return list(self._rows)


def _db_port(*results):
    conn = MagicMock()
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_portfolio_engine.return_value = engine
    return db_port, conn


def test_fetch_portfolio_maps_rows_to_domain_models() -> None:
    """Rows from each table should become typed domain models."""
    security = SimpleNamespace(
        id=1,
        name="Sberbank",
        ticker="SBER",
        type="Stock",
        current_price=Decimal("300.5"),
        previous_price=None,
        quantity=10,
        expected_dividend=Decimal("8"),
        dividend_frequency="Yearly",
        currency="usd",
    )
    flat = SimpleNamespace(
        id=2,
        name="Flat",
        location="Kazan",
        type="apartment",
        current_value=Decimal("6000000"),
        purchase_price=None,
        purchase_date="2020-05-01T00:00:00.000Z",
        expected_rental_yield=Decimal("6"),
        monthly_rent=None,
    )
    deposit = SimpleNamespace(
        id=3,
        name="Savings",
        bank="Bank",
        amount=100000,
        interest_rate=Decimal("12"),
        currency="GBP",
        opening_date=datetime(2024, 1, 15, 12, 0),
        maturity_date="not a date",
        capitalization="monthly",
        type="term",
    )
    crypto = SimpleNamespace(
        id=4,
        symbol="BTC",
        name="Bitcoin",
        amount=Decimal("0.1"),
        current_price=Decimal("60000"),
        previous_price=Decimal("58000"),
        staking_yield=None,
        purchase_price=Decimal("30000"),
        purchase_date=date(2021, 3, 1),
    )
    db_port, conn = _db_port([security], [flat], [deposit], [crypto])
    logger = MagicMock()

    portfolio = SqlAlchemyPortfolioRepository(
        db_port,
        logger=logger,
    ).fetch_portfolio(7)

    statements = [call.args[0] for call in conn.execute.call_args_list]
    assert statements == [
        SELECT_SECURITIES_SQL,
        SELECT_REAL_ESTATE_SQL,
        SELECT_DEPOSITS_SQL,
        SELECT_CRYPTOCURRENCIES_SQL,
    ]
    assert all(
        call.args[1] == {"user_id": 7}
        for call in conn.execute.call_args_list
    )

    stored_security = portfolio.securities[0]
    assert stored_security.id == "1"
    assert stored_security.kind == "stock"
    assert stored_security.previous_price == Decimal("0")
    assert stored_security.dividend_frequency == "yearly"
    assert stored_security.currency == "USD"

    stored_flat = portfolio.real_estate[0]
    assert stored_flat.purchase_date == date(2020, 5, 1)
    assert stored_flat.monthly_rent is None
    assert stored_flat.expected_rental_yield == Decimal("6")

    stored_deposit = portfolio.deposits[0]
    assert stored_deposit.amount == Decimal("100000")
    assert stored_deposit.currency == "RUB"
    assert stored_deposit.opening_date == date(2024, 1, 15)
    assert stored_deposit.maturity_date is None

    stored_crypto = portfolio.cryptocurrencies[0]
    assert stored_crypto.staking_yield is None
    assert stored_crypto.purchase_date == date(2021, 3, 1)

    assert logger.warning.call_count == 2


def test_fetch_portfolio_returns_empty_portfolio() -> None:
    """An owner without records should get an empty portfolio."""
    db_port, _ = _db_port([], [], [], [])

    portfolio = SqlAlchemyPortfolioRepository(
        db_port,
        logger=MagicMock(),
    ).fetch_portfolio(1)

    assert portfolio.is_empty
