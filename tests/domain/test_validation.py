"""Tests for portfolio validation and normalization."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import Crypto, Deposit, Portfolio, RealEstate, Security
from src.domain.services.normalization import (
    coerce_currency,
    normalize_choice,
    normalize_currency,
)
from src.domain.services.validation import validate_portfolio
from src.infrastructure.logging import logger as logger_module


def test_normalizers_trim_and_case() -> None:
    assert normalize_currency(" usd ") == "USD"
    assert normalize_currency("  ") is None
    assert normalize_currency(None) is None
    assert normalize_choice(" Monthly ") == "monthly"


def test_coerce_currency_defaults_to_rub_with_warning() -> None:
    logger = MagicMock()

    assert coerce_currency("eur", logger) == "EUR"
    logger.warning.assert_not_called()
    assert coerce_currency("GBP", logger) == "RUB"
    logger.warning.assert_called_once()


def test_valid_portfolio_has_no_issues() -> None:
    logger = MagicMock()
    portfolio = Portfolio(
        securities=(
            Security(
                id="1",
                name="S",
                ticker="S",
                kind="etf",
                current_price=Decimal("1"),
                previous_price=Decimal("1"),
                quantity=1,
                expected_dividend=Decimal("0"),
                dividend_frequency="monthly",
                currency="EUR",
            ),
        ),
        real_estate=(
            RealEstate(
                id="1",
                name="R",
                location="L",
                kind="commercial",
                current_value=Decimal("0"),
            ),
        ),
    )

    assert validate_portfolio(portfolio, logger) == []
    logger.warning.assert_not_called()


def test_invalid_records_are_reported_and_logged() -> None:
    logger = MagicMock()
    portfolio = Portfolio(
        securities=(
            Security(
                id="1",
                name="S",
                ticker="BAD",
                kind="option",
                current_price=Decimal("-1"),
                previous_price=Decimal("1"),
                quantity=0,
                expected_dividend=Decimal("0"),
                dividend_frequency="monthly",
                currency="RUB",
            ),
        ),
        deposits=(
            Deposit(
                id="1",
                name="D",
                bank="B",
                amount=Decimal("-5"),
                interest_rate=Decimal("3"),
                currency="RUB",
                opening_date=date(2024, 1, 1),
                capitalization="daily",
                type="term",
            ),
        ),
        cryptocurrencies=(
            Crypto(
                id="1",
                symbol="DOGE",
                name="Doge",
                amount=Decimal("0"),
                current_price=Decimal("1"),
                previous_price=Decimal("1"),
            ),
        ),
    )

    issues = validate_portfolio(portfolio, logger)

    assert len(issues) == 6
    assert any("quantity" in issue for issue in issues)
    assert any("unsupported kind 'option'" in issue for issue in issues)
    assert any("unsupported capitalization" in issue for issue in issues)
    assert any(issue.startswith("crypto DOGE") for issue in issues)
    assert logger.warning.call_count == 6


def test_validation_logs_through_app_logger_wrapper(monkeypatch) -> None:
    """The singleton wrapper returned by get_app_logger is accepted."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    app_logger = logger_module.get_app_logger()
    portfolio = Portfolio(
        cryptocurrencies=(
            Crypto(
                id="1",
                symbol="ETH",
                name="Ethereum",
                amount=Decimal("0"),
                current_price=Decimal("3000"),
                previous_price=Decimal("2900"),
            ),
        ),
    )

    issues = validate_portfolio(portfolio, app_logger)

    assert len(issues) == 1
    fake_logger.warning.assert_called_once_with(issues[0])
    assert coerce_currency("CHF", app_logger) == "RUB"
    assert fake_logger.warning.call_count == 2
