"""Domain services for portfolio aggregates."""

from datetime import date
from decimal import Decimal

from src.domain.constants import (
    ASSET_CLASS_CRYPTO,
    ASSET_CLASS_DEPOSITS,
    ASSET_CLASS_REAL_ESTATE,
    ASSET_CLASS_SECURITIES,
    CRYPTO_QUOTE_CURRENCY,
    INCOME_LABELS,
    MONTHS_PER_YEAR,
    REPORTING_CURRENCY,
    VALUE_LABELS,
)
from src.domain.models import (
    AssetClassAmount,
    ExchangeRateSnapshot,
    Portfolio,
    PortfolioTotals,
)
from src.domain.services.deposits import (
    deposit_current_value,
    deposit_monthly_income,
)
from src.domain.services.fx import convert_to_reporting
from src.domain.services.income import (
    crypto_monthly_staking_income,
    real_estate_annual_rental,
    security_monthly_dividend,
)


def compute_value_by_class(
    portfolio: Portfolio,
    rates: ExchangeRateSnapshot,
    *,
    as_of: date | None = None,
) -> list[AssetClassAmount]:
    """Compute the reporting-currency value of each asset class.

    Args:
        portfolio: Portfolio snapshot.
        rates: Exchange rates used for conversion.
        as_of: Valuation date for deposit accrual, today by default.

    Returns:
        list[AssetClassAmount]: Securities, real estate, deposits, crypto.
    """
    valuation_date = as_of or date.today()
    securities = sum(
        (
            convert_to_reporting(s.market_value, s.currency, rates)
            for s in portfolio.securities
        ),
        Decimal("0"),
    )
    real_estate = sum(
        (p.current_value for p in portfolio.real_estate),
        Decimal("0"),
    )
    deposits = sum(
        (
            convert_to_reporting(
                deposit_current_value(d, valuation_date),
                d.currency,
                rates,
            )
            for d in portfolio.deposits
        ),
        Decimal("0"),
    )
    crypto = sum(
        (
            convert_to_reporting(c.market_value, CRYPTO_QUOTE_CURRENCY, rates)
            for c in portfolio.cryptocurrencies
        ),
        Decimal("0"),
    )
    return _by_class(VALUE_LABELS, securities, real_estate, deposits, crypto)


def compute_income_by_class(
    portfolio: Portfolio,
    rates: ExchangeRateSnapshot,
) -> list[AssetClassAmount]:
    """Compute the reporting-currency monthly income of each asset class."""
    securities = sum(
        (
            convert_to_reporting(security_monthly_dividend(s), s.currency, rates)
            for s in portfolio.securities
        ),
        Decimal("0"),
    )
    real_estate = sum(
        (
            real_estate_annual_rental(p) / MONTHS_PER_YEAR
            for p in portfolio.real_estate
        ),
        Decimal("0"),
    )
    deposits = sum(
        (
            convert_to_reporting(deposit_monthly_income(d), d.currency, rates)
            for d in portfolio.deposits
        ),
        Decimal("0"),
    )
    crypto = sum(
        (
            convert_to_reporting(
                crypto_monthly_staking_income(c),
                CRYPTO_QUOTE_CURRENCY,
                rates,
            )
            for c in portfolio.cryptocurrencies
        ),
        Decimal("0"),
    )
    return _by_class(INCOME_LABELS, securities, real_estate, deposits, crypto)


def compute_total_value(
    portfolio: Portfolio,
    rates: ExchangeRateSnapshot,
    *,
    as_of: date | None = None,
) -> Decimal:
    """Return the total portfolio value in the reporting currency."""
    return _total(compute_value_by_class(portfolio, rates, as_of=as_of))


def compute_total_monthly_income(
    portfolio: Portfolio,
    rates: ExchangeRateSnapshot,
) -> Decimal:
    """Return the total monthly income in the reporting currency."""
    return _total(compute_income_by_class(portfolio, rates))


def compute_portfolio_totals(
    portfolio: Portfolio,
    rates: ExchangeRateSnapshot,
    *,
    as_of: date | None = None,
) -> PortfolioTotals:
    """Compute totals together with their per-class breakdown.

    Args:
        portfolio: Portfolio snapshot.
        rates: Exchange rates used for conversion.
        as_of: Valuation date for deposit accrual, today by default.

    Returns:
        PortfolioTotals: Value and income totals in the reporting currency.
    """
    value_by_class = compute_value_by_class(portfolio, rates, as_of=as_of)
    income_by_class = compute_income_by_class(portfolio, rates)
    return PortfolioTotals(
        total_value=_total(value_by_class),
        total_monthly_income=_total(income_by_class),
        currency_code=REPORTING_CURRENCY,
        value_by_class=value_by_class,
        income_by_class=income_by_class,
    )


def _by_class(
    labels: dict[str, str],
    securities: Decimal,
    real_estate: Decimal,
    deposits: Decimal,
    crypto: Decimal,
) -> list[AssetClassAmount]:
    amounts = (
        (ASSET_CLASS_SECURITIES, securities),
        (ASSET_CLASS_REAL_ESTATE, real_estate),
        (ASSET_CLASS_DEPOSITS, deposits),
        (ASSET_CLASS_CRYPTO, crypto),
    )
    return [
        AssetClassAmount(
            asset_class=asset_class,
            label=labels[asset_class],
            amount=amount,
        )
        for asset_class, amount in amounts
    ]


def _total(items: list[AssetClassAmount]) -> Decimal:
    return sum((item.amount for item in items), Decimal("0"))


__all__ = [
    "compute_value_by_class",
    "compute_income_by_class",
    "compute_total_value",
    "compute_total_monthly_income",
    "compute_portfolio_totals",
]
