"""Per-asset computed fields for tabular display."""

from datetime import date

from src.domain.models import (
    CryptoHolding,
    DepositHolding,
    Portfolio,
    PortfolioHoldings,
    RealEstateHolding,
    SecurityHolding,
)
from src.domain.services.deposits import (
    deposit_current_value,
    deposit_monthly_income,
)
from src.domain.services.income import (
    crypto_monthly_staking_income,
    is_rental_yield_calculated,
    price_change,
    price_change_percent,
    real_estate_annual_rental,
    real_estate_rental_yield_percent,
    security_monthly_dividend,
    security_period_dividend,
)


def build_holdings(
    portfolio: Portfolio,
    *,
    as_of: date | None = None,
) -> PortfolioHoldings:
    """Attach computed fields to every asset record.

    Amounts stay in each record's own currency.

    Args:
        portfolio: Portfolio snapshot.
        as_of: Valuation date for deposit accrual, today by default.

    Returns:
        PortfolioHoldings: Computed rows in input order.
    """
    valuation_date = as_of or date.today()
    return PortfolioHoldings(
        securities=[
            SecurityHolding(
                security=s,
                market_value=s.market_value,
                price_change=price_change(s.current_price, s.previous_price),
                price_change_percent=price_change_percent(
                    s.current_price,
                    s.previous_price,
                ),
                period_dividend=security_period_dividend(s),
                monthly_dividend=security_monthly_dividend(s),
            )
            for s in portfolio.securities
        ],
        real_estate=[
            RealEstateHolding(
                property=p,
                annual_rental=real_estate_annual_rental(p),
                rental_yield_percent=real_estate_rental_yield_percent(p),
                yield_is_calculated=is_rental_yield_calculated(p),
            )
            for p in portfolio.real_estate
        ],
        deposits=[
            DepositHolding(
                deposit=d,
                current_value=deposit_current_value(d, valuation_date),
                monthly_income=deposit_monthly_income(d),
            )
            for d in portfolio.deposits
        ],
        cryptocurrencies=[
            CryptoHolding(
                crypto=c,
                market_value=c.market_value,
                price_change=price_change(c.current_price, c.previous_price),
                price_change_percent=price_change_percent(
                    c.current_price,
                    c.previous_price,
                ),
                monthly_staking_income=crypto_monthly_staking_income(c),
            )
            for c in portfolio.cryptocurrencies
        ],
    )


__all__ = ["build_holdings"]
