"""Per-asset income and price change calculations.

Every function here is total: missing optional fields and zero divisors
resolve to a defined default instead of raising.
"""

from decimal import Decimal

from src.domain.constants import DIVIDEND_PERIODS_PER_YEAR, MONTHS_PER_YEAR
from src.domain.models import Crypto, RealEstate, Security

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def price_change(current: Decimal, previous: Decimal) -> Decimal:
    return current - previous


def price_change_percent(current: Decimal, previous: Decimal) -> Decimal:
    """Return the relative change in percent, 0 when ``previous`` is 0."""
    if previous == 0:
        return ZERO
    return (current - previous) / previous * HUNDRED


def security_annual_dividend(security: Security) -> Decimal:
    return (
        security.current_price
        * security.quantity
        * security.expected_dividend
        / HUNDRED
    )


def security_period_dividend(security: Security) -> Decimal:
    """Return the dividend paid per ``dividend_frequency`` period.

    Args:
        security: Security position.

    Returns:
        Decimal: Amount per payout period in the security currency, or 0
        for an unknown frequency.
    """
    periods = DIVIDEND_PERIODS_PER_YEAR.get(security.dividend_frequency)
    if not periods:
        return ZERO
    return security_annual_dividend(security) / periods


def security_monthly_dividend(security: Security) -> Decimal:
    """Return the annual dividend spread over 12 months.

    The frequency is ignored so that monthly income is comparable across
    asset classes.
    """
    return security_annual_dividend(security) / MONTHS_PER_YEAR


def real_estate_annual_rental(property: RealEstate) -> Decimal:
    """Return annual rental income in the reporting currency.

    Monthly rent takes precedence over the stored yield; a property with
    neither earns nothing.
    """
    if property.monthly_rent:
        return property.monthly_rent * MONTHS_PER_YEAR
    if property.expected_rental_yield:
        return property.current_value * property.expected_rental_yield / HUNDRED
    return ZERO


def is_rental_yield_calculated(property: RealEstate) -> bool:
    """Return True when the yield is derived from monthly rent."""
    return bool(property.monthly_rent) and property.current_value != 0


def real_estate_rental_yield_percent(property: RealEstate) -> Decimal:
    """Return the rental yield in percent per year.

    The derived yield wins over the stored ``expected_rental_yield``
    whenever monthly rent and a non-zero value are present.
    """
    if not is_rental_yield_calculated(property):
        return property.expected_rental_yield or ZERO
    annual_rent = property.monthly_rent * MONTHS_PER_YEAR
    return annual_rent / property.current_value * HUNDRED


def crypto_monthly_staking_income(crypto: Crypto) -> Decimal:
    """Return monthly staking income in USD, 0 without a staking yield."""
    if not crypto.staking_yield:
        return ZERO
    annual = crypto.current_price * crypto.amount * crypto.staking_yield / HUNDRED
    return annual / MONTHS_PER_YEAR


__all__ = [
    "price_change",
    "price_change_percent",
    "security_annual_dividend",
    "security_period_dividend",
    "security_monthly_dividend",
    "real_estate_annual_rental",
    "is_rental_yield_calculated",
    "real_estate_rental_yield_percent",
    "crypto_monthly_staking_income",
]
