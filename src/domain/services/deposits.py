"""Deposit accrual and expected income."""

from datetime import date
from decimal import Decimal

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models import Deposit

HUNDRED = Decimal("100")
ONE = Decimal("1")


def elapsed_months(start: date, end: date) -> int:
    """Return whole calendar months between two dates.

    The day of month is ignored, so a deposit opened on the 31st counts a
    full month on the 1st of the next month.
    """
    return (end.year - start.year) * MONTHS_PER_YEAR + (end.month - start.month)


def deposit_current_value(deposit: Deposit, as_of: date) -> Decimal:
    """Return the accrued deposit value at ``as_of``.

    Args:
        deposit: Deposit record.
        as_of: Valuation date.

    Returns:
        Decimal: Principal grown under the capitalization policy, or the
        principal unchanged when there is no opening date or no elapsed
        month.
    """
    if not deposit.opening_date:
        return deposit.amount
    months = elapsed_months(deposit.opening_date, as_of)
    if months <= 0:
        return deposit.amount

    annual_rate = deposit.interest_rate / HUNDRED
    if deposit.capitalization == "monthly":
        return deposit.amount * (ONE + annual_rate / 12) ** months
    if deposit.capitalization == "quarterly":
        quarters = months // 3
        return deposit.amount * (ONE + annual_rate / 4) ** quarters
    if deposit.capitalization == "yearly":
        years = months // 12
        return deposit.amount * (ONE + annual_rate) ** years
    return deposit.amount * (ONE + annual_rate * months / MONTHS_PER_YEAR)


def deposit_monthly_income(deposit: Deposit) -> Decimal:
    """Return the expected monthly income on the nominal principal.

    Monthly capitalization uses one compounding step; every other policy
    spreads the annual interest evenly.
    """
    if deposit.capitalization == "monthly":
        monthly_rate = deposit.interest_rate / 12 / HUNDRED
        return deposit.amount * monthly_rate
    annual_interest = deposit.amount * deposit.interest_rate / HUNDRED
    return annual_interest / MONTHS_PER_YEAR


__all__ = [
    "elapsed_months",
    "deposit_current_value",
    "deposit_monthly_income",
]
