"""Domain validation helpers.

Validation only reports problems; computations stay total and never rely on
it having run.
"""

from src.domain.constants import (
    CAPITALIZATION_POLICIES,
    DEPOSIT_TYPES,
    DIVIDEND_FREQUENCIES,
    REAL_ESTATE_KINDS,
    SECURITY_KINDS,
    SUPPORTED_CURRENCIES,
)
from src.domain.models import Crypto, Deposit, Portfolio, RealEstate, Security


def validate_security(security: Security) -> list[str]:
    issues = []
    label = f"security {security.ticker or security.id}"
    if security.quantity < 1:
        issues.append(f"{label}: quantity must be at least 1")
    if security.current_price < 0 or security.previous_price < 0:
        issues.append(f"{label}: prices must be non-negative")
    if security.expected_dividend < 0:
        issues.append(f"{label}: expected dividend must be non-negative")
    issues.extend(_check_choice(label, "kind", security.kind, SECURITY_KINDS))
    issues.extend(
        _check_choice(
            label,
            "dividend frequency",
            security.dividend_frequency,
            DIVIDEND_FREQUENCIES,
        )
    )
    issues.extend(
        _check_choice(label, "currency", security.currency, SUPPORTED_CURRENCIES)
    )
    return issues


def validate_real_estate(property: RealEstate) -> list[str]:
    issues = []
    label = f"real estate {property.name or property.id}"
    if property.current_value < 0:
        issues.append(f"{label}: current value must be non-negative")
    if property.monthly_rent is not None and property.monthly_rent < 0:
        issues.append(f"{label}: monthly rent must be non-negative")
    if (
        property.expected_rental_yield is not None
        and property.expected_rental_yield < 0
    ):
        issues.append(f"{label}: rental yield must be non-negative")
    issues.extend(_check_choice(label, "kind", property.kind, REAL_ESTATE_KINDS))
    return issues


def validate_deposit(deposit: Deposit) -> list[str]:
    issues = []
    label = f"deposit {deposit.name or deposit.id}"
    if deposit.amount < 0:
        issues.append(f"{label}: amount must be non-negative")
    if deposit.interest_rate < 0:
        issues.append(f"{label}: interest rate must be non-negative")
    issues.extend(
        _check_choice(
            label,
            "capitalization",
            deposit.capitalization,
            CAPITALIZATION_POLICIES,
        )
    )
    issues.extend(_check_choice(label, "type", deposit.type, DEPOSIT_TYPES))
    issues.extend(
        _check_choice(label, "currency", deposit.currency, SUPPORTED_CURRENCIES)
    )
    return issues


def validate_crypto(crypto: Crypto) -> list[str]:
    issues = []
    label = f"crypto {crypto.symbol or crypto.id}"
    if crypto.amount <= 0:
        issues.append(f"{label}: amount must be positive")
    if crypto.current_price < 0 or crypto.previous_price < 0:
        issues.append(f"{label}: prices must be non-negative")
    if crypto.staking_yield is not None and crypto.staking_yield < 0:
        issues.append(f"{label}: staking yield must be non-negative")
    return issues


def validate_portfolio(portfolio: Portfolio, logger) -> list[str]:
    """Collect contract violations across a portfolio.

    Args:
        portfolio: Portfolio snapshot.
        logger: Logger used for warnings.

    Returns:
        list[str]: One message per violation, empty when valid.
    """
    issues: list[str] = []
    for security in portfolio.securities:
        issues.extend(validate_security(security))
    for property in portfolio.real_estate:
        issues.extend(validate_real_estate(property))
    for deposit in portfolio.deposits:
        issues.extend(validate_deposit(deposit))
    for crypto in portfolio.cryptocurrencies:
        issues.extend(validate_crypto(crypto))
    for issue in issues:
        logger.warning(issue)
    return issues


def _check_choice(
    label: str,
    field_name: str,
    value: str,
    allowed: tuple[str, ...],
) -> list[str]:
    if value in allowed:
        return []
    return [f"{label}: unsupported {field_name} {value!r}"]


__all__ = [
    "validate_security",
    "validate_real_estate",
    "validate_deposit",
    "validate_crypto",
    "validate_portfolio",
]
