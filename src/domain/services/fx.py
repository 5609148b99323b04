"""Currency conversion into the reporting currency."""

from datetime import datetime
from decimal import Decimal

from src.domain.constants import FALLBACK_EUR_RATE, FALLBACK_USD_RATE
from src.domain.models import ExchangeRateSnapshot


def convert_to_reporting(
    amount: Decimal,
    currency: str,
    rates: ExchangeRateSnapshot,
) -> Decimal:
    """Convert an amount into the reporting currency.

    RUB and any unrecognized code are returned unchanged; callers are
    expected to validate currency codes beforehand.

    Args:
        amount: Amount expressed in ``currency``.
        currency: Source currency code.
        rates: Exchange rate snapshot.

    Returns:
        Decimal: Amount in the reporting currency.
    """
    if currency == "USD":
        return amount * rates.usd_rate
    if currency == "EUR":
        return amount * rates.eur_rate
    return amount


def fallback_rates(
    timestamp: datetime,
    usd_rate: Decimal = FALLBACK_USD_RATE,
    eur_rate: Decimal = FALLBACK_EUR_RATE,
) -> ExchangeRateSnapshot:
    """Return the hardcoded snapshot used when no rate source answers."""
    return ExchangeRateSnapshot(
        usd_rate=usd_rate,
        eur_rate=eur_rate,
        timestamp=timestamp,
    )


__all__ = ["convert_to_reporting", "fallback_rates"]
