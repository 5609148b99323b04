"""Update requests and market quotes applied to asset records."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SecurityUpdate:
    """Mutable security fields; None keeps the stored value."""

    current_price: Decimal | None = None
    previous_price: Decimal | None = None
    quantity: int | None = None


@dataclass(frozen=True)
class RealEstateUpdate:
    current_value: Decimal | None = None


@dataclass(frozen=True)
class DepositUpdate:
    amount: Decimal | None = None


@dataclass(frozen=True)
class CryptoUpdate:
    current_price: Decimal | None = None
    previous_price: Decimal | None = None
    amount: Decimal | None = None


@dataclass(frozen=True)
class SecurityQuote:
    """Fresh market data for a ticker.

    Attributes:
        symbol: Ticker the quote belongs to.
        price: Latest traded price.
        previous_close: Previous session close.
        name: Optional instrument name.
        currency: Optional quote currency.
        dividend_yield: Optional annual dividend yield, percent.
        dividend_frequency: Optional payout cadence.
    """

    symbol: str
    price: Decimal
    previous_close: Decimal
    name: str | None = None
    currency: str | None = None
    dividend_yield: Decimal | None = None
    dividend_frequency: str | None = None


@dataclass(frozen=True)
class CryptoQuote:
    """Fresh USD market data for a crypto symbol."""

    symbol: str
    price: Decimal
    previous_price: Decimal | None = None
    name: str | None = None


__all__ = [
    "SecurityUpdate",
    "RealEstateUpdate",
    "DepositUpdate",
    "CryptoUpdate",
    "SecurityQuote",
    "CryptoQuote",
]
