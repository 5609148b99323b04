"""Domain models for portfolio asset records."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Security:
    """Exchange-traded security position.

    Attributes:
        id: Record identity.
        name: Display name.
        ticker: Exchange ticker used for quote lookups.
        kind: One of stock, bond, etf.
        current_price: Latest price in ``currency``.
        previous_price: Previous price in ``currency``.
        quantity: Number of units held (at least 1).
        expected_dividend: Annual dividend yield on current price, percent.
        dividend_frequency: One of monthly, quarterly, yearly.
        currency: Price currency (RUB, USD, EUR).
    """

    id: str
    name: str
    ticker: str
    kind: str
    current_price: Decimal
    previous_price: Decimal
    quantity: int
    expected_dividend: Decimal
    dividend_frequency: str
    currency: str

    @property
    def market_value(self) -> Decimal:
        """Return price times quantity in the security currency."""
        return self.current_price * self.quantity


@dataclass(frozen=True)
class RealEstate:
    """Real estate property valued in the reporting currency."""

    id: str
    name: str
    location: str
    kind: str
    current_value: Decimal
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    expected_rental_yield: Decimal | None = None
    monthly_rent: Decimal | None = None


@dataclass(frozen=True)
class Deposit:
    """Bank deposit accruing interest under a capitalization policy."""

    id: str
    name: str
    bank: str
    amount: Decimal
    interest_rate: Decimal
    currency: str
    opening_date: date | None
    capitalization: str
    type: str
    maturity_date: date | None = None


@dataclass(frozen=True)
class Crypto:
    """Cryptocurrency position; prices are quoted in USD."""

    id: str
    symbol: str
    name: str
    amount: Decimal
    current_price: Decimal
    previous_price: Decimal
    staking_yield: Decimal | None = None
    purchase_price: Decimal | None = None
    purchase_date: date | None = None

    @property
    def market_value(self) -> Decimal:
        """Return price times amount in USD."""
        return self.current_price * self.amount


@dataclass(frozen=True)
class ExchangeRateSnapshot:
    """Rates converting one unit of a currency into the reporting currency."""

    usd_rate: Decimal
    eur_rate: Decimal
    timestamp: datetime


@dataclass(frozen=True)
class Portfolio:
    """Snapshot of the four asset collections owned by the caller."""

    securities: tuple[Security, ...] = field(default_factory=tuple)
    real_estate: tuple[RealEstate, ...] = field(default_factory=tuple)
    deposits: tuple[Deposit, ...] = field(default_factory=tuple)
    cryptocurrencies: tuple[Crypto, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Return True when no collection holds any record."""
        return not (
            self.securities
            or self.real_estate
            or self.deposits
            or self.cryptocurrencies
        )


__all__ = [
    "Security",
    "RealEstate",
    "Deposit",
    "Crypto",
    "ExchangeRateSnapshot",
    "Portfolio",
]
