"""Domain models for computed portfolio figures."""

from dataclasses import dataclass
from decimal import Decimal

from .assets import Crypto, Deposit, RealEstate, Security


@dataclass(frozen=True)
class SecurityHolding:
    """Security with its computed display fields (security currency)."""

    security: Security
    market_value: Decimal
    price_change: Decimal
    price_change_percent: Decimal
    period_dividend: Decimal
    monthly_dividend: Decimal


@dataclass(frozen=True)
class RealEstateHolding:
    """Property with its computed rental figures.

    Attributes:
        property: Source property record.
        annual_rental: Annual rental income in the reporting currency.
        rental_yield_percent: Effective rental yield, percent per year.
        yield_is_calculated: True when the yield is derived from monthly
            rent; the stored yield is then not editable.
    """

    property: RealEstate
    annual_rental: Decimal
    rental_yield_percent: Decimal
    yield_is_calculated: bool


@dataclass(frozen=True)
class DepositHolding:
    """Deposit with accrued value and expected monthly income."""

    deposit: Deposit
    current_value: Decimal
    monthly_income: Decimal


@dataclass(frozen=True)
class CryptoHolding:
    """Crypto position with USD figures."""

    crypto: Crypto
    market_value: Decimal
    price_change: Decimal
    price_change_percent: Decimal
    monthly_staking_income: Decimal


@dataclass(frozen=True)
class PortfolioHoldings:
    """Per-asset computed rows, in input order."""

    securities: list[SecurityHolding]
    real_estate: list[RealEstateHolding]
    deposits: list[DepositHolding]
    cryptocurrencies: list[CryptoHolding]


@dataclass(frozen=True)
class AssetClassAmount:
    """Amount aggregated for one asset class in the reporting currency."""

    asset_class: str
    label: str
    amount: Decimal


@dataclass(frozen=True)
class PortfolioTotals:
    """Total value and monthly income of a portfolio.

    Attributes:
        total_value: Sum of all asset values.
        total_monthly_income: Sum of all monthly incomes.
        currency_code: Reporting currency.
        value_by_class: Per-class value amounts.
        income_by_class: Per-class monthly income amounts.
    """

    total_value: Decimal
    total_monthly_income: Decimal
    currency_code: str
    value_by_class: list[AssetClassAmount]
    income_by_class: list[AssetClassAmount]


@dataclass(frozen=True)
class ChartSegment:
    """Pie chart slice with its share and angular bounds in degrees."""

    label: str
    value: Decimal
    color: str
    percentage: Decimal
    start_angle: Decimal
    end_angle: Decimal


@dataclass(frozen=True)
class ChartData:
    """Chart-ready distribution of positive amounts."""

    title: str
    segments: list[ChartSegment]
    total: Decimal
    is_full_circle: bool = False

    @property
    def is_empty(self) -> bool:
        """Return True when there is nothing to draw."""
        return not self.segments


__all__ = [
    "SecurityHolding",
    "RealEstateHolding",
    "DepositHolding",
    "CryptoHolding",
    "PortfolioHoldings",
    "AssetClassAmount",
    "PortfolioTotals",
    "ChartSegment",
    "ChartData",
]
