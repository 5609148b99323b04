"""Domain models package."""

from .assets import (
    Crypto,
    Deposit,
    ExchangeRateSnapshot,
    Portfolio,
    RealEstate,
    Security,
)
from .finance import (
    AssetClassAmount,
    ChartData,
    ChartSegment,
    CryptoHolding,
    DepositHolding,
    PortfolioHoldings,
    PortfolioTotals,
    RealEstateHolding,
    SecurityHolding,
)
from .updates import (
    CryptoQuote,
    CryptoUpdate,
    DepositUpdate,
    RealEstateUpdate,
    SecurityQuote,
    SecurityUpdate,
)

__all__ = [
    "Security",
    "RealEstate",
    "Deposit",
    "Crypto",
    "ExchangeRateSnapshot",
    "Portfolio",
    "SecurityHolding",
    "RealEstateHolding",
    "DepositHolding",
    "CryptoHolding",
    "PortfolioHoldings",
    "AssetClassAmount",
    "PortfolioTotals",
    "ChartSegment",
    "ChartData",
    "SecurityUpdate",
    "RealEstateUpdate",
    "DepositUpdate",
    "CryptoUpdate",
    "SecurityQuote",
    "CryptoQuote",
]
