"""Application ports package."""

from .database import DatabaseEnginePort
from .market_data import (
    CryptoQuoteProviderPort,
    ExchangeRateProviderPort,
    SecurityQuoteProviderPort,
)
from .portfolio_repository import PortfolioRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "CryptoQuoteProviderPort",
    "ExchangeRateProviderPort",
    "SecurityQuoteProviderPort",
    "PortfolioRepositoryPort",
]
