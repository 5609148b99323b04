"""Application ports for market data collaborators.

Providers return None when they have no data for a symbol and may raise
when the upstream service fails; callers isolate both per item.
"""

from typing import Protocol

from src.domain.models import CryptoQuote, ExchangeRateSnapshot, SecurityQuote


class SecurityQuoteProviderPort(Protocol):
    """Port returning quotes for exchange tickers."""

    def fetch_quote(self, symbol: str) -> SecurityQuote | None:
        """Return the latest quote for a ticker."""


class CryptoQuoteProviderPort(Protocol):
    """Port returning USD quotes for crypto symbols."""

    def fetch_quote(self, symbol: str) -> CryptoQuote | None:
        """Return the latest quote for a crypto symbol."""


class ExchangeRateProviderPort(Protocol):
    """Port returning rates into the reporting currency."""

    def fetch_rates(self) -> ExchangeRateSnapshot | None:
        """Return a fresh exchange rate snapshot."""


__all__ = [
    "SecurityQuoteProviderPort",
    "CryptoQuoteProviderPort",
    "ExchangeRateProviderPort",
]
