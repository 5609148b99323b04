"""Provider chains trying market data sources in order."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.domain.models import CryptoQuote, SecurityQuote
from src.infrastructure.logging.logger import get_app_logger

ProviderT = TypeVar("ProviderT")


@dataclass(frozen=True)
class NamedProvider(Generic[ProviderT]):
    name: str
    provider: ProviderT


class _ChainedQuoteProvider:
    """First-success chain over named quote providers."""

    def __init__(self, providers: list[NamedProvider], logger=None) -> None:
        self.providers = list(providers)
        self._logger = logger or get_app_logger()
        self.last_sources: dict[str, str] = {}

    def fetch_quote(self, symbol: str):
        """Return the first quote any provider yields for ``symbol``.

        Args:
            symbol: Ticker or crypto symbol.

        Returns:
            The quote, or None when every provider failed.
        """
        for named in self.providers:
            try:
                quote = named.provider.fetch_quote(symbol)
            except Exception as exc:
                self._logger.warning(
                    f"Quote provider {named.name} failed for {symbol}: {exc}"
                )
                continue
            if quote is not None:
                self.last_sources[symbol] = named.name
                return quote
        return None


class ChainedSecurityQuoteProvider(_ChainedQuoteProvider):
    """Security quote chain."""

    def fetch_quote(self, symbol: str) -> SecurityQuote | None:
        return super().fetch_quote(symbol)


class ChainedCryptoQuoteProvider(_ChainedQuoteProvider):
    """Crypto quote chain."""

    def fetch_quote(self, symbol: str) -> CryptoQuote | None:
        return super().fetch_quote(symbol)


__all__ = [
    "NamedProvider",
    "ChainedSecurityQuoteProvider",
    "ChainedCryptoQuoteProvider",
]
