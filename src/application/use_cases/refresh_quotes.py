"""Use case refreshing portfolio prices from market data providers."""

from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from src.application.ports.market_data import (
    CryptoQuoteProviderPort,
    SecurityQuoteProviderPort,
)
from src.domain.models import Portfolio
from src.domain.services.updates import apply_quotes
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True)
class RefreshQuotesResult:
    """Outcome of a batch price refresh.

    Attributes:
        portfolio: New portfolio with refreshed prices.
        updated_symbols: Tickers and symbols that received a quote.
        failed_symbols: Tickers and symbols left unchanged.
    """

    portfolio: Portfolio
    updated_symbols: list[str]
    failed_symbols: list[str]


class RefreshQuotesUseCase:
    """Fetch one quote per ticker in parallel and apply the batch."""

    def __init__(
        self,
        security_provider: SecurityQuoteProviderPort,
        crypto_provider: CryptoQuoteProviderPort,
        logger=None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the use case.

        Args:
            security_provider: Provider for exchange tickers.
            crypto_provider: Provider for crypto symbols.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Upper bound of concurrent fetches.
        """
        self._security_provider = security_provider
        self._crypto_provider = crypto_provider
        self._logger = logger or get_app_logger()
        self._max_workers = max(1, max_workers)

    def execute(self, portfolio: Portfolio) -> RefreshQuotesResult:
        """Refresh security and crypto prices of a portfolio.

        The input portfolio is never modified.

        Args:
            portfolio: Portfolio snapshot to refresh.

        Returns:
            RefreshQuotesResult: Refreshed portfolio and per-symbol status.
        """
        tickers = _unique(s.ticker for s in portfolio.securities)
        symbols = _unique(c.symbol for c in portfolio.cryptocurrencies)
        if not tickers and not symbols:
            return RefreshQuotesResult(portfolio, [], [])

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            security_futures = self._submit(
                pool,
                self._security_provider.fetch_quote,
                tickers,
            )
            crypto_futures = self._submit(
                pool,
                self._crypto_provider.fetch_quote,
                symbols,
            )
            security_quotes = self._collect(security_futures)
            crypto_quotes = self._collect(crypto_futures)

        updated = [*security_quotes, *crypto_quotes]
        failed = [
            *(t for t in tickers if t not in security_quotes),
            *(s for s in symbols if s not in crypto_quotes),
        ]
        self._logger.info(
            f"Quotes refreshed: updated={len(updated)}, failed={len(failed)}"
        )
        return RefreshQuotesResult(
            portfolio=apply_quotes(portfolio, security_quotes, crypto_quotes),
            updated_symbols=updated,
            failed_symbols=failed,
        )

    @staticmethod
    def _submit(
        pool: ThreadPoolExecutor,
        fetch: Callable,
        symbols: list[str],
    ) -> dict[str, Future]:
        return {symbol: pool.submit(fetch, symbol) for symbol in symbols}

    def _collect(self, futures: dict[str, Future]) -> dict:
        quotes = {}
        for symbol, future in futures.items():
            try:
                quote = future.result()
            except Exception as exc:
                self._logger.warning(f"Quote fetch failed for {symbol}: {exc}")
                continue
            if quote is None:
                self._logger.warning(f"No quote available for {symbol}")
                continue
            quotes[symbol] = quote
        return quotes


def _unique(values: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


__all__ = ["RefreshQuotesUseCase", "RefreshQuotesResult"]
