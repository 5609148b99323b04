"""Use case resolving the exchange rate snapshot for valuations."""

from collections.abc import Callable, Sequence
from datetime import datetime
from decimal import Decimal

from src.application.ports.market_data import ExchangeRateProviderPort
from src.domain.constants import FALLBACK_EUR_RATE, FALLBACK_USD_RATE
from src.domain.models import ExchangeRateSnapshot
from src.domain.services.fx import fallback_rates
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_REFRESH_SECONDS = 60 * 60


class GetExchangeRatesUseCase:
    """Return rates from the first provider that answers.

    Providers are asked in order; a provider that raises or returns None is
    skipped. When every provider fails the hardcoded fallback rates are
    used. A resolved snapshot is reused until it is older than the refresh
    interval.
    """

    def __init__(
        self,
        providers: Sequence[tuple[str, ExchangeRateProviderPort]],
        logger=None,
        refresh_seconds: int = DEFAULT_REFRESH_SECONDS,
        fallback_usd_rate: Decimal = FALLBACK_USD_RATE,
        fallback_eur_rate: Decimal = FALLBACK_EUR_RATE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            providers: Named rate providers in priority order.
            logger: Optional logger compatible with logging.Logger-like API.
            refresh_seconds: Maximum age of a reused snapshot.
            fallback_usd_rate: USD rate used when every provider fails.
            fallback_eur_rate: EUR rate used when every provider fails.
            clock: Optional callable returning the current time.
        """
        self._providers = list(providers)
        self._logger = logger or get_app_logger()
        self._refresh_seconds = refresh_seconds
        self._fallback_usd_rate = fallback_usd_rate
        self._fallback_eur_rate = fallback_eur_rate
        self._clock = clock or datetime.now
        self._cached: ExchangeRateSnapshot | None = None
        self._cached_at: datetime | None = None

    def execute(self, force_refresh: bool = False) -> ExchangeRateSnapshot:
        """Return the current exchange rate snapshot.

        Args:
            force_refresh: Ignore a cached snapshot that is still fresh.

        Returns:
            ExchangeRateSnapshot: Rates into the reporting currency.
        """
        now = self._clock()
        if not force_refresh and self._is_fresh(now):
            return self._cached

        snapshot = self._fetch_first(now)
        self._cached = snapshot
        self._cached_at = now
        return snapshot

    def _is_fresh(self, now: datetime) -> bool:
        if self._cached is None or self._cached_at is None:
            return False
        age = (now - self._cached_at).total_seconds()
        return age < self._refresh_seconds

    def _fetch_first(self, now: datetime) -> ExchangeRateSnapshot:
        for name, provider in self._providers:
            try:
                snapshot = provider.fetch_rates()
            except Exception as exc:
                self._logger.warning(f"Rate provider {name} failed: {exc}")
                continue
            if snapshot is None:
                self._logger.warning(f"Rate provider {name} returned no rates")
                continue
            self._logger.info(
                f"Exchange rates from {name}: USD={snapshot.usd_rate}, "
                f"EUR={snapshot.eur_rate}"
            )
            return snapshot

        self._logger.warning("All rate providers failed, using fallback rates")
        return fallback_rates(
            now,
            usd_rate=self._fallback_usd_rate,
            eur_rate=self._fallback_eur_rate,
        )


__all__ = ["GetExchangeRatesUseCase", "DEFAULT_REFRESH_SECONDS"]
