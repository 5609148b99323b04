"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

from src.domain.constants import FALLBACK_EUR_RATE, FALLBACK_USD_RATE
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PortfolioSettings:
    """Settings for valuing a stored portfolio.

    Attributes:
        owner_id: Identifier of the portfolio owner to report on.
        rates_refresh_seconds: Maximum age of reused exchange rates.
        fallback_usd_rate: USD rate used when no rate source answers.
        fallback_eur_rate: EUR rate used when no rate source answers.
        quote_workers: Concurrent quote fetches during a refresh.
    """

    owner_id: int = 1
    rates_refresh_seconds: int = 3600
    fallback_usd_rate: Decimal = FALLBACK_USD_RATE
    fallback_eur_rate: Decimal = FALLBACK_EUR_RATE
    quote_workers: int = 8

    @classmethod
    def from_env(cls) -> "PortfolioSettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by their defaults.

        Returns:
            PortfolioSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        defaults = cls()
        return cls(
            owner_id=cls._read_int(
                "PORTFOLIO_OWNER_ID",
                defaults.owner_id,
                logger,
            ),
            rates_refresh_seconds=cls._read_int(
                "RATES_REFRESH_SECONDS",
                defaults.rates_refresh_seconds,
                logger,
            ),
            fallback_usd_rate=cls._read_decimal(
                "FALLBACK_USD_RUB",
                defaults.fallback_usd_rate,
                logger,
            ),
            fallback_eur_rate=cls._read_decimal(
                "FALLBACK_EUR_RUB",
                defaults.fallback_eur_rate,
                logger,
            ),
            quote_workers=cls._read_int(
                "QUOTE_WORKERS",
                defaults.quote_workers,
                logger,
            ),
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive, got {value}")
            return default
        return value

    @staticmethod
    def _read_decimal(name: str, default: Decimal, logger) -> Decimal:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid decimal for {name}: {raw!r}")
            return default
        if not value.is_finite() or value <= 0:
            logger.warning(f"{name} must be a positive rate, got {raw!r}")
            return default
        return value


__all__ = ["PortfolioSettings"]
