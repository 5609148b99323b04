"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.market_data import (
    CryptoQuoteProviderPort,
    SecurityQuoteProviderPort,
)
from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.application.use_cases.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.application.use_cases.refresh_quotes import RefreshQuotesUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.exchange_rate_providers import (
    CbrExchangeRateProvider,
    ExchangeRateApiProvider,
    FrankfurterExchangeRateProvider,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.portfolio_repository import (
    SqlAlchemyPortfolioRepository,
)
from src.infrastructure.provider_chain import (
    ChainedCryptoQuoteProvider,
    ChainedSecurityQuoteProvider,
    NamedProvider,
)
from src.infrastructure.settings import PortfolioSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_portfolio_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PortfolioRepositoryPort:
    """Return the SQL-backed portfolio repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPortfolioRepository(resolved_db, logger=get_app_logger())


def build_exchange_rates_use_case(
    settings: PortfolioSettings | None = None,
) -> GetExchangeRatesUseCase:
    """Return the rate use case over the live rate sources."""
    resolved = settings or PortfolioSettings.from_env()
    return GetExchangeRatesUseCase(
        providers=[
            ("cbr", CbrExchangeRateProvider()),
            ("exchangerate-api", ExchangeRateApiProvider()),
            ("frankfurter", FrankfurterExchangeRateProvider()),
        ],
        logger=get_app_logger(),
        refresh_seconds=resolved.rates_refresh_seconds,
        fallback_usd_rate=resolved.fallback_usd_rate,
        fallback_eur_rate=resolved.fallback_eur_rate,
    )


def build_portfolio_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: PortfolioSettings | None = None,
) -> GetPortfolioSummaryUseCase:
    """Return the summary use case wired to the configured adapters."""
    return GetPortfolioSummaryUseCase(
        repository=build_portfolio_repository(db_port),
        rates_use_case=build_exchange_rates_use_case(settings),
        logger=get_app_logger(),
    )


def build_refresh_quotes_use_case(
    security_providers: list[NamedProvider[SecurityQuoteProviderPort]],
    crypto_providers: list[NamedProvider[CryptoQuoteProviderPort]],
    settings: PortfolioSettings | None = None,
) -> RefreshQuotesUseCase:
    """Return the quote refresh use case over the given provider chains."""
    resolved = settings or PortfolioSettings.from_env()
    logger = get_app_logger()
    return RefreshQuotesUseCase(
        security_provider=ChainedSecurityQuoteProvider(
            security_providers,
            logger=logger,
        ),
        crypto_provider=ChainedCryptoQuoteProvider(
            crypto_providers,
            logger=logger,
        ),
        logger=logger,
        max_workers=resolved.quote_workers,
    )


__all__ = [
    "build_database_adapter",
    "build_portfolio_repository",
    "build_exchange_rates_use_case",
    "build_portfolio_summary_use_case",
    "build_refresh_quotes_use_case",
]
