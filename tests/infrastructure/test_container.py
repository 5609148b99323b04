"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.application.use_cases.refresh_quotes import RefreshQuotesUseCase
from src.infrastructure import container
from src.infrastructure.exchange_rate_providers import (
    CbrExchangeRateProvider,
    ExchangeRateApiProvider,
    FrankfurterExchangeRateProvider,
)
from src.infrastructure.portfolio_repository import (
    SqlAlchemyPortfolioRepository,
)
from src.infrastructure.provider_chain import (
    ChainedSecurityQuoteProvider,
    NamedProvider,
)
from src.infrastructure.settings import PortfolioSettings


def test_build_exchange_rates_use_case_orders_live_sources(monkeypatch) -> None:
    """Rate sources should be tried in order with configured fallbacks."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    settings = PortfolioSettings(
        rates_refresh_seconds=120,
        fallback_usd_rate=Decimal("91"),
    )

    use_case = container.build_exchange_rates_use_case(settings)

    assert isinstance(use_case, GetExchangeRatesUseCase)
    names = [name for name, _ in use_case._providers]
    assert names == ["cbr", "exchangerate-api", "frankfurter"]
    assert isinstance(use_case._providers[0][1], CbrExchangeRateProvider)
    assert isinstance(use_case._providers[1][1], ExchangeRateApiProvider)
    assert isinstance(
        use_case._providers[2][1],
        FrankfurterExchangeRateProvider,
    )
    assert use_case._refresh_seconds == 120
    assert use_case._fallback_usd_rate == Decimal("91")


def test_build_portfolio_summary_use_case_uses_sql_repository(
    monkeypatch,
) -> None:
    """The summary use case should read from the SQL repository."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    db_port = MagicMock()

    use_case = container.build_portfolio_summary_use_case(
        db_port=db_port,
        settings=PortfolioSettings(),
    )

    assert isinstance(use_case, GetPortfolioSummaryUseCase)
    assert isinstance(use_case._repository, SqlAlchemyPortfolioRepository)
    db_port.get_portfolio_engine.assert_not_called()


def test_build_refresh_quotes_use_case_wraps_provider_chains(
    monkeypatch,
) -> None:
    """Providers should be wrapped into chains with configured workers."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    security = NamedProvider("moex", MagicMock())

    use_case = container.build_refresh_quotes_use_case(
        [security],
        [],
        settings=PortfolioSettings(quote_workers=3),
    )

    assert isinstance(use_case, RefreshQuotesUseCase)
    assert isinstance(
        use_case._security_provider,
        ChainedSecurityQuoteProvider,
    )
    assert use_case._security_provider.providers == [security]
    assert use_case._max_workers == 3
