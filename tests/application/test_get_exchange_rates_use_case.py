"""Tests for the GetExchangeRatesUseCase."""

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from src.domain.models import ExchangeRateSnapshot

NOW = datetime(2024, 6, 1, 10, 0)


class _Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class _Provider:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls = 0

    def fetch_rates(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


def _snapshot(usd: str, eur: str) -> ExchangeRateSnapshot:
    return ExchangeRateSnapshot(
        usd_rate=Decimal(usd),
        eur_rate=Decimal(eur),
        timestamp=NOW,
    )


def test_first_successful_provider_wins() -> None:
    failing = _Provider(error=RuntimeError("down"))
    empty = _Provider(result=None)
    good = _Provider(result=_snapshot("91", "99"))
    unused = _Provider(result=_snapshot("1", "1"))
    logger = MagicMock()

    use_case = GetExchangeRatesUseCase(
        providers=[
            ("failing", failing),
            ("empty", empty),
            ("good", good),
            ("unused", unused),
        ],
        logger=logger,
        clock=_Clock(NOW),
    )

    result = use_case.execute()

    assert result.usd_rate == Decimal("91")
    assert unused.calls == 0
    assert logger.warning.call_count == 2


def test_fallback_rates_when_all_providers_fail() -> None:
    use_case = GetExchangeRatesUseCase(
        providers=[("failing", _Provider(error=RuntimeError("down")))],
        logger=MagicMock(),
        clock=_Clock(NOW),
    )

    result = use_case.execute()

    assert result.usd_rate == Decimal("92.50")
    assert result.eur_rate == Decimal("100.00")
    assert result.timestamp == NOW


def test_configured_fallback_rates_are_used() -> None:
    use_case = GetExchangeRatesUseCase(
        providers=[],
        logger=MagicMock(),
        fallback_usd_rate=Decimal("80"),
        fallback_eur_rate=Decimal("88"),
        clock=_Clock(NOW),
    )

    result = use_case.execute()

    assert result.usd_rate == Decimal("80")
    assert result.eur_rate == Decimal("88")


def test_snapshot_is_reused_until_refresh_interval() -> None:
    provider = _Provider(result=_snapshot("90", "98"))
    clock = _Clock(NOW)
    use_case = GetExchangeRatesUseCase(
        providers=[("cbr", provider)],
        logger=MagicMock(),
        refresh_seconds=3600,
        clock=clock,
    )

    use_case.execute()
    clock.now = NOW + timedelta(minutes=59)
    use_case.execute()
    assert provider.calls == 1

    clock.now = NOW + timedelta(hours=1)
    use_case.execute()
    assert provider.calls == 2

    use_case.execute(force_refresh=True)
    assert provider.calls == 3
