"""Exchange rate providers converting USD and EUR into rubles."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import json
from urllib.error import HTTPError, URLError
from urllib.request import urlopen

from src.domain.constants import FALLBACK_EUR_RATE, FALLBACK_USD_RATE
from src.domain.models import ExchangeRateSnapshot
from src.domain.services.fx import fallback_rates

CBR_DAILY_URL = "https://www.cbr-xml-daily.ru/daily_json.js"
EXCHANGERATE_API_URL = "https://api.exchangerate-api.com/v4/latest/RUB"
FRANKFURTER_URL = "https://api.frankfurter.app/latest?from=RUB&to=USD,EUR"
DEFAULT_TIMEOUT_SECONDS = 8
CENT = Decimal("0.01")


class RateProviderUnavailable(RuntimeError):
    """Raised when a rate provider cannot fetch live rates."""


@dataclass(frozen=True)
class StaticExchangeRateProvider:
    """Deterministic rates, used as the last resort."""

    usd_rate: Decimal = FALLBACK_USD_RATE
    eur_rate: Decimal = FALLBACK_EUR_RATE

    def fetch_rates(self) -> ExchangeRateSnapshot:
        return fallback_rates(
            datetime.now(),
            usd_rate=self.usd_rate,
            eur_rate=self.eur_rate,
        )


@dataclass
class CbrExchangeRateProvider:
    """Official Central Bank of Russia daily rates."""

    url: str = CBR_DAILY_URL
    timeout: int = DEFAULT_TIMEOUT_SECONDS
    clock: Callable[[], datetime] = datetime.now

    def fetch_rates(self) -> ExchangeRateSnapshot | None:
        payload = _fetch_json(self.url, self.timeout, "CBR")
        valute = payload.get("Valute") or {}
        usd = (valute.get("USD") or {}).get("Value")
        eur = (valute.get("EUR") or {}).get("Value")
        if not usd or not eur:
            return None
        return ExchangeRateSnapshot(
            usd_rate=_round_rate(usd),
            eur_rate=_round_rate(eur),
            timestamp=self.clock(),
        )


@dataclass
class ExchangeRateApiProvider:
    """exchangerate-api.com rates quoted from RUB, inverted into RUB per unit."""

    url: str = EXCHANGERATE_API_URL
    timeout: int = DEFAULT_TIMEOUT_SECONDS
    clock: Callable[[], datetime] = datetime.now

    def fetch_rates(self) -> ExchangeRateSnapshot | None:
        payload = _fetch_json(self.url, self.timeout, "ExchangeRate")
        return _inverted_snapshot(payload.get("rates") or {}, self.clock())


@dataclass
class FrankfurterExchangeRateProvider:
    """ECB reference rates quoted from RUB, inverted into RUB per unit."""

    url: str = FRANKFURTER_URL
    timeout: int = DEFAULT_TIMEOUT_SECONDS
    clock: Callable[[], datetime] = datetime.now

    def fetch_rates(self) -> ExchangeRateSnapshot | None:
        payload = _fetch_json(self.url, self.timeout, "Frankfurter")
        return _inverted_snapshot(payload.get("rates") or {}, self.clock())


def _fetch_json(url: str, timeout: int, source: str) -> dict:
    try:
        with urlopen(url, timeout=timeout) as response:
            payload = json.load(response)
    except (HTTPError, URLError, TimeoutError, json.JSONDecodeError) as exc:
        raise RateProviderUnavailable(f"{source} API unavailable") from exc
    if not isinstance(payload, dict):
        raise RateProviderUnavailable(f"{source} response is not an object")
    return payload


def _inverted_snapshot(
    rates: dict,
    timestamp: datetime,
) -> ExchangeRateSnapshot | None:
    usd = rates.get("USD")
    eur = rates.get("EUR")
    if not usd or not eur:
        return None
    return ExchangeRateSnapshot(
        usd_rate=_round_rate(1 / Decimal(str(usd))),
        eur_rate=_round_rate(1 / Decimal(str(eur))),
        timestamp=timestamp,
    )


def _round_rate(value) -> Decimal:
    try:
        return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise RateProviderUnavailable(f"Invalid rate value {value!r}") from exc


__all__ = [
    "RateProviderUnavailable",
    "StaticExchangeRateProvider",
    "CbrExchangeRateProvider",
    "ExchangeRateApiProvider",
    "FrankfurterExchangeRateProvider",
]
