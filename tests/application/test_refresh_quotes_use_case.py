"""Tests for the RefreshQuotesUseCase."""

from decimal import Decimal
import threading
from unittest.mock import MagicMock

from src.application.use_cases.refresh_quotes import RefreshQuotesUseCase
from src.domain.models import Crypto, CryptoQuote, Portfolio, Security, SecurityQuote


class _SecurityProvider:
    def __init__(self) -> None:
        self.requested: list[str] = []
        self._lock = threading.Lock()

    def fetch_quote(self, symbol: str):
        with self._lock:
            self.requested.append(symbol)
        if symbol == "FAIL":
            raise RuntimeError("provider down")
        if symbol == "NONE":
            return None
        return SecurityQuote(
            symbol=symbol,
            price=Decimal("110"),
            previous_close=Decimal("105"),
        )


class _CryptoProvider:
    def fetch_quote(self, symbol: str):
        if symbol == "BTC":
            return CryptoQuote(symbol=symbol, price=Decimal("70000"))
        return None


def _security(ticker: str, id: str = "1") -> Security:
    return Security(
        id=id,
        name=ticker,
        ticker=ticker,
        kind="stock",
        current_price=Decimal("100"),
        previous_price=Decimal("100"),
        quantity=1,
        expected_dividend=Decimal("0"),
        dividend_frequency="yearly",
        currency="RUB",
    )


def _crypto(symbol: str) -> Crypto:
    return Crypto(
        id=symbol,
        symbol=symbol,
        name=symbol,
        amount=Decimal("1"),
        current_price=Decimal("60000"),
        previous_price=Decimal("59000"),
    )


def test_execute_applies_quotes_and_isolates_failures() -> None:
    security_provider = _SecurityProvider()
    logger = MagicMock()
    portfolio = Portfolio(
        securities=(
            _security("SBER"),
            _security("FAIL", id="2"),
            _security("NONE", id="3"),
            _security("SBER", id="4"),
        ),
        cryptocurrencies=(_crypto("BTC"), _crypto("XYZ")),
    )
    use_case = RefreshQuotesUseCase(
        security_provider=security_provider,
        crypto_provider=_CryptoProvider(),
        logger=logger,
        max_workers=4,
    )

    result = use_case.execute(portfolio)

    assert sorted(security_provider.requested) == ["FAIL", "NONE", "SBER"]
    assert result.updated_symbols == ["SBER", "BTC"]
    assert result.failed_symbols == ["FAIL", "NONE", "XYZ"]
    refreshed = result.portfolio
    assert refreshed.securities[0].current_price == Decimal("110")
    assert refreshed.securities[0].previous_price == Decimal("105")
    assert refreshed.securities[3].current_price == Decimal("110")
    assert refreshed.securities[1] is portfolio.securities[1]
    assert refreshed.cryptocurrencies[0].current_price == Decimal("70000")
    assert refreshed.cryptocurrencies[0].previous_price == Decimal("60000")
    assert refreshed.cryptocurrencies[1] is portfolio.cryptocurrencies[1]
    assert portfolio.securities[0].current_price == Decimal("100")
    assert logger.warning.call_count == 3


def test_execute_skips_fetch_for_portfolio_without_quotes() -> None:
    security_provider = MagicMock()
    crypto_provider = MagicMock()
    portfolio = Portfolio()

    result = RefreshQuotesUseCase(
        security_provider=security_provider,
        crypto_provider=crypto_provider,
        logger=MagicMock(),
    ).execute(portfolio)

    assert result.portfolio is portfolio
    assert result.updated_symbols == []
    assert result.failed_symbols == []
    security_provider.fetch_quote.assert_not_called()
    crypto_provider.fetch_quote.assert_not_called()
