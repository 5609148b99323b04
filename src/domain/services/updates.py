"""Pure application of update requests and market quotes."""

from collections.abc import Mapping
from dataclasses import replace

from src.domain.constants import DIVIDEND_FREQUENCIES, SUPPORTED_CURRENCIES
from src.domain.models import (
    Crypto,
    CryptoQuote,
    CryptoUpdate,
    Deposit,
    DepositUpdate,
    Portfolio,
    RealEstate,
    RealEstateUpdate,
    Security,
    SecurityQuote,
    SecurityUpdate,
)
from src.domain.services.normalization import normalize_currency


def apply_security_update(security: Security, update: SecurityUpdate) -> Security:
    """Return a copy with the prices and quantity from ``update``."""
    return replace(
        security,
        **_present(
            current_price=update.current_price,
            previous_price=update.previous_price,
            quantity=update.quantity,
        ),
    )


def apply_real_estate_update(
    property: RealEstate,
    update: RealEstateUpdate,
) -> RealEstate:
    return replace(property, **_present(current_value=update.current_value))


def apply_deposit_update(deposit: Deposit, update: DepositUpdate) -> Deposit:
    return replace(deposit, **_present(amount=update.amount))


def apply_crypto_update(crypto: Crypto, update: CryptoUpdate) -> Crypto:
    return replace(
        crypto,
        **_present(
            current_price=update.current_price,
            previous_price=update.previous_price,
            amount=update.amount,
        ),
    )


def apply_security_quote(security: Security, quote: SecurityQuote) -> Security:
    """Return a copy refreshed from a market quote.

    The quote's previous close replaces the stored previous price only when
    the stored one carries no information (0 or equal to the current price);
    otherwise the old current price becomes the previous price.

    Args:
        security: Stored security.
        quote: Fresh quote for its ticker.

    Returns:
        Security: Updated copy.
    """
    keep_quote_close = (
        security.previous_price == security.current_price
        or security.previous_price == 0
    )
    currency = normalize_currency(quote.currency)
    frequency = quote.dividend_frequency
    return replace(
        security,
        current_price=quote.price,
        previous_price=(
            quote.previous_close if keep_quote_close else security.current_price
        ),
        expected_dividend=(
            quote.dividend_yield
            if quote.dividend_yield is not None
            else security.expected_dividend
        ),
        dividend_frequency=(
            frequency
            if frequency in DIVIDEND_FREQUENCIES
            else security.dividend_frequency
        ),
        name=quote.name or security.name,
        currency=(
            currency if currency in SUPPORTED_CURRENCIES else security.currency
        ),
    )


def apply_crypto_quote(crypto: Crypto, quote: CryptoQuote) -> Crypto:
    """Return a copy with the quoted price; the old price becomes previous."""
    return replace(
        crypto,
        current_price=quote.price,
        previous_price=crypto.current_price,
        name=quote.name or crypto.name,
    )


def apply_quotes(
    portfolio: Portfolio,
    security_quotes: Mapping[str, SecurityQuote],
    crypto_quotes: Mapping[str, CryptoQuote],
) -> Portfolio:
    """Return a portfolio refreshed from a completed batch of quotes.

    Assets whose ticker or symbol has no quote are kept unchanged.
    """
    securities = tuple(
        apply_security_quote(s, security_quotes[s.ticker])
        if s.ticker in security_quotes
        else s
        for s in portfolio.securities
    )
    cryptocurrencies = tuple(
        apply_crypto_quote(c, crypto_quotes[c.symbol])
        if c.symbol in crypto_quotes
        else c
        for c in portfolio.cryptocurrencies
    )
    return replace(
        portfolio,
        securities=securities,
        cryptocurrencies=cryptocurrencies,
    )


def _present(**fields) -> dict:
    return {name: value for name, value in fields.items() if value is not None}


__all__ = [
    "apply_security_update",
    "apply_real_estate_update",
    "apply_deposit_update",
    "apply_crypto_update",
    "apply_security_quote",
    "apply_crypto_quote",
    "apply_quotes",
]
