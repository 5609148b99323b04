"""Domain constants for portfolio valuation."""

from decimal import Decimal

REPORTING_CURRENCY = "RUB"

SUPPORTED_CURRENCIES = ("RUB", "USD", "EUR")
SECURITY_KINDS = ("stock", "bond", "etf")
DIVIDEND_FREQUENCIES = ("monthly", "quarterly", "yearly")
REAL_ESTATE_KINDS = ("apartment", "house", "commercial")
CAPITALIZATION_POLICIES = ("monthly", "quarterly", "yearly", "none")
DEPOSIT_TYPES = ("demand", "term")

# Crypto prices are always quoted in USD.
CRYPTO_QUOTE_CURRENCY = "USD"

FALLBACK_USD_RATE = Decimal("92.50")
FALLBACK_EUR_RATE = Decimal("100.00")

MONTHS_PER_YEAR = 12
DIVIDEND_PERIODS_PER_YEAR = {
    "monthly": 12,
    "quarterly": 4,
    "yearly": 1,
}

FULL_CIRCLE_DEGREES = Decimal("360")
FULL_CIRCLE_THRESHOLD = Decimal("99.9")

ASSET_CLASS_SECURITIES = "securities"
ASSET_CLASS_REAL_ESTATE = "real_estate"
ASSET_CLASS_DEPOSITS = "deposits"
ASSET_CLASS_CRYPTO = "crypto"

VALUE_LABELS = {
    ASSET_CLASS_SECURITIES: "Securities",
    ASSET_CLASS_REAL_ESTATE: "Real estate",
    ASSET_CLASS_DEPOSITS: "Deposits",
    ASSET_CLASS_CRYPTO: "Cryptocurrencies",
}

INCOME_LABELS = {
    ASSET_CLASS_SECURITIES: "Dividends",
    ASSET_CLASS_REAL_ESTATE: "Rental income",
    ASSET_CLASS_DEPOSITS: "Deposit interest",
    ASSET_CLASS_CRYPTO: "Crypto staking",
}

ASSET_CLASS_COLORS = {
    ASSET_CLASS_SECURITIES: "#667eea",
    ASSET_CLASS_REAL_ESTATE: "#4caf50",
    ASSET_CLASS_DEPOSITS: "#ff9800",
    ASSET_CLASS_CRYPTO: "#ef5350",
}


__all__ = [
    "REPORTING_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "SECURITY_KINDS",
    "DIVIDEND_FREQUENCIES",
    "REAL_ESTATE_KINDS",
    "CAPITALIZATION_POLICIES",
    "DEPOSIT_TYPES",
    "CRYPTO_QUOTE_CURRENCY",
    "FALLBACK_USD_RATE",
    "FALLBACK_EUR_RATE",
    "MONTHS_PER_YEAR",
    "DIVIDEND_PERIODS_PER_YEAR",
    "FULL_CIRCLE_DEGREES",
    "FULL_CIRCLE_THRESHOLD",
    "ASSET_CLASS_SECURITIES",
    "ASSET_CLASS_REAL_ESTATE",
    "ASSET_CLASS_DEPOSITS",
    "ASSET_CLASS_CRYPTO",
    "VALUE_LABELS",
    "INCOME_LABELS",
    "ASSET_CLASS_COLORS",
]
