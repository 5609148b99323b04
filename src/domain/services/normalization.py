"""Domain normalization helpers."""

from src.domain.constants import REPORTING_CURRENCY, SUPPORTED_CURRENCIES


def normalize_currency(currency: str | None) -> str | None:
    """Normalize currency codes.

    Args:
        currency: Raw currency code from a repository or provider.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_choice(value: str | None) -> str | None:
    """Normalize enum-like values such as kinds and frequencies."""
    if not value:
        return None
    cleaned = value.strip()
    return cleaned.lower() if cleaned else None


def coerce_currency(currency: str | None, logger) -> str:
    """Return a supported currency code, defaulting to the reporting one.

    Args:
        currency: Raw currency code.
        logger: Logger used for warnings.

    Returns:
        str: One of the supported currency codes.
    """
    normalized = normalize_currency(currency)
    if normalized in SUPPORTED_CURRENCIES:
        return normalized
    logger.warning(
        f"Unsupported currency {currency!r}, using {REPORTING_CURRENCY}"
    )
    return REPORTING_CURRENCY


__all__ = ["normalize_currency", "normalize_choice", "coerce_currency"]
