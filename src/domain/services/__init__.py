"""Domain services package."""

from .charts import build_chart_data, build_income_chart, build_value_chart
from .deposits import (
    deposit_current_value,
    deposit_monthly_income,
    elapsed_months,
)
from .finance import (
    compute_income_by_class,
    compute_portfolio_totals,
    compute_total_monthly_income,
    compute_total_value,
    compute_value_by_class,
)
from .fx import convert_to_reporting, fallback_rates
from .holdings import build_holdings
from .income import (
    crypto_monthly_staking_income,
    is_rental_yield_calculated,
    price_change,
    price_change_percent,
    real_estate_annual_rental,
    real_estate_rental_yield_percent,
    security_monthly_dividend,
    security_period_dividend,
)
from .normalization import coerce_currency, normalize_choice, normalize_currency
from .updates import (
    apply_crypto_quote,
    apply_crypto_update,
    apply_deposit_update,
    apply_quotes,
    apply_real_estate_update,
    apply_security_quote,
    apply_security_update,
)
from .validation import validate_portfolio

__all__ = [
    "build_chart_data",
    "build_income_chart",
    "build_value_chart",
    "deposit_current_value",
    "deposit_monthly_income",
    "elapsed_months",
    "compute_income_by_class",
    "compute_portfolio_totals",
    "compute_total_monthly_income",
    "compute_total_value",
    "compute_value_by_class",
    "convert_to_reporting",
    "fallback_rates",
    "build_holdings",
    "crypto_monthly_staking_income",
    "is_rental_yield_calculated",
    "price_change",
    "price_change_percent",
    "real_estate_annual_rental",
    "real_estate_rental_yield_percent",
    "security_monthly_dividend",
    "security_period_dividend",
    "coerce_currency",
    "normalize_choice",
    "normalize_currency",
    "apply_crypto_quote",
    "apply_crypto_update",
    "apply_deposit_update",
    "apply_quotes",
    "apply_real_estate_update",
    "apply_security_quote",
    "apply_security_update",
    "validate_portfolio",
]
