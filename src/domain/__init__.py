"""Domain package for valuation rules and core models."""

from .constants import REPORTING_CURRENCY, SUPPORTED_CURRENCIES
from .models import (
    Crypto,
    Deposit,
    ExchangeRateSnapshot,
    Portfolio,
    PortfolioTotals,
    RealEstate,
    Security,
)
from .services import (
    build_holdings,
    build_income_chart,
    build_value_chart,
    compute_portfolio_totals,
    compute_total_monthly_income,
    compute_total_value,
    convert_to_reporting,
)

__all__ = [
    "REPORTING_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "Crypto",
    "Deposit",
    "ExchangeRateSnapshot",
    "Portfolio",
    "PortfolioTotals",
    "RealEstate",
    "Security",
    "build_holdings",
    "build_income_chart",
    "build_value_chart",
    "compute_portfolio_totals",
    "compute_total_monthly_income",
    "compute_total_value",
    "convert_to_reporting",
]
