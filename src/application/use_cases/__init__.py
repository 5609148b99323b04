"""Application use cases package."""

from .get_exchange_rates import GetExchangeRatesUseCase
from .get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
    PortfolioSummary,
    build_portfolio_summary,
)
from .refresh_quotes import RefreshQuotesResult, RefreshQuotesUseCase

__all__ = [
    "GetExchangeRatesUseCase",
    "GetPortfolioSummaryUseCase",
    "PortfolioSummary",
    "build_portfolio_summary",
    "RefreshQuotesResult",
    "RefreshQuotesUseCase",
]
