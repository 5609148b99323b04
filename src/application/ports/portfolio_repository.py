"""Application port for portfolio snapshots."""

from typing import Protocol

from src.domain.models import Portfolio


class PortfolioRepositoryPort(Protocol):
    """Port exposing read access to a stored portfolio."""

    def fetch_portfolio(self, owner_id: int) -> Portfolio:
        """Return the portfolio snapshot of an owner."""


__all__ = ["PortfolioRepositoryPort"]
