"""SQLAlchemy-backed repository for portfolio snapshots."""

from datetime import date, datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.domain.models import Crypto, Deposit, Portfolio, RealEstate, Security
from src.domain.services.normalization import coerce_currency, normalize_choice
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


SELECT_SECURITIES_SQL = text(
    """
    SELECT id, name, ticker, type, current_price, previous_price, quantity,
           expected_dividend, dividend_frequency, currency
    FROM securities
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_REAL_ESTATE_SQL = text(
    """
    SELECT id, name, location, type, current_value, purchase_price,
           purchase_date, expected_rental_yield, monthly_rent
    FROM real_estate
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_DEPOSITS_SQL = text(
    """
    SELECT id, name, bank, amount, interest_rate, currency, opening_date,
           maturity_date, capitalization, type
    FROM deposits
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_CRYPTOCURRENCIES_SQL = text(
    """
    SELECT id, symbol, name, amount, current_price, previous_price,
           staking_yield, purchase_price, purchase_date
    FROM cryptocurrencies
    WHERE user_id = :user_id
    ORDER BY id
    """
)


class SqlAlchemyPortfolioRepository(PortfolioRepositoryPort):
    """Read-only repository over the portfolio tables."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_portfolio(self, owner_id: int) -> Portfolio:
        params = {"user_id": owner_id}
        engine = self._db_port.get_portfolio_engine()
        with engine.connect() as conn:
            securities = conn.execute(SELECT_SECURITIES_SQL, params).all()
            real_estate = conn.execute(SELECT_REAL_ESTATE_SQL, params).all()
            deposits = conn.execute(SELECT_DEPOSITS_SQL, params).all()
            cryptos = conn.execute(SELECT_CRYPTOCURRENCIES_SQL, params).all()
        return Portfolio(
            securities=tuple(self._to_security(row) for row in securities),
            real_estate=tuple(self._to_real_estate(row) for row in real_estate),
            deposits=tuple(self._to_deposit(row) for row in deposits),
            cryptocurrencies=tuple(self._to_crypto(row) for row in cryptos),
        )

    def _to_security(self, row) -> Security:
        return Security(
            id=str(row.id),
            name=row.name,
            ticker=row.ticker,
            kind=normalize_choice(row.type),
            current_price=coerce_decimal(row.current_price),
            previous_price=coerce_decimal(row.previous_price),
            quantity=int(row.quantity or 0),
            expected_dividend=coerce_decimal(row.expected_dividend),
            dividend_frequency=normalize_choice(row.dividend_frequency),
            currency=coerce_currency(row.currency, self._logger),
        )

    def _to_real_estate(self, row) -> RealEstate:
        return RealEstate(
            id=str(row.id),
            name=row.name,
            location=row.location,
            kind=normalize_choice(row.type),
            current_value=coerce_decimal(row.current_value),
            purchase_price=coerce_optional_decimal(row.purchase_price),
            purchase_date=self._coerce_date(row.purchase_date),
            expected_rental_yield=coerce_optional_decimal(
                row.expected_rental_yield
            ),
            monthly_rent=coerce_optional_decimal(row.monthly_rent),
        )

    def _to_deposit(self, row) -> Deposit:
        return Deposit(
            id=str(row.id),
            name=row.name,
            bank=row.bank,
            amount=coerce_decimal(row.amount),
            interest_rate=coerce_decimal(row.interest_rate),
            currency=coerce_currency(row.currency, self._logger),
            opening_date=self._coerce_date(row.opening_date),
            maturity_date=self._coerce_date(row.maturity_date),
            capitalization=normalize_choice(row.capitalization),
            type=normalize_choice(row.type),
        )

    def _to_crypto(self, row) -> Crypto:
        return Crypto(
            id=str(row.id),
            symbol=row.symbol,
            name=row.name,
            amount=coerce_decimal(row.amount),
            current_price=coerce_decimal(row.current_price),
            previous_price=coerce_decimal(row.previous_price),
            staking_yield=coerce_optional_decimal(row.staking_yield),
            purchase_price=coerce_optional_decimal(row.purchase_price),
            purchase_date=self._coerce_date(row.purchase_date),
        )

    def _coerce_date(self, value) -> date | None:
        """Normalize stored dates, which may be ISO strings.

        Args:
            value: Raw date, datetime, ISO string, or None.

        Returns:
            date | None: Parsed date, or None when absent or invalid.
        """
        if not value:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError:
            self._logger.warning(f"Ignoring invalid stored date {value!r}")
            return None


__all__ = ["SqlAlchemyPortfolioRepository"]
