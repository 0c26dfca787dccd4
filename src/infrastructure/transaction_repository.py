"""SQLAlchemy-backed transaction store."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models import CurrencyValue, Transaction
from src.domain.services import (
    normalize_transaction_frequency,
    normalize_transaction_type,
)


CREATE_TRANSACTIONS_SQL = text(
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        amount TEXT NOT NULL,
        type TEXT NOT NULL,
        frequency TEXT NOT NULL,
        date TEXT NOT NULL,
        user_id TEXT NOT NULL
    )
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (id, title, amount, type, frequency, date, user_id)
    VALUES (:id, :title, :amount, :type, :frequency, :date, :user_id)
    """
)

DELETE_TRANSACTION_SQL = text(
    "DELETE FROM transactions WHERE id = :id AND user_id = :user_id"
)

_SELECT_COLUMNS = "SELECT id, title, amount, type, frequency, date, user_id"


class SqlAlchemyTransactionStore(TransactionStorePort):
    """Transaction store backed by a ``transactions`` table.

    Amounts are stored as text and dates as ISO strings so values round-trip
    exactly on any SQL backend.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the tracker engine.
        """
        self._db_port = db_port

    def ensure_schema(self) -> None:
        """Create the transactions table when it does not exist."""
        engine = self._db_port.get_tracker_engine()
        with engine.begin() as conn:
            conn.execute(CREATE_TRANSACTIONS_SQL)

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        query = self._build_fetch_query(start_date, end_date)
        params = self._build_params(user_id, start_date, end_date)
        engine = self._db_port.get_tracker_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        transactions = [self._to_transaction(row) for row in rows]
        return sorted(
            transactions,
            key=lambda transaction: transaction.date,
            reverse=True,
        )

    def get_transaction(
        self,
        user_id: str,
        transaction_id: str,
    ) -> Transaction | None:
        query = text(
            _SELECT_COLUMNS
            + " FROM transactions WHERE id = :id AND user_id = :user_id"
        )
        engine = self._db_port.get_tracker_engine()
        with engine.connect() as conn:
            row = conn.execute(
                query,
                {"id": transaction_id, "user_id": user_id},
            ).first()
        if not row:
            return None
        return self._to_transaction(row)

    def add_transaction(self, transaction: Transaction) -> Transaction:
        engine = self._db_port.get_tracker_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_TRANSACTION_SQL,
                {
                    "id": transaction.id,
                    "title": transaction.title,
                    "amount": transaction.amount.format(),
                    "type": _tag_value(transaction.type),
                    "frequency": _tag_value(transaction.frequency),
                    "date": transaction.date.isoformat(),
                    "user_id": transaction.user_id,
                },
            )
        return transaction

    def delete_transaction(self, user_id: str, transaction_id: str) -> int:
        engine = self._db_port.get_tracker_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_TRANSACTION_SQL,
                {"id": transaction_id, "user_id": user_id},
            )
            deleted = result.rowcount or 0
        return deleted

    @staticmethod
    def _build_fetch_query(
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = _SELECT_COLUMNS + " FROM transactions WHERE user_id = :user_id"
        if start_date:
            base_sql += " AND date >= :start_date"
        if end_date:
            base_sql += " AND date <= :end_date"
        base_sql += " ORDER BY date DESC, id"
        return text(base_sql)

    @staticmethod
    def _build_params(
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, str]:
        params = {"user_id": user_id}
        if start_date:
            params["start_date"] = start_date.isoformat()
        if end_date:
            params["end_date"] = end_date.isoformat()
        return params

    @staticmethod
    def _to_transaction(row) -> Transaction:
        raw_date = row.date
        if not isinstance(raw_date, date):
            raw_date = date.fromisoformat(str(raw_date))
        return Transaction(
            id=str(row.id),
            title=row.title,
            amount=CurrencyValue(str(row.amount)),
            type=normalize_transaction_type(row.type),
            frequency=normalize_transaction_frequency(row.frequency),
            date=raw_date,
            user_id=str(row.user_id),
        )


def _tag_value(tag) -> str:
    return getattr(tag, "value", tag)


__all__ = [
    "SqlAlchemyTransactionStore",
    "CREATE_TRANSACTIONS_SQL",
    "INSERT_TRANSACTION_SQL",
    "DELETE_TRANSACTION_SQL",
]
