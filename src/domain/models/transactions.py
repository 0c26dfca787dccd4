"""Domain models for user transactions."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from src.domain.models.money import CurrencyValue


class TransactionType(str, Enum):
    """Closed set of transaction type tags."""

    EXPENSE = "EXPENSE"
    INCOME = "INCOME"


class TransactionFrequency(str, Enum):
    """Closed set of transaction recurrence tags."""

    FIXED = "FIXED"
    VARIABLE = "VARIABLE"


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction record supplied by a transaction store.

    Attributes:
        id: Opaque unique identifier.
        title: Display label.
        amount: Non-negative magnitude; the sign comes from ``type``.
        type: Type tag. Stores may hand back a raw string for tags this
            version does not know about.
        frequency: Recurrence tag, not used in aggregation arithmetic.
        date: Calendar date of the transaction.
        user_id: Owner of the transaction.
    """

    id: str
    title: str
    amount: CurrencyValue
    type: TransactionType | str
    frequency: TransactionFrequency | str
    date: date
    user_id: str


@dataclass(frozen=True)
class TransactionDraft:
    """Validated user input ready to be persisted as a transaction."""

    title: str
    amount: CurrencyValue
    type: TransactionType
    frequency: TransactionFrequency
    date: date


__all__ = [
    "TransactionType",
    "TransactionFrequency",
    "Transaction",
    "TransactionDraft",
]
