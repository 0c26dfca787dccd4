"""Monthly rollups of a user's transactions."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import MONTH_LABELS
from src.domain.models.finance import MonthlyBucket
from src.domain.models.money import CurrencyValue
from src.domain.models.transactions import Transaction, TransactionType


def signed_amount(transaction: Transaction) -> CurrencyValue | None:
    """Return the transaction amount with its economic sign.

    Args:
        transaction: Transaction with a non-negative stored amount.

    Returns:
        CurrencyValue | None: Negative amount for expenses, positive for
        incomes, None for unknown type tags.
    """
    if transaction.type == TransactionType.EXPENSE:
        return CurrencyValue.zero().subtract(transaction.amount)
    if transaction.type == TransactionType.INCOME:
        return transaction.amount
    return None


def aggregate_by_month(
    transactions: Iterable[Transaction],
    year_reference: date,
) -> dict[str, MonthlyBucket]:
    """Fold transactions into per-month buckets for one calendar year.

    Transactions outside the year of ``year_reference`` and transactions with
    an unknown type tag are skipped.

    Args:
        transactions: Transactions of a single user, in any order.
        year_reference: Any date within the year to aggregate.

    Returns:
        dict[str, MonthlyBucket]: Buckets keyed by month name, in calendar
        order. Months without transactions are absent.
    """
    sums: dict[int, tuple[CurrencyValue, CurrencyValue]] = {}
    for transaction in transactions:
        if transaction.date.year != year_reference.year:
            continue
        month = transaction.date.month
        expense_sum, income_sum = sums.get(
            month,
            (CurrencyValue.zero(), CurrencyValue.zero()),
        )
        if transaction.type == TransactionType.EXPENSE:
            expense_sum = expense_sum.subtract(transaction.amount)
        elif transaction.type == TransactionType.INCOME:
            income_sum = income_sum.add(transaction.amount)
        sums[month] = (expense_sum, income_sum)

    return {
        MONTH_LABELS[month - 1]: MonthlyBucket(
            expense_sum=expense_sum,
            income_sum=income_sum,
            total=income_sum.add(expense_sum),
        )
        for month, (expense_sum, income_sum) in sorted(sums.items())
    }


def group_by_date(
    transactions: Iterable[Transaction],
) -> dict[date, list[Transaction]]:
    """Group transactions by day, most recent day first.

    Transactions keep their relative input order within a day.
    """
    groups: dict[date, list[Transaction]] = {}
    for transaction in transactions:
        groups.setdefault(transaction.date, []).append(transaction)
    return {day: groups[day] for day in sorted(groups, reverse=True)}


__all__ = ["signed_amount", "aggregate_by_month", "group_by_date"]
