"""Period-over-period change statistics for two adjacent windows."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Context, Decimal

from src.domain.constants import (
    EXPENSES_STAT_NAME,
    INCOME_STAT_NAME,
    RESULT_STAT_NAME,
)
from src.domain.models.finance import (
    ChangeType,
    MetricKind,
    PeriodComparison,
    PeriodStat,
    WindowTotals,
)
from src.domain.models.money import CENT, CurrencyValue
from src.domain.models.transactions import Transaction, TransactionType
from src.domain.services.aggregation import signed_amount


NON_FINITE_CHANGE = "0%"

# No traps: a zero previous sum yields Infinity or NaN instead of raising.
_PERCENT_CONTEXT = Context(prec=50, rounding=ROUND_HALF_UP, traps=[])

# (metric kind, went up) -> change type
_POLARITY = {
    (MetricKind.GENERIC, True): ChangeType.POSITIVE_INCREASE,
    (MetricKind.GENERIC, False): ChangeType.NEGATIVE_DECREASE,
    (MetricKind.INCOME, True): ChangeType.POSITIVE_INCREASE,
    (MetricKind.INCOME, False): ChangeType.NEGATIVE_DECREASE,
    (MetricKind.EXPENSE, True): ChangeType.NEGATIVE_INCREASE,
    (MetricKind.EXPENSE, False): ChangeType.POSITIVE_DECREASE,
}


def sum_by_type(transactions: Iterable[Transaction]) -> WindowTotals:
    """Sum a window's transactions with their economic sign.

    Args:
        transactions: Transactions falling in one comparison window.

    Returns:
        WindowTotals: Expense sum (<= 0) and income sum (>= 0).
    """
    expense = CurrencyValue.zero()
    income = CurrencyValue.zero()
    for transaction in transactions:
        amount = signed_amount(transaction)
        if amount is None:
            continue
        if transaction.type == TransactionType.EXPENSE:
            expense = expense.add(amount)
        else:
            income = income.add(amount)
    return WindowTotals(expense=expense, income=income)


def _as_decimal(percentage: Decimal | CurrencyValue) -> Decimal:
    if isinstance(percentage, CurrencyValue):
        return percentage.amount
    return percentage


def change_percentage(
    previous: CurrencyValue,
    current: CurrencyValue,
) -> Decimal:
    """Return ((current - previous) / previous) * 100, unrounded.

    Rounding to two decimal places is left to format_change so that a tiny
    change keeps its sign. A zero ``previous`` yields a non-finite value.
    """
    difference = current.subtract(previous).amount
    return _PERCENT_CONTEXT.divide(
        _PERCENT_CONTEXT.multiply(difference, Decimal(100)),
        previous.amount,
    )


def format_change(percentage: Decimal | CurrencyValue) -> str:
    """Render a percentage such as ``12.5%``; non-finite values become 0%."""
    value = _as_decimal(percentage)
    if not value.is_finite():
        return NON_FINITE_CHANGE
    rounded = _PERCENT_CONTEXT.quantize(value, CENT)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded.normalize(_PERCENT_CONTEXT):f}%"


def classify_change(
    percentage: Decimal | CurrencyValue,
    metric_kind: MetricKind = MetricKind.GENERIC,
) -> ChangeType:
    """Classify a percentage change by direction and desirability.

    Args:
        percentage: Output of change_percentage. Non-finite counts as 0.
        metric_kind: Metric the percentage describes.

    Returns:
        ChangeType: Entry of the polarity table for this metric.
    """
    value = _as_decimal(percentage)
    went_up = not value.is_finite() or value >= 0
    return _POLARITY[(MetricKind(metric_kind), went_up)]


def build_period_stat(
    name: str,
    current: CurrencyValue,
    previous: CurrencyValue,
    metric_kind: MetricKind = MetricKind.GENERIC,
) -> PeriodStat:
    """Build one statistic card from the two window sums."""
    percentage = change_percentage(previous, current)
    return PeriodStat(
        name=name,
        stat=current,
        previous_stat=previous,
        change=format_change(percentage),
        change_type=classify_change(percentage, metric_kind),
    )


def compare_windows(
    current_window: Iterable[Transaction],
    previous_window: Iterable[Transaction],
) -> PeriodComparison:
    """Compare the current window against the previous one.

    Args:
        current_window: Transactions of the most recent window.
        previous_window: Transactions of the window right before it.

    Returns:
        PeriodComparison: Expense, income and result statistics.
    """
    current = sum_by_type(current_window)
    previous = sum_by_type(previous_window)
    return PeriodComparison(
        expense_stat=build_period_stat(
            EXPENSES_STAT_NAME,
            current.expense,
            previous.expense,
            MetricKind.EXPENSE,
        ),
        income_stat=build_period_stat(
            INCOME_STAT_NAME,
            current.income,
            previous.income,
            MetricKind.INCOME,
        ),
        total_stat=build_period_stat(
            RESULT_STAT_NAME,
            current.result,
            previous.result,
        ),
    )


__all__ = [
    "NON_FINITE_CHANGE",
    "sum_by_type",
    "change_percentage",
    "format_change",
    "classify_change",
    "build_period_stat",
    "compare_windows",
]
