"""Domain package for business rules and core models."""

from .constants import DEFAULT_WINDOW_DAYS, MONTH_LABELS
from .errors import TransactionNotFoundError, ValidationError
from .models import (
    ChangeType,
    CurrencyValue,
    DashboardView,
    MetricKind,
    MonthlyBucket,
    PeriodComparison,
    PeriodStat,
    Transaction,
    TransactionDraft,
    TransactionFrequency,
    TransactionType,
    WindowTotals,
)
from .services import (
    aggregate_by_month,
    compare_windows,
    group_by_date,
    validate_transaction_input,
)

__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "MONTH_LABELS",
    "TransactionNotFoundError",
    "ValidationError",
    "ChangeType",
    "CurrencyValue",
    "DashboardView",
    "MetricKind",
    "MonthlyBucket",
    "PeriodComparison",
    "PeriodStat",
    "Transaction",
    "TransactionDraft",
    "TransactionFrequency",
    "TransactionType",
    "WindowTotals",
    "aggregate_by_month",
    "compare_windows",
    "group_by_date",
    "validate_transaction_input",
]
