"""Domain models package."""

from .finance import (
    ChangeType,
    DashboardView,
    MetricKind,
    MonthlyBucket,
    PeriodComparison,
    PeriodStat,
    WindowTotals,
)
from .money import CurrencyValue
from .transactions import (
    Transaction,
    TransactionDraft,
    TransactionFrequency,
    TransactionType,
)

__all__ = [
    "CurrencyValue",
    "Transaction",
    "TransactionDraft",
    "TransactionFrequency",
    "TransactionType",
    "ChangeType",
    "MetricKind",
    "MonthlyBucket",
    "WindowTotals",
    "PeriodStat",
    "PeriodComparison",
    "DashboardView",
]
