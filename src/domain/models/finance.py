"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from enum import Enum

from src.domain.models.money import CurrencyValue


class ChangeType(str, Enum):
    """Direction of a change combined with its economic desirability."""

    POSITIVE_INCREASE = "positive-increase"
    NEGATIVE_INCREASE = "negative-increase"
    POSITIVE_DECREASE = "positive-decrease"
    NEGATIVE_DECREASE = "negative-decrease"


class MetricKind(str, Enum):
    """Kind of metric a period statistic describes."""

    GENERIC = "GENERIC"
    EXPENSE = "EXPENSE"
    INCOME = "INCOME"


@dataclass(frozen=True)
class MonthlyBucket:
    """Per-month aggregate of a user's transactions.

    Attributes:
        expense_sum: Expenses accumulated with a negative sign (<= 0).
        income_sum: Incomes accumulated with a positive sign.
        total: income_sum + expense_sum.
    """

    expense_sum: CurrencyValue
    income_sum: CurrencyValue
    total: CurrencyValue

    def to_dict(self) -> dict[str, str]:
        return {
            "expenseSum": self.expense_sum.format(),
            "incomeSum": self.income_sum.format(),
            "total": self.total.format(),
        }


@dataclass(frozen=True)
class WindowTotals:
    """Economic-sign sums for one comparison window."""

    expense: CurrencyValue
    income: CurrencyValue

    @property
    def result(self) -> CurrencyValue:
        """Return income plus the (negative) expense sum."""
        return self.income.add(self.expense)


@dataclass(frozen=True)
class PeriodStat:
    """Statistic comparing the current window to the previous one."""

    name: str
    stat: CurrencyValue
    previous_stat: CurrencyValue
    change: str
    change_type: ChangeType

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "stat": self.stat.format(),
            "previousStat": self.previous_stat.format(),
            "change": self.change,
            "changeType": self.change_type.value,
        }


@dataclass(frozen=True)
class PeriodComparison:
    """Expense, income and result statistics for two adjacent windows."""

    expense_stat: PeriodStat
    income_stat: PeriodStat
    total_stat: PeriodStat

    def as_list(self) -> list[PeriodStat]:
        """Return the statistics in display order."""
        return [self.expense_stat, self.income_stat, self.total_stat]


@dataclass(frozen=True)
class DashboardView:
    """Structure handed to the presentation layer."""

    stats: list[PeriodStat]
    monthly_buckets: dict[str, MonthlyBucket] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize amounts as strings with two fractional digits."""
        return {
            "stats": [stat.to_dict() for stat in self.stats],
            "monthlyBuckets": {
                month: bucket.to_dict()
                for month, bucket in self.monthly_buckets.items()
            },
        }


__all__ = [
    "ChangeType",
    "MetricKind",
    "MonthlyBucket",
    "WindowTotals",
    "PeriodStat",
    "PeriodComparison",
    "DashboardView",
]
