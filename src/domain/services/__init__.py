"""Domain services package."""

from .aggregation import aggregate_by_month, group_by_date, signed_amount
from .normalization import (
    normalize_tag,
    normalize_transaction_frequency,
    normalize_transaction_type,
)
from .period_change import (
    build_period_stat,
    change_percentage,
    classify_change,
    compare_windows,
    format_change,
    sum_by_type,
)
from .validation import parse_amount, parse_date, validate_transaction_input

__all__ = [
    "aggregate_by_month",
    "group_by_date",
    "signed_amount",
    "normalize_tag",
    "normalize_transaction_frequency",
    "normalize_transaction_type",
    "build_period_stat",
    "change_percentage",
    "classify_change",
    "compare_windows",
    "format_change",
    "sum_by_type",
    "parse_amount",
    "parse_date",
    "validate_transaction_input",
]
