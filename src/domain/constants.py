"""Domain constants for transaction analytics."""

MONTH_LABELS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DEFAULT_WINDOW_DAYS = 30

EXPENSES_STAT_NAME = "Total Expenses"
INCOME_STAT_NAME = "Total Income"
RESULT_STAT_NAME = "Total Result"


__all__ = [
    "MONTH_LABELS",
    "DEFAULT_WINDOW_DAYS",
    "EXPENSES_STAT_NAME",
    "INCOME_STAT_NAME",
    "RESULT_STAT_NAME",
]
