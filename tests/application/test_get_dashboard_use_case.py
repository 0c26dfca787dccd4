"""Tests for the GetDashboardUseCase."""

from datetime import date
from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.domain.models import (
    ChangeType,
    CurrencyValue,
    Transaction,
    TransactionFrequency,
    TransactionType,
)
from src.infrastructure.memory_store import InMemoryTransactionStore


def _txn(
    txn_id: str,
    day: date,
    txn_type: TransactionType,
    amount: str,
    user_id: str = "user-1",
) -> Transaction:
    return Transaction(
        id=txn_id,
        title=f"Transaction {txn_id}",
        amount=CurrencyValue(amount),
        type=txn_type,
        frequency=TransactionFrequency.VARIABLE,
        date=day,
        user_id=user_id,
    )


def test_execute_fetches_year_and_both_windows() -> None:
    """The use case should query the store with the expected bounds."""
    store = MagicMock()
    store.fetch_transactions.return_value = []

    use_case = GetDashboardUseCase(store, logger=MagicMock())

    use_case.execute("user-1", today=date(2024, 3, 31))

    assert [call.args for call in store.fetch_transactions.call_args_list] == [
        ("user-1", date(2024, 1, 1), date(2024, 12, 31)),
        ("user-1", date(2024, 3, 1), date(2024, 3, 31)),
        ("user-1", date(2024, 1, 31), date(2024, 2, 29)),
    ]


def test_comparison_windows_do_not_overlap() -> None:
    """The previous window should end the day before the current one."""
    (current_start, current_end), (previous_start, previous_end) = (
        GetDashboardUseCase.comparison_windows(date(2024, 6, 30), 30)
    )

    assert current_end == date(2024, 6, 30)
    assert current_start == date(2024, 5, 31)
    assert previous_end == date(2024, 5, 30)
    assert previous_start == date(2024, 5, 1)


def test_execute_assembles_stats_and_buckets() -> None:
    """Stats and monthly buckets should be merged into one view."""
    today = date(2024, 3, 31)
    store = InMemoryTransactionStore(
        [
            _txn("1", date(2024, 1, 5), TransactionType.INCOME, "1000"),
            _txn("2", date(2024, 1, 10), TransactionType.EXPENSE, "300"),
            _txn("3", date(2024, 2, 10), TransactionType.EXPENSE, "100"),
            _txn("4", date(2024, 3, 15), TransactionType.EXPENSE, "150"),
            _txn("5", date(2024, 3, 20), TransactionType.INCOME, "200"),
            _txn("6", date(2023, 12, 31), TransactionType.INCOME, "5000"),
            _txn("7", date(2024, 3, 16), TransactionType.INCOME, "999", "other"),
        ]
    )

    view = GetDashboardUseCase(store, logger=MagicMock()).execute(
        "user-1",
        today=today,
    )

    assert list(view.monthly_buckets) == ["January", "February", "March"]
    assert view.monthly_buckets["January"].total == CurrencyValue("700")
    assert view.monthly_buckets["March"].total == CurrencyValue("50")

    expenses, income, result = view.stats
    assert expenses.stat == CurrencyValue("-150")
    assert expenses.previous_stat == CurrencyValue("-100")
    assert expenses.change == "50%"
    assert expenses.change_type == ChangeType.NEGATIVE_INCREASE
    assert income.stat == CurrencyValue("200")
    assert income.previous_stat == CurrencyValue("0")
    assert income.change == "0%"
    assert result.stat == CurrencyValue("50")
    assert result.previous_stat == CurrencyValue("-100")
    assert result.change == "-150%"
    assert result.change_type == ChangeType.NEGATIVE_DECREASE


def test_dashboard_view_serializes_for_presentation() -> None:
    """The serialized view should expose two-decimal strings only."""
    store = InMemoryTransactionStore(
        [_txn("1", date(2024, 3, 30), TransactionType.INCOME, "200")]
    )

    view = GetDashboardUseCase(store, logger=MagicMock()).execute(
        "user-1",
        today=date(2024, 3, 31),
    )

    assert view.to_dict() == {
        "stats": [
            {
                "name": "Total Expenses",
                "stat": "0.00",
                "previousStat": "0.00",
                "change": "0%",
                "changeType": "negative-increase",
            },
            {
                "name": "Total Income",
                "stat": "200.00",
                "previousStat": "0.00",
                "change": "0%",
                "changeType": "positive-increase",
            },
            {
                "name": "Total Result",
                "stat": "200.00",
                "previousStat": "0.00",
                "change": "0%",
                "changeType": "positive-increase",
            },
        ],
        "monthlyBuckets": {
            "March": {
                "expenseSum": "0.00",
                "incomeSum": "200.00",
                "total": "200.00",
            },
        },
    }


def test_window_days_are_configurable() -> None:
    """A custom window length should change the fetched ranges."""
    store = MagicMock()
    store.fetch_transactions.return_value = []

    use_case = GetDashboardUseCase(store, logger=MagicMock(), window_days=7)
    use_case.execute("user-1", today=date(2024, 3, 31))

    _, current_call, previous_call = store.fetch_transactions.call_args_list
    assert current_call.args[1:] == (date(2024, 3, 24), date(2024, 3, 31))
    assert previous_call.args[1:] == (date(2024, 3, 17), date(2024, 3, 23))
