"""Application use cases package."""

from .create_transaction import CreateTransactionUseCase
from .delete_transaction import DeleteTransactionUseCase
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_transaction import GetTransactionUseCase
from .list_transactions import ListTransactionsUseCase

__all__ = [
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "DashboardView",
    "GetDashboardUseCase",
    "GetTransactionUseCase",
    "ListTransactionsUseCase",
]
