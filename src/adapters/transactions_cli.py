"""CLI adapter to add, list, show and delete transactions."""

import argparse
import sys

from src.application.use_cases.get_transaction import GetTransactionUseCase
from src.domain.errors import TransactionNotFoundError, ValidationError
from src.domain.models import Transaction, TransactionType
from src.infrastructure.container import (
    build_create_transaction_use_case,
    build_delete_transaction_use_case,
    build_list_transactions_use_case,
    build_transaction_store,
)
from src.infrastructure.logging.logger import get_app_logger


_AMOUNT_SIGNS = {
    TransactionType.EXPENSE: "-",
    TransactionType.INCOME: "+",
}


def _format_transaction(transaction: Transaction) -> str:
    sign = _AMOUNT_SIGNS.get(transaction.type, "")
    type_label = getattr(transaction.type, "value", transaction.type)
    frequency_label = getattr(
        transaction.frequency,
        "value",
        transaction.frequency,
    )
    return (
        f"{transaction.id}  {transaction.title}  "
        f"{sign}{transaction.amount.format_display()}  "
        f"{type_label}  {frequency_label}"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage transactions.")
    parser.add_argument("--user-id", required=True)
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Record a new transaction.")
    add.add_argument("--title", required=True)
    add.add_argument("--amount", required=True)
    add.add_argument("--type", required=True, dest="transaction_type")
    add.add_argument("--frequency")
    add.add_argument("--date", dest="transaction_date")

    commands.add_parser("list", help="List transactions grouped by day.")

    show = commands.add_parser("show", help="Show one transaction.")
    show.add_argument("transaction_id")

    delete = commands.add_parser("delete", help="Delete one transaction.")
    delete.add_argument("transaction_id")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the requested transaction command.

    Returns:
        int: Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    store = build_transaction_store()

    try:
        if args.command == "add":
            transaction = build_create_transaction_use_case(store).execute(
                args.user_id,
                args.title,
                args.amount,
                args.transaction_type,
                frequency=args.frequency,
                transaction_date=args.transaction_date,
            )
            print(f"Created {_format_transaction(transaction)}")
        elif args.command == "list":
            groups = build_list_transactions_use_case(store).execute(
                args.user_id
            )
            for day, transactions in groups.items():
                print(day.isoformat())
                for transaction in transactions:
                    print(f"  {_format_transaction(transaction)}")
        elif args.command == "show":
            transaction = GetTransactionUseCase(store).execute(
                args.user_id,
                args.transaction_id,
            )
            print(_format_transaction(transaction))
        else:
            deleted = build_delete_transaction_use_case(store).execute(
                args.user_id,
                args.transaction_id,
            )
            if not deleted:
                raise TransactionNotFoundError(
                    args.transaction_id,
                    args.user_id,
                )
            print(f"Deleted {args.transaction_id}")
    except ValidationError as exc:
        for field, message in exc.errors.items():
            logger.error(f"{field}: {message}")
        return 1
    except TransactionNotFoundError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
