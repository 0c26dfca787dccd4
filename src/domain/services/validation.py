"""Domain validation helpers."""

from datetime import date, datetime

from src.domain.errors import ValidationError
from src.domain.models.money import MAX_AMOUNT, CurrencyValue
from src.domain.models.transactions import (
    TransactionDraft,
    TransactionFrequency,
    TransactionType,
)
from src.domain.services.normalization import (
    normalize_transaction_frequency,
    normalize_transaction_type,
)


def parse_amount(raw) -> CurrencyValue:
    """Parse a raw transaction amount.

    Args:
        raw: Amount as typed by the user or read from storage.

    Returns:
        CurrencyValue: Parsed, strictly positive amount.

    Raises:
        ValidationError: If the amount is malformed, zero, negative or above
            MAX_AMOUNT.
    """
    try:
        amount = CurrencyValue(raw)
    except ValidationError as exc:
        raise ValidationError({"amount": "Invalid amount"}) from exc
    if amount.is_zero():
        raise ValidationError({"amount": "Transaction amount cannot be 0"})
    if amount.is_negative():
        raise ValidationError(
            {"amount": "Transaction amount cannot be negative"}
        )
    if amount.amount > MAX_AMOUNT:
        raise ValidationError({"amount": "Transaction amount is too large"})
    return amount


def parse_date(raw) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string or pass a date through."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str) and raw.strip():
        try:
            return date.fromisoformat(raw.strip())
        except ValueError as exc:
            raise ValidationError({"date": "Invalid date"}) from exc
    raise ValidationError({"date": "Invalid date"})


def validate_transaction_input(
    title,
    amount,
    transaction_type,
    frequency=None,
    transaction_date=None,
) -> TransactionDraft:
    """Validate raw form values and build a transaction draft.

    Every field is checked so the caller can report all problems at once.

    Args:
        title: Display label; required.
        amount: Raw amount; must be a positive number.
        transaction_type: EXPENSE or INCOME (case-insensitive).
        frequency: FIXED or VARIABLE; defaults to FIXED when omitted.
        transaction_date: ISO date string or date.

    Returns:
        TransactionDraft: Validated values.

    Raises:
        ValidationError: With one message per invalid field.
    """
    errors: dict[str, str] = {}

    cleaned_title = title.strip() if isinstance(title, str) else ""
    if not cleaned_title:
        errors["title"] = "Title is required"

    parsed_amount = None
    try:
        parsed_amount = parse_amount(amount)
    except ValidationError as exc:
        errors.update(exc.errors)

    parsed_type = normalize_transaction_type(transaction_type)
    if not isinstance(parsed_type, TransactionType):
        errors["type"] = "A transaction type must be selected"

    if frequency is None:
        parsed_frequency = TransactionFrequency.FIXED
    else:
        parsed_frequency = normalize_transaction_frequency(frequency)
    if not isinstance(parsed_frequency, TransactionFrequency):
        errors["frequency"] = "A transaction frequency must be selected"

    parsed_date = None
    try:
        parsed_date = parse_date(transaction_date)
    except ValidationError as exc:
        errors.update(exc.errors)

    if errors:
        raise ValidationError(errors)

    return TransactionDraft(
        title=cleaned_title,
        amount=parsed_amount,
        type=parsed_type,
        frequency=parsed_frequency,
        date=parsed_date,
    )


__all__ = ["parse_amount", "parse_date", "validate_transaction_input"]
