"""Domain normalization helpers."""

from src.domain.models.transactions import (
    TransactionFrequency,
    TransactionType,
)


def normalize_tag(tag: str | None) -> str | None:
    """Normalize raw type or frequency tags.

    Args:
        tag: Raw tag value from a form or a repository.

    Returns:
        str | None: Upper-cased tag, or None when empty.
    """
    if not tag:
        return None
    cleaned = str(tag).strip()
    return cleaned.upper() if cleaned else None


def normalize_transaction_type(tag: str | None) -> TransactionType | str | None:
    """Map a raw tag to a TransactionType, keeping unknown tags as strings."""
    cleaned = normalize_tag(tag)
    if cleaned is None:
        return None
    try:
        return TransactionType(cleaned)
    except ValueError:
        return cleaned


def normalize_transaction_frequency(
    tag: str | None,
) -> TransactionFrequency | str | None:
    """Map a raw tag to a TransactionFrequency, keeping unknown tags."""
    cleaned = normalize_tag(tag)
    if cleaned is None:
        return None
    try:
        return TransactionFrequency(cleaned)
    except ValueError:
        return cleaned


__all__ = [
    "normalize_tag",
    "normalize_transaction_type",
    "normalize_transaction_frequency",
]
