"""Domain errors raised at the edge of the aggregation core."""


class ValidationError(ValueError):
    """Raised when raw input cannot be turned into a valid domain value.

    Attributes:
        errors: Mapping of field name to a user-facing message.
    """

    def __init__(self, errors: dict[str, str] | str) -> None:
        if isinstance(errors, str):
            errors = {"__all__": errors}
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))


class TransactionNotFoundError(LookupError):
    """Raised when a transaction does not exist for the requesting user."""

    def __init__(self, transaction_id: str, user_id: str) -> None:
        self.transaction_id = transaction_id
        self.user_id = user_id
        super().__init__(
            f"Transaction {transaction_id} not found for user {user_id}"
        )


__all__ = ["ValidationError", "TransactionNotFoundError"]
