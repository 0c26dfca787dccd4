"""Fixed-point money value used by every aggregation step."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from src.domain.errors import ValidationError


CENT = Decimal("0.01")

# Largest amount a single transaction may carry.
MAX_AMOUNT = Decimal("1e15")

# No traps: x / 0 yields Infinity and 0 / 0 yields NaN instead of raising.
_MONEY_CONTEXT = Context(prec=50, rounding=ROUND_HALF_UP, traps=[])


def _parse_decimal(raw) -> Decimal:
    """Turn a raw numeric input into a finite Decimal.

    Args:
        raw: String, int, float, Decimal or CurrencyValue.

    Returns:
        Decimal: Parsed value, not yet quantized.

    Raises:
        ValidationError: If the input is malformed or not finite.
    """
    if isinstance(raw, CurrencyValue):
        return raw.amount
    if isinstance(raw, bool) or raw is None:
        raise ValidationError({"amount": f"Invalid amount: {raw!r}"})
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        try:
            value = Decimal(raw.strip())
        except InvalidOperation as exc:
            raise ValidationError(
                {"amount": f"Invalid amount: {raw!r}"}
            ) from exc
    else:
        raise ValidationError({"amount": f"Invalid amount: {raw!r}"})
    if not value.is_finite():
        raise ValidationError({"amount": f"Invalid amount: {raw!r}"})
    return value


@dataclass(frozen=True, order=True)
class CurrencyValue:
    """Exact monetary amount with two fractional digits.

    Every operation returns a new value rounded half-up to the cent. Dividing
    by zero does not raise; it returns a non-finite value that callers detect
    with ``is_finite``. Values too large to hold at cent precision are
    rejected at construction.

    Attributes:
        amount: Underlying Decimal, quantized to two decimal places.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        value = _MONEY_CONTEXT.quantize(_parse_decimal(self.amount), CENT)
        if value.is_nan():
            # Too many digits to hold at cent precision.
            raise ValidationError(
                {"amount": f"Invalid amount: {self.amount!r}"}
            )
        if value.is_zero():
            # Avoid rendering "-0.00".
            value = value.copy_abs()
        object.__setattr__(self, "amount", value)

    @classmethod
    def zero(cls) -> "CurrencyValue":
        """Return a zero amount."""
        return cls(Decimal("0"))

    @classmethod
    def _from_result(cls, value: Decimal) -> "CurrencyValue":
        if value.is_finite():
            return cls(value)
        sentinel = object.__new__(cls)
        object.__setattr__(sentinel, "amount", value)
        return sentinel

    def add(self, other) -> "CurrencyValue":
        """Return self + other."""
        return self._from_result(
            _MONEY_CONTEXT.add(self.amount, _operand(other))
        )

    def subtract(self, other) -> "CurrencyValue":
        """Return self - other."""
        return self._from_result(
            _MONEY_CONTEXT.subtract(self.amount, _operand(other))
        )

    def multiply(self, factor) -> "CurrencyValue":
        """Return self * factor."""
        return self._from_result(
            _MONEY_CONTEXT.multiply(self.amount, _operand(factor))
        )

    def divide(self, divisor) -> "CurrencyValue":
        """Return self / divisor.

        A zero divisor yields ``Infinity`` (or ``NaN`` for ``0 / 0``).
        """
        return self._from_result(
            _MONEY_CONTEXT.divide(self.amount, _operand(divisor))
        )

    def negate(self) -> "CurrencyValue":
        """Return the value with its sign flipped."""
        return self._from_result(_MONEY_CONTEXT.minus(self.amount))

    def is_zero(self) -> bool:
        return self.amount.is_finite() and self.amount.is_zero()

    def is_finite(self) -> bool:
        return self.amount.is_finite()

    def is_negative(self) -> bool:
        return not self.amount.is_nan() and self.amount < 0

    def format(self) -> str:
        """Return the canonical raw string, e.g. ``-1234.50``.

        Non-finite values render as ``Infinity``, ``-Infinity`` or ``NaN``.
        """
        if not self.amount.is_finite():
            return str(self.amount)
        return f"{self.amount:.2f}"

    def format_display(self) -> str:
        """Return the amount with thousands separators, e.g. ``1,234.50``."""
        if not self.amount.is_finite():
            return str(self.amount)
        return f"{self.amount:,.2f}"

    def __str__(self) -> str:
        return self.format()


def _operand(value) -> Decimal:
    if isinstance(value, CurrencyValue):
        return value.amount
    return _parse_decimal(value)


__all__ = ["CurrencyValue", "CENT", "MAX_AMOUNT"]
