"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They normalize their input so two equal amounts or identifiers are
always represented the same way.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from catalog.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


def _precision_for(*values: Decimal) -> int:
    """Context precision that holds every operand, a carry and the cents exactly."""
    widest = 0
    for value in values:
        sign, digits, exponent = value.as_tuple()
        widest = max(widest, len(digits) + max(exponent, 0))
    return widest + 3


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount rounded to cents.

    Uses Decimal to avoid floating-point rounding errors. Unlike most
    money types, negative amounts are allowed: a negative price is a
    legitimate (if odd) catalog state that drives the product status.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, _precision_for(self.amount))
            rounded = self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            # -0.004 rounds to -0.00; store plain zero
            rounded = rounded.copy_abs()
        # frozen dataclass: normalize in place once, at construction
        object.__setattr__(self, "amount", rounded)

    def is_negative(self) -> bool:
        return self.amount < Decimal("0")

    # --- Arithmetic helpers ---------------------------------------------------

    def add(self, other: Money) -> Money:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, _precision_for(self.amount, other.amount))
            return Money(self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, _precision_for(self.amount, other.amount))
            return Money(self.amount - other.amount)

    __add__ = add
    __sub__ = subtract

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats go through ``str()`` first so ``Money.of(25.99)`` is
        exactly 25.99 rather than its binary approximation.
        """
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class ProductId:
    """Opaque product identifier.

    Either generated (random UUID4) or wrapped verbatim from a value
    supplied by the caller; no format is enforced.
    """

    value: str

    @staticmethod
    def generate() -> ProductId:
        return ProductId(str(uuid.uuid4()))

    @staticmethod
    def of(value: str) -> ProductId:
        return ProductId(value)

    def __str__(self) -> str:
        return self.value
