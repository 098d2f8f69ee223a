"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import InvalidValueError

_ZERO = Decimal("0")


def to_decimal(value: str | float | int | Decimal, label: str = "amount") -> Decimal:
    """Coerce *value* to Decimal via ``str`` so floats do not leak binary noise."""
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidValueError(f"Invalid {label}: {value!r}") from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidValueError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < _ZERO:
            raise InvalidValueError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise InvalidValueError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount, "money amount"), currency)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Dimensions:
    """Physical size and weight of a purchasable.

    Every measurement is optional; ``None`` means "not specified", which
    is different from zero on the catalog side but collapses to zero once
    copied onto a line item.
    """

    width: Decimal | None = None
    height: Decimal | None = None
    length: Decimal | None = None
    weight: Decimal | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "length", "weight"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, Decimal):
                raise InvalidValueError(
                    f"{name.capitalize()} must be a Decimal, got {type(value).__name__}"
                )
            if value < _ZERO:
                raise InvalidValueError(f"{name.capitalize()} cannot be negative, got {value}")

    @staticmethod
    def of(**values: str | float | int | Decimal | None) -> Dimensions:
        """Build from loosely-typed input, e.g. ``Dimensions.of(weight="1.5")``."""
        coerced = {
            name: None if value is None else to_decimal(value, name)
            for name, value in values.items()
        }
        return Dimensions(**coerced)

    def or_zero(self) -> dict[str, Decimal]:
        """Measurements with unset values coerced to zero."""
        return {
            "width": self.width if self.width is not None else _ZERO,
            "height": self.height if self.height is not None else _ZERO,
            "length": self.length if self.length is not None else _ZERO,
            "weight": self.weight if self.weight is not None else _ZERO,
        }
