from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from student_fees.domain.exceptions import InvalidAmountError


@dataclass(frozen=True, slots=True)
class Amount:
    """Immutable non-negative monetary value.

    Single currency, no partial units enforced. Every arithmetic operation
    returns a new Amount and re-runs validation, so an instance holding a
    negative value cannot exist.

    Use create() to build instances from plain numbers.
    """

    value: Decimal

    def __post_init__(self) -> None:
        normalized = _to_decimal(self.value)

        if normalized < 0:
            raise InvalidAmountError(f"Amount must be non-negative, got {normalized}")

        if normalized is not self.value:
            object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, value: int | float | Decimal) -> Amount:
        """Factory method to create an Amount with validation.

        Args:
            value: Monetary value. Floats are converted through their string
                   form so that 0.1 becomes Decimal("0.1").

        Returns:
            A new Amount instance.

        Raises:
            InvalidAmountError: If value is negative, not finite, or not a number.
        """
        return cls(value=value)  # type: ignore[arg-type]

    @classmethod
    def zero(cls) -> Amount:
        return cls(value=Decimal(0))

    def add(self, other: Amount) -> Amount:
        return Amount.create(self.value + other.value)

    def subtract(self, other: Amount) -> Amount:
        """Return self - other.

        Raises:
            InvalidAmountError: If other is greater than self.
        """
        return Amount.create(self.value - other.value)


def _to_decimal(value: object) -> Decimal:
    # bool is an int subclass; True must not become an amount of 1
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")

    return result
