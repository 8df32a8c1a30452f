"""Fee entity: one billed obligation with an amount and a due date."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal

from student_fees.domain.exceptions import FeeAlreadyPaidError, InvalidExpirationError
from student_fees.domain.value_objects import Amount, FeeId


def as_calendar_date(value: date) -> date:
    """Reduce a datetime to its calendar date; plain dates pass through.

    Raises:
        InvalidExpirationError: If value is not a date or datetime.
    """
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidExpirationError(f"Expected a date, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class ExpiredFee:
    """Read model for an unpaid fee whose due date has passed."""

    amount: Amount
    expiration: date


@dataclass(frozen=True, slots=True)
class Fee:
    """Fee entity.

    Fee is immutable (frozen dataclass). Paying it returns a new Fee
    instance; the ledger swaps the stored record.

    Lifecycle:
        - unpaid → paid (mark_paid)
        - paid is terminal (no "unpay")

    Use the create() factory method to construct new fees with validation.
    """

    id: FeeId
    amount: Amount
    expiration: date
    paid: bool = False

    @classmethod
    def create(cls, amount: int | float | Decimal, expiration: date) -> Fee:
        """Factory method to create an unpaid Fee with a fresh identifier.

        Args:
            amount: Fee amount as a plain number.
            expiration: Due date. A datetime is reduced to its calendar date.

        Returns:
            A new unpaid Fee instance.

        Raises:
            InvalidAmountError: If amount is negative or not a number.
            InvalidExpirationError: If expiration is not a date.
        """
        return cls(
            id=FeeId.generate(),
            amount=Amount.create(amount),
            expiration=as_calendar_date(expiration),
            paid=False,
        )

    def mark_paid(self) -> Fee:
        """Mark the fee as paid.

        Returns:
            New Fee instance with paid=True.

        Raises:
            FeeAlreadyPaidError: If the fee is already paid.
        """
        if self.paid:
            raise FeeAlreadyPaidError(f"Fee already paid: {self.id}")

        return replace(self, paid=True)

    def is_expired(self, today: date) -> bool:
        """Check whether the fee is overdue at the given date.

        A fee is overdue only while unpaid and strictly after its due date:
        a fee due today is not expired yet.
        """
        if self.paid:
            return False

        return self.expiration < as_calendar_date(today)
