"""StudentFeeAccount aggregate root.

The single consistency boundary for a student's fees and running totals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from student_fees.domain.entities.fee_ledger import FeeLedger
from student_fees.domain.value_objects import Amount, StudentId

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date
    from decimal import Decimal

    from student_fees.domain.entities.fee import ExpiredFee, Fee
    from student_fees.domain.value_objects import FeeId


class StudentFeeAccount:
    """Aggregate root owning one FeeLedger and two running totals.

    - total_charged: sum of every fee amount ever added
    - total_paid: sum of every fee amount ever paid

    total_paid never exceeds total_charged: it only grows by amounts of fees
    already counted in total_charged, and a fee cannot be paid twice. Hence
    the balance (charged minus paid) is never negative.

    Mutations update the totals in place, after the ledger call has
    succeeded, so a rejected operation leaves the account unchanged.
    """

    __slots__ = ("_id", "_total_charged", "_total_paid", "_ledger")

    def __init__(
        self,
        student_id: StudentId,
        total_charged: Amount,
        total_paid: Amount,
        ledger: FeeLedger,
    ) -> None:
        self._id = student_id
        self._total_charged = total_charged
        self._total_paid = total_paid
        self._ledger = ledger

    @classmethod
    def open(cls, student_id: StudentId) -> StudentFeeAccount:
        """Create an empty account: nothing charged, nothing paid, no fees."""
        return cls(
            student_id=student_id,
            total_charged=Amount.zero(),
            total_paid=Amount.zero(),
            ledger=FeeLedger(),
        )

    @classmethod
    def restore(
        cls,
        student_id: StudentId,
        total_charged: Amount,
        total_paid: Amount,
        fees: Iterable[Fee],
    ) -> StudentFeeAccount:
        """Rebuild an account from previously exported state.

        Totals are taken as given rather than recomputed from the fees; they
        were validated when the original operations ran.

        Raises:
            DuplicateFeeError: If two fees share an identifier.
        """
        return cls(
            student_id=student_id,
            total_charged=total_charged,
            total_paid=total_paid,
            ledger=FeeLedger(fees),
        )

    # -------------------------------------------------------------------------
    # Export accessors (read-only)
    # -------------------------------------------------------------------------

    @property
    def id(self) -> StudentId:
        return self._id

    @property
    def total_charged(self) -> Amount:
        return self._total_charged

    @property
    def total_paid(self) -> Amount:
        return self._total_paid

    @property
    def fees(self) -> tuple[Fee, ...]:
        return self._ledger.fees

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def add_fee(self, amount: int | float | Decimal, expiration: date) -> FeeId:
        """Charge a new fee to the account.

        Args:
            amount: Fee amount as a plain number.
            expiration: Due date of the fee.

        Returns:
            The identifier of the new fee.

        Raises:
            InvalidAmountError: If amount is negative; the account is unchanged.
            InvalidExpirationError: If expiration is not a date; the account is unchanged.
        """
        fee_id = self._ledger.add_fee(amount, expiration)
        self._total_charged = self._total_charged.add(self._ledger.get(fee_id).amount)
        return fee_id

    def pay_fee(self, fee_id: FeeId) -> Amount:
        """Pay a fee in full.

        Returns:
            The amount paid.

        Raises:
            FeeNotFoundError: If the fee is unknown; the account is unchanged.
            FeeAlreadyPaidError: If the fee is already paid; the account is unchanged.
        """
        paid_amount = self._ledger.pay_fee(fee_id)
        self._total_paid = self._total_paid.add(paid_amount)
        return paid_amount

    def get_balance(self) -> Decimal:
        """Return the credit still owed: total charged minus total paid."""
        return self._total_charged.subtract(self._total_paid).value

    def get_expired_fees(self, today: date) -> list[ExpiredFee]:
        return self._ledger.list_expired_unpaid(today)

    def can_access(self, today: date) -> bool:
        """True when the student has no expired unpaid fees at the given date."""
        return not self._ledger.list_expired_unpaid(today)

    def __repr__(self) -> str:
        return (
            f"StudentFeeAccount(id={self._id.value!r}, "
            f"total_charged={self._total_charged.value}, "
            f"total_paid={self._total_paid.value}, fees={len(self._ledger)})"
        )
