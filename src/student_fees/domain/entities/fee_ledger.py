from __future__ import annotations

from typing import TYPE_CHECKING

from student_fees.domain.entities.fee import ExpiredFee, Fee, as_calendar_date
from student_fees.domain.exceptions import DuplicateFeeError, FeeNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import date
    from decimal import Decimal

    from student_fees.domain.value_objects import Amount, FeeId


class FeeLedger:
    """Insertion-ordered collection of fees owned by one account.

    Invariants:
    - Fee identifiers are unique within the ledger
    - Append-only: fees are never removed
    - Existing fees only change by flipping paid from False to True
    """

    __slots__ = ("_fees", "_positions")

    def __init__(self, fees: Iterable[Fee] = ()) -> None:
        self._fees: list[Fee] = []
        self._positions: dict[FeeId, int] = {}
        for fee in fees:
            self._append(fee)

    def __len__(self) -> int:
        return len(self._fees)

    def __iter__(self) -> Iterator[Fee]:
        return iter(tuple(self._fees))

    @property
    def fees(self) -> tuple[Fee, ...]:
        """Snapshot of the stored fees in insertion order."""
        return tuple(self._fees)

    def get(self, fee_id: FeeId) -> Fee:
        """Return the fee with the given identifier.

        Raises:
            FeeNotFoundError: If no fee has this identifier.
        """
        position = self._positions.get(fee_id)
        if position is None:
            raise FeeNotFoundError(f"Fee not found: {fee_id}")
        return self._fees[position]

    def add_fee(self, amount: int | float | Decimal, expiration: date) -> FeeId:
        """Append a new unpaid fee and return its identifier.

        Raises:
            InvalidAmountError: If amount is negative; the ledger is unchanged.
            InvalidExpirationError: If expiration is not a date; the ledger is unchanged.
        """
        fee = Fee.create(amount, expiration)
        self._append(fee)
        return fee.id

    def pay_fee(self, fee_id: FeeId) -> Amount:
        """Mark a fee as paid and return its amount.

        Raises:
            FeeNotFoundError: If no fee has this identifier.
            FeeAlreadyPaidError: If the fee is already paid.
        """
        fee = self.get(fee_id)
        paid = fee.mark_paid()
        self._fees[self._positions[fee_id]] = paid
        return paid.amount

    def list_expired_unpaid(self, today: date) -> list[ExpiredFee]:
        """List unpaid fees whose expiration is strictly before today.

        Results keep insertion order; they are not sorted by date.
        """
        today = as_calendar_date(today)
        return [
            ExpiredFee(amount=fee.amount, expiration=fee.expiration)
            for fee in self._fees
            if fee.is_expired(today)
        ]

    def _append(self, fee: Fee) -> None:
        if fee.id in self._positions:
            raise DuplicateFeeError(f"Duplicate fee ID in ledger: {fee.id}")
        self._positions[fee.id] = len(self._fees)
        self._fees.append(fee)
