from __future__ import annotations

from datetime import UTC, date
from decimal import Decimal
from typing import TYPE_CHECKING, TypedDict

from student_fees.application.use_cases import (
    AddFeeRequest,
    AddFeeUseCase,
    GetBalanceUseCase,
    GetExpiredFeesUseCase,
    PayFeeRequest,
    PayFeeUseCase,
)
from student_fees.domain.value_objects import FeeId, StudentId

if TYPE_CHECKING:
    from datetime import tzinfo

    from student_fees.application.ports import (
        LockProvider,
        StudentFeeAccountRepository,
        TimeProvider,
    )


class ExpiredFeeSummary(TypedDict):
    amount: Decimal
    expiration: date


class StudentFeesService:
    """Facade exposing the four student-fee operations on plain values.

    Request handlers call this with raw strings, numbers and dates; it wraps
    them in value objects and delegates to the use cases. Results come back
    unwrapped as strings, Decimals and dicts. Domain exceptions propagate
    unchanged.
    """

    def __init__(
        self,
        account_repository: StudentFeeAccountRepository,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        timezone: tzinfo = UTC,
    ) -> None:
        self._add_fee = AddFeeUseCase(lock_provider, account_repository)
        self._pay_fee = PayFeeUseCase(lock_provider, account_repository)
        self._get_balance = GetBalanceUseCase(account_repository)
        self._get_expired_fees = GetExpiredFeesUseCase(
            account_repository, time_provider, timezone
        )

    def add_fee(self, student_id: str, amount: int | float | Decimal, expiration: date) -> str:
        """Charge a fee, opening the account if needed. Returns the new fee id."""
        response = self._add_fee.execute(
            AddFeeRequest(student_id=StudentId(student_id), amount=amount, expiration=expiration)
        )
        return response.fee_id.value

    def pay_fee(self, student_id: str, fee_id: str) -> None:
        self._pay_fee.execute(PayFeeRequest(student_id=StudentId(student_id), fee_id=FeeId(fee_id)))

    def get_balance(self, student_id: str) -> Decimal:
        return self._get_balance.execute(StudentId(student_id))

    def get_expired_fees(self, student_id: str) -> list[ExpiredFeeSummary]:
        expired = self._get_expired_fees.execute(StudentId(student_id))
        return [{"amount": fee.amount.value, "expiration": fee.expiration} for fee in expired]
