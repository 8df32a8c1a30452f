from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from student_fees.application.ports import StudentFeeAccountRepository
    from student_fees.domain.value_objects import StudentId


class GetBalanceUseCase:
    """Reports how much credit a student currently owes.

    Read-only: no lock is taken and nothing is saved. An unknown student owes
    nothing, so the balance is 0 rather than an error.
    """

    def __init__(self, account_repository: StudentFeeAccountRepository) -> None:
        self._account_repo = account_repository

    def execute(self, student_id: StudentId) -> Decimal:
        account = self._account_repo.get(student_id)
        if account is None:
            return Decimal(0)
        return account.get_balance()
