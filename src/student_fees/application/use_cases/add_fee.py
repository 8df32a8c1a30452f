from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from student_fees.domain.entities import StudentFeeAccount
from student_fees.domain.exceptions import InvalidAmountError, InvalidExpirationError

if TYPE_CHECKING:
    from datetime import date
    from decimal import Decimal

    from student_fees.application.ports import LockProvider, StudentFeeAccountRepository
    from student_fees.domain.value_objects import FeeId, StudentId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddFeeRequest:
    """Input DTO for add fee use case."""

    student_id: StudentId
    amount: int | float | Decimal
    expiration: date


@dataclass(frozen=True, slots=True)
class AddFeeResponse:
    """Output DTO for add fee use case."""

    fee_id: FeeId
    balance: Decimal


class AddFeeUseCase:
    """Charges a new fee to a student.

    Responsibilities:
    - Acquire per-student lock
    - Load the account, opening an empty one on first use
    - Add the fee and persist the whole account

    A rejected fee (invalid amount) is never saved, so it cannot create an
    account as a side effect.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        account_repository: StudentFeeAccountRepository,
    ) -> None:
        self._lock_provider = lock_provider
        self._account_repo = account_repository

    def execute(self, request: AddFeeRequest) -> AddFeeResponse:
        """Execute the add fee workflow.

        Args:
            request: Student, amount and due date of the new fee.

        Returns:
            AddFeeResponse with the new fee id and the resulting balance.

        Raises:
            InvalidAmountError: Amount is negative or not a number.
            InvalidExpirationError: Expiration is not a date.
        """
        with self._lock_provider.acquire(str(request.student_id)):
            return self._execute_within_lock(request)

    def _execute_within_lock(self, request: AddFeeRequest) -> AddFeeResponse:
        account = self._account_repo.get(request.student_id)
        if account is None:
            logger.info("Opening fee account for student %s", request.student_id)
            account = StudentFeeAccount.open(request.student_id)

        try:
            fee_id = account.add_fee(request.amount, request.expiration)
        except InvalidAmountError:
            logger.warning(
                "Rejected fee for student %s: invalid amount %r",
                request.student_id,
                request.amount,
            )
            raise
        except InvalidExpirationError:
            logger.warning(
                "Rejected fee for student %s: invalid expiration %r",
                request.student_id,
                request.expiration,
            )
            raise

        self._account_repo.save(account)
        logger.info(
            "Added fee %s for student %s (amount=%s, expiration=%s)",
            fee_id,
            request.student_id,
            request.amount,
            request.expiration,
        )

        return AddFeeResponse(fee_id=fee_id, balance=account.get_balance())
