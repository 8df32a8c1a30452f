from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from student_fees.domain.exceptions import (
    AccountNotFoundError,
    FeeAlreadyPaidError,
    FeeNotFoundError,
)

if TYPE_CHECKING:
    from decimal import Decimal

    from student_fees.application.ports import LockProvider, StudentFeeAccountRepository
    from student_fees.domain.value_objects import Amount, FeeId, StudentId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PayFeeRequest:
    """Input DTO for pay fee use case."""

    student_id: StudentId
    fee_id: FeeId


@dataclass(frozen=True, slots=True)
class PayFeeResponse:
    """Output DTO for pay fee use case."""

    fee_id: FeeId
    amount_paid: Amount
    balance: Decimal


class PayFeeUseCase:
    """Pays one of a student's fees in full.

    Unlike AddFeeUseCase, the account must already exist: paying a fee of an
    unknown student raises instead of opening an empty account.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        account_repository: StudentFeeAccountRepository,
    ) -> None:
        self._lock_provider = lock_provider
        self._account_repo = account_repository

    def execute(self, request: PayFeeRequest) -> PayFeeResponse:
        """Execute the pay fee workflow.

        Raises:
            AccountNotFoundError: No account exists for the student.
            FeeNotFoundError: The account has no fee with this id.
            FeeAlreadyPaidError: The fee was already paid.
        """
        with self._lock_provider.acquire(str(request.student_id)):
            return self._execute_within_lock(request)

    def _execute_within_lock(self, request: PayFeeRequest) -> PayFeeResponse:
        try:
            account = self._account_repo.get_or_raise(request.student_id)
            amount_paid = account.pay_fee(request.fee_id)
        except (AccountNotFoundError, FeeNotFoundError, FeeAlreadyPaidError) as e:
            logger.warning(
                "Rejected payment of fee %s for student %s: %s",
                request.fee_id,
                request.student_id,
                e,
            )
            raise

        self._account_repo.save(account)
        logger.info(
            "Paid fee %s for student %s (amount=%s)",
            request.fee_id,
            request.student_id,
            amount_paid.value,
        )

        return PayFeeResponse(
            fee_id=request.fee_id,
            amount_paid=amount_paid,
            balance=account.get_balance(),
        )
