"""Use cases - One class per operation exposed to callers."""

from student_fees.application.use_cases.add_fee import (
    AddFeeRequest,
    AddFeeResponse,
    AddFeeUseCase,
)
from student_fees.application.use_cases.get_balance import GetBalanceUseCase
from student_fees.application.use_cases.get_expired_fees import GetExpiredFeesUseCase
from student_fees.application.use_cases.pay_fee import (
    PayFeeRequest,
    PayFeeResponse,
    PayFeeUseCase,
)

__all__ = [
    "AddFeeRequest",
    "AddFeeResponse",
    "AddFeeUseCase",
    "GetBalanceUseCase",
    "GetExpiredFeesUseCase",
    "PayFeeRequest",
    "PayFeeResponse",
    "PayFeeUseCase",
]
