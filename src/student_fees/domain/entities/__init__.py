"""Domain entities - Objects with identity and lifecycle."""

from student_fees.domain.entities.fee import ExpiredFee, Fee
from student_fees.domain.entities.fee_ledger import FeeLedger
from student_fees.domain.entities.student_fee_account import StudentFeeAccount

__all__ = [
    "ExpiredFee",
    "Fee",
    "FeeLedger",
    "StudentFeeAccount",
]
