"""Value objects - Immutable objects defined by their attributes."""

from student_fees.domain.value_objects.amount import Amount
from student_fees.domain.value_objects.fee_id import FeeId
from student_fees.domain.value_objects.student_id import StudentId

__all__ = [
    "Amount",
    "FeeId",
    "StudentId",
]
