from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from student_fees.application.ports import StudentFeeAccountRepository
from student_fees.infrastructure.account_mapper import from_record, to_record

if TYPE_CHECKING:
    from student_fees.domain.entities import StudentFeeAccount
    from student_fees.domain.value_objects import StudentId
    from student_fees.infrastructure.account_mapper import StudentFeeAccountRecord

logger = logging.getLogger(__name__)


class InMemoryStudentFeeAccountRepository(StudentFeeAccountRepository):
    """In-memory account repository backed by flat records.

    Implementation notes:
    - Keyed by the student ID string
    - Stores the mapper's record, not the aggregate, mimicking a document store
    - get() rebuilds a fresh aggregate from the record on every call
    - save() replaces the whole record (no field-level patching)
    - NOT thread-safe; relies on external LockProvider for serialization

    Going through the mapper on every save and load means every test using
    this repository also exercises the persistence round trip.
    """

    def __init__(self) -> None:
        self._records: dict[str, StudentFeeAccountRecord] = {}

    def get(self, student_id: StudentId) -> StudentFeeAccount | None:
        record = self._records.get(student_id.value)
        if record is None:
            return None
        return from_record(record)

    def save(self, account: StudentFeeAccount) -> None:
        self._records[account.id.value] = to_record(account)
        logger.debug("Saved fee account for student %s", account.id)

    def get_record(self, student_id: StudentId) -> StudentFeeAccountRecord | None:
        """Return a copy of the stored record, as a document store would hold it."""
        record = self._records.get(student_id.value)
        if record is None:
            return None
        return copy.deepcopy(record)
