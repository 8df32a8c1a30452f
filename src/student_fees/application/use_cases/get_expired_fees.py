from __future__ import annotations

from datetime import UTC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import tzinfo

    from student_fees.application.ports import StudentFeeAccountRepository, TimeProvider
    from student_fees.domain.entities import ExpiredFee
    from student_fees.domain.value_objects import StudentId


class GetExpiredFeesUseCase:
    """Lists a student's unpaid fees whose due date has passed.

    "Today" is read from the TimeProvider on every call and converted to a
    calendar date in the school's timezone; expiry is never cached.
    Unknown students have no expired fees.
    """

    def __init__(
        self,
        account_repository: StudentFeeAccountRepository,
        time_provider: TimeProvider,
        timezone: tzinfo = UTC,
    ) -> None:
        self._account_repo = account_repository
        self._time_provider = time_provider
        self._timezone = timezone

    def execute(self, student_id: StudentId) -> list[ExpiredFee]:
        account = self._account_repo.get(student_id)
        if account is None:
            return []
        return account.get_expired_fees(self._time_provider.today(self._timezone))
