from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from student_fees.domain.exceptions import AccountNotFoundError

if TYPE_CHECKING:
    from student_fees.domain.entities import StudentFeeAccount
    from student_fees.domain.value_objects import StudentId


class StudentFeeAccountRepository(ABC):
    """Port for student fee account persistence.

    Contract:
    - get() returns None if the account does not exist (no exception)
    - get_or_raise() turns absence into AccountNotFoundError
    - save() overwrites the whole aggregate: creates if new, replaces if exists
    - Every read returns a freshly loaded aggregate; no references are kept
    - Implementations are NOT thread-safe; callers must ensure serialization

    There is no version token on stored accounts. Two unserialized
    load-mutate-save sequences on the same student lose the earlier save.
    """

    @abstractmethod
    def get(self, student_id: StudentId) -> StudentFeeAccount | None:
        """Retrieve an account by student ID.

        Args:
            student_id: The student identifier.

        Returns:
            The StudentFeeAccount if found, None otherwise.
            Returned aggregate is a copy; mutations do not affect stored state.
        """

    @abstractmethod
    def save(self, account: StudentFeeAccount) -> None:
        """Persist the full current state of an account (upsert semantics).

        Args:
            account: The aggregate to save, keyed by account.id.
        """

    def get_or_raise(self, student_id: StudentId) -> StudentFeeAccount:
        """Retrieve an account that is expected to exist.

        Raises:
            AccountNotFoundError: If no account is stored for student_id.
        """
        account = self.get(student_id)
        if account is None:
            raise AccountNotFoundError(f"Student fee account not found: {student_id.value}")
        return account
