"""Shared pytest fixtures for the test suite."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

import pytest

from student_fees.application.ports import LockProvider
from student_fees.domain.value_objects import StudentId
from student_fees.infrastructure.account_repository import InMemoryStudentFeeAccountRepository
from student_fees.infrastructure.lock_provider import NoOpLockProvider
from student_fees.infrastructure.time_provider import FixedTimeProvider


class RecordingLockProvider(LockProvider):
    """Lock provider that records which resources were locked."""

    def __init__(self) -> None:
        self.acquired: list[str] = []
        self.held = False

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        self.acquired.append(resource_id)
        self.held = True
        try:
            yield
        finally:
            self.held = False


@pytest.fixture
def recording_lock_provider() -> RecordingLockProvider:
    return RecordingLockProvider()


@pytest.fixture
def fixed_time() -> datetime:
    """An instant after 2025-03-01 and before 2030-03-01."""
    return datetime(2026, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture
def account_repository() -> InMemoryStudentFeeAccountRepository:
    return InMemoryStudentFeeAccountRepository()


@pytest.fixture
def student_id() -> StudentId:
    return StudentId("student-42")
