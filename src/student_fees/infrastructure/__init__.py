"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: Account mapper and in-memory account repository
- Time Provider: Clock abstraction for testability
- Locking: Per-student locking

Infrastructure adapters implement the ports defined in the application layer.
"""

from student_fees.infrastructure.account_repository import InMemoryStudentFeeAccountRepository
from student_fees.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from student_fees.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryLockProvider",
    "InMemoryStudentFeeAccountRepository",
    "NoOpLockProvider",
    "SystemTimeProvider",
]
