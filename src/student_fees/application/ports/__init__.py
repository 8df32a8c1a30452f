"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from student_fees.application.ports.account_repository import StudentFeeAccountRepository
from student_fees.application.ports.lock_provider import LockProvider
from student_fees.application.ports.time_provider import TimeProvider

__all__ = [
    "LockProvider",
    "StudentFeeAccountRepository",
    "TimeProvider",
]
