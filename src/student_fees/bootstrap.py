"""Wiring of the student fees service with the bundled adapters."""

from __future__ import annotations

import logging

from student_fees.application.service import StudentFeesService
from student_fees.config import Settings, configure_logging, get_settings
from student_fees.infrastructure import (
    InMemoryLockProvider,
    InMemoryStudentFeeAccountRepository,
    SystemTimeProvider,
)

logger = logging.getLogger(__name__)


def create_service(settings: Settings | None = None) -> StudentFeesService:
    """Build a StudentFeesService backed by in-memory storage and the system clock.

    Args:
        settings: Settings to use; defaults to get_settings().
    """
    settings = settings or get_settings()
    configure_logging(settings)

    logger.info("Starting student fees service (timezone=%s)", settings.timezone)

    return StudentFeesService(
        account_repository=InMemoryStudentFeeAccountRepository(),
        lock_provider=InMemoryLockProvider(),
        time_provider=SystemTimeProvider(),
        timezone=settings.tzinfo,
    )
