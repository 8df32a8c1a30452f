from __future__ import annotations

from datetime import UTC, datetime, timedelta

from student_fees.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production time provider using the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Test time provider with a controllable instant.

    Accepts any timezone-aware datetime and stores it converted to UTC.
    Naive datetimes are rejected.

    Note: NOT thread-safe; intended for single-threaded tests.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = self._to_utc(fixed_time)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = self._to_utc(new_time)

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward (or backward, for a negative delta)."""
        self._fixed_time = self._fixed_time + delta

    @staticmethod
    def _to_utc(dt: datetime) -> datetime:
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"datetime must be timezone-aware, got naive {dt.isoformat()}")
        return dt.astimezone(UTC)
