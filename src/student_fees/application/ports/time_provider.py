from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime, tzinfo


class TimeProvider(ABC):
    """Port for reading the wall clock.

    Contract:
    - now() MUST return a datetime with tzinfo=datetime.UTC
    - now() MUST NOT return naive datetimes

    Fee due dates are calendar dates in the school's timezone; today()
    converts the UTC instant into that calendar date.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current UTC datetime (tzinfo=datetime.UTC)."""
        ...

    def today(self, tz: tzinfo) -> date:
        """Return the current calendar date as seen in timezone tz."""
        return self.now().astimezone(tz).date()
