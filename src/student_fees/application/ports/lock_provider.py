from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for per-account locking.

    Contract:
    - acquire() MUST serialize access to the same resource_id
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST block until the lock is available
    - Different resource_ids MAY be held concurrently

    Mutating use cases hold the lock across load, mutate and save so that two
    requests on the same student cannot overwrite each other's changes.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Hold the lock for resource_id for the duration of the context.

        Args:
            resource_id: Stable string key, e.g. str(student_id).

        Usage:
            with lock_provider.acquire(str(student_id)):
                account = repository.get(student_id)
                ...
                repository.save(account)
        """
        ...
