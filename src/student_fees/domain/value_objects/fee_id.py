from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from student_fees.domain.exceptions import InvalidFeeIdError


@dataclass(frozen=True, slots=True)
class FeeId:
    """Value object for fee identifiers.

    Opaque, non-empty string. New identifiers are UUID4 strings, but any
    non-empty string read back from storage is accepted; no ordering is implied.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidFeeIdError(f"Fee ID must be a non-empty string, got {self.value!r}")

    @classmethod
    def generate(cls) -> FeeId:
        """Generate a new unique FeeId."""
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value
