from __future__ import annotations

from dataclasses import dataclass

from student_fees.domain.exceptions import InvalidStudentIdError


@dataclass(frozen=True, slots=True)
class StudentId:
    """Value object for student identifiers.

    Assigned outside this package and treated as opaque:
      - Non-empty
      - Whitespace is trimmed (normalization)
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidStudentIdError(f"Student ID must be a string, got {self.value!r}")

        normalized = self.value.strip()

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidStudentIdError("Student ID cannot be empty")

    def __str__(self) -> str:
        return self.value
