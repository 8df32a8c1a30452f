"""Domain exceptions for student-fees.

Exception hierarchy:
    DomainException (base)
    ├── Fee Lifecycle Errors
    │   ├── FeeAlreadyPaidError
    │   └── DuplicateFeeError
    ├── Not Found Errors
    │   ├── FeeNotFoundError
    │   └── AccountNotFoundError
    └── Validation Errors
        ├── InvalidAmountError
        ├── InvalidStudentIdError
        ├── InvalidFeeIdError
        ├── InvalidExpirationError
        └── InvalidRecordError

None of these are caught inside the package; callers translate them into a
user-facing response.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Fee Lifecycle Errors
# =============================================================================


class FeeAlreadyPaidError(DomainException):
    """Raised when a fee that is already paid is paid again.

    A fee flips from unpaid to paid exactly once; there is no "unpay".
    """


class DuplicateFeeError(DomainException):
    """Raised when a ledger would hold two fees with the same identifier.

    This is an INVARIANT VIOLATION: new fees always get a fresh identifier,
    so it can only surface when restoring a corrupted stored ledger.
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class FeeNotFoundError(DomainException):
    """Raised when a fee identifier is unknown within an account."""


class AccountNotFoundError(DomainException):
    """Raised when an account is required but does not exist.

    Reads on an unknown student report an empty baseline instead; only
    operations that must not silently create state (paying a fee) raise this.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidAmountError(DomainException):
    """Raised when a monetary value is negative or not a finite number."""


class InvalidStudentIdError(DomainException):
    """Raised when a student identifier is empty."""


class InvalidFeeIdError(DomainException):
    """Raised when a fee identifier is empty."""


class InvalidExpirationError(DomainException):
    """Raised when a due date is not a calendar date."""


class InvalidRecordError(DomainException):
    """Raised when a stored account record is missing fields or has the wrong shape."""
