"""Persistence mapper between StudentFeeAccount and its flat storage record.

Pure and stateless. The record holds only plain values (str, Decimal, date,
bool) so that it can be handed to any document store as-is:

    {
        "id": "student-42",
        "charged_total": Decimal("1200"),
        "paid_total": Decimal("300"),
        "fees": [
            {"id": "<uuid>", "amount": Decimal("300"),
             "expiration": date(2025, 2, 1), "paid": True},
            ...
        ],
    }

from_record(to_record(account)) behaves exactly like account.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, TypedDict

from student_fees.domain.entities import Fee, StudentFeeAccount
from student_fees.domain.entities.fee import as_calendar_date
from student_fees.domain.exceptions import InvalidRecordError
from student_fees.domain.value_objects import Amount, FeeId, StudentId


class FeeRecord(TypedDict):
    id: str
    amount: Decimal
    expiration: date
    paid: bool


class StudentFeeAccountRecord(TypedDict):
    id: str
    charged_total: Decimal
    paid_total: Decimal
    fees: list[FeeRecord]


def to_record(account: StudentFeeAccount) -> StudentFeeAccountRecord:
    """Export an account verbatim; totals are copied, never recomputed."""
    return {
        "id": account.id.value,
        "charged_total": account.total_charged.value,
        "paid_total": account.total_paid.value,
        "fees": [_fee_to_record(fee) for fee in account.fees],
    }


def from_record(record: StudentFeeAccountRecord | dict[str, Any]) -> StudentFeeAccount:
    """Rebuild an account from a stored record, fees in stored order.

    Raises:
        InvalidRecordError: If a required field is missing or has the wrong shape.
        InvalidAmountError: If a stored amount is negative.
        DuplicateFeeError: If two stored fees share an identifier.
    """
    try:
        return StudentFeeAccount.restore(
            student_id=StudentId(record["id"]),
            total_charged=Amount.create(record["charged_total"]),
            total_paid=Amount.create(record["paid_total"]),
            fees=[_fee_from_record(fee) for fee in record["fees"]],
        )
    except (KeyError, TypeError) as e:
        raise InvalidRecordError(f"Malformed student fee account record: {e!r}") from e


def _fee_to_record(fee: Fee) -> FeeRecord:
    return {
        "id": fee.id.value,
        "amount": fee.amount.value,
        "expiration": fee.expiration,
        "paid": fee.paid,
    }


def _fee_from_record(record: FeeRecord | dict[str, Any]) -> Fee:
    expiration = record["expiration"]
    if not isinstance(expiration, date):
        raise InvalidRecordError(f"Stored fee expiration must be a date, got {expiration!r}")

    paid = record["paid"]
    if not isinstance(paid, bool):
        raise InvalidRecordError(f"Stored fee paid flag must be a bool, got {paid!r}")

    return Fee(
        id=FeeId(record["id"]),
        amount=Amount.create(record["amount"]),
        expiration=as_calendar_date(expiration),
        paid=paid,
    )
