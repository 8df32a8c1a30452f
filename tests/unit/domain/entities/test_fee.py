from datetime import UTC, date, datetime

import pytest

from student_fees.domain.entities import Fee
from student_fees.domain.exceptions import (
    FeeAlreadyPaidError,
    InvalidAmountError,
    InvalidExpirationError,
)
from student_fees.domain.value_objects import Amount, FeeId


@pytest.fixture
def fee() -> Fee:
    return Fee.create(100, date(2025, 3, 1))


class TestFeeCreate:
    def test_create_unpaid_fee(self, fee: Fee) -> None:
        assert fee.amount == Amount.create(100)
        assert fee.expiration == date(2025, 3, 1)
        assert fee.paid is False
        assert isinstance(fee.id, FeeId)

    def test_create_assigns_fresh_ids(self) -> None:
        first = Fee.create(100, date(2025, 3, 1))
        second = Fee.create(100, date(2025, 3, 1))

        assert first.id != second.id

    def test_create_reduces_datetime_to_date(self) -> None:
        fee = Fee.create(100, datetime(2025, 3, 1, 23, 59, tzinfo=UTC))

        assert fee.expiration == date(2025, 3, 1)
        assert type(fee.expiration) is date

    def test_create_negative_amount_raises(self) -> None:
        with pytest.raises(InvalidAmountError):
            Fee.create(-100, date(2025, 3, 1))

    @pytest.mark.parametrize("expiration", ["2025-03-01", 20250301, None])
    def test_create_non_date_expiration_raises(self, expiration: object) -> None:
        with pytest.raises(InvalidExpirationError):
            Fee.create(100, expiration)  # type: ignore[arg-type]

    def test_fee_is_frozen(self, fee: Fee) -> None:
        with pytest.raises(AttributeError):
            fee.paid = True  # type: ignore[misc]


class TestFeeMarkPaid:
    def test_mark_paid_returns_paid_copy(self, fee: Fee) -> None:
        paid = fee.mark_paid()

        assert paid.paid is True
        assert paid.id == fee.id
        assert paid.amount == fee.amount
        assert fee.paid is False

    def test_mark_paid_twice_raises(self, fee: Fee) -> None:
        paid = fee.mark_paid()

        with pytest.raises(FeeAlreadyPaidError):
            paid.mark_paid()


class TestFeeIsExpired:
    def test_unpaid_fee_is_expired_after_due_date(self, fee: Fee) -> None:
        assert fee.is_expired(date(2025, 3, 2)) is True

    def test_fee_due_today_is_not_expired(self, fee: Fee) -> None:
        """Strict less-than: expiration == today is not expired yet."""
        assert fee.is_expired(date(2025, 3, 1)) is False

    def test_fee_before_due_date_is_not_expired(self, fee: Fee) -> None:
        assert fee.is_expired(date(2025, 2, 28)) is False

    def test_paid_fee_is_never_expired(self, fee: Fee) -> None:
        assert fee.mark_paid().is_expired(date(2099, 1, 1)) is False

    def test_accepts_datetime_as_today(self, fee: Fee) -> None:
        assert fee.is_expired(datetime(2025, 3, 2, 0, 0, tzinfo=UTC)) is True
        assert fee.is_expired(datetime(2025, 3, 1, 23, 59, tzinfo=UTC)) is False

    def test_non_date_today_raises(self, fee: Fee) -> None:
        with pytest.raises(InvalidExpirationError):
            fee.is_expired("2025-03-02")  # type: ignore[arg-type]
