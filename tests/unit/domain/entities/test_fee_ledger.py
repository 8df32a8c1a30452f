from datetime import date

import pytest

from student_fees.domain.entities import ExpiredFee, Fee, FeeLedger
from student_fees.domain.exceptions import (
    DuplicateFeeError,
    FeeAlreadyPaidError,
    FeeNotFoundError,
    InvalidAmountError,
)
from student_fees.domain.value_objects import Amount, FeeId


@pytest.fixture
def ledger() -> FeeLedger:
    return FeeLedger()


class TestFeeLedgerAddFee:
    def test_empty_ledger(self, ledger: FeeLedger) -> None:
        assert len(ledger) == 0
        assert ledger.fees == ()

    def test_add_fee_appends_unpaid_fee(self, ledger: FeeLedger) -> None:
        fee_id = ledger.add_fee(100, date(2025, 1, 1))

        fee = ledger.get(fee_id)
        assert fee.amount == Amount.create(100)
        assert fee.expiration == date(2025, 1, 1)
        assert fee.paid is False
        assert len(ledger) == 1

    def test_add_fee_keeps_insertion_order(self, ledger: FeeLedger) -> None:
        ids = [
            ledger.add_fee(500, date(2030, 3, 1)),
            ledger.add_fee(300, date(2025, 2, 1)),
            ledger.add_fee(400, date(2025, 3, 1)),
        ]

        assert [fee.id for fee in ledger] == ids

    def test_add_fee_negative_amount_leaves_ledger_unchanged(self, ledger: FeeLedger) -> None:
        ledger.add_fee(100, date(2025, 1, 1))

        with pytest.raises(InvalidAmountError):
            ledger.add_fee(-100, date(2025, 1, 1))

        assert len(ledger) == 1

    def test_fees_snapshot_is_detached(self, ledger: FeeLedger) -> None:
        snapshot = ledger.fees

        ledger.add_fee(100, date(2025, 1, 1))

        assert snapshot == ()


class TestFeeLedgerPayFee:
    def test_pay_fee_marks_paid_and_returns_amount(self, ledger: FeeLedger) -> None:
        fee_id = ledger.add_fee(250, date(2025, 1, 1))

        amount = ledger.pay_fee(fee_id)

        assert amount == Amount.create(250)
        assert ledger.get(fee_id).paid is True

    def test_pay_fee_keeps_position(self, ledger: FeeLedger) -> None:
        first = ledger.add_fee(100, date(2025, 1, 1))
        second = ledger.add_fee(200, date(2025, 1, 1))

        ledger.pay_fee(first)

        assert [fee.id for fee in ledger] == [first, second]

    def test_pay_unknown_fee_raises(self, ledger: FeeLedger) -> None:
        ledger.add_fee(100, date(2025, 1, 1))

        with pytest.raises(FeeNotFoundError):
            ledger.pay_fee(FeeId.generate())

    def test_pay_fee_twice_raises(self, ledger: FeeLedger) -> None:
        fee_id = ledger.add_fee(100, date(2025, 1, 1))
        ledger.pay_fee(fee_id)

        with pytest.raises(FeeAlreadyPaidError):
            ledger.pay_fee(fee_id)

        assert ledger.get(fee_id).paid is True


class TestFeeLedgerListExpiredUnpaid:
    def test_empty_ledger_returns_empty_list(self, ledger: FeeLedger) -> None:
        assert ledger.list_expired_unpaid(date(2026, 1, 1)) == []

    def test_returns_unpaid_fees_before_today_in_insertion_order(
        self, ledger: FeeLedger
    ) -> None:
        ledger.add_fee(400, date(2025, 3, 1))
        ledger.add_fee(500, date(2030, 3, 1))
        ledger.add_fee(300, date(2025, 2, 1))

        result = ledger.list_expired_unpaid(date(2026, 6, 15))

        assert result == [
            ExpiredFee(amount=Amount.create(400), expiration=date(2025, 3, 1)),
            ExpiredFee(amount=Amount.create(300), expiration=date(2025, 2, 1)),
        ]

    def test_excludes_paid_fees(self, ledger: FeeLedger) -> None:
        paid_id = ledger.add_fee(300, date(2025, 2, 1))
        ledger.add_fee(400, date(2025, 3, 1))
        ledger.pay_fee(paid_id)

        result = ledger.list_expired_unpaid(date(2026, 6, 15))

        assert result == [ExpiredFee(amount=Amount.create(400), expiration=date(2025, 3, 1))]

    def test_fee_due_today_is_excluded(self, ledger: FeeLedger) -> None:
        ledger.add_fee(100, date(2025, 3, 1))

        assert ledger.list_expired_unpaid(date(2025, 3, 1)) == []
        assert len(ledger.list_expired_unpaid(date(2025, 3, 2))) == 1

    def test_result_is_evaluated_on_each_call(self, ledger: FeeLedger) -> None:
        ledger.add_fee(100, date(2025, 3, 1))

        assert ledger.list_expired_unpaid(date(2025, 1, 1)) == []
        assert len(ledger.list_expired_unpaid(date(2026, 1, 1))) == 1


class TestFeeLedgerRestore:
    def test_restore_from_existing_fees(self) -> None:
        fees = [Fee.create(100, date(2025, 1, 1)), Fee.create(200, date(2025, 2, 1)).mark_paid()]

        ledger = FeeLedger(fees)

        assert ledger.fees == tuple(fees)

    def test_restore_with_duplicate_ids_raises(self) -> None:
        fee = Fee.create(100, date(2025, 1, 1))

        with pytest.raises(DuplicateFeeError):
            FeeLedger([fee, fee.mark_paid()])

    def test_get_unknown_fee_raises(self, ledger: FeeLedger) -> None:
        with pytest.raises(FeeNotFoundError):
            ledger.get(FeeId("missing"))
