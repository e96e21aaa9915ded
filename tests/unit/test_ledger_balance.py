"""Tests for sl_ledger.domain.balance — folding, grouping and display."""

from datetime import date

import pytest

from src.sl_common.enums import BalanceStatus
from src.sl_common.money import ZERO, Money
from src.sl_ledger.domain.balance import (
    compute_balance,
    compute_group_summary,
    describe_balance,
    group_by_status,
    required_payment,
)
from src.sl_ledger.domain.models import Adjustment, Balance, Credit, Debit


def _balance(pid: str, debits: tuple[str, ...] = (), credits: tuple[str, ...] = ()) -> Balance:
    day = date(2026, 1, 5)
    txns = [Debit(Money(d), day, f"s{i}") for i, d in enumerate(debits)]
    txns += [Credit(Money(c), day) for c in credits]
    return compute_balance(txns, pid)


_HISTORY = [
    Debit(Money("18.75"), date(2026, 1, 5), "s1"),
    Credit(Money("50.00"), date(2026, 1, 6)),
    Debit(Money("15.50"), date(2026, 1, 12), "s2"),
    Adjustment(Money("-5.00"), date(2026, 1, 13), "Payment amount corrected"),
]


class TestComputeBalance:
    def test_credit_scenario(self, credit_balance: Balance) -> None:
        assert credit_balance.total_debits == Money("34.25")
        assert credit_balance.total_credits == Money(50)
        assert credit_balance.total_adjustments == Money(-5)
        assert credit_balance.current_balance == Money("10.75")
        assert credit_balance.status is BalanceStatus.CREDIT
        assert credit_balance.is_credit
        assert credit_balance.credit == Money("10.75")
        assert credit_balance.debt == ZERO

    def test_last_dates(self, credit_balance: Balance) -> None:
        assert credit_balance.last_session_date == date(2026, 1, 12)
        assert credit_balance.last_payment_date == date(2026, 1, 6)

    def test_empty_history_is_settled(self) -> None:
        balance = compute_balance([])
        assert balance.is_settled
        assert balance.current_balance == ZERO
        assert balance.last_session_date is None

    def test_debt(self) -> None:
        balance = _balance("bob", debits=("20", "12.50"), credits=("10",))
        assert balance.current_balance == Money("-22.50")
        assert balance.is_debt
        assert balance.debt == Money("22.50")

    def test_order_does_not_matter(self) -> None:
        forward = compute_balance(_HISTORY, "alice")
        assert compute_balance(list(reversed(_HISTORY)), "alice") == forward
        shuffled = [_HISTORY[2], _HISTORY[0], _HISTORY[3], _HISTORY[1]]
        assert compute_balance(shuffled, "alice") == forward

    def test_partition_combines(self) -> None:
        whole = compute_balance(_HISTORY)
        for cut in range(len(_HISTORY) + 1):
            left = compute_balance(_HISTORY[:cut])
            right = compute_balance(_HISTORY[cut:])
            assert left.combine(right) == whole

    def test_exact_shares_settle_exactly(self) -> None:
        share = Money(10).divide(3)
        day = date(2026, 1, 5)
        txns = [Debit(share, day, f"s{i}") for i in range(3)] + [Credit(Money(10), day)]
        assert compute_balance(txns).is_settled

    def test_accepts_generator(self) -> None:
        assert compute_balance(txn for txn in _HISTORY).current_balance == Money("10.75")

    def test_unsupported_transaction(self) -> None:
        with pytest.raises(TypeError):
            compute_balance([Money(5)])  # type: ignore[list-item]


class TestGroupSummary:
    def test_totals_are_per_class_magnitudes(self) -> None:
        balances = [
            _balance("a", debits=("20",)),
            _balance("b", debits=("5",)),
            _balance("c", credits=("7",)),
            _balance("d", debits=("3",), credits=("3",)),
        ]
        summary = compute_group_summary(balances)
        assert summary.total_debt == Money(25)
        assert summary.total_credit == Money(7)
        assert summary.net_balance == Money(-18)
        assert (summary.debtors, summary.creditors, summary.settled) == (2, 1, 1)
        assert summary.total == 4

    def test_empty_group(self) -> None:
        summary = compute_group_summary([])
        assert summary.total == 0
        assert summary.net_balance == ZERO


class TestGroupByStatus:
    def test_largest_first_ties_by_id(self) -> None:
        balances = [
            _balance("zoe", debits=("20",)),
            _balance("bob", debits=("5",)),
            _balance("amy", debits=("20",)),
            _balance("fay", credits=("7",)),
            _balance("cat", credits=("7",)),
            _balance("gus", credits=("10",)),
            _balance("max"),
            _balance("eve"),
        ]
        groups = group_by_status(balances)
        assert [b.participant_id for b in groups.debtors] == ["amy", "zoe", "bob"]
        assert [b.participant_id for b in groups.creditors] == ["gus", "cat", "fay"]
        assert [b.participant_id for b in groups.settled] == ["eve", "max"]

    def test_input_order_irrelevant(self) -> None:
        balances = [_balance("a", debits=("1",)), _balance("b", debits=("1",))]
        assert group_by_status(balances) == group_by_status(list(reversed(balances)))


class TestRequiredPayment:
    def test_debt(self) -> None:
        assert required_payment(_balance("a", debits=("12.5",))) == Money("12.5")

    def test_credit_needs_nothing(self, credit_balance: Balance) -> None:
        assert required_payment(credit_balance) == ZERO


class TestDescribeBalance:
    def test_debt(self) -> None:
        display = describe_balance(_balance("a", debits=("12.5",)))
        assert display.status is BalanceStatus.DEBT
        assert display.amount == "$12.50"
        assert display.display_text == "Owes $12.50"

    def test_credit(self, credit_balance: Balance) -> None:
        assert describe_balance(credit_balance).display_text == "Credit $10.75"

    def test_settled(self) -> None:
        display = describe_balance(_balance("a"))
        assert display.amount == "$0.00"
        assert display.display_text == "Settled"
