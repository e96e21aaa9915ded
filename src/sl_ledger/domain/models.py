"""Ledger domain models — frozen dataclasses, no framework dependency.

Transaction is a tagged union of Debit | Credit | Adjustment:
  - Debit:      non-negative share owed for a session
  - Credit:     positive payment received
  - Adjustment: signed, non-zero correction to a prior credit (reason required)
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Union

from src.sl_common.enums import BalanceStatus, PaymentMethod, TransactionKind
from src.sl_common.errors import (
    InvalidAdjustmentError,
    NegativeInputError,
    NonPositivePaymentError,
)
from src.sl_common.money import ZERO, Money
from src.sl_ledger.domain import convention


@dataclass(frozen=True)
class Debit:
    amount: Money
    date: date
    session_ref: str
    kind: TransactionKind = field(default=TransactionKind.DEBIT, init=False)

    def __post_init__(self) -> None:
        if self.amount.is_negative():
            raise NegativeInputError("debit amount", self.amount)


@dataclass(frozen=True)
class Credit:
    amount: Money
    date: date
    method: PaymentMethod = PaymentMethod.CASH
    reference: str | None = None
    kind: TransactionKind = field(default=TransactionKind.CREDIT, init=False)

    def __post_init__(self) -> None:
        if not self.amount.is_positive():
            raise NonPositivePaymentError(self.amount)


@dataclass(frozen=True)
class Adjustment:
    amount: Money  # signed
    date: date
    reason: str
    reference: str | None = None
    kind: TransactionKind = field(default=TransactionKind.ADJUSTMENT, init=False)

    def __post_init__(self) -> None:
        if self.amount.is_zero():
            raise InvalidAdjustmentError("amount must be non-zero")
        if not self.reason.strip():
            raise InvalidAdjustmentError("reason is required")


Transaction = Union[Debit, Credit, Adjustment]


def balance_delta(txn: Transaction) -> Money:
    """Signed effect of one transaction on a balance, per the sign convention."""
    if isinstance(txn, Debit):
        return convention.charge(ZERO, txn.amount)
    # credits and adjustments both move money toward the participant
    return convention.receive(ZERO, txn.amount)


@dataclass(frozen=True)
class Balance:
    participant_id: str
    total_debits: Money
    total_credits: Money
    total_adjustments: Money
    last_session_date: date | None = None
    last_payment_date: date | None = None

    @property
    def current_balance(self) -> Money:
        credited = convention.receive(ZERO, self.total_credits.add(self.total_adjustments))
        return convention.charge(credited, self.total_debits)

    @property
    def status(self) -> BalanceStatus:
        return convention.classify(self.current_balance)

    @property
    def is_debt(self) -> bool:
        return self.status is BalanceStatus.DEBT

    @property
    def is_credit(self) -> bool:
        return self.status is BalanceStatus.CREDIT

    @property
    def is_settled(self) -> bool:
        return self.status is BalanceStatus.SETTLED

    @property
    def debt(self) -> Money:
        return convention.debt_magnitude(self.current_balance)

    @property
    def credit(self) -> Money:
        return convention.credit_magnitude(self.current_balance)

    def combine(self, other: "Balance") -> "Balance":
        """Fold of a partition: combine(fold(a), fold(b)) == fold(a + b)."""
        return Balance(
            participant_id=self.participant_id or other.participant_id,
            total_debits=self.total_debits.add(other.total_debits),
            total_credits=self.total_credits.add(other.total_credits),
            total_adjustments=self.total_adjustments.add(other.total_adjustments),
            last_session_date=_latest(self.last_session_date, other.last_session_date),
            last_payment_date=_latest(self.last_payment_date, other.last_payment_date),
        )


def _latest(a: date | None, b: date | None) -> date | None:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


@dataclass(frozen=True)
class GroupSummary:
    total_debt: Money
    total_credit: Money
    net_balance: Money
    debtors: int
    creditors: int
    settled: int
    total: int


@dataclass(frozen=True)
class StatusGroups:
    debtors: tuple[Balance, ...]
    creditors: tuple[Balance, ...]
    settled: tuple[Balance, ...]


@dataclass(frozen=True)
class BalanceDisplay:
    amount: str
    status: BalanceStatus
    display_text: str


@dataclass(frozen=True)
class PaymentImpact:
    new_balance: Money
    is_fully_settled: bool
    remaining_debt: Money
    overpayment: Money


@dataclass(frozen=True)
class SettlementSuggestion:
    exact: Money
    rounded_up: Money | None
    half: Money | None


@dataclass(frozen=True)
class TrendPoint:
    date: date
    running_balance: Money
    delta: Money
    transaction: Transaction


@dataclass(frozen=True)
class PaymentStats:
    count: int
    total: Money
    average: Money
    by_method: dict[PaymentMethod, int]
