"""Pydantic schemas for the ledger API.

Transactions arrive as a discriminated union on `kind`; Money travels as
decimal strings (numbers are accepted on input).
"""

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.sl_common.enums import BalanceStatus, PaymentMethod, TransactionKind
from src.sl_common.money import Money
from src.sl_ledger.domain.balance import describe_balance
from src.sl_ledger.domain.models import (
    Adjustment,
    Balance,
    Credit,
    Debit,
    GroupSummary,
    PaymentImpact,
    PaymentStats,
    SettlementSuggestion,
    StatusGroups,
    Transaction,
    TrendPoint,
)

# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class DebitIn(BaseModel):
    kind: Literal["DEBIT"] = "DEBIT"
    amount: Money
    entry_date: date
    session_ref: str = Field(..., min_length=1)

    def to_domain(self) -> Debit:
        return Debit(amount=self.amount, date=self.entry_date, session_ref=self.session_ref)


class CreditIn(BaseModel):
    kind: Literal["CREDIT"] = "CREDIT"
    amount: Money
    entry_date: date
    method: PaymentMethod = PaymentMethod.CASH
    reference: str | None = None

    def to_domain(self) -> Credit:
        return Credit(
            amount=self.amount, date=self.entry_date, method=self.method, reference=self.reference
        )

    @classmethod
    def from_domain(cls, credit: Credit) -> "CreditIn":
        return cls(
            amount=credit.amount,
            entry_date=credit.date,
            method=credit.method,
            reference=credit.reference,
        )


class AdjustmentIn(BaseModel):
    kind: Literal["ADJUSTMENT"] = "ADJUSTMENT"
    amount: Money
    entry_date: date
    reason: str
    reference: str | None = None

    def to_domain(self) -> Adjustment:
        return Adjustment(
            amount=self.amount, date=self.entry_date, reason=self.reason, reference=self.reference
        )

    @classmethod
    def from_domain(cls, adjustment: Adjustment) -> "AdjustmentIn":
        return cls(
            amount=adjustment.amount,
            entry_date=adjustment.date,
            reason=adjustment.reason,
            reference=adjustment.reference,
        )


TransactionIn = Annotated[Union[DebitIn, CreditIn, AdjustmentIn], Field(discriminator="kind")]


def to_domain_transactions(items: list[TransactionIn]) -> list[Transaction]:
    return [item.to_domain() for item in items]


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BalanceRequest(BaseModel):
    participant_id: str = ""
    transactions: list[TransactionIn] = Field(default_factory=list)


class GroupSummaryRequest(BaseModel):
    participants: list[BalanceRequest]


class PaymentImpactRequest(BalanceRequest):
    payment: Money


class PaymentStatsRequest(BaseModel):
    transactions: list[TransactionIn] = Field(default_factory=list)
    from_date: date | None = None
    to_date: date | None = None


class PaymentCorrectionRequest(BaseModel):
    original: CreditIn
    corrected_amount: Money
    correction_date: date
    reason: str = "Payment amount corrected"


class CreditTransferRequest(BaseModel):
    source: BalanceRequest
    target_id: str = Field(..., min_length=1)
    amount: Money
    transfer_date: date


class CreditTransferResponse(BaseModel):
    source_adjustment: AdjustmentIn
    target_credit: CreditIn


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BalanceResponse(BaseModel):
    participant_id: str
    total_debits: Money
    total_credits: Money
    total_adjustments: Money
    current_balance: Money
    status: BalanceStatus
    is_debt: bool
    is_credit: bool
    is_settled: bool
    display_amount: str
    display_text: str
    last_session_date: date | None = None
    last_payment_date: date | None = None

    @classmethod
    def from_domain(cls, balance: Balance) -> "BalanceResponse":
        display = describe_balance(balance)
        return cls(
            participant_id=balance.participant_id,
            total_debits=balance.total_debits,
            total_credits=balance.total_credits,
            total_adjustments=balance.total_adjustments,
            current_balance=balance.current_balance,
            status=balance.status,
            is_debt=balance.is_debt,
            is_credit=balance.is_credit,
            is_settled=balance.is_settled,
            display_amount=display.amount,
            display_text=display.display_text,
            last_session_date=balance.last_session_date,
            last_payment_date=balance.last_payment_date,
        )


class GroupSummaryResponse(BaseModel):
    total_debt: Money
    total_credit: Money
    net_balance: Money
    players_in_debt: int
    players_in_credit: int
    settled_players: int
    total_players: int
    debtors: list[BalanceResponse]
    creditors: list[BalanceResponse]
    settled: list[BalanceResponse]

    @classmethod
    def from_domain(cls, summary: GroupSummary, groups: StatusGroups) -> "GroupSummaryResponse":
        return cls(
            total_debt=summary.total_debt,
            total_credit=summary.total_credit,
            net_balance=summary.net_balance,
            players_in_debt=summary.debtors,
            players_in_credit=summary.creditors,
            settled_players=summary.settled,
            total_players=summary.total,
            debtors=[BalanceResponse.from_domain(b) for b in groups.debtors],
            creditors=[BalanceResponse.from_domain(b) for b in groups.creditors],
            settled=[BalanceResponse.from_domain(b) for b in groups.settled],
        )


class PaymentImpactResponse(BaseModel):
    new_balance: Money
    new_balance_display: str
    is_fully_settled: bool
    remaining_debt: Money
    overpayment: Money

    @classmethod
    def from_domain(cls, impact: PaymentImpact) -> "PaymentImpactResponse":
        return cls(
            new_balance=impact.new_balance,
            new_balance_display=impact.new_balance.format(show_explicit_sign=True),
            is_fully_settled=impact.is_fully_settled,
            remaining_debt=impact.remaining_debt,
            overpayment=impact.overpayment,
        )


class SettlementSuggestionResponse(BaseModel):
    exact: Money
    rounded_up: Money | None = None
    half: Money | None = None

    @classmethod
    def from_domain(cls, suggestion: SettlementSuggestion) -> "SettlementSuggestionResponse":
        return cls(exact=suggestion.exact, rounded_up=suggestion.rounded_up, half=suggestion.half)


class TrendPointOut(BaseModel):
    entry_date: date
    running_balance: Money
    delta: Money
    kind: TransactionKind

    @classmethod
    def from_domain(cls, point: TrendPoint) -> "TrendPointOut":
        return cls(
            entry_date=point.date,
            running_balance=point.running_balance,
            delta=point.delta,
            kind=point.transaction.kind,
        )


class PaymentStatsResponse(BaseModel):
    count: int
    total: Money
    average: Money
    by_method: dict[PaymentMethod, int]

    @classmethod
    def from_domain(cls, stats: PaymentStats) -> "PaymentStatsResponse":
        return cls(
            count=stats.count, total=stats.total, average=stats.average, by_method=stats.by_method
        )
