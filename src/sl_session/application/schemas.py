"""Pydantic schemas for the session cost API. Money travels as decimal strings."""

from datetime import date, datetime, time
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from src.sl_common.enums import CourtType
from src.sl_common.money import ZERO, Money
from src.sl_ledger.domain.models import Debit
from src.sl_session.domain.models import (
    ComponentCost,
    FlatCost,
    RateCard,
    SessionCostResult,
    UsageComponent,
)

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CostLineIn(BaseModel):
    """Either a metered line (rate + quantity) or a flat amount."""

    label: str = Field(..., min_length=1)
    rate: Money | None = None
    quantity: Decimal | None = None
    amount: Money | None = None

    @model_validator(mode="after")
    def _one_shape(self) -> "CostLineIn":
        metered = self.rate is not None or self.quantity is not None
        if metered and self.amount is not None:
            raise ValueError("give either rate + quantity or amount, not both")
        if metered and (self.rate is None or self.quantity is None):
            raise ValueError("a metered line needs both rate and quantity")
        if not metered and self.amount is None:
            raise ValueError("a cost line needs rate + quantity or amount")
        return self

    def to_domain(self) -> UsageComponent | FlatCost:
        if self.amount is not None:
            return FlatCost(self.label, self.amount)
        return UsageComponent(self.label, self.rate, self.quantity)  # type: ignore[arg-type]


class SessionCostRequest(BaseModel):
    components: list[CostLineIn] = Field(..., min_length=1)
    participant_count: int


class UsageCostRequest(BaseModel):
    hours_played: Decimal
    shuttlecocks_used: int
    other_costs: Money = ZERO
    participant_count: int
    session_time: time
    court_type: CourtType | None = None

    @field_validator("session_time")
    @classmethod
    def local_wall_clock(cls, v: time) -> time:
        """Peak windows are local wall-clock times; a UTC offset would be ambiguous."""
        if v.tzinfo is not None:
            raise ValueError("session_time must be a local time without a UTC offset")
        return v


class SplitRequest(BaseModel):
    components: list[CostLineIn] = Field(..., min_length=1)
    participant_ids: list[str] = Field(..., min_length=1)
    session_ref: str = Field(..., min_length=1)
    session_date: date


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ComponentCostOut(BaseModel):
    label: str
    amount: Money
    rate: Money | None = None
    quantity: Decimal | None = None

    @classmethod
    def from_domain(cls, line: ComponentCost) -> "ComponentCostOut":
        quantity = None if line.quantity is None else Decimal(line.quantity)
        return cls(label=line.label, amount=line.amount, rate=line.rate, quantity=quantity)


class RateCardOut(BaseModel):
    court_type: CourtType
    court_rate_per_hour: Money
    shuttlecock_rate_each: Money
    effective_from: datetime
    is_peak: bool

    @classmethod
    def from_domain(cls, card: RateCard) -> "RateCardOut":
        return cls(
            court_type=card.court_type,
            court_rate_per_hour=card.court_rate_per_hour,
            shuttlecock_rate_each=card.shuttlecock_rate_each,
            effective_from=card.effective_from,
            is_peak=card.is_peak,
        )


class SessionCostResponse(BaseModel):
    components: list[ComponentCostOut]
    total_cost: Money
    total_cost_display: str
    participant_count: int
    cost_per_participant: Money  # exact; use this for ledger entries
    cost_per_participant_display: str
    rate_card: RateCardOut | None = None

    @classmethod
    def from_domain(cls, result: SessionCostResult) -> "SessionCostResponse":
        return cls(
            components=[ComponentCostOut.from_domain(line) for line in result.components],
            total_cost=result.total_cost,
            total_cost_display=result.total_cost.format(),
            participant_count=result.participant_count,
            cost_per_participant=result.cost_per_participant,
            cost_per_participant_display=result.cost_per_participant.format(),
            rate_card=None if result.rate_card is None else RateCardOut.from_domain(result.rate_card),
        )


class DebitOut(BaseModel):
    participant_id: str
    amount: Money
    amount_display: str
    session_date: date
    session_ref: str

    @classmethod
    def from_domain(cls, participant_id: str, debit: Debit) -> "DebitOut":
        return cls(
            participant_id=participant_id,
            amount=debit.amount,
            amount_display=debit.amount.format(),
            session_date=debit.date,
            session_ref=debit.session_ref,
        )


class SplitResponse(BaseModel):
    session: SessionCostResponse
    debits: list[DebitOut]
