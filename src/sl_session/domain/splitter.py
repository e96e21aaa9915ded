"""Session cost splitter — usage lines -> exact total -> exact equal share.

The per-participant share is total_cost / participant_count with no rounding.
That exact value is what each participant's Debit carries, so the shares of a
session always add back up to its total. Rounding belongs to display only.
"""

import logging
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from config.settings import settings
from src.sl_common.errors import (
    NegativeInputError,
    NoParticipantsError,
    ParticipantMismatchError,
    SessionLimitError,
)
from src.sl_common.money import ZERO, Money, sum_money
from src.sl_ledger.domain.models import Debit
from src.sl_session.domain.models import (
    ComponentCost,
    FlatCost,
    RateCard,
    SessionCostResult,
    SessionUsage,
    UsageComponent,
)

logger = logging.getLogger(__name__)

COURT_LABEL = "court"
SHUTTLECOCK_LABEL = "shuttlecocks"
OTHER_LABEL = "other"

CostLine = UsageComponent | FlatCost


def check_participant_count(participant_count: object) -> int:
    """Raise NoParticipantsError unless participant_count is an int >= 1."""
    if (
        isinstance(participant_count, bool)
        or not isinstance(participant_count, int)
        or participant_count < 1
    ):
        raise NoParticipantsError(participant_count)
    return participant_count


def _price_line(line: CostLine) -> ComponentCost:
    if isinstance(line, UsageComponent):
        if line.rate.is_negative():
            raise NegativeInputError(f"{line.label} rate", line.rate)
        if line.quantity < 0:
            raise NegativeInputError(f"{line.label} quantity", line.quantity)
        return ComponentCost(line.label, line.cost, rate=line.rate, quantity=line.quantity)
    if isinstance(line, FlatCost):
        if line.amount.is_negative():
            raise NegativeInputError(f"{line.label} cost", line.amount)
        return ComponentCost(line.label, line.amount)
    raise TypeError(f"unsupported cost line: {type(line).__name__}")


def compute_session_cost(
    components: Sequence[CostLine],
    participant_count: int,
    *,
    rate_card: RateCard | None = None,
) -> SessionCostResult:
    """Price every line, sum exactly, and divide exactly among participants."""
    count = check_participant_count(participant_count)
    lines = tuple(_price_line(line) for line in components)
    total = sum_money(line.amount for line in lines)
    share = total.divide(count)
    logger.debug(
        "Session cost: lines=%d total=%s participants=%d share=%s",
        len(lines), total, count, share,
    )
    return SessionCostResult(
        components=lines,
        total_cost=total,
        participant_count=count,
        cost_per_participant=share,
        rate_card=rate_card,
    )


def compute_flat_session_cost(
    court_cost: Money,
    participant_count: int,
    shuttlecock_cost: Money = ZERO,
    other_costs: Money = ZERO,
) -> SessionCostResult:
    """Court + shuttlecocks + other, each already a total."""
    return compute_session_cost(
        [
            FlatCost(COURT_LABEL, court_cost),
            FlatCost(SHUTTLECOCK_LABEL, shuttlecock_cost),
            FlatCost(OTHER_LABEL, other_costs),
        ],
        participant_count,
    )


def compute_usage_cost(
    usage: SessionUsage,
    rate_card: RateCard,
    participant_count: int,
    *,
    max_hours: Decimal | None = None,
    max_participants: int | None = None,
) -> SessionCostResult:
    """Price actual usage (hours x court rate, shuttlecocks x unit rate) with a frozen rate card."""
    max_hours = settings.MAX_SESSION_HOURS if max_hours is None else max_hours
    max_participants = (
        settings.MAX_SESSION_PARTICIPANTS if max_participants is None else max_participants
    )

    count = check_participant_count(participant_count)
    if count > max_participants:
        raise SessionLimitError(f"{count} participants, maximum is {max_participants}")

    hours = usage.hours_played
    if hours < 0:
        raise NegativeInputError("hours played", hours)
    if hours == 0:
        raise SessionLimitError("hours played must be greater than 0")
    if hours > max_hours:
        raise SessionLimitError(f"{hours} hours played, maximum is {max_hours}")

    shuttlecocks = usage.shuttlecocks_used
    if isinstance(shuttlecocks, bool) or not isinstance(shuttlecocks, int):
        raise SessionLimitError(f"shuttlecocks used must be a whole number, got {shuttlecocks!r}")

    return compute_session_cost(
        [
            UsageComponent(COURT_LABEL, rate_card.court_rate_per_hour, hours),
            UsageComponent(SHUTTLECOCK_LABEL, rate_card.shuttlecock_rate_each, shuttlecocks),
            FlatCost(OTHER_LABEL, usage.other_costs),
        ],
        count,
        rate_card=rate_card,
    )


def split_among(
    result: SessionCostResult,
    participant_ids: Sequence[str],
    session_ref: str,
    session_date: date,
) -> dict[str, Debit]:
    """One Debit per participant, each carrying the exact (unrounded) share."""
    if len(set(participant_ids)) != len(participant_ids):
        raise ParticipantMismatchError("participant ids must be distinct")
    if len(participant_ids) != result.participant_count:
        raise ParticipantMismatchError(
            f"{len(participant_ids)} ids for a session split {result.participant_count} ways"
        )
    return {
        pid: Debit(amount=result.cost_per_participant, date=session_date, session_ref=session_ref)
        for pid in participant_ids
    }
