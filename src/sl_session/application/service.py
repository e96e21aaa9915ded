"""Session cost application service — schema <-> domain orchestration. Stateless."""

import logging

from src.sl_common.errors import InternalError
from src.sl_session.application.schemas import (
    DebitOut,
    SessionCostRequest,
    SessionCostResponse,
    SplitRequest,
    SplitResponse,
    UsageCostRequest,
)
from src.sl_session.domain.invariants import verify_session_debits, verify_split_conservation
from src.sl_session.domain.models import SessionUsage
from src.sl_session.domain.presets import preset_session_cost
from src.sl_session.domain.rates import RateSchedule, select_rate_card
from src.sl_session.domain.splitter import compute_session_cost, compute_usage_cost, split_among

logger = logging.getLogger(__name__)


def _require_clean(violations: list[str]) -> None:
    if violations:
        raise InternalError(f"Session cost check failed: {violations[0]}")


class SessionApplicationService:
    def __init__(self, schedule: RateSchedule | None = None) -> None:
        self._schedule = schedule or RateSchedule.from_settings()

    @property
    def schedule(self) -> RateSchedule:
        return self._schedule

    def compute_cost(self, body: SessionCostRequest) -> SessionCostResponse:
        result = compute_session_cost(
            [line.to_domain() for line in body.components], body.participant_count
        )
        _require_clean(verify_split_conservation(result))
        return SessionCostResponse.from_domain(result)

    def compute_usage_cost(self, body: UsageCostRequest) -> SessionCostResponse:
        card = select_rate_card(self._schedule, body.session_time, body.court_type)
        usage = SessionUsage(
            hours_played=body.hours_played,
            shuttlecocks_used=body.shuttlecocks_used,
            other_costs=body.other_costs,
        )
        result = compute_usage_cost(usage, card, body.participant_count)
        _require_clean(verify_split_conservation(result))
        logger.info(
            "Usage cost: court_type=%s peak=%s total=%s participants=%d",
            card.court_type.value, card.is_peak, result.total_cost, result.participant_count,
        )
        return SessionCostResponse.from_domain(result)

    def compute_preset_cost(self, name: str, participant_count: int) -> SessionCostResponse:
        result = preset_session_cost(name, participant_count)
        _require_clean(verify_split_conservation(result))
        return SessionCostResponse.from_domain(result)

    def split(self, body: SplitRequest) -> SplitResponse:
        result = compute_session_cost(
            [line.to_domain() for line in body.components], len(body.participant_ids)
        )
        debits = split_among(result, body.participant_ids, body.session_ref, body.session_date)
        _require_clean(verify_session_debits(result, debits))
        return SplitResponse(
            session=SessionCostResponse.from_domain(result),
            debits=[DebitOut.from_domain(pid, debit) for pid, debit in debits.items()],
        )
