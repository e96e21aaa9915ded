"""Session cost conservation checks."""

import logging
from collections.abc import Mapping

from src.sl_common.money import sum_money
from src.sl_ledger.domain.models import Debit
from src.sl_session.domain.models import SessionCostResult

logger = logging.getLogger(__name__)


def verify_split_conservation(result: SessionCostResult) -> list[str]:
    """Check a SessionCostResult. Returns list of violation strings.

    total_cost == sum(components)
    cost_per_participant * participant_count == total_cost
    """
    violations: list[str] = []
    component_sum = sum_money(line.amount for line in result.components)
    if component_sum != result.total_cost:
        violations.append(
            f"total_cost({result.total_cost}) != sum of components({component_sum})"
        )
    shares = result.cost_per_participant.multiply(result.participant_count)
    if shares != result.total_cost:
        violations.append(
            f"{result.participant_count} shares of {result.cost_per_participant} = {shares} "
            f"!= total_cost({result.total_cost})"
        )
    for msg in violations:
        logger.error("Split conservation violated: %s", msg)
    return violations


def verify_session_debits(result: SessionCostResult, debits: Mapping[str, Debit]) -> list[str]:
    """Check that a session's debits charge exactly its total, once per participant."""
    violations: list[str] = []
    if len(debits) != result.participant_count:
        violations.append(
            f"{len(debits)} debits for {result.participant_count} participants"
        )
    charged = sum_money(debit.amount for debit in debits.values())
    if charged != result.total_cost:
        violations.append(f"debits sum to {charged}, session total is {result.total_cost}")
    for msg in violations:
        logger.error("Session debit check failed: %s", msg)
    if not violations:
        logger.debug("Session debits OK: total=%s participants=%d", charged, len(debits))
    return violations
