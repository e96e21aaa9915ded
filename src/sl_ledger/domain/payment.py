"""Payment impact, settlement suggestions, payment corrections and credit transfers."""

import logging
from datetime import date

from src.sl_common.enums import PaymentMethod, RoundingMode
from src.sl_common.errors import (
    InsufficientCreditError,
    InvalidAdjustmentError,
    NonPositivePaymentError,
    NotInDebtError,
)
from src.sl_common.id_generator import generate_reference
from src.sl_common.money import Money
from src.sl_ledger.domain import convention
from src.sl_ledger.domain.models import (
    Adjustment,
    Balance,
    Credit,
    PaymentImpact,
    SettlementSuggestion,
)

logger = logging.getLogger(__name__)

SMALL_DEBT_THRESHOLD = Money(10)
SMALL_DEBT_STEP = Money(5)
LARGE_DEBT_STEP = Money(10)
MINIMUM_PARTIAL_PAYMENT = Money(5)


def _check_payment(payment: Money) -> None:
    if not payment.is_positive():
        raise NonPositivePaymentError(payment)


def apply_payment(balance: Balance, payment: Money) -> PaymentImpact:
    """Effect of receiving `payment` on a balance. Nothing is mutated."""
    _check_payment(payment)
    new_balance = convention.receive(balance.current_balance, payment)
    remaining = convention.debt_magnitude(new_balance)
    return PaymentImpact(
        new_balance=new_balance,
        is_fully_settled=remaining.is_zero(),
        remaining_debt=remaining,
        overpayment=convention.credit_magnitude(new_balance),
    )


def suggest_settlement_amounts(balance: Balance) -> SettlementSuggestion:
    """Exact debt, a round-number amount above it, and a half payment below it.

    rounded_up: next multiple of 5 (debt < 10) or 10, only when above the debt.
    half:       debt / 2 floored at 5, only when below the debt.
    """
    if not balance.is_debt:
        raise NotInDebtError(balance.participant_id)
    exact = balance.debt
    step = SMALL_DEBT_STEP if exact < SMALL_DEBT_THRESHOLD else LARGE_DEBT_STEP
    rounded_up = exact.round_to_step(step, RoundingMode.CEILING)
    half = max(exact.divide(2), MINIMUM_PARTIAL_PAYMENT)
    return SettlementSuggestion(
        exact=exact,
        rounded_up=rounded_up if rounded_up > exact else None,
        half=half if half < exact else None,
    )


def correct_payment(
    original: Credit, corrected_amount: Money, correction_date: date, reason: str
) -> Adjustment:
    """Record an edit of a past payment as an adjustment of (corrected - original)."""
    _check_payment(corrected_amount)
    difference = corrected_amount.subtract(original.amount)
    if difference.is_zero():
        raise InvalidAdjustmentError("corrected amount equals the original payment")
    logger.info(
        "Payment correction: ref=%s original=%s corrected=%s",
        original.reference, original.amount, corrected_amount,
    )
    return Adjustment(
        amount=difference,
        date=correction_date,
        reason=reason,
        reference=original.reference,
    )


def transfer_credit(
    source: Balance,
    amount: Money,
    transfer_date: date,
    target_id: str,
    reference: str | None = None,
) -> tuple[Adjustment, Credit]:
    """Move credit from one participant to another.

    Returns (adjustment for the source, credit for the target), tied by a
    shared reference. The source must hold at least `amount` in credit.
    """
    _check_payment(amount)
    if amount > source.credit:
        raise InsufficientCreditError(amount, source.credit)
    reference = reference or generate_reference("transfer")
    logger.info(
        "Credit transfer: %s -> %s amount=%s ref=%s",
        source.participant_id, target_id, amount, reference,
    )
    outgoing = Adjustment(
        amount=amount.negate(),
        date=transfer_date,
        reason=f"Credit transferred to {target_id}",
        reference=reference,
    )
    incoming = Credit(
        amount=amount,
        date=transfer_date,
        method=PaymentMethod.CREDIT_TRANSFER,
        reference=reference,
    )
    return outgoing, incoming
