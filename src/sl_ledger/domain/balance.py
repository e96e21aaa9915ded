"""Balance calculator — folds a participant's transactions into one Balance."""

import logging
from collections.abc import Iterable, Sequence

from src.sl_common.enums import BalanceStatus
from src.sl_common.money import ZERO, Money
from src.sl_ledger.domain.models import (
    Adjustment,
    Balance,
    BalanceDisplay,
    Credit,
    Debit,
    GroupSummary,
    StatusGroups,
    Transaction,
)

logger = logging.getLogger(__name__)


def compute_balance(transactions: Iterable[Transaction], participant_id: str = "") -> Balance:
    """Single pass; each total is a Money accumulator built with add() only."""
    debits = credits = adjustments = ZERO
    last_session = last_payment = None
    count = 0
    for txn in transactions:
        count += 1
        if isinstance(txn, Debit):
            debits = debits.add(txn.amount)
            if last_session is None or txn.date > last_session:
                last_session = txn.date
        elif isinstance(txn, Credit):
            credits = credits.add(txn.amount)
            if last_payment is None or txn.date > last_payment:
                last_payment = txn.date
        elif isinstance(txn, Adjustment):
            adjustments = adjustments.add(txn.amount)
        else:
            raise TypeError(f"unsupported transaction: {type(txn).__name__}")

    balance = Balance(
        participant_id=participant_id,
        total_debits=debits,
        total_credits=credits,
        total_adjustments=adjustments,
        last_session_date=last_session,
        last_payment_date=last_payment,
    )
    logger.debug(
        "Balance: participant=%s txns=%d balance=%s status=%s",
        participant_id, count, balance.current_balance, balance.status.value,
    )
    return balance


def compute_group_summary(balances: Sequence[Balance]) -> GroupSummary:
    """Totals are magnitudes per class, never signed sums across classes."""
    total_debt = total_credit = ZERO
    debtors = creditors = settled = 0
    for balance in balances:
        if balance.is_debt:
            total_debt = total_debt.add(balance.debt)
            debtors += 1
        elif balance.is_credit:
            total_credit = total_credit.add(balance.credit)
            creditors += 1
        else:
            settled += 1
    return GroupSummary(
        total_debt=total_debt,
        total_credit=total_credit,
        net_balance=total_credit.subtract(total_debt),
        debtors=debtors,
        creditors=creditors,
        settled=settled,
        total=len(balances),
    )


def group_by_status(balances: Iterable[Balance]) -> StatusGroups:
    """Largest debt / credit first; ties broken by participant id ascending."""
    debtors: list[Balance] = []
    creditors: list[Balance] = []
    settled: list[Balance] = []
    for balance in balances:
        if balance.is_debt:
            debtors.append(balance)
        elif balance.is_credit:
            creditors.append(balance)
        else:
            settled.append(balance)

    # two stable passes: secondary key first, then primary descending
    debtors.sort(key=lambda b: b.participant_id)
    debtors.sort(key=lambda b: b.debt, reverse=True)
    creditors.sort(key=lambda b: b.participant_id)
    creditors.sort(key=lambda b: b.credit, reverse=True)
    settled.sort(key=lambda b: b.participant_id)
    return StatusGroups(tuple(debtors), tuple(creditors), tuple(settled))


def required_payment(balance: Balance) -> Money:
    """Amount that settles the balance; ZERO unless in debt."""
    return balance.debt


def describe_balance(balance: Balance) -> BalanceDisplay:
    status = balance.status
    if status is BalanceStatus.DEBT:
        amount = balance.debt.format()
        text = f"Owes {amount}"
    elif status is BalanceStatus.CREDIT:
        amount = balance.credit.format()
        text = f"Credit {amount}"
    else:
        amount = ZERO.format()
        text = "Settled"
    return BalanceDisplay(amount=amount, status=status, display_text=text)
