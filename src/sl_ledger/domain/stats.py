"""Payment statistics over a date window."""

from collections import Counter
from collections.abc import Iterable
from datetime import date

from src.sl_common.money import ZERO, sum_money
from src.sl_ledger.domain.models import Credit, PaymentStats, Transaction


def compute_payment_stats(
    transactions: Iterable[Transaction],
    from_date: date | None = None,
    to_date: date | None = None,
) -> PaymentStats:
    """Count, total, exact average and per-method counts of credits in [from_date, to_date]."""
    payments = [
        txn
        for txn in transactions
        if isinstance(txn, Credit)
        and (from_date is None or txn.date >= from_date)
        and (to_date is None or txn.date <= to_date)
    ]
    total = sum_money(p.amount for p in payments)
    return PaymentStats(
        count=len(payments),
        total=total,
        average=total.divide(len(payments)) if payments else ZERO,
        by_method=dict(Counter(p.method for p in payments)),
    )
