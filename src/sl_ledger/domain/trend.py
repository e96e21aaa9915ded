"""Balance trend — replays transactions in date order into a running balance."""

from collections.abc import Iterable

from src.sl_common.money import ZERO
from src.sl_ledger.domain.models import Transaction, TrendPoint, balance_delta


def compute_trend(transactions: Iterable[Transaction]) -> list[TrendPoint]:
    """Recomputed from scratch on every call; same-date transactions keep input order."""
    ordered = sorted(transactions, key=lambda txn: txn.date)  # sorted() is stable
    running = ZERO
    points: list[TrendPoint] = []
    for txn in ordered:
        delta = balance_delta(txn)
        running = running.add(delta)
        points.append(
            TrendPoint(date=txn.date, running_balance=running, delta=delta, transaction=txn)
        )
    return points
