"""Shared test fixtures."""

from datetime import date

import pytest

from src.sl_common.money import Money
from src.sl_ledger.domain.balance import compute_balance
from src.sl_ledger.domain.models import Adjustment, Balance, Credit, Debit


@pytest.fixture
def credit_balance() -> Balance:
    """Two sessions (18.75 + 15.50), one 50.00 payment, one -5.00 adjustment -> +10.75."""
    return compute_balance(
        [
            Debit(Money("18.75"), date(2026, 1, 5), "s1"),
            Debit(Money("15.50"), date(2026, 1, 12), "s2"),
            Credit(Money("50.00"), date(2026, 1, 6)),
            Adjustment(Money("-5.00"), date(2026, 1, 13), "Payment amount corrected"),
        ],
        "alice",
    )
