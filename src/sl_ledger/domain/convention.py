"""Balance sign convention — the single place that decides what a sign means.

    balance = credits + adjustments - debits

POSITIVE balance: the participant has CREDIT (paid ahead).
NEGATIVE balance: the participant is in DEBT (owes money).
ZERO:             SETTLED.

Classification, magnitudes, payment application and display all go through
this module; no other code compares a balance against zero.
"""

from src.sl_common.enums import BalanceStatus
from src.sl_common.money import ZERO, Money

BALANCE_CONVENTION = BalanceStatus.CREDIT  # status of a positive balance


def classify(balance: Money) -> BalanceStatus:
    if balance.is_zero():
        return BalanceStatus.SETTLED
    if balance.is_positive():
        return BALANCE_CONVENTION
    return BalanceStatus.DEBT if BALANCE_CONVENTION is BalanceStatus.CREDIT else BalanceStatus.CREDIT


def debt_magnitude(balance: Money) -> Money:
    """How much is owed, as a non-negative amount."""
    return balance.abs() if classify(balance) is BalanceStatus.DEBT else ZERO


def credit_magnitude(balance: Money) -> Money:
    """How much is held in credit, as a non-negative amount."""
    return balance.abs() if classify(balance) is BalanceStatus.CREDIT else ZERO


def charge(balance: Money, amount: Money) -> Money:
    """Move a balance toward debt by `amount` (a session share)."""
    return balance.subtract(amount) if BALANCE_CONVENTION is BalanceStatus.CREDIT else balance.add(amount)


def receive(balance: Money, amount: Money) -> Money:
    """Move a balance toward credit by `amount` (a payment)."""
    return balance.add(amount) if BALANCE_CONVENTION is BalanceStatus.CREDIT else balance.subtract(amount)
