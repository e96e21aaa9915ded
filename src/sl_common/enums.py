"""Global enums — values double as the JSON wire format."""

from enum import Enum


class RoundingMode(str, Enum):
    HALF_UP = "HALF_UP"  # ties away from zero
    HALF_EVEN = "HALF_EVEN"
    UP = "UP"  # away from zero
    DOWN = "DOWN"  # toward zero
    CEILING = "CEILING"
    FLOOR = "FLOOR"


class Comparison(str, Enum):
    LESS_THAN = "LESS_THAN"
    EQUAL = "EQUAL"
    GREATER_THAN = "GREATER_THAN"


class TransactionKind(str, Enum):
    DEBIT = "DEBIT"  # session share charged to a participant
    CREDIT = "CREDIT"  # payment received from a participant
    ADJUSTMENT = "ADJUSTMENT"  # signed correction to a prior credit


class PaymentMethod(str, Enum):
    CASH = "cash"
    PAYNOW = "paynow"
    BANK_TRANSFER = "bank_transfer"
    CREDIT_TRANSFER = "credit_transfer"
    OTHER = "other"


class BalanceStatus(str, Enum):
    DEBT = "debt"
    CREDIT = "credit"
    SETTLED = "settled"


class CourtType(str, Enum):
    INDOOR_PEAK = "indoor_peak"
    INDOOR_OFFPEAK = "indoor_offpeak"
    OUTDOOR = "outdoor"
    COMMUNITY = "community"
