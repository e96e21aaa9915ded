"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Money
  2xxx: Session cost
  3xxx: Ledger / payments
  9xxx: System

Every invalid input surfaces as one of these; nothing is coerced to zero.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Money ---

class InvalidAmountError(AppError):
    def __init__(self, value: object) -> None:
        super().__init__(1001, f"Invalid amount: {value!r}", 422)


class DivisionByZeroError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Division by zero in monetary calculation", 422)


# --- 2xxx: Session cost ---

class NoParticipantsError(AppError):
    def __init__(self, participant_count: object) -> None:
        super().__init__(
            2001,
            f"Participant count must be a whole number >= 1, got {participant_count!r}",
            422,
        )


class NegativeInputError(AppError):
    def __init__(self, field: str, value: object) -> None:
        super().__init__(2002, f"{field} cannot be negative, got {value}", 422)


class SessionLimitError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2003, f"Session limit exceeded: {detail}", 422)


class UnknownPresetError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(2004, f"Unknown session preset: {name}", 404)


class ParticipantMismatchError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2005, f"Participant list mismatch: {detail}", 422)


# --- 3xxx: Ledger / payments ---

class NonPositivePaymentError(AppError):
    def __init__(self, amount: object) -> None:
        super().__init__(3001, f"Payment amount must be positive, got {amount}", 422)


class NotInDebtError(AppError):
    def __init__(self, participant_id: str) -> None:
        super().__init__(
            3002, f"Participant {participant_id or '<unknown>'} has no outstanding debt", 422
        )


class InsufficientCreditError(AppError):
    def __init__(self, requested: object, available: object) -> None:
        super().__init__(
            3003,
            f"Insufficient credit: requested {requested}, available {available}",
            422,
        )


class InvalidAdjustmentError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3004, f"Invalid adjustment: {detail}", 422)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
