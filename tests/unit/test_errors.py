"""Tests for sl_common.errors and sl_common.response."""

from src.sl_common.errors import (
    AppError,
    DivisionByZeroError,
    InsufficientCreditError,
    InternalError,
    InvalidAdjustmentError,
    InvalidAmountError,
    NegativeInputError,
    NoParticipantsError,
    NonPositivePaymentError,
    NotInDebtError,
    ParticipantMismatchError,
    SessionLimitError,
    UnknownPresetError,
)
from src.sl_common.response import ApiResponse, error_response, new_request_id, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=2004, message="No such preset", http_status=404)
        assert err.http_status == 404

    def test_is_exception(self) -> None:
        err = AppError(code=1001, message="test")
        assert isinstance(err, Exception)
        assert str(err) == "test"


class TestSpecificErrors:
    def test_invalid_amount(self) -> None:
        err = InvalidAmountError("abc")
        assert err.code == 1001
        assert err.http_status == 422
        assert "'abc'" in err.message

    def test_division_by_zero(self) -> None:
        err = DivisionByZeroError()
        assert err.code == 1002
        assert err.http_status == 422

    def test_no_participants(self) -> None:
        err = NoParticipantsError(0)
        assert err.code == 2001
        assert "0" in err.message

    def test_negative_input(self) -> None:
        err = NegativeInputError("court cost", "-5")
        assert err.code == 2002
        assert "court cost" in err.message
        assert "-5" in err.message

    def test_session_limit(self) -> None:
        assert SessionLimitError("9 hours").code == 2003

    def test_unknown_preset(self) -> None:
        err = UnknownPresetError("squash")
        assert err.code == 2004
        assert err.http_status == 404

    def test_participant_mismatch(self) -> None:
        assert ParticipantMismatchError("duplicate ids").code == 2005

    def test_non_positive_payment(self) -> None:
        err = NonPositivePaymentError("0")
        assert err.code == 3001
        assert err.http_status == 422

    def test_not_in_debt(self) -> None:
        err = NotInDebtError("alice")
        assert err.code == 3002
        assert "alice" in err.message
        assert "<unknown>" in NotInDebtError("").message

    def test_insufficient_credit(self) -> None:
        err = InsufficientCreditError("40", "30")
        assert err.code == 3003
        assert "40" in err.message
        assert "30" in err.message

    def test_invalid_adjustment(self) -> None:
        assert InvalidAdjustmentError("reason is required").code == 3004

    def test_internal(self) -> None:
        err = InternalError()
        assert err.code == 9002
        assert err.http_status == 500


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"total_cost": "61.25"})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"total_cost": "61.25"}

    def test_error(self) -> None:
        resp = error_response(2001, "Participant count must be a whole number >= 1")
        assert resp.code == 2001
        assert resp.data is None

    def test_serialization(self) -> None:
        resp = success_response([1, 2])
        d = resp.model_dump()
        assert "code" in d
        assert "message" in d
        assert "data" in d
        assert "timestamp" in d
        assert d["request_id"].startswith("req_")

    def test_request_ids_unique(self) -> None:
        assert len({new_request_id() for _ in range(100)}) == 100

    def test_model_accepts_any_data(self) -> None:
        assert ApiResponse(data="x").data == "x"
