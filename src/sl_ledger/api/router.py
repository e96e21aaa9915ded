"""sl_ledger REST API — stateless balance, payment and trend calculations.

Callers send the participant's full transaction history; nothing is stored.
"""

from fastapi import APIRouter, Request

from src.sl_common.response import ApiResponse, success_response
from src.sl_ledger.application.schemas import (
    BalanceRequest,
    CreditTransferRequest,
    GroupSummaryRequest,
    PaymentCorrectionRequest,
    PaymentImpactRequest,
    PaymentStatsRequest,
)
from src.sl_ledger.application.service import LedgerApplicationService

router = APIRouter(prefix="/ledger", tags=["ledger"])

_service = LedgerApplicationService()


@router.post("/balance")
async def get_balance(body: BalanceRequest, request: Request) -> ApiResponse:
    data = _service.get_balance(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/summary")
async def get_group_summary(body: GroupSummaryRequest, request: Request) -> ApiResponse:
    data = _service.get_group_summary(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/payment-impact")
async def get_payment_impact(body: PaymentImpactRequest, request: Request) -> ApiResponse:
    data = _service.get_payment_impact(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/suggestions")
async def get_suggestions(body: BalanceRequest, request: Request) -> ApiResponse:
    data = _service.get_suggestions(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/trend")
async def get_trend(body: BalanceRequest, request: Request) -> ApiResponse:
    points = _service.get_trend(body)
    resp = success_response([p.model_dump(mode="json") for p in points])
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/payment-stats")
async def get_payment_stats(body: PaymentStatsRequest, request: Request) -> ApiResponse:
    data = _service.get_payment_stats(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/correct-payment")
async def correct_payment(body: PaymentCorrectionRequest, request: Request) -> ApiResponse:
    data = _service.correct_payment(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/transfer-credit")
async def transfer_credit(body: CreditTransferRequest, request: Request) -> ApiResponse:
    data = _service.transfer_credit(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
