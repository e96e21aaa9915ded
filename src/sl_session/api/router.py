"""sl_session REST API — stateless session cost calculations."""

from fastapi import APIRouter, Query, Request

from src.sl_common.response import ApiResponse, success_response
from src.sl_session.application.schemas import SessionCostRequest, SplitRequest, UsageCostRequest
from src.sl_session.application.service import SessionApplicationService

router = APIRouter(prefix="/sessions", tags=["sessions"])

_service = SessionApplicationService()


@router.post("/cost")
async def compute_cost(body: SessionCostRequest, request: Request) -> ApiResponse:
    data = _service.compute_cost(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/usage-cost")
async def compute_usage_cost(body: UsageCostRequest, request: Request) -> ApiResponse:
    data = _service.compute_usage_cost(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/presets/{name}")
async def compute_preset_cost(
    name: str,
    request: Request,
    participant_count: int = Query(..., description="Number of participants sharing the cost"),
) -> ApiResponse:
    data = _service.compute_preset_cost(name, participant_count)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/split")
async def split(body: SplitRequest, request: Request) -> ApiResponse:
    data = _service.split(body)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
