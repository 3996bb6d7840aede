"""Network Capture Routes: create captures, record requests, list them, call tools.

Invariants:
    - _captures dict is the single source for in-memory capture state
    - Requests are only ever appended (keeps page tokens meaningful)
    - Listing never errors on bad pageSize/pageToken/requestType values: the core
      normalizes them and reports invalid_token
    - Tool calls go through one ToolDispatch per capture (serialized per capture)

Design Decisions:
    - _captures as module-level dict: deliberate exception to no-global-state rule
      (ADR: single-process uvicorn, captures lost on restart)
    - Tool errors are 200 with status=error: a tool failing is a result, not a transport error
"""

import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, Query, status

from netpager.config import Settings, get_settings
from netpager.core.capture_state import NetworkCaptureState, NetworkRequest
from netpager.core.errors import ResourceNotFoundError
from netpager.core.list_requests import ListingOptions, list_network_requests
from netpager.schemas.network import (
    CaptureResponse,
    NetworkRequestCreate,
    NetworkRequestsListingResponse,
)
from netpager.services.network_response import listing_response
from netpager.services.tool_dispatch import ToolDispatch
from netpager.services.tools_registry import get_all_tools

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/captures", tags=["captures"])

_captures: dict[str, NetworkCaptureState] = {}
_dispatchers: dict[str, ToolDispatch] = {}


def get_capture_or_404(capture_id: str) -> NetworkCaptureState:
    state = _captures.get(capture_id)
    if state is None:
        raise ResourceNotFoundError("Capture", capture_id)
    return state


def _page_size_param(raw: str | None) -> int | None:
    """Query string to int; unparseable becomes 0 so the core falls back to the default."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return 0


def _capture_response(capture_id: str, state: NetworkCaptureState) -> CaptureResponse:
    return CaptureResponse(id=capture_id, request_count=len(state.requests))


@router.post(
    "", response_model=CaptureResponse, status_code=status.HTTP_201_CREATED,
)
async def create_capture():
    capture_id = uuid4().hex
    _captures[capture_id] = NetworkCaptureState()
    logger.info("Capture created", extra={"capture_id": capture_id})
    return _capture_response(capture_id, _captures[capture_id])


@router.get("/tools")
async def list_tools(settings: Settings = Depends(get_settings)):
    """Tool definitions advertised to clients."""
    return {"tools": get_all_tools(settings.max_page_size)}


@router.get("/{capture_id}", response_model=CaptureResponse)
async def get_capture(capture_id: str):
    return _capture_response(capture_id, get_capture_or_404(capture_id))


@router.post(
    "/{capture_id}/requests", response_model=CaptureResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_request(capture_id: str, body: NetworkRequestCreate):
    """Append one captured request (pushed by the browser driver)."""
    state = get_capture_or_404(capture_id)
    state.record_request(NetworkRequest(**body.model_dump()))
    return _capture_response(capture_id, state)


@router.get(
    "/{capture_id}/requests", response_model=NetworkRequestsListingResponse,
)
async def list_requests(
    capture_id: str,
    page_size: str | None = Query(None, alias="pageSize"),
    page_token: str | None = Query(None, alias="pageToken"),
    request_type: list[str] | None = Query(None, alias="requestType"),
    settings: Settings = Depends(get_settings),
):
    """Paginated, optionally type-filtered listing of captured requests."""
    state = get_capture_or_404(capture_id)
    size = _page_size_param(page_size)
    if request_type is not None and len(request_type) == 1:
        request_type = request_type[0]

    listing = list_network_requests(
        state.get_requests(),
        ListingOptions(
            page_size=size, page_token=page_token, request_type=request_type,
        ),
        default_page_size=settings.default_page_size,
    )
    return listing_response(listing)


@router.post("/{capture_id}/tools/{tool_name}")
async def call_tool(
    capture_id: str, tool_name: str, input_data: dict | None = None,
    settings: Settings = Depends(get_settings),
):
    """Run a tool against this capture. Tool failures come back as status=error."""
    state = get_capture_or_404(capture_id)
    dispatch = _dispatchers.get(capture_id)
    if dispatch is None:
        dispatch = ToolDispatch(state, settings, capture_id=capture_id)
        _dispatchers[capture_id] = dispatch
    return await dispatch.execute(tool_name, input_data or {})


@router.delete("/{capture_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_capture(capture_id: str):
    get_capture_or_404(capture_id)
    _captures.pop(capture_id, None)
    _dispatchers.pop(capture_id, None)
    logger.info("Capture deleted", extra={"capture_id": capture_id})
