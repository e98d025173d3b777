"""
app/api/routes/sessions.py
Endpoints för laddsessioner: lista samt ägarens manuella åtgärder.

Bodyn är valfri. Utan body (eller med fält av fel typ) hittas ingen
session och svaret blir 404, inte FastAPI:s 422.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_station_state
from app.models.actions import (
    ActionResponse,
    ErrorResponse,
    PauseRequest,
    PriorityRequest,
    ToggleAiRequest,
)
from app.models.station import ChargingSession
from app.services.station_state import InvalidPriorityError, SessionNotFoundError, StationState

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sessions", tags=["sessions"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def _error(status_code: int, e: Exception) -> JSONResponse:
    # Frontend läser "message", inte FastAPI:s "detail"
    return JSONResponse(status_code=status_code, content={"message": str(e)})


@router.get("", response_model=list[ChargingSession])
def list_sessions(state: StationState = Depends(get_station_state)):
    return state.get_sessions()


@router.post(
    "/priority",
    response_model=ActionResponse,
    responses={**NOT_FOUND, 422: {"model": ErrorResponse}},
)
def update_priority(
    req: Optional[PriorityRequest] = None,
    state: StationState = Depends(get_station_state),
):
    """
    Ägaren sätter ny prioritet. "High" triggar AI-boost (15 kW, +5 grid load).
    """
    if req is None:
        req = PriorityRequest()
    try:
        session, log = state.set_priority(req.ev_id, req.new_priority)
    except SessionNotFoundError as e:
        return _error(404, e)
    except InvalidPriorityError as e:
        return _error(422, e)
    return ActionResponse(message="Priority updated successfully", session=session, new_log=log)


@router.post("/toggle-ai", response_model=ActionResponse, responses=NOT_FOUND)
def toggle_ai(
    req: Optional[ToggleAiRequest] = None,
    state: StationState = Depends(get_station_state),
):
    if req is None:
        req = ToggleAiRequest()
    try:
        session, log = state.toggle_ai(req.charger_id)
    except SessionNotFoundError as e:
        return _error(404, e)
    return ActionResponse(message="AI Toggled successfully", session=session, new_log=log)


@router.post("/pause", response_model=ActionResponse, responses=NOT_FOUND)
def pause(
    req: Optional[PauseRequest] = None,
    state: StationState = Depends(get_station_state),
):
    if req is None:
        req = PauseRequest()
    try:
        session, log = state.pause_session(req.ev_id)
    except SessionNotFoundError as e:
        return _error(404, e)
    return ActionResponse(message="Charging paused successfully", session=session, new_log=log)
