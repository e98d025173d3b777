"""
app/models/actions.py

Request- och responsmodeller för dashboardens åtgärder.

Id-fälten tas emot som rå JSON (Any) och jämförs exakt i StationState.
Saknas de, eller har fel typ, hittas ingen session och routen svarar 404,
precis som för ett okänt id.
"""

from typing import Any

from app.models.station import AiLogEntry, ChargingSession, CamelModel


class PriorityRequest(CamelModel):
    ev_id: Any = None
    new_priority: Any = None      # måste vara str om sessionen finns


class ToggleAiRequest(CamelModel):
    # Ingen koercering: "3" och true ska INTE matcha laddare 3 resp. 1
    charger_id: Any = None


class PauseRequest(CamelModel):
    ev_id: Any = None


class ActionResponse(CamelModel):
    message: str
    session: ChargingSession
    new_log: AiLogEntry


class ErrorResponse(CamelModel):
    message: str
