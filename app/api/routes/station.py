"""
app/api/routes/station.py
Läs-endpoints för dashboarden: stationsdata, intäkter och AI-logg.
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_station_state
from app.models.station import AiLogEntry, RevenueData, StationData
from app.services.station_state import StationState

router = APIRouter(tags=["station"])


@router.get("/station-data", response_model=StationData)
def get_station_data(state: StationState = Depends(get_station_state)):
    return state.get_station_data()


@router.get("/revenue", response_model=RevenueData)
def get_revenue(state: StationState = Depends(get_station_state)):
    """totalProfit och savingsSolar skickas som text med 2 decimaler."""
    return state.get_revenue()


@router.get("/logs", response_model=list[AiLogEntry])
def get_logs(state: StationState = Depends(get_station_state)):
    # Senaste först
    return state.get_logs()
