from fastapi import Request

from app.services.station_state import StationState


def get_station_state(request: Request) -> StationState:
    """Tillståndet skapas i lifespan och ligger på app.state"""
    return request.app.state.station
