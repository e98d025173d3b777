"""
app/models/station.py

Datamodeller för laddstationens dashboard.
Python-sidan använder snake_case, JSON-sidan camelCase med exakt de nycklar
som frontend förväntar sig (totalEVs, costSavingsAI, aiDisabled ...).
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Station ───────────────────────────────────────────────────────────────────

class StationData(CamelModel):
    # to_camel ger "totalEvs" / "costSavingsAi", frontend vill ha versaler
    total_evs: int = Field(alias="totalEVs")
    chargers_in_use: int
    chargers_available: int
    grid_load: Union[int, float]  # ingen spärr mot load_limit
    load_limit: Union[int, float]
    power_consumed: float         # kW
    ai_status: str
    revenue_today: float
    energy_cost_today: float
    cost_savings_ai: float = Field(alias="costSavingsAI")
    peak_avoidance_savings: float


class RevenueData(StationData):
    total_profit: str             # 2 decimaler som text
    savings_solar: str


# ── Sessioner ─────────────────────────────────────────────────────────────────

class ChargingSession(CamelModel):
    id: str
    charger: int
    battery: int                  # %, valideras inte
    target: int
    departure: str                # "06:30 PM"
    priority: str                 # Low | Medium | High
    status: str
    power: float                  # kW
    ai_disabled: bool = False


# ── AI-logg ───────────────────────────────────────────────────────────────────

class AiLogEntry(CamelModel):
    time: str                     # "HH:MM:SS", lokal tid
    type: str                     # Alert | Action
    message: str
