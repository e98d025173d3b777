"""
app/services/station_state.py

Simulerad laddstation i minnet
------------------------------
Äger tre samlingar: stationsdata, laddsessioner och AI-loggen.
Skapas en gång vid uppstart (se lifespan i app/main.py) och nollställs
bara vid omstart. Ingen databas, ingen persistens.

"AI:n" är en fast sidoeffekt: sätts en session till High-prioritet
ökar grid_load med 5 och effekten sätts till 15.0 kW.

Samtidighet:
  - FastAPI kör synkrona endpoints i en trådpool. Alla läsningar och
    mutationer går därför via ett och samma lås, så att en request
    alltid appliceras helt innan nästa börjar.
"""

import logging
import threading
from datetime import datetime
from typing import Any

from app.models.station import AiLogEntry, ChargingSession, RevenueData, StationData
from app.core.revenue import calc_revenue

logger = logging.getLogger(__name__)

# ── Konstanter ────────────────────────────────────────────────────────────────

HIGH_PRIORITY = "High"
BOOST_POWER_KW = 15.0
BOOST_GRID_LOAD = 5

STATUS_PAUSED = "Paused by Owner"
STATUS_AI_OFF = "AI OFF (Manual Control)"
STATUS_AI_ON = "AI Active"

SESSION_NOT_FOUND = "EV Session not found"
CHARGER_NOT_FOUND = "Charger not found"
PRIORITY_REQUIRED = "newPriority must be a string"


# ── Fel ───────────────────────────────────────────────────────────────────────

class SessionNotFoundError(Exception):
    """Inget id/laddarnummer matchade någon session. Blir 404 i routen."""


class InvalidPriorityError(ValueError):
    """Sessionen finns men newPriority saknas eller är inte text. Blir 422."""


# ── Startdata ─────────────────────────────────────────────────────────────────

def _seed_station() -> StationData:
    return StationData(
        total_evs=12,
        chargers_in_use=8,
        chargers_available=4,
        grid_load=75,
        load_limit=100,
        power_consumed=55.0,
        ai_status="Active - Load Balancing",
        revenue_today=450.75,
        energy_cost_today=112.30,
        cost_savings_ai=35.10,
        peak_avoidance_savings=15.50,
    )


SEED_SESSIONS = [
    # (id, laddare, batteri, mål, avgång, prioritet, status, kW)
    ("EV-12", 1, 65, 80, "06:30 PM", "Low", "Slowing (Grid)", 5.5),
    ("EV-07", 3, 85, 95, "07:50 PM", "High", "Boosting", 15.0),
    ("EV-03", 5, 12, 100, "10:00 PM", "Low", "Active (Slow)", 3.0),
    ("EV-19", 8, 45, 90, "09:30 PM", "Medium", "Charging Normal", 7.7),
    ("EV-21", 2, 20, 80, "08:00 PM", "Medium", "Charging Normal", 7.0),
]


def _seed_sessions() -> list[ChargingSession]:
    return [
        ChargingSession(
            id=ev_id,
            charger=charger,
            battery=battery,
            target=target,
            departure=departure,
            priority=priority,
            status=status,
            power=power,
            ai_disabled=False,
        )
        for ev_id, charger, battery, target, departure, priority, status, power in SEED_SESSIONS
    ]


def _now_time() -> str:
    """Lokal tid som "HH:MM:SS" (24h), inget datum, ingen tidszon."""
    return datetime.now().strftime("%H:%M:%S")


# ── Tillståndsbehållare ───────────────────────────────────────────────────────

class StationState:
    def __init__(self):
        self._lock = threading.Lock()
        self.station = _seed_station()
        self.sessions = _seed_sessions()
        self.logs: list[AiLogEntry] = [
            AiLogEntry(
                time=_now_time(),
                type="Alert",
                message="⚠️ **Grid Load High** — slowing non-urgent charging.",
            ),
        ]

    # ── Läsningar ────────────────────────────────────────────────────────────

    def get_station_data(self) -> StationData:
        with self._lock:
            return self.station.model_copy()

    def get_sessions(self) -> list[ChargingSession]:
        with self._lock:
            return [s.model_copy() for s in self.sessions]

    def get_logs(self) -> list[AiLogEntry]:
        with self._lock:
            return [e.model_copy() for e in self.logs]

    def get_revenue(self) -> RevenueData:
        with self._lock:
            return calc_revenue(self.station)

    # ── Mutationer ───────────────────────────────────────────────────────────

    def set_priority(self, ev_id: Any, new_priority: Any) -> tuple[ChargingSession, AiLogEntry]:
        """
        Ägaren ändrar prioritet för en session.

        Vid "High" boostar AI:n direkt: +5 på grid_load och 15.0 kW.
        Boost-loggen läggs överst men returneras inte, bara den manuella.
        """
        with self._lock:
            session = self._find_by_id(ev_id)
            if not isinstance(new_priority, str):
                logger.warning(f"{ev_id}: ogiltig prioritet {new_priority!r}")
                raise InvalidPriorityError(PRIORITY_REQUIRED)
            session.priority = new_priority
            session.status = f"Owner set to {new_priority} Priority"

            log = self._add_log(f"Owner manually set **{ev_id}** to {new_priority} priority.")
            logger.info(f"{ev_id}: prioritet satt till {new_priority}")

            if new_priority == HIGH_PRIORITY:
                # Ingen övre gräns och ingen väg ner
                self.station.grid_load += BOOST_GRID_LOAD
                session.power = BOOST_POWER_KW
                self._add_log(f"AI boosts {ev_id} charging speed (safe adjustment).")
                logger.info(
                    f"{ev_id}: AI-boost till {BOOST_POWER_KW} kW, "
                    f"grid_load nu {self.station.grid_load}"
                )

            return session.model_copy(), log.model_copy()

    def toggle_ai(self, charger_id: Any) -> tuple[ChargingSession, AiLogEntry]:
        with self._lock:
            session = self._find_by_charger(charger_id)
            session.ai_disabled = not session.ai_disabled
            session.status = STATUS_AI_OFF if session.ai_disabled else STATUS_AI_ON

            action = "disabled" if session.ai_disabled else "enabled"
            log = self._add_log(f"Owner manually **{action}** AI for Charger #{charger_id}.")
            logger.info(f"Laddare #{charger_id}: AI {action}")
            return session.model_copy(), log.model_copy()

    def pause_session(self, ev_id: Any) -> tuple[ChargingSession, AiLogEntry]:
        with self._lock:
            session = self._find_by_id(ev_id)
            # Tidigare effekt sparas inte
            session.status = STATUS_PAUSED
            session.power = 0.0

            log = self._add_log(f"Owner manually **Paused** charging for **{ev_id}**.")
            logger.info(f"{ev_id}: laddning pausad")
            return session.model_copy(), log.model_copy()

    # ── Hjälpfunktioner (anropas med låset taget) ────────────────────────────

    def _find_by_id(self, ev_id) -> ChargingSession:
        # Linjär sökning, första träffen vinner vid dubbletter
        for session in self.sessions:
            if session.id == ev_id:
                return session
        logger.warning(f"Ingen session med id {ev_id!r}")
        raise SessionNotFoundError(SESSION_NOT_FOUND)

    def _find_by_charger(self, charger_id) -> ChargingSession:
        # Bara JSON-tal matchar: "3" och true är inte laddare 3 resp. 1
        is_number = isinstance(charger_id, (int, float)) and not isinstance(charger_id, bool)
        for session in self.sessions:
            if is_number and session.charger == charger_id:
                return session
        logger.warning(f"Ingen session på laddare {charger_id!r}")
        raise SessionNotFoundError(CHARGER_NOT_FOUND)

    def _add_log(self, message: str, log_type: str = "Action") -> AiLogEntry:
        entry = AiLogEntry(time=_now_time(), type=log_type, message=message)
        self.logs.insert(0, entry)
        return entry
