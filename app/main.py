import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.routes import station, sessions
from app.config import settings
from app.services.station_state import StationState

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Ett tillstånd per process, nollställs vid omstart
    app.state.station = StationState()
    logger.info(f"⚡ Backend running on http://{settings.host}:{settings.port}")
    yield


app = FastAPI(
    title="EV Station Mock API",
    description="Simulerad backend för laddstationens dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(station.router, prefix="/api")
app.include_router(sessions.router, prefix="/api")

@app.get("/health")
def health():
    return {"status": "ok", "service": "ev-station-mock-api"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
