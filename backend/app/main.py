"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import diagnostics, routes, trips, vehicles, ws
from app.config import settings
from app.core.broadcaster import Broadcaster
from app.core.network import FLEET
from app.core.reasoning import ReasoningService
from app.core.route_planner import RoutePlanningClient
from app.core.scheduler import create_scheduler
from app.core.simulation import SimulationClock
from app.core.suggestion_client import SuggestionClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    broadcaster = Broadcaster()
    await broadcaster.connect()

    service = ReasoningService()
    if not service.configured:
        logger.warning("GEMINI_API_KEY not set - suggestions disabled, planning will fail")
    suggestion_client = SuggestionClient(service)
    planner = RoutePlanningClient(service)

    clock = SimulationClock(
        FLEET,
        publisher=broadcaster,
        interval_seconds=settings.tick_interval_ms / 1000,
    )

    # Wire up API modules
    ws.broadcaster = broadcaster
    ws.suggestion_client = suggestion_client
    ws.planner = planner
    vehicles.clock = clock
    trips.suggestion_client = suggestion_client
    trips.planner = planner
    diagnostics.clock = clock
    diagnostics.broadcaster = broadcaster
    diagnostics.service = service

    scheduler = create_scheduler(clock)
    scheduler.start()
    logger.info("Transit planner started - %d simulated vehicles", len(FLEET))

    yield

    # Shutdown
    clock.stop()
    scheduler.shutdown(wait=False)
    await broadcaster.close()
    logger.info("Transit planner shut down")


app = FastAPI(
    title="Franklin County Transit Planner",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)
app.include_router(vehicles.router)
app.include_router(trips.router)
app.include_router(diagnostics.router)
app.include_router(ws.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
