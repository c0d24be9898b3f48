"""Diagnostics API for the simulation and reasoning service wiring."""

from fastapi import APIRouter

router = APIRouter(prefix="/api/diagnostics", tags=["diagnostics"])

# Will be set by main.py
clock = None
broadcaster = None
service = None


@router.get("")
async def get_diagnostics():
    """Simulation tick, fleet size, subscriber count and service config."""
    if clock is None:
        return {"error": "Simulation not initialized"}
    return {
        "session_id": clock.session_id,
        "tick": clock.tick,
        "running": clock.running,
        "vehicles": len(clock.current_vehicles),
        "subscribers": broadcaster.subscriber_count if broadcaster else 0,
        "reasoning_configured": bool(service and service.configured),
    }
