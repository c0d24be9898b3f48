"""WebSocket endpoints: live vehicle stream and interactive trip sessions."""

import asyncio
import logging

import orjson
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.core.trip_session import TripSessionController
from app.schemas.trip import TripField, TripState
from app.schemas.vehicle import Coordinate

logger = logging.getLogger(__name__)

router = APIRouter()

# Will be set by main.py on startup
broadcaster = None
suggestion_client = None
planner = None


@router.websocket("/ws/vehicles")
async def vehicle_ws(websocket: WebSocket) -> None:
    """Stream real-time vehicle position updates."""
    await websocket.accept()

    if broadcaster is None:
        await websocket.close(code=1011, reason="Service not ready")
        return

    # Send current snapshot first
    state_data = await broadcaster.get_current_state()
    if state_data:
        snapshot = orjson.loads(state_data)
        snapshot["type"] = "snapshot"
        await websocket.send_bytes(orjson.dumps(snapshot))

    queue = broadcaster.subscribe()
    try:
        while True:
            data = await queue.get()
            await websocket.send_bytes(data)
    except WebSocketDisconnect:
        pass
    except asyncio.CancelledError:
        pass
    except Exception:
        logger.exception("WebSocket error")
    finally:
        broadcaster.unsubscribe(queue)


async def _send_states(websocket: WebSocket, outbox: asyncio.Queue) -> None:
    while True:
        state: TripState = await outbox.get()
        await websocket.send_bytes(orjson.dumps({"type": "state", "state": state.model_dump(mode="json")}))


def _dispatch(session: TripSessionController, message: dict, tasks: set[asyncio.Task]) -> None:
    kind = message["type"]
    if kind == "focus":
        session.focus(TripField(message["field"]))
    elif kind == "blur":
        session.blur()
    elif kind == "input":
        session.update_field(TripField(message["field"]), str(message["text"]))
    elif kind == "select":
        session.select_suggestion(str(message["text"]))
    elif kind == "location":
        session.location_found(Coordinate(**message["location"]))
    elif kind == "use_location":
        session.use_current_location(Coordinate(**message["location"]))
    elif kind == "location_denied":
        session.location_denied()
    elif kind == "plan":
        # Planning runs beside the receive loop so typing stays responsive
        task = asyncio.create_task(session.submit_plan())
        tasks.add(task)
        task.add_done_callback(tasks.discard)
    else:
        raise ValueError(f"Unknown message type: {kind}")


@router.websocket("/ws/trip")
async def trip_ws(websocket: WebSocket) -> None:
    """Drive one trip session; every state change is pushed back."""
    await websocket.accept()

    if suggestion_client is None or planner is None:
        await websocket.close(code=1011, reason="Service not ready")
        return

    outbox: asyncio.Queue = asyncio.Queue()
    session = TripSessionController(suggestion_client, planner, listener=outbox.put_nowait)
    tasks: set[asyncio.Task] = set()
    sender = asyncio.create_task(_send_states(websocket, outbox))
    outbox.put_nowait(session.state)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                _dispatch(session, orjson.loads(raw), tasks)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Ignoring malformed trip message %r: %s", raw[:200], e)
    except WebSocketDisconnect:
        pass
    except asyncio.CancelledError:
        pass
    except Exception:
        logger.exception("Trip WebSocket error")
    finally:
        sender.cancel()
        for task in tasks:
            task.cancel()
        await asyncio.gather(sender, *tasks, return_exceptions=True)
        await session.close()
