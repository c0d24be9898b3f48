"""Fan-out of vehicle snapshots to WebSocket subscribers and Redis."""

import asyncio
import logging

import orjson
import redis.asyncio as aioredis

from app.config import settings

logger = logging.getLogger(__name__)

CHANNEL = "transit:vehicles"
STATE_KEY = "transit:state"


class Broadcaster:
    """Publishes vehicle state to Redis and manages WebSocket subscribers."""

    def __init__(self, redis_url: str | None = None) -> None:
        self._redis_url = settings.redis_url if redis_url is None else redis_url
        self._redis: aioredis.Redis | None = None
        self._subscribers: set[asyncio.Queue] = set()
        self._last_payload: bytes | None = None

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def connect(self) -> None:
        if not self._redis_url:
            logger.info("No REDIS_URL configured - broadcasting in-process only")
            return
        self._redis = aioredis.from_url(self._redis_url, decode_responses=False)

    async def close(self) -> None:
        if self._redis:
            await self._redis.aclose()

    async def publish(self, vehicles_data: list[dict]) -> None:
        """Publish vehicle state update to Redis and fan out to WebSocket subscribers."""
        payload = orjson.dumps({"type": "update", "vehicles": vehicles_data})
        self._last_payload = payload

        if self._redis:
            try:
                # Store current state for new connections
                await self._redis.set(STATE_KEY, payload)
                await self._redis.publish(CHANNEL, payload)
            except Exception:
                logger.exception("Failed to publish to Redis")

        dead = set()
        for q in self._subscribers:
            try:
                q.put_nowait(payload)
            except asyncio.QueueFull:
                dead.add(q)
        self._subscribers -= dead

    async def get_current_state(self) -> bytes | None:
        """Latest vehicle snapshot, from Redis when available."""
        if self._redis:
            try:
                data = await self._redis.get(STATE_KEY)
                if data:
                    return data
            except Exception:
                logger.exception("Failed to get state from Redis")
        return self._last_payload

    def subscribe(self) -> asyncio.Queue:
        """Create a new subscriber queue for WebSocket fan-out."""
        q: asyncio.Queue = asyncio.Queue(maxsize=10)
        self._subscribers.add(q)
        return q

    def unsubscribe(self, q: asyncio.Queue) -> None:
        self._subscribers.discard(q)
