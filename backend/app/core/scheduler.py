"""APScheduler setup for periodic tasks."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)


def create_scheduler(clock) -> AsyncIOScheduler:
    """Create the scheduler and register the simulation clock on it."""
    scheduler = AsyncIOScheduler()

    # Advance simulated vehicles every tick_interval_ms
    clock.start(scheduler)

    return scheduler
