"""Booking Engine Bootstrap — composition root wiring settings, DB and manager.

Invariants:
    - Logging configured and database reachable before the manager is handed out
    - Engine disposed and db_manager cleared on exit, even when the caller raises

Design Decisions:
    - Async context manager (lifespan-style): startup before yield, cleanup after
    - Schema creation opt-in via settings: production schemas come from alembic
    - Failed startup health check raises DatabaseError instead of yielding a
      manager whose first call would fail
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from hotel_booking.config import Settings, get_settings
from hotel_booking.core.errors import DatabaseError
from hotel_booking.infrastructure.database import close_db, init_db
from hotel_booking.infrastructure.observability import setup_logging
from hotel_booking.infrastructure.sql_repositories import (
    SqlBookingRepository, SqlRoomRepository,
)
from hotel_booking.services.booking_manager import BookingManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def booking_engine(
    settings: Settings | None = None,
) -> AsyncIterator[BookingManager]:
    """Startup/shutdown lifecycle around a SQL-backed BookingManager."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if settings.database_create_schema:
            await db.create_schema()
        if not await db.health_check():
            raise DatabaseError("Database unreachable at startup", "connect")

        manager = BookingManager(
            booking_repository=SqlBookingRepository(db),
            room_repository=SqlRoomRepository(db),
        )
        logger.info("Booking engine started")
        yield manager
    finally:
        logger.info("Booking engine shutting down")
        await close_db()
        logging.root.removeHandler(handler)
