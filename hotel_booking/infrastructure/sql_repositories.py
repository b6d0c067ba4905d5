"""SQL Repositories — RoomRepository and BookingRepository over async SQLAlchemy.

Invariants:
    - Every call opens its own session from DatabaseSessionManager (auto-rollback)
    - get_all orders by primary key: the manager scans rooms in that order
    - Domain objects in and out; ORM rows never leave this module
    - edit/remove of a missing id raise ResourceNotFoundError

Design Decisions:
    - Session per call, not per manager: the manager is stateless and may be
      shared across concurrent callers
    - add() writes the generated booking id back onto the domain object
"""

import logging

from sqlalchemy import select

from hotel_booking.core.domain_types import (
    Booking, BookingId, Room,
)
from hotel_booking.core.errors import ResourceNotFoundError
from hotel_booking.infrastructure.database import DatabaseSessionManager
from hotel_booking.models.booking import Booking as BookingModel
from hotel_booking.models.room import Room as RoomModel

logger = logging.getLogger(__name__)


class _SqlRepository:
    """Shared read/delete paths keyed on the ORM model's integer id."""

    model: type[RoomModel] | type[BookingModel]
    resource_type: str

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    async def get_all(self) -> list:
        async with self.db.session() as session:
            result = await session.execute(
                select(self.model).order_by(self.model.id),
            )
            return [row.to_domain() for row in result.scalars().all()]

    async def get_by_id(self, entity_id: int):
        async with self.db.session() as session:
            row = await session.get(self.model, entity_id)
            return row.to_domain() if row else None

    async def remove(self, entity_id: int) -> None:
        async with self.db.session() as session:
            row = await session.get(self.model, entity_id)
            if row is None:
                raise ResourceNotFoundError(self.resource_type, entity_id)
            await session.delete(row)
            await session.commit()
        logger.info(f"{self.resource_type} {entity_id} removed")


class SqlRoomRepository(_SqlRepository):
    """Room inventory backed by the `rooms` table."""

    model = RoomModel
    resource_type = "Room"

    async def get_all(self) -> list[Room]:
        return await super().get_all()

    async def get_by_id(self, entity_id: int) -> Room | None:
        return await super().get_by_id(entity_id)

    async def add(self, entity: Room) -> None:
        async with self.db.session() as session:
            session.add(RoomModel(id=entity.id, description=entity.description))
            await session.commit()

    async def edit(self, entity: Room) -> None:
        async with self.db.session() as session:
            row = await session.get(RoomModel, entity.id)
            if row is None:
                raise ResourceNotFoundError(self.resource_type, entity.id)
            row.description = entity.description
            await session.commit()


class SqlBookingRepository(_SqlRepository):
    """Booking store backed by the `bookings` table."""

    model = BookingModel
    resource_type = "Booking"

    async def get_all(self) -> list[Booking]:
        return await super().get_all()

    async def get_by_id(self, entity_id: int) -> Booking | None:
        return await super().get_by_id(entity_id)

    async def add(self, entity: Booking) -> None:
        async with self.db.session() as session:
            row = BookingModel.from_domain(entity)
            session.add(row)
            await session.commit()
            entity.id = BookingId(row.id)
        logger.debug(
            "Booking persisted",
            extra={"booking_id": entity.id, "room_id": entity.room_id},
        )

    async def edit(self, entity: Booking) -> None:
        async with self.db.session() as session:
            row = None
            if entity.id is not None:
                row = await session.get(BookingModel, entity.id)
            if row is None:
                raise ResourceNotFoundError(self.resource_type, entity.id)
            row.room_id = entity.room_id
            row.customer_id = entity.customer_id
            row.start_date = entity.start_date
            row.end_date = entity.end_date
            row.is_active = entity.is_active
            await session.commit()
