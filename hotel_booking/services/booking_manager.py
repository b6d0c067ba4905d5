"""Booking Manager — async orchestration of availability, occupancy and creation.

Invariants:
    - Stateless: holds repositories and a clock, never a copy of the inventory
    - The caller's booking request is only updated after add() returns
    - Date-range validation happens before any repository call
    - create_booking persists at most one booking, and only when a room was found
    - Repository errors propagate unchanged (no retry, no local recovery)

Design Decisions:
    - Impureim sandwich: await listings, call core.occupancy, await add
    - today injected as a callable: "strictly in the future" is evaluated per call
    - No locking: check-then-add against concurrent callers is an accepted race
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from hotel_booking.core.domain_types import Booking, RoomId, NO_ROOM_AVAILABLE
from hotel_booking.core.errors import InvalidArgumentError
from hotel_booking.core.occupancy import (
    find_free_room,
    fully_occupied_dates,
    validate_booking_window,
    validate_date_range,
)
from hotel_booking.core.repository_protocols import (
    BookingRepository, RoomRepository,
)

logger = logging.getLogger(__name__)


class BookingManager:
    """Decides room availability and records new bookings."""

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        today: Callable[[], date] = date.today,
    ):
        self.booking_repository = booking_repository
        self.room_repository = room_repository
        self._today = today

    async def find_available_room(self, start_date: date, end_date: date) -> RoomId:
        """Id of the first free room for the range, or NO_ROOM_AVAILABLE (-1)."""
        try:
            validate_booking_window(start_date, end_date, self._today())
        except InvalidArgumentError:
            logger.warning(
                "Rejected availability query",
                extra={"start_date": str(start_date), "end_date": str(end_date)},
            )
            raise

        rooms = await self.room_repository.get_all()
        bookings = await self.booking_repository.get_all()
        room_id = find_free_room(rooms, bookings, start_date, end_date)

        if room_id == NO_ROOM_AVAILABLE:
            logger.info(
                "No room available",
                extra={"start_date": str(start_date), "end_date": str(end_date)},
            )
        else:
            logger.debug(
                f"Room {room_id} available",
                extra={
                    "room_id": room_id,
                    "start_date": str(start_date),
                    "end_date": str(end_date),
                },
            )
        return room_id

    async def get_fully_occupied_dates(
        self, start_date: date, end_date: date,
    ) -> list[date]:
        """Dates in [start_date, end_date] on which every room is booked.

        Historical ranges are allowed; only start <= end is enforced.
        """
        validate_date_range(start_date, end_date)

        rooms = await self.room_repository.get_all()
        bookings = await self.booking_repository.get_all()
        return fully_occupied_dates(rooms, bookings, start_date, end_date)

    async def create_booking(self, booking: Booking) -> bool:
        """Assign a free room and persist the booking. False if fully booked.

        The request is only updated once the repository accepted the booking;
        a failing add() leaves it untouched.
        """
        room_id = await self.find_available_room(
            booking.start_date, booking.end_date,
        )
        if room_id == NO_ROOM_AVAILABLE:
            return False

        persisted = replace(booking, room_id=room_id, is_active=True)
        await self.booking_repository.add(persisted)

        booking.room_id = persisted.room_id
        booking.is_active = persisted.is_active
        booking.id = persisted.id

        logger.info(
            f"Booking created for room {room_id}",
            extra={
                "room_id": room_id,
                "booking_id": booking.id,
                "start_date": str(booking.start_date),
                "end_date": str(booking.end_date),
            },
        )
        return True
