"""Domain Types — the room and booking records the decision logic works on.

Invariants:
    - Room is immutable once created (frozen dataclass)
    - Booking dates are inclusive on both ends: start_date <= D <= end_date
    - Only active bookings occupy a room; inactive ones are soft-cancelled
    - NO_ROOM_AVAILABLE (-1) is the single source of truth for "no capacity"

Design Decisions:
    - Plain dataclasses, not ORM rows: core never imports SQLAlchemy
    - NewType ids: zero runtime cost, full type-checker support
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RoomId = NewType("RoomId", int)
BookingId = NewType("BookingId", int)

NO_ROOM_AVAILABLE: RoomId = RoomId(-1)


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Room:
    """Bookable room, lifecycle owned by the room repository."""
    id: RoomId
    description: str = ""


@dataclass
class Booking:
    """Booking of one room for an inclusive date range.

    A booking request arrives with only the dates set; ``room_id`` and
    ``is_active`` are filled in by the manager, ``id`` by the repository.
    """
    start_date: date
    end_date: date
    room_id: RoomId | None = None
    is_active: bool = False
    customer_id: int | None = None
    id: BookingId | None = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
