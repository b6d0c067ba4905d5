"""Occupancy Rules — pure availability and full-occupancy computation.

Invariants:
    - All functions are PURE: inputs are in-memory snapshots, nothing is mutated
    - Inactive bookings never block a room and never count toward occupancy
    - Ranges are inclusive on both ends; overlap is b.start <= end and b.end >= start
    - A date is fully occupied only if the room set is non-empty and every room
      has an active booking covering it

Design Decisions:
    - Separate from services/booking_manager: the shell awaits repositories,
      these functions decide (ADR: impureim sandwich)
    - Validation raises InvalidArgumentError instead of returning an error dict:
      a malformed range is a caller bug, not a domain outcome
"""

from collections.abc import Iterable, Iterator
from datetime import date, timedelta

from hotel_booking.core.domain_types import (
    Booking, Room, RoomId, NO_ROOM_AVAILABLE,
)
from hotel_booking.core.errors import InvalidArgumentError

ONE_DAY = timedelta(days=1)


def validate_date_range(start_date: date, end_date: date) -> None:
    """Reject ranges where start comes after end."""
    if start_date > end_date:
        raise InvalidArgumentError(
            f"start_date {start_date.isoformat()} is later than "
            f"end_date {end_date.isoformat()}",
            "start_date",
        )


def validate_booking_window(start_date: date, end_date: date, today: date) -> None:
    """Forward-looking ranges must start strictly after today and be ordered."""
    if start_date <= today:
        raise InvalidArgumentError(
            f"start_date {start_date.isoformat()} must be later than "
            f"today ({today.isoformat()})",
            "start_date",
        )
    validate_date_range(start_date, end_date)


def active_bookings(bookings: Iterable[Booking]) -> list[Booking]:
    return [b for b in bookings if b.is_active]


def overlaps(booking: Booking, start_date: date, end_date: date) -> bool:
    """True if the booking's inclusive range intersects [start_date, end_date]."""
    return booking.start_date <= end_date and booking.end_date >= start_date


def find_free_room(
    rooms: Iterable[Room],
    bookings: Iterable[Booking],
    start_date: date,
    end_date: date,
) -> RoomId:
    """Id of the first room (in the given order) free for the whole range.

    Returns NO_ROOM_AVAILABLE when every room has an overlapping active booking.
    """
    blocked = {
        b.room_id for b in active_bookings(bookings)
        if overlaps(b, start_date, end_date)
    }
    for room in rooms:
        if room.id not in blocked:
            return room.id
    return NO_ROOM_AVAILABLE


def iter_dates(start_date: date, end_date: date) -> Iterator[date]:
    day = start_date
    while day <= end_date:
        yield day
        day += ONE_DAY


def fully_occupied_dates(
    rooms: Iterable[Room],
    bookings: Iterable[Booking],
    start_date: date,
    end_date: date,
) -> list[date]:
    """Ascending dates in [start_date, end_date] on which every room is booked."""
    room_ids = {room.id for room in rooms}
    if not room_ids:
        return []

    relevant = [
        b for b in active_bookings(bookings)
        if b.room_id in room_ids and overlaps(b, start_date, end_date)
    ]
    if not relevant:
        return []

    occupied: list[date] = []
    for day in iter_dates(start_date, end_date):
        booked_rooms = {b.room_id for b in relevant if b.covers(day)}
        if booked_rooms == room_ids:
            occupied.append(day)
    return occupied
