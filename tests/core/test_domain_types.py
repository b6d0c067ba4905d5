"""Domain Types — verifies room/booking records and the no-room sentinel.

Tests:
    - NO_ROOM_AVAILABLE is -1
    - Room is immutable
    - Booking request defaults: no room, inactive, no id
    - Booking.covers is inclusive on both ends
"""

import dataclasses
from datetime import date

import pytest

from hotel_booking.core.domain_types import (
    Booking, BookingId, Room, RoomId, NO_ROOM_AVAILABLE,
)


def test_no_room_sentinel_is_minus_one():
    assert NO_ROOM_AVAILABLE == -1


def test_identity_types_wrap_int():
    assert RoomId(3) == 3
    assert BookingId(7) == 7


def test_room_is_frozen():
    room = Room(RoomId(1), "Sea view")
    with pytest.raises(dataclasses.FrozenInstanceError):
        room.description = "Garden view"


def test_booking_request_defaults():
    booking = Booking(start_date=date(2025, 5, 1), end_date=date(2025, 5, 3))
    assert booking.room_id is None
    assert booking.is_active is False
    assert booking.id is None
    assert booking.customer_id is None


def test_booking_covers_both_ends():
    booking = Booking(start_date=date(2025, 5, 1), end_date=date(2025, 5, 3))
    assert booking.covers(date(2025, 5, 1))
    assert booking.covers(date(2025, 5, 3))
    assert not booking.covers(date(2025, 4, 30))
    assert not booking.covers(date(2025, 5, 4))
