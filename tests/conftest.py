"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Tests never reach a real PostgreSQL server
    - TODAY is fixed so "strictly in the future" checks are deterministic
"""

import os

import pytest

from tests.fakes import TODAY, FakeBookingRepository, FakeRoomRepository
from hotel_booking.core.domain_types import Room, RoomId
from hotel_booking.services.booking_manager import BookingManager

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)


@pytest.fixture
def rooms():
    return FakeRoomRepository([
        Room(id=RoomId(1), description="Room A"),
        Room(id=RoomId(2), description="Room B"),
    ])


@pytest.fixture
def bookings():
    return FakeBookingRepository()


@pytest.fixture
def manager(bookings, rooms):
    return BookingManager(bookings, rooms, today=lambda: TODAY)
