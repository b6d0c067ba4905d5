"""ORM Models — SQLAlchemy declarative models for rooms and bookings.

Invariants:
    - All models inherit from Base (db/base.py)
    - Room owns its bookings; bookings are scoped by room_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from hotel_booking.models.room import Room  # noqa: F401
from hotel_booking.models.booking import Booking  # noqa: F401
