"""Room ORM — persists the bookable room inventory.

Invariants:
    - id is an integer primary key (autoincrement); -1 is never a valid id
    - description is non-nullable text (empty string allowed)
    - Loading rooms never loads bookings; deleting a room never deletes bookings
      (the FK keeps history, a booking is retired by is_active=False)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.core.domain_types import Room as RoomEntity, RoomId
from hotel_booking.db.base import Base


class Room(Base):
    """Room row."""
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    description: Mapped[str] = mapped_column(
        String(200), nullable=False, default="",
    )

    bookings: Mapped[list["Booking"]] = relationship(
        "Booking", back_populates="room",
        lazy="raise", passive_deletes=True,
    )

    def to_domain(self) -> RoomEntity:
        return RoomEntity(id=RoomId(self.id), description=self.description)
