"""Booking ORM — persists a room reservation for an inclusive date range.

Invariants:
    - Always belongs to a Room (room_id FK)
    - start_date <= end_date, both inclusive
    - is_active=False is a soft cancel: the row stays, the room is freed

Design Decisions:
    - Date columns, not DateTime: bookings are whole days
    - customer_id kept as a plain integer: customers live outside this service
"""

from datetime import date

from sqlalchemy import Boolean, CheckConstraint, Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.core.domain_types import (
    Booking as BookingEntity, BookingId, RoomId,
)
from hotel_booking.db.base import Base


class Booking(Base):
    """Booking row."""
    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="ck_bookings_date_order"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rooms.id"), nullable=False, index=True,
    )
    customer_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )

    room: Mapped["Room"] = relationship("Room", back_populates="bookings")

    def to_domain(self) -> BookingEntity:
        return BookingEntity(
            id=BookingId(self.id),
            room_id=RoomId(self.room_id),
            start_date=self.start_date,
            end_date=self.end_date,
            is_active=self.is_active,
            customer_id=self.customer_id,
        )

    @classmethod
    def from_domain(cls, booking: BookingEntity) -> "Booking":
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            start_date=booking.start_date,
            end_date=booking.end_date,
            is_active=booking.is_active,
            customer_id=booking.customer_id,
        )
