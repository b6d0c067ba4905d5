"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - get_all returns entities in a stable order (rooms are scanned in that order)

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory doubles need no base class
    - Async in Protocol: boundary methods are async because implementations do IO,
      the pure functions in core.occupancy never are
"""

from typing import Protocol, TypeVar

from hotel_booking.core.domain_types import Booking, Room

T = TypeVar("T")


class Repository(Protocol[T]):
    """Generic entity store — implemented by shell."""
    async def get_all(self) -> list[T]: ...
    async def get_by_id(self, entity_id: int) -> T | None: ...
    async def add(self, entity: T) -> None: ...
    async def edit(self, entity: T) -> None: ...
    async def remove(self, entity_id: int) -> None: ...


class RoomRepository(Repository[Room], Protocol):
    """Contract for room inventory — implemented by shell."""


class BookingRepository(Repository[Booking], Protocol):
    """Contract for booking persistence — implemented by shell."""
