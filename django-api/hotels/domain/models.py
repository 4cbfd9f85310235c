"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from hotels.domain.value_objects import (
    Capacity,
    HotelId,
    Money,
    RoomId,
    TicketId,
    TicketTypeId,
)


class TicketStatus(Enum):
    """Known payment statuses of a ticket.

    Upstream systems may store other values; anything but PAID is unpaid.
    """

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket with its TicketType."""

    id: TicketId
    status: str
    ticket_type: TicketType
    created_at: datetime
    updated_at: datetime

    @property
    def is_paid(self) -> bool:
        return self.status == TicketStatus.PAID.value

    @property
    def grants_hotel_access(self) -> bool:
        """A ticket grants hotel access once paid, if its type includes a hotel."""
        return self.is_paid and self.ticket_type.includes_hotel


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: RoomId
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel.

    ``rooms`` is only populated when the hotel was loaded with its rooms.
    """

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] = ()
