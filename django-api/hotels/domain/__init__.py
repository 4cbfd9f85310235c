from hotels.domain.models import Hotel, Room, Ticket, TicketStatus, TicketType
from hotels.domain.value_objects import (
    Capacity,
    HotelId,
    Money,
    RoomId,
    TicketId,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Hotel",
    "Room",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "HotelId",
    "RoomId",
    "TicketId",
    "TicketTypeId",
    "UserId",
    "Money",
    "Capacity",
]
