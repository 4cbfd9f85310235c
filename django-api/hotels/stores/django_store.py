"""Django ORM implementation of the ticket and hotel stores."""

import logging

from django.db import DatabaseError

from hotels import models
from hotels.domain import (
    Capacity,
    Hotel,
    HotelId,
    Money,
    Room,
    RoomId,
    Ticket,
    TicketId,
    TicketType,
    TicketTypeId,
    UserId,
)
from hotels.domain.errors import StoreUnavailableError
from hotels.stores.interfaces import HotelStore, TicketStore

logger = logging.getLogger(__name__)


def _to_ticket(row: models.Ticket) -> Ticket:
    ticket_type = row.ticket_type
    return Ticket(
        id=TicketId(row.id),
        status=row.status,
        ticket_type=TicketType(
            id=TicketTypeId(ticket_type.id),
            name=ticket_type.name,
            price=Money(ticket_type.price),
            is_remote=ticket_type.is_remote,
            includes_hotel=ticket_type.includes_hotel,
        ),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_room(row: models.Room) -> Room:
    return Room(
        id=RoomId(row.id),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    def find_ticket_by_user_id(self, user_id: UserId) -> Ticket | None:
        try:
            row = (
                models.Ticket.objects.select_related("ticket_type")
                .filter(enrollment__user_id=user_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Ticket lookup failed", extra={"user_id": user_id.value})
            raise StoreUnavailableError() from exc
        if row is None:
            return None
        return _to_ticket(row)


class DjangoHotelStore(HotelStore):
    """Relational hotel store using Django ORM."""

    def find_hotels(self) -> list[Hotel]:
        try:
            rows = list(models.Hotel.objects.order_by("id"))
        except DatabaseError as exc:
            logger.exception("Hotel listing failed")
            raise StoreUnavailableError() from exc
        return [_to_hotel(row) for row in rows]

    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        try:
            row = (
                models.Hotel.objects.prefetch_related("rooms")
                .filter(pk=hotel_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Hotel lookup failed", extra={"hotel_id": hotel_id.value})
            raise StoreUnavailableError() from exc
        if row is None:
            return None
        rooms = tuple(_to_room(room) for room in row.rooms.all())
        return _to_hotel(row, rooms)
