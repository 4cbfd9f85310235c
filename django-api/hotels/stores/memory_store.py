"""In-memory stores for tests and local wiring."""

from dataclasses import replace

from hotels.domain import Hotel, HotelId, Room, Ticket, UserId
from hotels.stores.interfaces import HotelStore, TicketStore


class InMemoryTicketStore(TicketStore):
    def __init__(self, tickets: dict[int, Ticket] | None = None) -> None:
        self._tickets = dict(tickets or {})

    def add(self, user_id: int, ticket: Ticket) -> None:
        self._tickets[user_id] = ticket

    def find_ticket_by_user_id(self, user_id: UserId) -> Ticket | None:
        return self._tickets.get(user_id.value)


class InMemoryHotelStore(HotelStore):
    def __init__(self) -> None:
        self._hotels: dict[int, Hotel] = {}
        self._rooms: dict[int, list[Room]] = {}

    def add_hotel(self, hotel: Hotel) -> None:
        self._hotels[hotel.id.value] = replace(hotel, rooms=())
        self._rooms.setdefault(hotel.id.value, []).extend(hotel.rooms)

    def add_room(self, room: Room) -> None:
        self._rooms.setdefault(room.hotel_id.value, []).append(room)

    def find_hotels(self) -> list[Hotel]:
        return [self._hotels[key] for key in sorted(self._hotels)]

    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        hotel = self._hotels.get(hotel_id.value)
        if hotel is None:
            return None
        rooms = sorted(self._rooms.get(hotel_id.value, []), key=lambda room: room.id.value)
        return replace(hotel, rooms=tuple(rooms))
