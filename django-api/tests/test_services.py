"""Unit tests for HotelService.

These test eligibility rules and domain error mapping over in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from hotels.domain import (
    Capacity,
    Hotel,
    HotelId,
    Money,
    Room,
    RoomId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
)
from hotels.domain.errors import (
    HotelNotFoundError,
    PaymentRequiredError,
    TicketNotFoundError,
)
from hotels.services import HotelService
from hotels.stores import InMemoryHotelStore, InMemoryTicketStore

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)
USER_ID = 7
UNPAID = TicketStatus.RESERVED.value
UNPAID_STATUSES = [TicketStatus.RESERVED.value, "CANCELLED", "PENDING"]


def ticket(status: str = TicketStatus.PAID.value, includes_hotel: bool = True) -> Ticket:
    return Ticket(
        id=TicketId(1),
        status=status,
        ticket_type=TicketType(
            id=TicketTypeId(1),
            name="Presencial + Hotel",
            price=Money(Decimal("600.00")),
            is_remote=False,
            includes_hotel=includes_hotel,
        ),
        created_at=NOW,
        updated_at=NOW,
    )


def hotel(hotel_id: int, name: str) -> Hotel:
    return Hotel(
        id=HotelId(hotel_id),
        name=name,
        image=f"https://images.example.com/{hotel_id}.jpg",
        created_at=NOW,
        updated_at=NOW,
    )


def room(room_id: int, hotel_id: int, name: str, capacity: int = 2) -> Room:
    return Room(
        id=RoomId(room_id),
        hotel_id=HotelId(hotel_id),
        name=name,
        capacity=Capacity(capacity),
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.fixture
def tickets() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def hotels() -> InMemoryHotelStore:
    return InMemoryHotelStore()


@pytest.fixture
def service(tickets, hotels) -> HotelService:
    return HotelService(tickets=tickets, hotels=hotels)


class TestCheckEligibility:
    def test_no_ticket_raises_not_found(self, service):
        with pytest.raises(TicketNotFoundError):
            service.check_eligibility(USER_ID)

    @pytest.mark.parametrize("status", UNPAID_STATUSES)
    @pytest.mark.parametrize("includes_hotel", [True, False])
    def test_unpaid_ticket_raises_payment_required(self, service, tickets, status, includes_hotel):
        tickets.add(USER_ID, ticket(status, includes_hotel))

        with pytest.raises(PaymentRequiredError):
            service.check_eligibility(USER_ID)

    def test_paid_ticket_without_hotel_raises_payment_required(self, service, tickets):
        tickets.add(USER_ID, ticket(TicketStatus.PAID.value, includes_hotel=False))

        with pytest.raises(PaymentRequiredError):
            service.check_eligibility(USER_ID)

    def test_paid_ticket_with_hotel_returns_ticket(self, service, tickets):
        paid = ticket()
        tickets.add(USER_ID, paid)

        assert service.check_eligibility(USER_ID) == paid

    def test_ticket_of_another_user_is_ignored(self, service, tickets):
        tickets.add(USER_ID + 1, ticket())

        with pytest.raises(TicketNotFoundError):
            service.check_eligibility(USER_ID)


class TestListHotels:
    def test_no_ticket_raises_not_found(self, service, hotels):
        hotels.add_hotel(hotel(1, "Marriott"))

        with pytest.raises(TicketNotFoundError):
            service.list_hotels(USER_ID)

    @pytest.mark.parametrize("status", UNPAID_STATUSES)
    def test_unpaid_ticket_raises_payment_required(self, service, tickets, status):
        tickets.add(USER_ID, ticket(status))

        with pytest.raises(PaymentRequiredError):
            service.list_hotels(USER_ID)

    def test_empty_store_returns_empty_list(self, service, tickets):
        tickets.add(USER_ID, ticket())

        assert service.list_hotels(USER_ID) == []

    def test_returns_all_hotels_without_rooms(self, service, tickets, hotels):
        tickets.add(USER_ID, ticket())
        hotels.add_hotel(hotel(2, "Ibis"))
        hotels.add_hotel(hotel(1, "Marriott"))
        hotels.add_room(room(10, 1, "Suite 101"))

        result = service.list_hotels(USER_ID)

        assert [h.name for h in result] == ["Marriott", "Ibis"]
        assert all(h.rooms == () for h in result)


class TestGetHotelWithRooms:
    def test_no_ticket_raises_not_found_before_hotel_lookup(self, service, hotels):
        hotels.add_hotel(hotel(1, "Marriott"))

        with pytest.raises(TicketNotFoundError):
            service.get_hotel_with_rooms(USER_ID, "1")

    def test_ineligible_ticket_raises_payment_required(self, service, tickets, hotels):
        tickets.add(USER_ID, ticket(TicketStatus.PAID.value, includes_hotel=False))
        hotels.add_hotel(hotel(1, "Marriott"))

        with pytest.raises(PaymentRequiredError):
            service.get_hotel_with_rooms(USER_ID, "1")

    def test_ineligible_ticket_wins_over_malformed_hotel_id(self, service, tickets):
        tickets.add(USER_ID, ticket(UNPAID))

        with pytest.raises(PaymentRequiredError):
            service.get_hotel_with_rooms(USER_ID, "abc")

    @pytest.mark.parametrize("hotel_id", ["0", "-1", "abc", "999"])
    def test_unknown_hotel_raises_not_found(self, service, tickets, hotels, hotel_id):
        tickets.add(USER_ID, ticket())
        hotels.add_hotel(hotel(1, "Marriott"))

        with pytest.raises(HotelNotFoundError):
            service.get_hotel_with_rooms(USER_ID, hotel_id)

    @pytest.mark.parametrize("hotel_id", ["1_0", "+10", " 10", "１０"])
    def test_loosely_formatted_id_does_not_resolve_to_a_hotel(self, service, tickets, hotels, hotel_id):
        tickets.add(USER_ID, ticket())
        hotels.add_hotel(hotel(10, "Marriott"))

        with pytest.raises(HotelNotFoundError):
            service.get_hotel_with_rooms(USER_ID, hotel_id)

    def test_returns_hotel_with_all_rooms(self, service, tickets, hotels):
        tickets.add(USER_ID, ticket())
        hotels.add_hotel(hotel(1, "Marriott"))
        hotels.add_hotel(hotel(2, "Ibis"))
        hotels.add_room(room(11, 1, "Suite 102", capacity=3))
        hotels.add_room(room(10, 1, "Suite 101"))
        hotels.add_room(room(12, 2, "Standard"))

        result = service.get_hotel_with_rooms(USER_ID, "1")

        assert result.name == "Marriott"
        assert [r.name for r in result.rooms] == ["Suite 101", "Suite 102"]
        assert [r.capacity.value for r in result.rooms] == [2, 3]

    def test_hotel_without_rooms_returns_empty_rooms(self, service, tickets, hotels):
        tickets.add(USER_ID, ticket())
        hotels.add_hotel(hotel(3, "Hostel"))

        assert service.get_hotel_with_rooms(USER_ID, "3").rooms == ()
