"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from hotels.domain import Hotel, HotelId, Ticket, UserId
from hotels.domain.errors import (
    HotelNotFoundError,
    PaymentRequiredError,
    TicketNotFoundError,
)
from hotels.stores.interfaces import HotelStore, TicketStore

logger = logging.getLogger(__name__)


class HotelService:
    """Service for ticket-gated hotel listings."""

    def __init__(self, tickets: TicketStore, hotels: HotelStore) -> None:
        self._tickets = tickets
        self._hotels = hotels

    def check_eligibility(self, user_id: int) -> Ticket:
        """Return the user's ticket if it grants hotel access.

        Raises:
            TicketNotFoundError: If the user has no ticket.
            PaymentRequiredError: If the ticket is unpaid or its type has no hotel.
        """
        ticket = self._tickets.find_ticket_by_user_id(UserId(user_id))
        if ticket is None:
            logger.info("No ticket for user", extra={"user_id": user_id})
            raise TicketNotFoundError(user_id)

        if not ticket.grants_hotel_access:
            logger.info(
                "Ticket does not grant hotel access",
                extra={
                    "user_id": user_id,
                    "ticket_id": ticket.id.value,
                    "status": ticket.status,
                    "includes_hotel": ticket.ticket_type.includes_hotel,
                },
            )
            raise PaymentRequiredError()

        logger.debug("Ticket grants hotel access", extra={"user_id": user_id})
        return ticket

    def list_hotels(self, user_id: int) -> list[Hotel]:
        """Return all hotels, without rooms."""
        self.check_eligibility(user_id)
        return self._hotels.find_hotels()

    def get_hotel_with_rooms(self, user_id: int, hotel_id: str) -> Hotel:
        """Return a hotel with its rooms.

        Raises:
            TicketNotFoundError, PaymentRequiredError: See check_eligibility.
            HotelNotFoundError: If hotel_id is not a positive integer or the
                hotel does not exist.
        """
        self.check_eligibility(user_id)

        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            logger.info("Malformed hotel id", extra={"user_id": user_id, "hotel_id": hotel_id})
            raise HotelNotFoundError(hotel_id) from None

        hotel = self._hotels.find_hotel_by_id(parsed_id)
        if hotel is None:
            logger.info("Hotel not found", extra={"user_id": user_id, "hotel_id": hotel_id})
            raise HotelNotFoundError(hotel_id)
        return hotel
