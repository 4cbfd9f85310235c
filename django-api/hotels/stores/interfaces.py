"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId, Ticket, UserId


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_ticket_by_user_id(self, user_id: UserId) -> Ticket | None:
        """Return the ticket attached to the user's enrollment, with its type, or None."""
        ...


class HotelStore(ABC):
    """Interface for hotel lookups."""

    @abstractmethod
    def find_hotels(self) -> list[Hotel]:
        """Return all hotels without rooms, ordered by id ascending."""
        ...

    @abstractmethod
    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with all of its rooms, or None if not found."""
        ...
