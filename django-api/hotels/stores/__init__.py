from hotels.stores.django_store import DjangoHotelStore, DjangoTicketStore
from hotels.stores.interfaces import HotelStore, TicketStore
from hotels.stores.memory_store import InMemoryHotelStore, InMemoryTicketStore

__all__ = [
    "HotelStore",
    "TicketStore",
    "DjangoHotelStore",
    "DjangoTicketStore",
    "InMemoryHotelStore",
    "InMemoryTicketStore",
]
