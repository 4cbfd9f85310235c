"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Coarse error categories exposed to the HTTP layer."""

    NOT_FOUND = "NotFound"
    PAYMENT_REQUIRED = "PaymentRequired"
    UNAVAILABLE = "Unavailable"


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self]


_KINDS = {
    ErrorCode.TICKET_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.PAYMENT_REQUIRED: ErrorKind.PAYMENT_REQUIRED,
    ErrorCode.STORE_UNAVAILABLE: ErrorKind.UNAVAILABLE,
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class TicketNotFoundError(DomainError):
    """Raised when the user has no ticket."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        object.__setattr__(self, "user_id", user_id)


class PaymentRequiredError(DomainError):
    """Raised when the ticket is unpaid or its type does not include a hotel."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_REQUIRED,
            message="You must pay the ticket before continuing",
        )


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: str) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )
        object.__setattr__(self, "hotel_id", hotel_id)


class StoreUnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Service temporarily unavailable",
        )
