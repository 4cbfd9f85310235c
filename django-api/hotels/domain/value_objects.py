"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Self

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _PositiveId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not _DIGITS.fullmatch(value):
            raise ValueError(f"{cls.__name__} must be a decimal integer")
        return cls(value=int(value))


@dataclass(frozen=True)
class UserId(_PositiveId):
    """Identifier of an authenticated user."""


@dataclass(frozen=True)
class TicketId(_PositiveId):
    """Unique identifier for a Ticket."""


@dataclass(frozen=True)
class TicketTypeId(_PositiveId):
    """Unique identifier for a TicketType."""


@dataclass(frozen=True)
class HotelId(_PositiveId):
    """Unique identifier for a Hotel."""


@dataclass(frozen=True)
class RoomId(_PositiveId):
    """Unique identifier for a Room."""


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
