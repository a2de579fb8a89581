"""Domain models for rooms, guests and reservations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


@dataclass
class Room:
    room_id: int
    room_type: str
    base_rate: float
    available: bool = True

    def __post_init__(self) -> None:
        self.room_type = self.room_type.upper()

    def matches_type(self, room_type: str) -> bool:
        return self.room_type == room_type.upper()

    def reserve(self) -> None:
        self.available = False


@dataclass
class Guest:
    guest_id: int
    name: str
    national_id: str
    email: str
    is_vip: bool = False

    def promote_to_vip(self) -> None:
        self.is_vip = True


@dataclass(frozen=True)
class Reservation:
    reservation_id: int
    room_id: int
    guest_id: int
    start_date: date
    end_date: date


@dataclass(frozen=True)
class HotelProfile:
    name: str
    address: str
    phone: str


class BookingOutcome(str, Enum):
    BOOKED = "BOOKED"
    NO_ROOMS_IN_HOTEL = "NO_ROOMS_IN_HOTEL"
    GUEST_NOT_FOUND = "GUEST_NOT_FOUND"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    NO_ROOM_AVAILABLE_FOR_TYPE = "NO_ROOM_AVAILABLE_FOR_TYPE"


@dataclass(frozen=True)
class BookingResult:
    outcome: BookingOutcome
    room_number: Optional[int] = None

    @property
    def booked(self) -> bool:
        return self.outcome is BookingOutcome.BOOKED
