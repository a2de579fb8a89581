"""Hotel operations surface consumed by controllers and scripts."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from backend.domain.models import BookingResult, Guest, HotelProfile, Reservation, Room
from backend.repository.hotel_repository import HotelRepository
from backend.services.reservation_service import ReservationEngine
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


class HotelError(Exception):
    """Base exception for hotel lookups and registrations."""


class RoomNotFoundError(HotelError):
    """Raised when a room number does not exist."""


class GuestNotFoundError(HotelError):
    """Raised when a guest id does not exist."""


class RoomRegistrationError(HotelError):
    """Raised when a batch of rooms cannot be registered."""


class HotelService:
    """Registers rooms and guests, answers queries and delegates bookings."""

    def __init__(
        self,
        repository: Optional[HotelRepository] = None,
        engine: Optional[ReservationEngine] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or HotelRepository()
        self._engine = engine or ReservationEngine(
            repository=self._repository,
            settings=self._settings,
        )
        self._profile = HotelProfile(
            name=self._settings.hotel_name,
            address=self._settings.hotel_address,
            phone=self._settings.hotel_phone,
        )

    @property
    def profile(self) -> HotelProfile:
        return self._profile

    def register_room(self, room_type: str, base_rate: float) -> Room:
        room = self._repository.add_room(room_type, base_rate)
        logger.info("Room #%s registered as %s", room.room_id, room.room_type)
        return room

    def register_rooms(
        self,
        room_types: Sequence[str],
        base_rates: Sequence[float],
    ) -> list[Room]:
        if len(room_types) != len(base_rates):
            raise RoomRegistrationError(
                f"Got {len(room_types)} room types but {len(base_rates)} base rates"
            )
        rooms = self._repository.add_rooms(room_types, base_rates)
        logger.info("Registered %s rooms", len(rooms))
        return rooms

    def list_available_rooms(self) -> list[Room]:
        return self._repository.rooms.list_available()

    def get_room(self, room_id: int) -> Room:
        room = self._repository.rooms.get_room(room_id)
        if room is None:
            raise RoomNotFoundError(f"Room #{room_id} does not exist")
        return room

    def register_guest(
        self,
        name: str,
        email: str,
        national_id: str,
        is_vip: bool = False,
    ) -> Guest:
        guest = self._repository.add_guest(name, email, national_id, is_vip)
        logger.info("Guest #%s registered", guest.guest_id)
        return guest

    def list_guests(self) -> list[Guest]:
        return self._repository.guests.list_guests()

    def get_guest(self, guest_id: int) -> Guest:
        guest = self._repository.guests.get_guest(guest_id)
        if guest is None:
            raise GuestNotFoundError(f"Guest #{guest_id} does not exist")
        return guest

    def reserve_room(
        self,
        guest_id: int,
        room_type: str,
        check_in: date,
        check_out: date,
    ) -> BookingResult:
        return self._engine.reserve_room(
            guest_id=guest_id,
            room_type=room_type,
            check_in=check_in,
            check_out=check_out,
        )

    def list_reservations_by_room(self) -> dict[int, list[Reservation]]:
        return self._repository.reservations.list_by_room()

    def seed_demo_inventory_if_empty(self) -> int:
        """Register the configured demo rooms when the hotel has none."""
        with self._repository.lock:
            if not self._repository.rooms.is_empty():
                logger.info("Room inventory already present; skipping demo seed")
                return 0
            rooms = self.register_rooms(
                self._settings.demo_room_types,
                self._settings.demo_room_rates,
            )
        return len(rooms)
