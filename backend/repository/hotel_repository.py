"""In-memory repository layer holding rooms, guests and reservations."""

from __future__ import annotations

from datetime import date
from itertools import count
from threading import RLock
from typing import Optional, Sequence

from backend.domain.models import Guest, Reservation, Room
from backend.utils.logger import get_logger


logger = get_logger(__name__)


class RoomRegistry:
    """Rooms in registration order with their current availability.

    Register through `HotelRepository.add_room`, which also opens the
    room's entry in the reservation ledger.
    """

    def __init__(self) -> None:
        self._rooms: list[Room] = []
        self._ids = count(1)

    def register_room(self, room_type: str, base_rate: float) -> Room:
        room = Room(room_id=next(self._ids), room_type=room_type, base_rate=base_rate)
        self._rooms.append(room)
        logger.debug("Registered room #%s (%s)", room.room_id, room.room_type)
        return room

    def is_empty(self) -> bool:
        return not self._rooms

    def list_rooms(self) -> list[Room]:
        return list(self._rooms)

    def list_available(self) -> list[Room]:
        return [room for room in self._rooms if room.available]

    def get_room(self, room_id: int) -> Optional[Room]:
        for room in self._rooms:
            if room.room_id == room_id:
                return room
        return None

    def find_first_available(self, room_type: str) -> Optional[Room]:
        """Return the lowest-numbered available room of the given type."""
        for room in self._rooms:
            if room.matches_type(room_type) and room.available:
                return room
        return None


class GuestRegistry:
    """Guests keyed by identity; dict order doubles as registration order."""

    def __init__(self) -> None:
        self._guests: dict[int, Guest] = {}
        self._ids = count(1)

    def register_guest(
        self,
        name: str,
        email: str,
        national_id: str,
        is_vip: bool = False,
    ) -> Guest:
        guest = Guest(
            guest_id=next(self._ids),
            name=name,
            national_id=national_id,
            email=email,
            is_vip=is_vip,
        )
        self._guests[guest.guest_id] = guest
        logger.debug("Registered guest #%s", guest.guest_id)
        return guest

    def list_guests(self) -> list[Guest]:
        return list(self._guests.values())

    def get_guest(self, guest_id: int) -> Optional[Guest]:
        return self._guests.get(guest_id)


class ReservationLedger:
    """Reservations grouped by the room they occupy, in booking order."""

    def __init__(self) -> None:
        self._by_room: dict[int, list[Reservation]] = {}
        self._ids = count(1)

    def open_room(self, room: Room) -> None:
        self._by_room.setdefault(room.room_id, [])

    def record_reservation(
        self,
        room: Room,
        guest: Guest,
        start_date: date,
        end_date: date,
    ) -> Reservation:
        reservation = Reservation(
            reservation_id=next(self._ids),
            room_id=room.room_id,
            guest_id=guest.guest_id,
            start_date=start_date,
            end_date=end_date,
        )
        self._by_room.setdefault(room.room_id, []).append(reservation)
        return reservation

    def list_by_room(self) -> dict[int, list[Reservation]]:
        return {
            room_id: list(reservations)
            for room_id, reservations in self._by_room.items()
        }

    def count_recent_reservations_for_guest(self, guest: Guest, since: date) -> int:
        """Count the guest's reservations starting strictly after `since`."""
        return sum(
            1
            for reservations in self._by_room.values()
            for reservation in reservations
            if reservation.guest_id == guest.guest_id and reservation.start_date > since
        )


class HotelRepository:
    """Aggregate owning one hotel's registries, ledger and lock.

    All mutations that read-then-write shared state must hold `lock`.
    """

    def __init__(self) -> None:
        self.rooms = RoomRegistry()
        self.guests = GuestRegistry()
        self.reservations = ReservationLedger()
        self.lock = RLock()

    def add_room(self, room_type: str, base_rate: float) -> Room:
        with self.lock:
            room = self.rooms.register_room(room_type, base_rate)
            self.reservations.open_room(room)
            return room

    def add_rooms(
        self,
        room_types: Sequence[str],
        base_rates: Sequence[float],
    ) -> list[Room]:
        with self.lock:
            return [
                self.add_room(room_type, base_rate)
                for room_type, base_rate in zip(room_types, base_rates)
            ]

    def add_guest(
        self,
        name: str,
        email: str,
        national_id: str,
        is_vip: bool = False,
    ) -> Guest:
        with self.lock:
            return self.guests.register_guest(name, email, national_id, is_vip)
