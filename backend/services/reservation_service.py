"""Reservation engine: room selection, VIP promotion and booking commit."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from backend.domain.constraints import (
    BookingPolicy,
    is_valid_stay,
    qualifies_for_vip,
    validate_booking_policy,
    years_before,
)
from backend.domain.models import BookingOutcome, BookingResult
from backend.repository.hotel_repository import HotelRepository
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


def build_booking_policy(settings: Settings) -> BookingPolicy:
    policy = BookingPolicy(
        vip_reservation_threshold=settings.vip_reservation_threshold,
        vip_lookback_years=settings.vip_lookback_years,
    )
    validate_booking_policy(policy)
    return policy


class ReservationEngine:
    """Validates booking requests and commits them against one hotel.

    Checks run in a fixed order and each one short-circuits with its own
    outcome. Nothing is mutated until every check has passed; the VIP
    promotion, the new reservation and the availability flip are applied
    together under the repository lock.
    """

    def __init__(
        self,
        repository: HotelRepository,
        settings: Optional[Settings] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository
        self._policy = build_booking_policy(self._settings)
        self._today = today

    def reserve_room(
        self,
        guest_id: int,
        room_type: str,
        check_in: date,
        check_out: date,
    ) -> BookingResult:
        repository = self._repository
        with repository.lock:
            if repository.rooms.is_empty():
                logger.info("Booking rejected: the hotel has no rooms")
                return BookingResult(BookingOutcome.NO_ROOMS_IN_HOTEL)

            guest = repository.guests.get_guest(guest_id)
            if guest is None:
                logger.info("Booking rejected: guest #%s does not exist", guest_id)
                return BookingResult(BookingOutcome.GUEST_NOT_FOUND)

            if not is_valid_stay(check_in, check_out):
                logger.info(
                    "Booking rejected: check-in %s is not before check-out %s",
                    check_in,
                    check_out,
                )
                return BookingResult(BookingOutcome.INVALID_DATE_RANGE)

            room = repository.rooms.find_first_available(room_type)
            if room is None:
                logger.info("Booking rejected: no available rooms of type %s", room_type)
                return BookingResult(BookingOutcome.NO_ROOM_AVAILABLE_FOR_TYPE)

            # Counted before recording so the new booking is excluded.
            since = years_before(self._today(), self._policy.vip_lookback_years)
            recent = repository.reservations.count_recent_reservations_for_guest(guest, since)
            if qualifies_for_vip(recent, self._policy) and not guest.is_vip:
                guest.promote_to_vip()
                logger.info("Guest %s (#%s) is now VIP", guest.name, guest.guest_id)

            reservation = repository.reservations.record_reservation(
                room, guest, check_in, check_out
            )
            room.reserve()

        logger.info(
            "Reservation #%s booked: room #%s for guest #%s (%s -> %s)",
            reservation.reservation_id,
            room.room_id,
            guest.guest_id,
            check_in,
            check_out,
        )
        return BookingResult(BookingOutcome.BOOKED, room_number=room.room_id)
