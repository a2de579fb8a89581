from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import date

import pytest

from backend.domain.models import BookingOutcome
from backend.services.hotel_service import (
    GuestNotFoundError,
    HotelService,
    RoomNotFoundError,
    RoomRegistrationError,
)
from backend.utils.config import get_settings


def _build_service(**overrides) -> HotelService:
    get_settings.cache_clear()
    settings = replace(
        get_settings(),
        hotel_name="Hotel Miramar",
        hotel_address="Rúa do Mar 1",
        hotel_phone="+34 600 000 000",
        **overrides,
    )
    return HotelService(settings=settings)


def test_register_rooms_pairs_types_with_rates():
    service = _build_service()

    rooms = service.register_rooms(["single", "double"], [50.0, 80.0])

    assert [(room.room_id, room.room_type, room.base_rate) for room in rooms] == [
        (1, "SINGLE", 50.0),
        (2, "DOUBLE", 80.0),
    ]


def test_register_rooms_rejects_mismatched_lengths_without_side_effects():
    service = _build_service()

    with pytest.raises(RoomRegistrationError):
        service.register_rooms(["SINGLE", "DOUBLE"], [50.0])

    assert service.list_available_rooms() == []
    assert service.register_room("SUITE", 150.0).room_id == 1


def test_get_room_and_guest_raise_when_missing():
    service = _build_service()
    service.register_room("SINGLE", 50.0)
    service.register_guest("Ana", "a@x.com", "111")

    assert service.get_room(1).room_type == "SINGLE"
    assert service.get_guest(1).name == "Ana"
    with pytest.raises(RoomNotFoundError):
        service.get_room(2)
    with pytest.raises(GuestNotFoundError):
        service.get_guest(2)


def test_booking_scenario_through_service():
    service = _build_service()
    service.register_room("SINGLE", 50.0)
    service.register_room("SINGLE", 60.0)
    guest = service.register_guest("Ana", "a@x.com", "111", False)

    result = service.reserve_room(guest.guest_id, "single", date(2026, 7, 1), date(2026, 7, 3))

    assert result.outcome is BookingOutcome.BOOKED
    assert result.room_number == 1
    assert [room.room_id for room in service.list_available_rooms()] == [2]
    assert service.list_reservations_by_room()[1][0].guest_id == guest.guest_id

    missing = service.reserve_room(guest.guest_id, "DOUBLE", date(2026, 7, 1), date(2026, 7, 3))
    assert missing.outcome is BookingOutcome.NO_ROOM_AVAILABLE_FOR_TYPE


def test_list_guests_keeps_registration_order():
    service = _build_service()
    service.register_guest("Ana", "a@x.com", "111")
    service.register_guest("Bea", "b@x.com", "222", is_vip=True)

    guests = service.list_guests()

    assert [(guest.guest_id, guest.name, guest.is_vip) for guest in guests] == [
        (1, "Ana", False),
        (2, "Bea", True),
    ]


def test_profile_comes_from_settings():
    service = _build_service()

    assert service.profile.name == "Hotel Miramar"
    assert service.profile.address == "Rúa do Mar 1"
    assert service.profile.phone == "+34 600 000 000"


def test_demo_seed_only_runs_on_empty_inventory():
    service = _build_service(
        demo_room_types=("SINGLE", "DOUBLE"),
        demo_room_rates=(50.0, 80.0),
    )

    assert service.seed_demo_inventory_if_empty() == 2
    assert service.seed_demo_inventory_if_empty() == 0
    assert len(service.list_available_rooms()) == 2


def test_invalid_policy_settings_are_rejected():
    with pytest.raises(ValueError):
        _build_service(vip_lookback_years=0)


def test_concurrent_demo_seeds_register_inventory_once():
    service = _build_service(
        demo_room_types=("SINGLE", "DOUBLE", "SUITE"),
        demo_room_rates=(50.0, 80.0, 150.0),
    )

    with ThreadPoolExecutor(max_workers=8) as pool:
        seeded = list(pool.map(lambda _: service.seed_demo_inventory_if_empty(), range(8)))

    assert sorted(seeded) == [0] * 7 + [3]
    assert [room.room_id for room in service.list_available_rooms()] == [1, 2, 3]
