"""Domain-level rules for booking validation and VIP promotion."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BookingPolicy:
    vip_reservation_threshold: int
    vip_lookback_years: int


def validate_booking_policy(policy: BookingPolicy) -> None:
    if policy.vip_reservation_threshold < 0:
        raise ValueError("vip_reservation_threshold must be >= 0")
    if policy.vip_lookback_years < 1:
        raise ValueError("vip_lookback_years must be >= 1")


def is_valid_stay(check_in: date, check_out: date) -> bool:
    return check_in < check_out


def years_before(reference: date, years: int) -> date:
    """Shift a date back by whole calendar years, clamping 29 February."""
    target_year = reference.year - years
    try:
        return reference.replace(year=target_year)
    except ValueError:
        return reference.replace(year=target_year, day=28)


def qualifies_for_vip(recent_reservations: int, policy: BookingPolicy) -> bool:
    return recent_reservations > policy.vip_reservation_threshold
