"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_tuple(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    app_name: str = "Hotel Reservation Service"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    hotel_name: str = "Hotel"
    hotel_address: str = ""
    hotel_phone: str = ""

    vip_reservation_threshold: int = 3
    vip_lookback_years: int = 1

    seed_demo_data: bool = False
    demo_room_types: tuple[str, ...] = ("SINGLE", "SINGLE", "DOUBLE", "DOUBLE", "SUITE")
    demo_room_rates: tuple[float, ...] = (50.0, 60.0, 80.0, 90.0, 150.0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process from environment variables."""
    defaults = Settings()
    return Settings(
        app_name=os.getenv("APP_NAME", defaults.app_name),
        app_version=os.getenv("APP_VERSION", defaults.app_version),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        hotel_name=os.getenv("HOTEL_NAME", defaults.hotel_name),
        hotel_address=os.getenv("HOTEL_ADDRESS", defaults.hotel_address),
        hotel_phone=os.getenv("HOTEL_PHONE", defaults.hotel_phone),
        vip_reservation_threshold=int(
            os.getenv("VIP_RESERVATION_THRESHOLD", str(defaults.vip_reservation_threshold))
        ),
        vip_lookback_years=int(
            os.getenv("VIP_LOOKBACK_YEARS", str(defaults.vip_lookback_years))
        ),
        seed_demo_data=_env_bool("SEED_DEMO_DATA", defaults.seed_demo_data),
        demo_room_types=_env_tuple("DEMO_ROOM_TYPES", defaults.demo_room_types),
        demo_room_rates=tuple(
            float(item)
            for item in _env_tuple(
                "DEMO_ROOM_RATES",
                tuple(str(rate) for rate in defaults.demo_room_rates),
            )
        ),
    )
