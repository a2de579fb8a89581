"""
app.py: FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires the hotel repository and services, registers routers, and runs
startup initialization.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from backend.controllers.guest_controller import router as guest_router
from backend.controllers.hotel_controller import router as hotel_router
from backend.controllers.reservation_controller import router as reservation_router
from backend.controllers.room_controller import router as room_router
from backend.repository.hotel_repository import HotelRepository
from backend.services.hotel_service import HotelService
from backend.services.reservation_service import ReservationEngine
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    One HotelRepository per app: every request shares the same rooms,
    guests and ledger, and bookings serialize on its lock.
    """
    settings = settings or get_settings()

    # --- Repository (in-memory hotel aggregate) ---
    repository = HotelRepository()

    # --- Services ---
    engine = ReservationEngine(repository=repository, settings=settings)
    hotel_service = HotelService(
        repository=repository,
        engine=engine,
        settings=settings,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Run startup initialization before accepting requests."""
        _startup(app, settings)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(room_router)
    app.include_router(guest_router)
    app.include_router(reservation_router)
    app.include_router(hotel_router)

    app.state.repository = repository
    app.state.reservation_engine = engine
    app.state.hotel_service = hotel_service

    return app


def _startup(app: FastAPI, settings: Settings) -> None:
    """Idempotent startup sequence; demo rooms only land in an empty hotel."""
    hotel_service: HotelService = app.state.hotel_service

    if settings.seed_demo_data:
        logger.info("Startup: seeding demo room inventory")
        seeded = hotel_service.seed_demo_inventory_if_empty()
        logger.info("Startup: %s demo rooms registered", seeded)

    logger.info("Startup complete: %s ready", hotel_service.profile.name)


# Module-level app object for uvicorn
app = create_app()
