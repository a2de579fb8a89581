"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from backend.services.hotel_service import HotelService


def get_hotel_service(request: Request) -> HotelService:
    service = getattr(request.app.state, "hotel_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Hotel service is not initialized",
        )
    return service
