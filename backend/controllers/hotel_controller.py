"""HTTP controller layer for the hotel profile."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backend.controllers.dependencies import get_hotel_service
from backend.services.hotel_service import HotelService


router = APIRouter(prefix="/hotel", tags=["hotel"])


class HotelProfileResponse(BaseModel):
    name: str
    address: str
    phone: str


@router.get("", response_model=HotelProfileResponse)
async def get_hotel_profile(
    service: HotelService = Depends(get_hotel_service),
) -> HotelProfileResponse:
    profile = service.profile
    return HotelProfileResponse(name=profile.name, address=profile.address, phone=profile.phone)
