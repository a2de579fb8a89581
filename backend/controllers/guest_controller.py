"""HTTP controller layer for guest registration and lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from backend.controllers.dependencies import get_hotel_service
from backend.domain.models import Guest
from backend.services.hotel_service import GuestNotFoundError, HotelService


router = APIRouter(prefix="/guests", tags=["guests"])


class RegisterGuestRequest(BaseModel):
    name: str
    email: str
    national_id: str
    is_vip: bool = False


class GuestResponse(BaseModel):
    guest_id: int = Field(gt=0)
    name: str
    national_id: str
    email: str
    is_vip: bool

    @classmethod
    def from_guest(cls, guest: Guest) -> "GuestResponse":
        return cls(
            guest_id=guest.guest_id,
            name=guest.name,
            national_id=guest.national_id,
            email=guest.email,
            is_vip=guest.is_vip,
        )


@router.post(
    "",
    response_model=GuestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_guest(
    payload: RegisterGuestRequest,
    service: HotelService = Depends(get_hotel_service),
) -> GuestResponse:
    guest = service.register_guest(
        name=payload.name,
        email=payload.email,
        national_id=payload.national_id,
        is_vip=payload.is_vip,
    )
    return GuestResponse.from_guest(guest)


@router.get("", response_model=list[GuestResponse])
async def list_guests(
    service: HotelService = Depends(get_hotel_service),
) -> list[GuestResponse]:
    return [GuestResponse.from_guest(guest) for guest in service.list_guests()]


@router.get("/{guest_id}", response_model=GuestResponse)
async def get_guest(
    guest_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> GuestResponse:
    try:
        return GuestResponse.from_guest(service.get_guest(guest_id))
    except GuestNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
