"""HTTP controller layer for room inventory."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from backend.controllers.dependencies import get_hotel_service
from backend.domain.models import Room
from backend.services.hotel_service import (
    HotelService,
    RoomNotFoundError,
    RoomRegistrationError,
)


router = APIRouter(prefix="/rooms", tags=["rooms"])


class RegisterRoomRequest(BaseModel):
    room_type: str
    base_rate: float


class RegisterRoomsRequest(BaseModel):
    room_types: list[str]
    base_rates: list[float]


class RoomResponse(BaseModel):
    room_id: int = Field(gt=0)
    room_type: str
    base_rate: float
    available: bool

    @classmethod
    def from_room(cls, room: Room) -> "RoomResponse":
        return cls(
            room_id=room.room_id,
            room_type=room.room_type,
            base_rate=room.base_rate,
            available=room.available,
        )


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_room(
    payload: RegisterRoomRequest,
    service: HotelService = Depends(get_hotel_service),
) -> RoomResponse:
    room = service.register_room(payload.room_type, payload.base_rate)
    return RoomResponse.from_room(room)


@router.post(
    "/batch",
    response_model=list[RoomResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register_rooms(
    payload: RegisterRoomsRequest,
    service: HotelService = Depends(get_hotel_service),
) -> list[RoomResponse]:
    try:
        rooms = service.register_rooms(payload.room_types, payload.base_rates)
    except RoomRegistrationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return [RoomResponse.from_room(room) for room in rooms]


@router.get("/available", response_model=list[RoomResponse])
async def list_available_rooms(
    service: HotelService = Depends(get_hotel_service),
) -> list[RoomResponse]:
    return [RoomResponse.from_room(room) for room in service.list_available_rooms()]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> RoomResponse:
    try:
        return RoomResponse.from_room(service.get_room(room_id))
    except RoomNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
