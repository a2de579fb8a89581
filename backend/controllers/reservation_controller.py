"""HTTP controller layer for bookings and the reservation listing."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from backend.controllers.dependencies import get_hotel_service
from backend.domain.models import BookingOutcome
from backend.services.hotel_service import HotelService


router = APIRouter(tags=["reservations"])

_OUTCOME_STATUS_CODES = {
    BookingOutcome.BOOKED: status.HTTP_201_CREATED,
    BookingOutcome.GUEST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookingOutcome.INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    BookingOutcome.NO_ROOMS_IN_HOTEL: status.HTTP_409_CONFLICT,
    BookingOutcome.NO_ROOM_AVAILABLE_FOR_TYPE: status.HTTP_409_CONFLICT,
}


class ReserveRoomRequest(BaseModel):
    """Shape-only DTO; date ordering is a booking outcome, not a 422."""

    guest_id: int
    room_type: str
    check_in: date
    check_out: date


class ReserveRoomResponse(BaseModel):
    outcome: BookingOutcome
    room_number: int | None = Field(default=None, gt=0)


class ReservationRow(BaseModel):
    reservation_id: int = Field(gt=0)
    guest_id: int = Field(gt=0)
    guest_name: str
    start_date: date
    end_date: date


class RoomReservationsResponse(BaseModel):
    room_id: int = Field(gt=0)
    reservations: list[ReservationRow]


@router.post("/reservations", response_model=ReserveRoomResponse)
async def reserve_room(
    payload: ReserveRoomRequest,
    response: Response,
    service: HotelService = Depends(get_hotel_service),
) -> ReserveRoomResponse:
    result = service.reserve_room(
        guest_id=payload.guest_id,
        room_type=payload.room_type,
        check_in=payload.check_in,
        check_out=payload.check_out,
    )
    response.status_code = _OUTCOME_STATUS_CODES[result.outcome]
    return ReserveRoomResponse(outcome=result.outcome, room_number=result.room_number)


@router.get("/reservations", response_model=list[RoomReservationsResponse])
async def list_reservations(
    service: HotelService = Depends(get_hotel_service),
) -> list[RoomReservationsResponse]:
    guest_names = {guest.guest_id: guest.name for guest in service.list_guests()}
    return [
        RoomReservationsResponse(
            room_id=room_id,
            reservations=[
                ReservationRow(
                    reservation_id=item.reservation_id,
                    guest_id=item.guest_id,
                    guest_name=guest_names.get(item.guest_id, ""),
                    start_date=item.start_date,
                    end_date=item.end_date,
                )
                for item in reservations
            ],
        )
        for room_id, reservations in service.list_reservations_by_room().items()
    ]

