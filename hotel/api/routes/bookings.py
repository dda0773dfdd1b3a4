from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from hotel.api.deps import BookingServiceDep
from hotel.api.schemas import BookingIn, BookingOut, DeletedOut, InsertedOut
from hotel.application.errors import (
    BookingError,
    Conflict,
    InvalidIdentifier,
    NotFound,
    RoomNotFound,
    StorageUnavailable,
)

bookings_router = APIRouter(prefix="/bookings")

_STATUS_BY_ERROR: dict[type[BookingError], int] = {
    Conflict: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    RoomNotFound: status.HTTP_404_NOT_FOUND,
    InvalidIdentifier: status.HTTP_404_NOT_FOUND,
    StorageUnavailable: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(exc: BookingError) -> JSONResponse:
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse({"message": str(exc)}, status_code=code)


@bookings_router.get("", response_model=list[BookingOut])
async def list_bookings(booking_service: BookingServiceDep):
    try:
        bookings = await booking_service.list_bookings()
    except StorageUnavailable as exc:
        return _error_response(exc)
    return [BookingOut.from_booking(booking) for booking in bookings]


@bookings_router.post("", response_model=InsertedOut)
async def create_booking(booking_in: BookingIn, booking_service: BookingServiceDep):
    try:
        booking_id = await booking_service.create_booking(
            room_id=booking_in.room,
            guest_name=booking_in.guest_name,
            check_in=booking_in.check_in,
            check_out=booking_in.check_out,
        )
    except (Conflict, RoomNotFound, StorageUnavailable) as exc:
        return _error_response(exc)
    return InsertedOut(inserted_id=booking_id)


@bookings_router.delete("/{booking_id}", response_model=DeletedOut)
async def cancel_booking(booking_id: str, booking_service: BookingServiceDep):
    try:
        deleted = await booking_service.cancel_booking(booking_id)
    except (NotFound, StorageUnavailable) as exc:
        return _error_response(exc)
    return DeletedOut(deleted_count=deleted)
