from fastapi import APIRouter

from hotel.api.deps import BookingServiceDep
from hotel.api.schemas import RoomOut

rooms_router = APIRouter(prefix="/rooms")


@rooms_router.get("", response_model=list[RoomOut])
async def list_rooms(booking_service: BookingServiceDep):
    return [RoomOut.from_room(room) for room in booking_service.list_rooms()]
