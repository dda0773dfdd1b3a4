from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hotel.domain.models import Booking, Room


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoomOut(_CamelModel):
    id: str
    type: str
    price: float
    available: bool
    image_url: str

    @classmethod
    def from_room(cls, room: Room) -> "RoomOut":
        return cls(
            id=room.id,
            type=room.type,
            price=room.price,
            available=room.available,
            image_url=room.image_url,
        )


class BookingIn(_CamelModel):
    id: str | None = Field(default=None, alias="_id")
    room: str
    guest_name: str
    check_in: str
    check_out: str


class BookingOut(BookingIn):
    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingOut":
        return cls(
            id=booking.id,
            room=booking.room,
            guest_name=booking.guest_name,
            check_in=booking.check_in,
            check_out=booking.check_out,
        )


class InsertedOut(_CamelModel):
    inserted_id: str


class DeletedOut(_CamelModel):
    deleted_count: int
