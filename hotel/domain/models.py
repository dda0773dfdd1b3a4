from dataclasses import dataclass


@dataclass
class Room:
    id: str
    type: str
    price: float
    available: bool
    image_url: str


@dataclass(frozen=True)
class Booking:
    room: str
    guest_name: str
    check_in: str
    check_out: str
    id: str | None = None
