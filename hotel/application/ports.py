from typing import Protocol

from hotel.domain.models import Booking


class BookingStore(Protocol):
    async def list_bookings(self) -> list[Booking]: ...

    async def insert_booking(self, booking: Booking) -> str: ...

    async def find_booking(self, booking_id: str) -> Booking: ...

    async def delete_booking(self, booking_id: str) -> int: ...
