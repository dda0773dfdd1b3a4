class BookingError(Exception):
    """Base class for errors surfaced to the request handlers."""


class Conflict(BookingError):
    def __init__(self, room_id: str):
        super().__init__(f"room {room_id} is already booked")
        self.room_id = room_id


class NotFound(BookingError):
    def __init__(self, booking_id: str):
        super().__init__(f"booking {booking_id} not found")
        self.booking_id = booking_id


class RoomNotFound(BookingError):
    def __init__(self, room_id: str):
        super().__init__(f"room {room_id} does not exist")
        self.room_id = room_id


class InvalidIdentifier(NotFound):
    """A malformed id can never name a stored booking."""

    def __init__(self, booking_id: str):
        BookingError.__init__(self, f"booking {booking_id} not found: malformed id")
        self.booking_id = booking_id


class StorageUnavailable(BookingError):
    pass
