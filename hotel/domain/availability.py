from enum import Enum


class RoomState(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"

    @classmethod
    def of(cls, available: bool) -> "RoomState":
        return cls.AVAILABLE if available else cls.BOOKED
