from dataclasses import replace

from hotel.domain.availability import RoomState
from hotel.domain.models import Room
from hotel.domain.room_seed import seed_rooms


class RoomCatalog:
    """In-memory registry of bookable rooms.

    Rooms are fixed for the lifetime of the instance; only their
    ``available`` flag changes, and only through ``set_availability``.
    """

    def __init__(self, rooms: list[Room]):
        self._rooms = [replace(room) for room in rooms]

    @classmethod
    def seeded(cls) -> "RoomCatalog":
        return cls(seed_rooms())

    def list_rooms(self) -> list[Room]:
        return [replace(room) for room in self._rooms]

    def get_room(self, room_id: str) -> Room | None:
        for room in self._rooms:
            if room.id == room_id:
                return replace(room)
        return None

    def state_of(self, room_id: str) -> RoomState | None:
        room = self.get_room(room_id)
        if room is None:
            return None
        return RoomState.of(room.available)

    def set_availability(self, room_id: str, available: bool) -> None:
        # unknown ids are ignored
        for room in self._rooms:
            if room.id == room_id:
                room.available = available
                return
