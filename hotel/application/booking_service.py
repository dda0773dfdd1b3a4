import asyncio
import logging
from contextlib import AbstractAsyncContextManager, nullcontext

from hotel.application.errors import Conflict, NotFound, RoomNotFound
from hotel.application.guards import valid_booking_id
from hotel.application.ports import BookingStore
from hotel.config import CatalogConfig
from hotel.domain.availability import RoomState
from hotel.domain.catalog import RoomCatalog
from hotel.domain.models import Booking, Room

logger = logging.getLogger(__name__)


class BookingService:
    """Keeps room availability in step with the stored bookings.

    A room is booked exactly when one stored booking references it. The
    check, the store write and the catalog flip for a room run under that
    room's lock, so concurrent requests for one room are serialised. Only
    catalog rooms get a lock; unknown ids have no availability to guard.
    """

    def __init__(
        self,
        store: BookingStore,
        catalog: RoomCatalog,
        config: CatalogConfig | None = None,
    ):
        self._store = store
        self._catalog = catalog
        self._config = config or CatalogConfig()
        self._room_locks: dict[str, asyncio.Lock] = {
            room.id: asyncio.Lock() for room in catalog.list_rooms()
        }

    def _get_lock(self, room_id: str) -> AbstractAsyncContextManager:
        lock = self._room_locks.get(room_id)
        if lock is None:
            return nullcontext()
        return lock

    def list_rooms(self) -> list[Room]:
        return self._catalog.list_rooms()

    async def list_bookings(self) -> list[Booking]:
        return await self._store.list_bookings()

    async def create_booking(
        self, room_id: str, guest_name: str, check_in: str, check_out: str
    ) -> str:
        async with self._get_lock(room_id):
            state = self._catalog.state_of(room_id)
            if state is RoomState.BOOKED:
                logger.info("rejected booking for %s: already booked", room_id)
                raise Conflict(room_id)
            if state is None:
                if self._config.require_known_room:
                    raise RoomNotFound(room_id)
                logger.warning("booking references unknown room %s", room_id)

            booking_id = await self._store.insert_booking(
                Booking(
                    room=room_id,
                    guest_name=guest_name,
                    check_in=check_in,
                    check_out=check_out,
                )
            )
            self._catalog.set_availability(room_id, False)

        logger.info("booking %s created for room %s", booking_id, room_id)
        return booking_id

    @valid_booking_id
    async def cancel_booking(self, booking_id: str) -> int:
        booking = await self._store.find_booking(booking_id)

        async with self._get_lock(booking.room):
            deleted = await self._store.delete_booking(booking_id)
            if deleted == 0:
                # removed by a concurrent cancel after our lookup
                raise NotFound(booking_id)
            self._catalog.set_availability(booking.room, True)

        logger.info("booking %s cancelled, room %s released", booking_id, booking.room)
        return deleted
