import asyncio
import inspect
import logging
import secrets
from typing import Any, Awaitable, Callable, TypeVar, cast

from redis.asyncio.client import Redis
from redis.exceptions import RedisError

from hotel.application.errors import InvalidIdentifier, NotFound, StorageUnavailable
from hotel.application.guards import is_booking_id
from hotel.config import BookingStoreConfig
from hotel.domain.models import Booking

logger = logging.getLogger(__name__)

T = TypeVar("T")

BOOKINGS_INDEX_KEY = "bookings"


async def _await(x: T | Awaitable[T]) -> T:
    if inspect.isawaitable(x):
        return await cast(Awaitable[T], x)
    return x


def _to_mapping(booking: Booking) -> dict[str, str]:
    return {
        "room": booking.room,
        "guestName": booking.guest_name,
        "checkIn": booking.check_in,
        "checkOut": booking.check_out,
    }


def _from_mapping(booking_id: str, data: dict[str, Any]) -> Booking:
    return Booking(
        id=booking_id,
        room=data.get("room", ""),
        guest_name=data.get("guestName", ""),
        check_in=data.get("checkIn", ""),
        check_out=data.get("checkOut", ""),
    )


class RedisBookingStore:
    """Bookings kept as one hash per record plus an id list for ordering.

    Every operation is bounded by a timeout; timeouts and connection
    failures surface as StorageUnavailable.
    """

    def __init__(self, r: Redis, config: BookingStoreConfig | None = None):
        self._r = r
        self._config = config or BookingStoreConfig()

    def _booking_key(self, booking_id: str) -> str:
        return f"booking:{booking_id}"

    def _make_booking_id(self) -> str:
        return secrets.token_hex(12)

    async def _bounded(
        self, op: str, timeout: float, func: Callable[[], Awaitable[T]]
    ) -> T:
        try:
            return await asyncio.wait_for(func(), timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("%s timed out after %ss", op, timeout)
            raise StorageUnavailable(f"{op} timed out after {timeout}s") from exc
        except (RedisError, OSError) as exc:
            logger.warning("%s failed: %s", op, exc)
            raise StorageUnavailable(f"{op} failed: {exc}") from exc

    async def list_bookings(self) -> list[Booking]:
        async def _list() -> list[Booking]:
            ids = await _await(self._r.lrange(BOOKINGS_INDEX_KEY, 0, -1))
            if not ids:
                return []
            async with self._r.pipeline(transaction=False) as pipe:
                for booking_id in ids:
                    pipe.hgetall(self._booking_key(booking_id))
                rows = await pipe.execute()
            return [
                _from_mapping(booking_id, data)
                for booking_id, data in zip(ids, rows)
                if data
            ]

        return await self._bounded(
            "list_bookings", self._config.read_timeout, _list
        )

    async def insert_booking(self, booking: Booking) -> str:
        booking_id = self._make_booking_id()

        async def _insert() -> str:
            async with self._r.pipeline(transaction=True) as pipe:
                pipe.hset(self._booking_key(booking_id), mapping=_to_mapping(booking))
                pipe.rpush(BOOKINGS_INDEX_KEY, booking_id)
                await pipe.execute()
            return booking_id

        return await self._bounded(
            "insert_booking", self._config.write_timeout, _insert
        )

    async def find_booking(self, booking_id: str) -> Booking:
        if not is_booking_id(booking_id):
            raise InvalidIdentifier(booking_id)

        async def _find() -> Booking:
            data = await _await(self._r.hgetall(self._booking_key(booking_id)))
            if not data:
                raise NotFound(booking_id)
            return _from_mapping(booking_id, data)

        return await self._bounded(
            "find_booking", self._config.write_timeout, _find
        )

    async def delete_booking(self, booking_id: str) -> int:
        if not is_booking_id(booking_id):
            raise InvalidIdentifier(booking_id)

        async def _delete() -> int:
            async with self._r.pipeline(transaction=True) as pipe:
                pipe.lrem(BOOKINGS_INDEX_KEY, 0, booking_id)
                pipe.delete(self._booking_key(booking_id))
                _, deleted = await pipe.execute()
            return int(deleted)

        return await self._bounded(
            "delete_booking", self._config.write_timeout, _delete
        )
