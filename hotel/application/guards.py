import re
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar, cast

from hotel.application.errors import InvalidIdentifier

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

BOOKING_ID_RE = re.compile(r"[0-9a-f]{24}")


def is_booking_id(value: str) -> bool:
    return BOOKING_ID_RE.fullmatch(value) is not None


def valid_booking_id(func: F) -> F:
    @wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        booking_id = kwargs.get("booking_id")
        if booking_id is None:
            if not args:
                raise ValueError("booking_id is required")
            booking_id = args[0]
        if not is_booking_id(booking_id):
            raise InvalidIdentifier(booking_id)
        return await func(self, *args, **kwargs)

    return cast(F, wrapper)
