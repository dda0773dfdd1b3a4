from typing import Annotated

from fastapi import Depends
from fastapi.requests import HTTPConnection

from hotel.application.booking_service import BookingService


def get_booking_service(conn: HTTPConnection) -> BookingService:
    return conn.app.state.booking_service


BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
