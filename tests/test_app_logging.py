import logging

from fastapi.testclient import TestClient

from hotel.config import Config
from hotel.main import app_factory


def test_startup_applies_configured_log_level():
    hotel_logger = logging.getLogger("hotel")
    previous = hotel_logger.level
    app = app_factory("redis://127.0.0.1:1/0", Config(log_level="DEBUG"))
    try:
        with TestClient(app):
            assert hotel_logger.level == logging.DEBUG
            assert logging.getLogger("hotel.application.booking_service").isEnabledFor(
                logging.DEBUG
            )
    finally:
        hotel_logger.setLevel(previous)
