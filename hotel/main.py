import logging
import os
from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel.api.routes.bookings import bookings_router
from hotel.api.routes.rooms import rooms_router
from hotel.application.booking_service import BookingService
from hotel.config import Config
from hotel.domain.catalog import RoomCatalog
from hotel.env import load_env_file
from hotel.infrastructure.redis_booking_store import RedisBookingStore

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level)
    logging.getLogger("hotel").setLevel(level)


def app_factory(redis_url, config: Config | None = None):
    config = config or Config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _configure_logging(config.log_level)
        app.state.redis = redis.from_url(
            redis_url,
            decode_responses=True,
            health_check_interval=30,
        )
        app.state.catalog = RoomCatalog.seeded()
        app.state.booking_store = RedisBookingStore(
            app.state.redis, config.booking_store
        )
        app.state.booking_service = BookingService(
            app.state.booking_store, app.state.catalog, config.catalog
        )
        logger.info("catalog seeded with %d rooms", len(app.state.catalog.list_rooms()))
        try:
            yield
        finally:
            await app.state.redis.aclose()

    app = FastAPI(lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors.allow_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(rooms_router)
    app.include_router(bookings_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


load_env_file()

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CONFIG = Config.load(os.getenv("HOTEL_CONFIG"))

app = app_factory(REDIS_URL, CONFIG)
