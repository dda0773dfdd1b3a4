from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


def _default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _require_number(value: Any, default: float, name: str) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number") from exc
    if number <= 0:
        raise ValueError(f"{name} must be positive")
    return number


def _require_bool(value: Any, default: bool, name: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false")
    return value


def _require_level(value: Any, default: str) -> str:
    if value is None:
        return default
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"log_level {value!r} is not a logging level")
    return level


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping")
    return value


@dataclass(frozen=True)
class BookingStoreConfig:
    read_timeout: float = 30
    write_timeout: float = 5


@dataclass(frozen=True)
class CatalogConfig:
    require_known_room: bool = False


@dataclass(frozen=True)
class CorsConfig:
    allow_origins: tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class Config:
    log_level: str = "INFO"
    booking_store: BookingStoreConfig = field(default_factory=BookingStoreConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        config_path = Path(path) if path else _default_config_path()
        if not config_path.exists():
            return cls()
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError("config.yaml must contain a mapping")
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        defaults = cls()
        store_data = _section(data, "booking_store")
        catalog_data = _section(data, "catalog")
        cors_data = _section(data, "cors")

        origins = cors_data.get("allow_origins")
        if origins is None:
            allow_origins = defaults.cors.allow_origins
        elif isinstance(origins, list) and all(isinstance(o, str) for o in origins):
            allow_origins = tuple(origins)
        else:
            raise ValueError("cors.allow_origins must be a list of strings")

        return cls(
            log_level=_require_level(data.get("log_level"), defaults.log_level),
            booking_store=BookingStoreConfig(
                read_timeout=_require_number(
                    store_data.get("read_timeout"),
                    defaults.booking_store.read_timeout,
                    "booking_store.read_timeout",
                ),
                write_timeout=_require_number(
                    store_data.get("write_timeout"),
                    defaults.booking_store.write_timeout,
                    "booking_store.write_timeout",
                ),
            ),
            catalog=CatalogConfig(
                require_known_room=_require_bool(
                    catalog_data.get("require_known_room"),
                    defaults.catalog.require_known_room,
                    "catalog.require_known_room",
                ),
            ),
            cors=CorsConfig(allow_origins=allow_origins),
        )
