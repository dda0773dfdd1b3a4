from __future__ import annotations

import os
from pathlib import Path


def _parse_value(raw: str) -> str:
    value = raw.strip()
    if value[:1] in ("\"", "'"):
        end = value.find(value[0], 1)
        if end != -1:
            # anything after the closing quote is a comment
            return value[1:end]
    if " #" in value:
        value = value.split(" #", 1)[0].rstrip()
    return value


def load_env_file(path: str | os.PathLike[str] = ".env") -> dict[str, str]:
    """Fill os.environ from a dotenv file, keeping variables already set.

    Returns the entries that were actually applied.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}

    applied: dict[str, str] = {}
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        value = _parse_value(raw_value)
        os.environ[key] = value
        applied[key] = value
    return applied
