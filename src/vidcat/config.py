"""Runtime configuration from environment variables.

Variables:
- VIDCAT_SNAPSHOT_PATH: snapshot JSON file (default data/videos.json)
- VIDCAT_CORS_ORIGINS: comma-separated allowed origins for the dashboard
- VIDCAT_DEFAULT_PAGE_SIZE: page size when the client sends none (default 10)
- VIDCAT_LOG_LEVEL: logging level name (default INFO)
- HOST / PORT: server bind address (default 127.0.0.1:5001)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

DEFAULT_SNAPSHOT_PATH = Path("data/videos.json")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
)


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    snapshot_path: Path = DEFAULT_SNAPSHOT_PATH
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    default_page_size: int = 10
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5001


def _read_int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings with unset variables at their defaults.

    Raises:
        ValueError: If a numeric variable is not a valid integer.
    """
    if env is None:
        env = os.environ

    origins_raw = env.get("VIDCAT_CORS_ORIGINS")
    if origins_raw:
        cors_origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())
    else:
        cors_origins = DEFAULT_CORS_ORIGINS

    return Settings(
        snapshot_path=Path(env.get("VIDCAT_SNAPSHOT_PATH", str(DEFAULT_SNAPSHOT_PATH))),
        cors_origins=cors_origins,
        default_page_size=_read_int(env, "VIDCAT_DEFAULT_PAGE_SIZE", 10, minimum=1),
        log_level=env.get("VIDCAT_LOG_LEVEL", "INFO").upper(),
        host=env.get("HOST", "127.0.0.1"),
        port=_read_int(env, "PORT", 5001, minimum=1),
    )
