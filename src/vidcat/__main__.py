"""Run the vidcat API server.

Usage:
    python -m vidcat

Configuration is read from the environment, see vidcat.config.
"""

from __future__ import annotations

import logging

import uvicorn

from vidcat.api.app import create_app
from vidcat.config import load_settings


def main() -> None:
    """Configure logging and serve the API with uvicorn."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(__name__).info(f"Starting vidcat on {settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
