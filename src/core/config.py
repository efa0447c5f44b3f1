"""Runtime configuration read from environment variables."""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """
    Read an integer environment variable.

    A value that is not an integer is logged and replaced by ``default``,
    so a bad setting never stops the package from importing.
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


# Rendering
RENDER_WORKERS = env_int("RAYTRACER_WORKERS", 0)
ROWS_PER_CHUNK = max(1, env_int("RAYTRACER_ROWS_PER_CHUNK", 4))

# Output
OUTPUT_DIR = Path(os.getenv("RAYTRACER_OUTPUT_DIR", "output"))

# Logging
LOG_LEVEL = os.getenv("RAYTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RAYTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def resolve_workers(requested: Optional[int] = None) -> int:
    """
    Turn a requested worker count into a positive process count.

    ``None`` falls back to RAYTRACER_WORKERS; zero or a negative value means
    one worker per CPU.
    """
    if requested is None:
        requested = RENDER_WORKERS
    if requested <= 0:
        return os.cpu_count() or 1
    return requested


__all__ = [
    "RENDER_WORKERS",
    "ROWS_PER_CHUNK",
    "OUTPUT_DIR",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "env_int",
    "resolve_workers",
]
