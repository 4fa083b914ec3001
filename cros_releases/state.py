"""Cached timestamp of the newest release already shown (``--diff``)."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from .exceptions import CacheError
from .models import format_timestamp

logger = logging.getLogger(__name__)

CACHE_PREFIX = "crosreleasenotifier"
CACHE_FILE = "last_release"


def cache_root() -> Path:
    xdg = os.getenv("XDG_CACHE_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".cache"


def cache_path(cache_dir: Optional[Path] = None) -> Path:
    return (cache_dir or cache_root()) / CACHE_PREFIX / CACHE_FILE


def _parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    ts = datetime.fromisoformat(value)
    if ts.tzinfo is None:
        raise ValueError(f"timestamp without timezone: {value}")
    return ts


def load_last_release(path: Path) -> Optional[datetime]:
    """Stored timestamp, or None when the file is missing or unreadable."""
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, str):
            raise ValueError("expected a JSON string")
        return _parse_timestamp(data)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable release cache %s: %s", path, e)
        return None


def save_last_release(path: Path, timestamp: datetime) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(format_timestamp(timestamp)), encoding="utf-8")
    except OSError as e:
        raise CacheError(f"Failed to write release cache: {path} ({e})") from e
