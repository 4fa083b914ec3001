from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .fetcher import DEFAULT_FEED_URL
from .state import cache_root


@dataclass(frozen=True)
class Settings:
    feed_url: str
    cache_dir: Path
    log_level: Optional[str] = None
    discord_token: Optional[str] = None


def load_settings(*, dotenv: bool = True) -> Settings:
    """
    Read settings from the environment, after loading a ``.env`` file when present.

    CROS_RELEASES_FEED_URL   base URL of the releases feed
    CROS_RELEASES_CACHE_DIR  cache root holding crosreleasenotifier/last_release
    CROS_RELEASES_LOG_LEVEL  logging level name (DEBUG, INFO, ...)
    DISCORD_BOT_TOKEN        token for discord_bot.py
    """
    if dotenv:
        load_dotenv()

    cache_dir = os.getenv("CROS_RELEASES_CACHE_DIR")
    return Settings(
        feed_url=os.getenv("CROS_RELEASES_FEED_URL") or DEFAULT_FEED_URL,
        cache_dir=Path(cache_dir).expanduser() if cache_dir else cache_root(),
        log_level=(os.getenv("CROS_RELEASES_LOG_LEVEL") or None),
        discord_token=os.getenv("DISCORD_BOT_TOKEN") or None,
    )
