from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import feedparser

from .exceptions import ReleaseFetchError

logger = logging.getLogger(__name__)

# Chrome Releases blog (Blogger) Atom feed.
DEFAULT_FEED_URL = "https://www.blogger.com/feeds/8982037438137564684/posts/default"


def feed_url(start: int = 1, max_results: int = 25, base_url: Optional[str] = None) -> str:
    """
    Build the paged feed URL. ``max_results`` is capped server-side at an
    undocumented maximum, so it is not the number of releases returned.
    """
    query = urlencode({"start-index": start, "max-results": max_results})
    return f"{base_url or DEFAULT_FEED_URL}?{query}"


def fetch_feed_entries(url: str) -> List[Dict[str, Any]]:
    """
    Fetch a single feed URL and return its entries.

    Raises ReleaseFetchError on network/parse issues or when the feed is malformed
    (bozo) and yielded no entries.
    """
    try:
        feed = feedparser.parse(url)
    except Exception as e:  # pragma: no cover - surface as domain error
        raise ReleaseFetchError(f"Failed to fetch feed: {url} ({e})") from e

    entries = getattr(feed, "entries", None)
    if getattr(feed, "bozo", 0) and not entries:
        exc = getattr(feed, "bozo_exception", None)
        msg = f"Invalid Atom feed: {url}"
        if exc:
            msg += f" ({exc})"
        raise ReleaseFetchError(msg)

    if not isinstance(entries, list):
        raise ReleaseFetchError(f"Feed has no entries: {url}")
    logger.info("Fetched %d entries from %s", len(entries), url)
    return entries
