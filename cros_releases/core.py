from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from .classifier import is_chromeos_entry
from .decorators import DecoratorStyle
from .fetcher import fetch_feed_entries, feed_url
from .models import Release
from .normalizer import to_release
from .parser import parse_entry

logger = logging.getLogger(__name__)


@dataclass
class FetchOptions:
    decorator: DecoratorStyle = DecoratorStyle.RICH
    unfiltered: bool = False
    releases: int = 25
    start: int = 1
    since: Optional[datetime] = None
    feed_url: Optional[str] = None


def newer_than(releases: Iterable[Release], cutoff: Optional[datetime]) -> List[Release]:
    """Drop releases with ``timestamp <= cutoff``; no cutoff keeps everything."""
    if cutoff is None:
        return list(releases)
    return [r for r in releases if r.timestamp > cutoff]


def build_releases(
    entries: Iterable[Dict[str, Any]],
    *,
    decorator: DecoratorStyle | str = DecoratorStyle.RICH,
    unfiltered: bool = False,
    since: Optional[datetime] = None,
) -> List[Release]:
    """
    Turn raw feed entries into releases, newest first.

    Pipeline: parse → category filter (ChromeOS only) → render + filter → sort → cutoff
    """
    parsed = [parse_entry(e) for e in entries]
    chromeos = [e for e in parsed if is_chromeos_entry(e)]

    releases = []
    for e in chromeos:
        try:
            releases.append(to_release(e, decorator=decorator, unfiltered=unfiltered))
        except ValueError:
            # Entries without title/content/updated time are skipped
            logger.debug("Skipping incomplete entry %s", e.get("guid") or e.get("link"))
            continue

    releases.sort(key=lambda r: r.timestamp, reverse=True)
    return newer_than(releases, since)


class ReleaseFetcher:
    """
    High-level API: fetch the Chrome Releases feed and return ChromeOS releases.

    Pipeline: fetch → parse → category filter → render + filter → sort (newest first) → cutoff
    """

    def __init__(
        self,
        *,
        decorator: DecoratorStyle | str = DecoratorStyle.RICH,
        unfiltered: bool = False,
        releases: int = 25,
        start: int = 1,
        since: Optional[datetime] = None,
        feed_url: Optional[str] = None,
    ) -> None:
        self.options = FetchOptions(
            decorator=DecoratorStyle(decorator),
            unfiltered=unfiltered,
            releases=releases,
            start=start,
            since=since,
            feed_url=feed_url,
        )

    def fetch(self) -> List[Release]:
        url = feed_url(self.options.start, self.options.releases, base_url=self.options.feed_url)
        entries = fetch_feed_entries(url)
        releases = build_releases(
            entries,
            decorator=self.options.decorator,
            unfiltered=self.options.unfiltered,
            since=self.options.since,
        )
        logger.info("Built %d ChromeOS releases from %d feed entries", len(releases), len(entries))
        return releases
