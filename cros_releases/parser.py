from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import time


def _to_datetime(entry: Dict[str, Any]) -> Optional[datetime]:
    """
    Convert the entry's last-updated time to a timezone-aware UTC datetime.
    feedparser normalizes ``*_parsed`` fields to UTC struct_time values.
    """
    val = entry.get("updated_parsed")
    if isinstance(val, time.struct_time):
        try:
            return datetime(*val[:6], tzinfo=timezone.utc)
        except (TypeError, ValueError):
            return None
    return None


def _get_content(entry: Dict[str, Any]) -> Optional[str]:
    # Atom <content>: feedparser exposes a list of {"type", "value", ...}
    content = entry.get("content")
    if isinstance(content, list) and content:
        c0 = content[0]
        if isinstance(c0, dict):
            value = c0.get("value")
            return value if isinstance(value, str) else ""
    return None


def _get_categories(entry: Dict[str, Any]) -> List[str]:
    terms: List[str] = []
    tags = entry.get("tags")
    if isinstance(tags, list):
        for t in tags:
            if isinstance(t, dict):
                term = t.get("term")
                if isinstance(term, str):
                    terms.append(term)
    return terms


def parse_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw feed entry (from feedparser) to a normalized dict.
    Fields: title (str|None), content (raw HTML str|None), updated_at (datetime|None),
    categories (list of terms), link, guid
    """
    title = entry.get("title")
    if not isinstance(title, str) or not title.strip():
        title = None
    else:
        title = title.strip()

    guid = None
    for k in ("id", "guid"):
        v = entry.get(k)
        if isinstance(v, str) and v.strip():
            guid = v.strip()
            break

    return {
        "title": title,
        "content": _get_content(entry),
        "updated_at": _to_datetime(entry),
        "categories": _get_categories(entry),
        "link": (entry.get("link") or "").strip(),
        "guid": guid,
    }
