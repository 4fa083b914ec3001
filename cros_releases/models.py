from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict


def format_timestamp(ts: datetime) -> str:
    """RFC 3339 text for a timezone-aware datetime, using ``Z`` for UTC."""
    text = ts.isoformat()
    if ts.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


@dataclass(frozen=True)
class Release:
    """
    One processed ChromeOS release announcement.

    WARNING: Do not change fields lightly. This is the JSON output contract.
    """
    title: str
    summary: str
    content: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "content": self.content,
            "timestamp": format_timestamp(self.timestamp),
        }
