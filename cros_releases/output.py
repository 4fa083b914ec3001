from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .models import Release

SEPARATOR = "============"


@dataclass(frozen=True)
class Notification:
    summary: str
    body: str


def render_json(releases: Iterable[Release]) -> str:
    return json.dumps([r.to_dict() for r in releases], ensure_ascii=False)


def render_pretty(releases: Sequence[Release]) -> str:
    """Human-readable block per release. Empty string when there is nothing to show."""
    return "\n".join(
        f"{SEPARATOR}\n{r.title}\nReleased at {r.timestamp:%d/%m/%Y %H:%M}\n{SEPARATOR}\n{r.content}"
        for r in releases
    )


def to_notifications(releases: Iterable[Release]) -> List[Notification]:
    return [
        Notification(summary=f"ChromeOS Release on {r.timestamp:%Y/%m/%d}", body=r.summary)
        for r in releases
    ]


def render_notifications(releases: Iterable[Release]) -> str:
    return "\n\n".join(f"{n.summary}\n{n.body}" for n in to_notifications(releases))
