from __future__ import annotations

import time
from typing import Any, Dict, List

import pytest

FOOTER_HTML = (
    "<p>Interested in switching channels? Find out how.</p>"
    "<p>Matt Nelson</p>"
    "<p>Google ChromeOS</p>"
    "<p>Footer</p>"
)

STABLE_HTML = (
    "<p>Hi everyone!</p>"
    "<p>The Stable channel is being updated to 120.0.6099.235 (Platform version: 15662.76.0)"
    " for most ChromeOS devices. Want to know more? "
    '<a href="https://support.google.com/chrome/a/answer/7679408">Release notes for ChromeOS 120</a></p>'
    "<p>If you find new issues, please let us know.</p>"
    "<p><u>Security Fixes and Rewards</u></p>"
    "<p>This update contains multiple Security fixes, including:</p>"
    '<p>[N/A][<a href="https://crbug.com/1">1</a>] High CVE-2024-0001</p>'
    + FOOTER_HTML
)


def make_entry(
    *,
    title: Any = "Stable Channel Update for ChromeOS",
    html: Any = STABLE_HTML,
    updated: Any = (2024, 1, 17, 18, 30, 0),
    terms: List[str] = ("ChromeOS", "Stable updates"),
    entry_id: str = "tag:blogger.com,1999:post-1",
) -> Dict[str, Any]:
    """Entry shaped like feedparser output for the Chrome Releases Atom feed."""
    entry: Dict[str, Any] = {"id": entry_id, "link": "https://chromereleases.googleblog.com/post"}
    if title is not None:
        entry["title"] = title
    if html is not None:
        entry["content"] = [{"type": "text/html", "value": html}]
    if updated is not None:
        entry["updated_parsed"] = time.struct_time(tuple(updated) + (0, 1, 0))
    entry["tags"] = [{"term": t, "scheme": None, "label": None} for t in terms]
    return entry


@pytest.fixture
def entry_factory():
    return make_entry
