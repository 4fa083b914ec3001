from __future__ import annotations

from typing import Any, Dict


# Exact category terms used by the Chrome Releases blog for ChromeOS posts.
CHROMEOS_CATEGORIES = frozenset({
    "ChromeOS", "Chrome OS", "ChromeOS Flex", "Chrome OS Flex",
})


def is_chromeos_entry(entry: Dict[str, Any]) -> bool:
    """
    True when one of the entry's category terms is a ChromeOS category.

    This function expects an entry dict produced by `cros_releases.parser.parse_entry`.
    Terms are compared exactly; "chromeos" or "ChromeOS Beta" do not qualify.
    """
    return any(term in CHROMEOS_CATEGORIES for term in entry.get("categories") or ())


def has_required_fields(entry: Dict[str, Any]) -> bool:
    """Entries without a title, a content element or an updated time produce no release."""
    return bool(entry.get("title")) and entry.get("content") is not None and entry.get("updated_at") is not None
