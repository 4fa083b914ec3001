from __future__ import annotations

from typing import Any, Dict

from .classifier import has_required_fields
from .decorators import DecoratorStyle, make_decorator
from .filters import filter_content
from .models import Release
from .renderer import render_html

# Used when the entry has a content element with an empty body.
NO_CONTENT = "No content."


def remap_underline(html: str) -> str:
    """Underline has no text equivalent; render it as strong instead."""
    return html.replace("<u>", "<strong>").replace("</u>", "</strong>")


def to_release(
    entry: Dict[str, Any],
    *,
    decorator: DecoratorStyle | str = DecoratorStyle.RICH,
    unfiltered: bool = False,
) -> Release:
    """
    Convert a parsed entry dict into a Release.
    Requires:
    - title (non-empty string)
    - content (raw HTML string, may be empty)
    - updated_at (timezone-aware datetime)

    Each call renders with a fresh decorator and fresh filter state.
    """
    if not has_required_fields(entry):
        raise ValueError("Entry lacks required fields for Release: title/content/updated_at")

    content = entry["content"]

    if content:
        rendered = render_html(remap_underline(content), make_decorator(decorator))
    else:
        rendered = NO_CONTENT

    result = filter_content(rendered, enabled=not unfiltered)

    return Release(
        title=entry["title"],
        summary=result.summary,
        content=result.content,
        timestamp=entry["updated_at"],
    )
