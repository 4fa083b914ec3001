"""
Decoration policies used by the HTML renderer.

A decorator maps markup events (link open/close, emphasis, headings, list items,
images, ...) to the text fragments emitted in their place. Two styles exist:

- ``markdown``: lightweight markup that can be re-rendered (``[text](url)``)
- ``plain``: unmarked text with link targets appended inline (``text (url)``)

Both styles render emphasis, strong, strikeout, code, headings, quotes and list
items identically; only links and images differ.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Protocol, Sequence


class TextDecorator(Protocol):
    def on_link_open(self, url: str) -> str:  # pragma: no cover - interface
        ...

    def on_link_close(self) -> str:  # pragma: no cover - interface
        ...

    def on_emphasis_open(self) -> str:  # pragma: no cover - interface
        ...

    def on_emphasis_close(self) -> str:  # pragma: no cover - interface
        ...

    def on_strong_open(self) -> str:  # pragma: no cover - interface
        ...

    def on_strong_close(self) -> str:  # pragma: no cover - interface
        ...

    def on_strikeout_open(self) -> str:  # pragma: no cover - interface
        ...

    def on_strikeout_close(self) -> str:  # pragma: no cover - interface
        ...

    def on_code_open(self) -> str:  # pragma: no cover - interface
        ...

    def on_code_close(self) -> str:  # pragma: no cover - interface
        ...

    def on_image(self, src: str, title: str) -> str:  # pragma: no cover - interface
        ...

    def header_prefix(self, level: int) -> str:  # pragma: no cover - interface
        ...

    def quote_prefix(self) -> str:  # pragma: no cover - interface
        ...

    def unordered_item_prefix(self) -> str:  # pragma: no cover - interface
        ...

    def ordered_item_prefix(self, index: int) -> str:  # pragma: no cover - interface
        ...

    def finalize(self, links: Sequence[str]) -> List[str]:  # pragma: no cover - interface
        ...

    def clone_for_subblock(self) -> "TextDecorator":  # pragma: no cover - interface
        ...


class DecoratorStyle(str, Enum):
    RICH = "markdown"
    PLAIN = "plain"


_EMPHASIS = "*"
_STRONG = "**"
_STRIKEOUT = "~~"
_CODE = "`"


@dataclass
class StyleDecorator:
    """
    Decorator for one render pass.

    The only state is the target of the most recently opened link, which is
    consumed when the link closes. Links do not nest in release HTML; if they
    did, the inner target would overwrite the outer one.
    """
    style: DecoratorStyle = DecoratorStyle.RICH
    current_link: str = ""

    def on_link_open(self, url: str) -> str:
        self.current_link = url
        if self.style is DecoratorStyle.PLAIN:
            return ""
        return "["

    def on_link_close(self) -> str:
        if self.style is DecoratorStyle.PLAIN:
            return f" ({self.current_link})"
        return f"]({self.current_link})"

    def on_emphasis_open(self) -> str:
        return _EMPHASIS

    def on_emphasis_close(self) -> str:
        return _EMPHASIS

    def on_strong_open(self) -> str:
        return _STRONG

    def on_strong_close(self) -> str:
        return _STRONG

    def on_strikeout_open(self) -> str:
        return _STRIKEOUT

    def on_strikeout_close(self) -> str:
        return _STRIKEOUT

    def on_code_open(self) -> str:
        return _CODE

    def on_code_close(self) -> str:
        return _CODE

    def on_image(self, src: str, title: str) -> str:
        if self.style is DecoratorStyle.PLAIN:
            return f" {title} ({src})"
        return f"[{title}]({src})"

    def header_prefix(self, level: int) -> str:
        return "#" * level + " "

    def quote_prefix(self) -> str:
        return "> "

    def unordered_item_prefix(self) -> str:
        return "* "

    def ordered_item_prefix(self, index: int) -> str:
        return f"{index}. "

    def finalize(self, links: Sequence[str]) -> List[str]:
        # No footnote-style link list; targets are already inline.
        return []

    def clone_for_subblock(self) -> "StyleDecorator":
        return replace(self)


def make_decorator(style: DecoratorStyle | str = DecoratorStyle.RICH) -> StyleDecorator:
    """Fresh decorator for a single entry. Accepts the enum or its value (``"markdown"``/``"plain"``)."""
    return StyleDecorator(style=DecoratorStyle(style))
