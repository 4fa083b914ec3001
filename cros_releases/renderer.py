from __future__ import annotations

import re
from typing import Iterable, List

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .decorators import TextDecorator


# Tags whose entire subtree is discarded.
_SKIP_TAGS = frozenset({"script", "style", "head", "title", "noscript", "iframe", "template"})

# Block-level tags that force a paragraph break around them.
_BLOCK_TAGS = frozenset({
    "p", "div", "section", "article", "main", "header", "footer", "aside",
    "address", "center", "figure", "figcaption", "table", "tr", "dl", "dt", "dd", "hr",
})

_HEADER_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}

# Inline tags -> (open, close) decorator hooks.
_INLINE_TAGS = {
    "em": ("on_emphasis_open", "on_emphasis_close"),
    "i": ("on_emphasis_open", "on_emphasis_close"),
    "strong": ("on_strong_open", "on_strong_close"),
    "b": ("on_strong_open", "on_strong_close"),
    "s": ("on_strikeout_open", "on_strikeout_close"),
    "strike": ("on_strikeout_open", "on_strikeout_close"),
    "del": ("on_strikeout_open", "on_strikeout_close"),
    "code": ("on_code_open", "on_code_close"),
    "tt": ("on_code_open", "on_code_close"),
}

_WS_RE = re.compile(r"\s+")


def _trim_blank(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start]:
        start += 1
    while end > start and not lines[end - 1]:
        end -= 1
    return lines[start:end]


class _BlockRenderer:
    """
    Renders a sequence of nodes into lines.

    Inline content accumulates into the current line until a block boundary
    flushes it. List items and quotes render in a child renderer holding a
    cloned decorator, so link state never leaks between nesting levels.
    """

    def __init__(self, decorator: TextDecorator) -> None:
        self.decorator = decorator
        self.lines: List[str] = []
        self.links: List[str] = []
        self._fragments: List[str] = []

    def render(self, nodes: Iterable) -> List[str]:
        for node in nodes:
            self._walk(node)
        self._flush()
        return _trim_blank(self.lines)

    def _flush(self) -> bool:
        text = "".join(self._fragments).strip()
        self._fragments = []
        if text:
            self.lines.append(text)
        return bool(text)

    def _append_text(self, data: str) -> None:
        # Collapse per text node; decorator output (link targets, image sources) is never rewritten.
        text = _WS_RE.sub(" ", data)
        if text.startswith(" ") and (not self._fragments or self._fragments[-1].endswith(" ")):
            text = text[1:]
        if text:
            self._fragments.append(text)

    def _break(self) -> None:
        self._flush()
        if self.lines and self.lines[-1]:
            self.lines.append("")

    def _subblock(self, tag: Tag) -> List[str]:
        child = _BlockRenderer(self.decorator.clone_for_subblock())
        lines = child.render(tag.children)
        self.links.extend(child.links)
        return lines

    def _walk(self, node) -> None:
        if isinstance(node, PreformattedString):
            # Comments, doctypes, CDATA and processing instructions.
            return
        if isinstance(node, NavigableString):
            self._append_text(str(node))
            return
        if not isinstance(node, Tag):
            return

        name = node.name
        dec = self.decorator
        if name in _SKIP_TAGS:
            return
        if name == "br":
            if not self._flush():
                self.lines.append("")
        elif name in _HEADER_TAGS:
            self._break()
            self._fragments.append(dec.header_prefix(_HEADER_TAGS[name]))
            self._walk_children(node)
            self._break()
        elif name == "a" and node.get("href") is not None:
            href = node.get("href")
            self.links.append(href)
            self._fragments.append(dec.on_link_open(href))
            self._walk_children(node)
            self._fragments.append(dec.on_link_close())
        elif name in _INLINE_TAGS:
            open_hook, close_hook = _INLINE_TAGS[name]
            self._fragments.append(getattr(dec, open_hook)())
            self._walk_children(node)
            self._fragments.append(getattr(dec, close_hook)())
        elif name == "img":
            src = node.get("src") or ""
            title = node.get("alt") or node.get("title") or ""
            self._fragments.append(dec.on_image(src, title))
        elif name == "blockquote":
            self._break()
            prefix = dec.quote_prefix()
            for line in self._subblock(node):
                self.lines.append(prefix + line if line else prefix.rstrip())
            self._break()
        elif name in ("ul", "ol"):
            self._render_list(node)
        elif name == "pre":
            self._break()
            self.lines.extend(node.get_text().strip("\n").split("\n"))
            self._break()
        elif name in _BLOCK_TAGS:
            self._break()
            self._walk_children(node)
            self._break()
        else:
            self._walk_children(node)

    def _walk_children(self, node: Tag) -> None:
        for child in node.children:
            self._walk(child)

    def _render_list(self, node: Tag) -> None:
        dec = self.decorator
        ordered = node.name == "ol"
        try:
            index = int(node.get("start", 1))
        except (TypeError, ValueError):
            index = 1

        self._break()
        for item in node.find_all("li", recursive=False):
            prefix = dec.ordered_item_prefix(index) if ordered else dec.unordered_item_prefix()
            index += 1
            lines = self._subblock(item)
            if not lines:
                self.lines.append(prefix.rstrip())
                continue
            self.lines.append(prefix + lines[0])
            indent = " " * len(prefix)
            self.lines.extend(indent + line if line else "" for line in lines[1:])
        self._break()


def render_html(html: str, decorator: TextDecorator) -> str:
    """
    Render an HTML fragment to text using ``decorator`` for all markup.

    Lines are never wrapped and each one ends with ``\\n``, so a non-empty
    result always ends with a newline. Parsing is best-effort (BeautifulSoup
    with the stdlib ``html.parser`` backend), so malformed markup degrades
    instead of failing.
    """
    soup = BeautifulSoup(html, "html.parser")
    renderer = _BlockRenderer(decorator)
    lines = renderer.render(soup.children)
    lines.extend(decorator.finalize(renderer.links))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
