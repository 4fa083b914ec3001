"""
cros_releases

A small library that turns the Chrome Releases feed into ChromeOS release records.

Core ideas:
- Input: the Chrome Releases Atom feed
- Process: fetch → parse → ChromeOS-only → render HTML to text → filter boilerplate → sort (newest first)
- Output: List[Release] with title, one-line summary, cleaned content and timestamp

Example
-------
from cros_releases import ReleaseFetcher

fetcher = ReleaseFetcher(decorator="plain", releases=10)

for release in fetcher.fetch():
    print(release.timestamp, release.title)
    print(release.summary)
"""
from .models import Release
from .decorators import DecoratorStyle, StyleDecorator, TextDecorator, make_decorator
from .renderer import render_html
from .filters import FilterResult, filter_content, filter_lines
from .core import ReleaseFetcher, build_releases

__version__ = "0.1.0"

__all__ = [
    "Release",
    "DecoratorStyle",
    "StyleDecorator",
    "TextDecorator",
    "make_decorator",
    "render_html",
    "FilterResult",
    "filter_content",
    "filter_lines",
    "ReleaseFetcher",
    "build_releases",
]
