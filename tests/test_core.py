from __future__ import annotations

from datetime import datetime, timezone

from cros_releases import core
from cros_releases.core import ReleaseFetcher, build_releases, newer_than
from cros_releases.decorators import DecoratorStyle
from cros_releases.fetcher import DEFAULT_FEED_URL, feed_url


def _entries(entry_factory):
    return [
        entry_factory(title="Older", updated=(2024, 1, 10, 12, 0, 0), entry_id="a"),
        entry_factory(title="Desktop", terms=["Desktop Update"], entry_id="b"),
        entry_factory(title="Newest", updated=(2024, 1, 20, 12, 0, 0), terms=["Chrome OS Flex"], entry_id="c"),
        entry_factory(title=None, entry_id="d"),
        entry_factory(html=None, entry_id="e"),
        entry_factory(updated=None, entry_id="f"),
        entry_factory(title="Middle", updated=(2024, 1, 15, 12, 0, 0), entry_id="g"),
    ]


def test_build_releases_filters_and_sorts(entry_factory):
    releases = build_releases(_entries(entry_factory))
    assert [r.title for r in releases] == ["Newest", "Middle", "Older"]
    assert all(r.summary for r in releases)


def test_build_releases_cutoff_is_exclusive(entry_factory):
    cutoff = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    releases = build_releases(_entries(entry_factory), since=cutoff)
    assert [r.title for r in releases] == ["Newest"]


def test_newer_than_without_cutoff(entry_factory):
    releases = build_releases(_entries(entry_factory))
    assert newer_than(releases, None) == releases


def test_processing_order_does_not_matter(entry_factory):
    entries = _entries(entry_factory)
    assert build_releases(entries) == build_releases(list(reversed(entries)))


def test_feed_url():
    assert feed_url(1, 25) == f"{DEFAULT_FEED_URL}?start-index=1&max-results=25"
    assert feed_url(5, 10, base_url="https://feed.test/posts") == "https://feed.test/posts?start-index=5&max-results=10"


def test_release_fetcher_uses_paged_url(monkeypatch, entry_factory):
    seen = []

    def fake_fetch(url):
        seen.append(url)
        return _entries(entry_factory)

    monkeypatch.setattr(core, "fetch_feed_entries", fake_fetch)
    fetcher = ReleaseFetcher(decorator="plain", releases=10, start=3, feed_url="https://feed.test/posts")
    releases = fetcher.fetch()

    assert seen == ["https://feed.test/posts?start-index=3&max-results=10"]
    assert fetcher.options.decorator is DecoratorStyle.PLAIN
    assert [r.title for r in releases] == ["Newest", "Middle", "Older"]
    assert "[N/A][1 (https://crbug.com/1)] High CVE-2024-0001" in releases[0].content
