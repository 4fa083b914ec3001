from __future__ import annotations

import json
import logging

import pytest

from cros_releases import cli, core, notifier
from cros_releases.exceptions import ReleaseFetchError
from cros_releases.state import cache_path, load_last_release


@pytest.fixture
def feed(monkeypatch, tmp_path, entry_factory):
    monkeypatch.setenv("CROS_RELEASES_CACHE_DIR", str(tmp_path))
    monkeypatch.delenv("CROS_RELEASES_FEED_URL", raising=False)
    monkeypatch.delenv("CROS_RELEASES_LOG_LEVEL", raising=False)
    entries = [
        entry_factory(title="Older", updated=(2024, 1, 10, 12, 0, 0)),
        entry_factory(title="Newest", updated=(2024, 1, 20, 12, 0, 0)),
    ]
    monkeypatch.setattr(core, "fetch_feed_entries", lambda url: entries)
    return entries


def test_pretty_is_default(feed, capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("============\nNewest\nReleased at 20/01/2024 12:00\n============\n")
    assert "\nOlder\n" in out


def test_json_plain_unfiltered(feed, capsys):
    assert cli.main(["-f", "json", "-D", "plain", "-F"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["title"] for d in data] == ["Newest", "Older"]
    assert all(d["summary"] == "" for d in data)
    assert "Hi everyone!" in data[0]["content"]
    assert data[0]["timestamp"] == "2024-01-20T12:00:00Z"


def test_notification_format_sends_one_per_release(feed, monkeypatch, capsys):
    sent = []

    class RecordingNotifier:
        def __init__(self, app_name):
            self.app_name = app_name

        async def send(self, title, message):
            sent.append((title, message))

    monkeypatch.setattr(notifier, "DesktopNotifier", RecordingNotifier)
    assert cli.main(["--format", "notification"]) == 0
    assert [title for title, _ in sent] == ["ChromeOS Release on 2024/01/20", "ChromeOS Release on 2024/01/10"]
    assert all(body.startswith("The Stable channel is being updated") for _, body in sent)
    assert capsys.readouterr().out == ""


def test_notification_falls_back_to_stdout(feed, monkeypatch, capsys):
    class NoBackend:
        def __init__(self, app_name):
            pass

        async def send(self, title, message):
            raise OSError("no D-Bus session")

    monkeypatch.setattr(notifier, "DesktopNotifier", NoBackend)
    assert cli.main(["--format", "notification"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("ChromeOS Release on 2024/01/20\nThe Stable channel is being updated")


def test_invalid_log_level_falls_back_to_warning(feed, monkeypatch, capsys):
    monkeypatch.setenv("CROS_RELEASES_LOG_LEVEL", "loud")
    assert cli.main(["-f", "json"]) == 0
    assert "unknown log level 'loud'" in capsys.readouterr().err
    assert cli._resolve_log_level(False, "loud") == logging.WARNING
    assert cli._resolve_log_level(False, "debug") == logging.DEBUG
    assert cli._resolve_log_level(True, "debug") == logging.INFO


def test_diff_stores_and_applies_cutoff(feed, tmp_path, capsys):
    assert cli.main(["-d", "-f", "json"]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 2
    stored = load_last_release(cache_path(tmp_path))
    assert stored is not None and stored.day == 20

    assert cli.main(["-d", "-f", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == []

    assert cli.main(["-d"]) == 0
    assert capsys.readouterr().out == ""


def test_fetch_error_exit_code(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("CROS_RELEASES_CACHE_DIR", str(tmp_path))

    def boom(url):
        raise ReleaseFetchError("Invalid Atom feed: x")

    monkeypatch.setattr(core, "fetch_feed_entries", boom)
    assert cli.main([]) == 1
    assert "Invalid Atom feed" in capsys.readouterr().err


def test_rejects_unknown_decorator():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["-D", "html"])
