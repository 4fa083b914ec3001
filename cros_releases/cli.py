"""ChromeOS releases command line.

Fetches the Chrome Releases feed and filters it down to ChromeOS updates.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import __version__
from .config import load_settings
from .core import ReleaseFetcher
from .decorators import DecoratorStyle
from .exceptions import CacheError, NotificationError, ReleaseFetchError
from .models import Release
from .notifier import send_notifications
from .output import render_json, render_notifications, render_pretty
from .state import cache_path, load_last_release, save_last_release

logger = logging.getLogger(__name__)

FORMATS = ("json", "pretty", "notification")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cros-releases",
        description="Fetch the Chrome Releases feed and show only ChromeOS updates.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-D", "--decorator",
        choices=[s.value for s in DecoratorStyle],
        default=DecoratorStyle.RICH.value,
        help="Decorator to format the release HTML with.",
    )
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="pretty",
        help="Format to print releases in.",
    )
    parser.add_argument(
        "-F", "--no-filter",
        dest="unfiltered",
        action="store_true",
        help="Disable filtering the release HTML to remove boilerplate.",
    )
    parser.add_argument(
        "-r", "--releases",
        type=int,
        default=25,
        help="Number of feed entries to request. The feed caps this at an unknown maximum, "
             "and it does not equal the number of releases returned.",
    )
    parser.add_argument(
        "-s", "--start",
        type=int,
        default=1,
        help="Start index of feed entries to request.",
    )
    parser.add_argument(
        "-d", "--diff",
        action="store_true",
        help="Store and use a timestamp to only show new releases. "
             "The timestamp lives in the cache directory under crosreleasenotifier/.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def format_releases(releases: List[Release], fmt: str) -> Optional[str]:
    """Text to print for ``fmt``; None when nothing should be printed."""
    if fmt == "json":
        return render_json(releases)
    if not releases:
        return None
    return render_pretty(releases)


def _resolve_log_level(verbose: bool, configured: Optional[str]) -> int:
    if verbose:
        return logging.INFO
    if not configured:
        return logging.WARNING
    levels = logging.getLevelNamesMapping()
    name = configured.strip().upper()
    if name in levels:
        return levels[name]
    print(f"warning: unknown log level {configured!r} in CROS_RELEASES_LOG_LEVEL, using WARNING", file=sys.stderr)
    return logging.WARNING


def _notify(releases: List[Release]) -> None:
    """Desktop notifications; printed instead when no backend is available."""
    if not releases:
        return
    try:
        send_notifications(releases)
    except NotificationError as e:
        logger.warning("%s; printing notifications instead", e)
        print(render_notifications(releases))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()

    level = _resolve_log_level(args.verbose, settings.log_level)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    diff_file = cache_path(settings.cache_dir)
    since = load_last_release(diff_file) if args.diff else None

    fetcher = ReleaseFetcher(
        decorator=args.decorator,
        unfiltered=args.unfiltered,
        releases=args.releases,
        start=args.start,
        since=since,
        feed_url=settings.feed_url,
    )
    try:
        releases = fetcher.fetch()
    except ReleaseFetchError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "notification":
        _notify(releases)
    else:
        text = format_releases(releases, args.format)
        if text is not None:
            print(text)

    if args.diff and releases:
        try:
            save_last_release(diff_file, releases[0].timestamp)
        except CacheError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0
