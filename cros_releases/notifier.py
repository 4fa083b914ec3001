"""Desktop notifications, one per release."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

from desktop_notifier import DesktopNotifier

from .exceptions import NotificationError
from .models import Release
from .output import Notification, to_notifications

logger = logging.getLogger(__name__)

APP_NAME = "ChromeOS Releases"


async def _send_all(notifier: DesktopNotifier, notes: List[Notification]) -> None:
    for note in notes:
        await notifier.send(title=note.summary, message=note.body)


def send_notifications(releases: Iterable[Release], notifier: Optional[DesktopNotifier] = None) -> int:
    """
    Show a desktop notification per release: the release date as heading, the
    release summary as body. Returns the number of notifications sent.

    Raises NotificationError when no notification backend is reachable.
    """
    notes = to_notifications(releases)
    if not notes:
        return 0
    try:
        asyncio.run(_send_all(notifier or DesktopNotifier(app_name=APP_NAME), notes))
    except Exception as e:  # backend errors vary by platform (D-Bus, WinRT, ...)
        raise NotificationError(f"Failed to show desktop notification ({e})") from e
    logger.info("Sent %d desktop notifications", len(notes))
    return len(notes)
