"""
Project-wide notification bus and its sinks.
"""

from __future__ import annotations

import logging
from typing import List

from rich.console import Console
from rich.panel import Panel

from .notification import Notification, NotificationType, LINK_RE

logger = logging.getLogger(__name__)


class NotificationBus:
    """
    Publishes notifications to every subscribed sink.

    The bus keeps the history of published notifications so callers can
    activate their links after the fact.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sinks: List = []
        self.history: List[Notification] = []

    def subscribe(self, sink) -> None:
        self._sinks.append(sink)

    def unsubscribe(self, sink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def notify(self, notification: Notification) -> None:
        self.history.append(notification)
        if not self.enabled:
            logger.debug("Notifications disabled, not delivering %s", notification.group_id)
            return

        for sink in list(self._sinks):
            try:
                sink.notify(notification)
            except Exception:
                logger.exception("Notification sink %r failed", sink)

    def active(self) -> List[Notification]:
        """Published notifications that have not expired."""
        return [n for n in self.history if not n.expired]


class LoggingNotificationSink:
    """Writes notifications to the log."""

    _LEVELS = {
        NotificationType.INFORMATION: logging.INFO,
        NotificationType.WARNING: logging.WARNING,
        NotificationType.ERROR: logging.ERROR,
    }

    def notify(self, notification: Notification) -> None:
        logger.log(
            self._LEVELS[notification.type],
            "[%s] %s: %s",
            notification.group_id,
            notification.title,
            notification.plain_text,
        )


class RichNotificationSink:
    """Renders notifications as panels on a rich console."""

    _STYLES = {
        NotificationType.INFORMATION: "blue",
        NotificationType.WARNING: "yellow",
        NotificationType.ERROR: "red",
    }

    def __init__(self, console: Console = None, use_rich: bool = True):
        self.console = console or Console(stderr=True)
        self.use_rich = use_rich

    def notify(self, notification: Notification) -> None:
        if not self.use_rich:
            self.console.print(f"{notification.title}: {notification.plain_text}")
            return

        body = LINK_RE.sub(r"[bold underline]\2[/bold underline]", notification.content)
        self.console.print(
            Panel(
                body,
                title=notification.title,
                border_style=self._STYLES[notification.type],
            )
        )
