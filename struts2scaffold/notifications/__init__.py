"""Notifications published while configuring a project."""

from .bus import LoggingNotificationSink, NotificationBus, RichNotificationSink
from .notification import (
    HyperlinkEvent,
    HyperlinkEventType,
    Notification,
    NotificationType,
)

__all__ = [
    "HyperlinkEvent",
    "HyperlinkEventType",
    "LoggingNotificationSink",
    "Notification",
    "NotificationBus",
    "NotificationType",
    "RichNotificationSink",
]
