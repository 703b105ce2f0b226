"""
User notifications with embedded hyperlinks.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

LINK_RE = re.compile(r'<a\s+href="([^"]*)"\s*>(.*?)</a>', re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")


class NotificationType(Enum):
    """Severity of a notification."""

    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


class HyperlinkEventType(Enum):
    ENTERED = "entered"
    EXITED = "exited"
    ACTIVATED = "activated"


@dataclass(frozen=True)
class HyperlinkEvent:
    """A user interaction with a hyperlink inside a notification."""

    href: str
    event_type: HyperlinkEventType = HyperlinkEventType.ACTIVATED


NotificationListener = Callable[["Notification", HyperlinkEvent], None]


@dataclass
class Notification:
    """
    A message published to a notification bus.

    ``content`` may contain ``<a href="...">`` links; interacting with them is
    forwarded to ``listener`` until the notification expires.
    """

    group_id: str
    title: str
    content: str
    type: NotificationType = NotificationType.INFORMATION
    listener: Optional[NotificationListener] = None
    expired: bool = field(default=False, init=False)

    @property
    def links(self) -> List[str]:
        return [href for href, _ in LINK_RE.findall(self.content)]

    @property
    def plain_text(self) -> str:
        return _TAG_RE.sub("", self.content)

    def expire(self) -> None:
        self.expired = True

    def hyperlink_update(self, event: HyperlinkEvent) -> bool:
        """
        Forward a hyperlink event to the listener.

        Returns:
            True if the event was delivered
        """
        if self.expired or self.listener is None:
            logger.debug("Ignoring hyperlink event on notification %s", self.group_id)
            return False
        self.listener(self, event)
        return True

    def activate(self, href: Optional[str] = None) -> bool:
        """Activate a link; defaults to the first link in the content."""
        if href is None:
            links = self.links
            if not links:
                return False
            href = links[0]
        return self.hyperlink_update(HyperlinkEvent(href, HyperlinkEventType.ACTIVATED))
