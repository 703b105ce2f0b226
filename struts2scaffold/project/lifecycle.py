"""
Project startup lifecycle.

Work that needs a consistent project model is queued with
``run_when_project_initialized`` and runs once, after the project's own
startup sequence has finished.
"""

from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class StartupManager:
    """Runs post-startup hooks exactly once per registration."""

    def __init__(self, project_name: str = ""):
        self.project_name = project_name
        self._initialized = False
        self._disposed = False
        self._pending: List[Callable[[], None]] = []

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def run_when_project_initialized(self, hook: Callable[[], None]) -> None:
        """Queue a hook; runs immediately if the project is already initialized."""
        if self._disposed:
            logger.debug("Project %s disposed, dropping startup hook", self.project_name)
            return
        if self._initialized:
            hook()
            return
        self._pending.append(hook)

    def mark_initialized(self) -> None:
        """Finish startup and drain the queued hooks in registration order."""
        if self._initialized or self._disposed:
            return
        self._initialized = True

        logger.debug(
            "Project %s initialized, running %d startup hook(s)",
            self.project_name,
            len(self._pending),
        )
        while self._pending:
            hook = self._pending.pop(0)
            try:
                hook()
            except Exception:
                logger.exception("Startup hook %r of %s failed", hook, self.project_name)

    def dispose(self) -> None:
        """Close the project; hooks that have not run yet are discarded."""
        self._disposed = True
        if self._pending:
            logger.debug(
                "Discarding %d pending startup hook(s) of %s",
                len(self._pending),
                self.project_name,
            )
        self._pending = []
