"""
Capability interfaces for struts2-scaffold components.

The scaffolding logic talks to the project only through these Protocols, so it
can run against the filesystem-backed implementations shipped with the tool or
against test doubles.
"""

from pathlib import Path
from typing import Any, Callable, ContextManager, Dict, List, Optional, Protocol

from .notifications.notification import Notification


class SourceTree(Protocol):
    """Protocol for resolving a module's source roots and their contents."""

    def get_source_roots(self) -> List[Path]:
        """Get the configured source roots, in order."""
        ...

    def find_directory(self, root: Path) -> Optional[Path]:
        """Resolve a source root to an existing directory, or None."""
        ...

    def find_file(self, directory: Path, name: str) -> Optional[Path]:
        """Find a file directly inside a directory, or None."""
        ...


class TemplateEngine(Protocol):
    """Protocol for materializing named file templates."""

    def create_from_template(
        self,
        template_name: str,
        file_name: str,
        directory: Path,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Path:
        """Render a template into a new file and return its path."""
        ...


class ProjectTransaction(Protocol):
    """
    Protocol for a scoped, atomic edit of project state.

    Attributes:
        rollback_errors: Errors raised by undo steps during a rollback
    """

    rollback_errors: List[str]

    def track_created(self, path: Path) -> None:
        """Register a file or directory created inside the transaction."""
        ...

    def backup(self, path: Path) -> None:
        """Remember a file's content so it can be restored on rollback."""
        ...

    def on_rollback(self, undo: Callable[[], None], description: str = "undo") -> None:
        """Register an in-memory undo action."""
        ...

    def on_commit(self, action: Callable[[], None]) -> None:
        """Register an action to run once the transaction commits."""
        ...


class TransactionFactory(Protocol):
    """Protocol for opening write transactions against a project."""

    def write_action(self, name: str) -> ContextManager[ProjectTransaction]:
        """Open a write transaction; committed on exit, rolled back on error."""
        ...


class NotificationSink(Protocol):
    """Protocol for publishing user notifications."""

    def notify(self, notification: Notification) -> None:
        """Publish a notification."""
        ...
