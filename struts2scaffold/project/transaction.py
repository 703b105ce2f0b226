"""
Write transactions for project edits.

A WriteTransaction journals every change made while it is open: files it
creates, files whose content it is about to modify, and in-memory undo
actions. Leaving the ``write_action`` block normally commits; an exception
rolls the journal back in reverse order and is re-raised.

Example:
    >>> manager = TransactionManager()
    >>> with manager.write_action("Add Struts 2 filter") as tx:
    ...     tx.backup(web_xml)
    ...     descriptor.save()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

from ..errors import TransactionError

logger = logging.getLogger(__name__)


class WriteTransaction:
    """
    Journal of changes made inside one write action.

    Attributes:
        name: Human-readable name of the action
        committed: Whether the transaction committed
        rolled_back: Whether the transaction was rolled back
        rollback_errors: Errors raised by individual undo steps
    """

    def __init__(self, name: str):
        self.name = name
        self.committed = False
        self.rolled_back = False
        self.rollback_errors: List[str] = []
        self._journal: List[Tuple[str, Callable[[], None]]] = []
        self._commit_actions: List[Callable[[], None]] = []
        self._backed_up: set = set()

    @property
    def is_open(self) -> bool:
        return not (self.committed or self.rolled_back)

    def _check_open(self) -> None:
        if not self.is_open:
            raise TransactionError(f"Transaction '{self.name}' is already closed")

    def track_created(self, path: Path) -> None:
        """
        Register a file or directory created inside the transaction.

        Directories are removed on rollback only if they are empty by then.
        """
        self._check_open()
        path = Path(path)

        def _remove() -> None:
            if path.is_dir():
                if any(path.iterdir()):
                    logger.warning("Keeping %s, it is not empty", path)
                    return
                path.rmdir()
                logger.info("Removed %s", path)
            elif path.exists():
                path.unlink()
                logger.info("Removed %s", path)

        self._journal.append((f"remove {path}", _remove))

    def backup(self, path: Path) -> None:
        """Remember a file's current content so it can be restored on rollback."""
        self._check_open()
        path = Path(path)
        if path in self._backed_up:
            return
        self._backed_up.add(path)

        original: Optional[bytes] = path.read_bytes() if path.exists() else None

        def _restore() -> None:
            if original is None:
                if path.exists():
                    path.unlink()
            else:
                path.write_bytes(original)
            logger.info("Restored %s", path)

        self._journal.append((f"restore {path}", _restore))

    def on_rollback(self, undo: Callable[[], None], description: str = "undo") -> None:
        """Register an in-memory undo action."""
        self._check_open()
        self._journal.append((description, undo))

    def on_commit(self, action: Callable[[], None]) -> None:
        """Register an action to run once the transaction commits."""
        self._check_open()
        self._commit_actions.append(action)

    def commit(self) -> None:
        self._check_open()
        self.committed = True
        self._journal = []
        for action in self._commit_actions:
            action()
        logger.debug("Committed transaction '%s'", self.name)

    def rollback(self) -> bool:
        """
        Undo the journal in reverse order.

        Returns:
            True if every undo step succeeded
        """
        self._check_open()
        logger.warning("Rolling back '%s'...", self.name)
        for description, undo in reversed(self._journal):
            try:
                undo()
            except Exception as e:
                logger.error("Failed to %s: %s", description, e)
                self.rollback_errors.append(f"{description}: {e}")
        self._journal = []
        self.rolled_back = True
        return not self.rollback_errors


class TransactionManager:
    """Opens write transactions against one project; nesting is rejected."""

    def __init__(self):
        self._current: Optional[WriteTransaction] = None

    @property
    def current(self) -> Optional[WriteTransaction]:
        return self._current

    @contextmanager
    def write_action(self, name: str) -> Iterator[WriteTransaction]:
        """
        Context manager for an atomic write action.

        Yields:
            The open WriteTransaction

        Raises:
            TransactionError: If another write action is already open
            Exception: Re-raises any exception after rollback
        """
        if self._current is not None:
            raise TransactionError(
                f"Cannot start '{name}' while '{self._current.name}' is running"
            )

        tx = WriteTransaction(name)
        self._current = tx
        try:
            yield tx
        except BaseException:
            tx.rollback()
            raise
        else:
            tx.commit()
        finally:
            self._current = None
