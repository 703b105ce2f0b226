"""
Struts2 file sets: named groups of struts.xml-style configuration files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TYPE_CHECKING

from ..constants import FILE_SET_ID_PREFIX

if TYPE_CHECKING:
    from .configuration import StrutsFacetConfiguration

logger = logging.getLogger(__name__)


class StrutsFileSet:
    """
    A named, de-duplicated group of configuration files.

    Files are kept in insertion order as POSIX-style paths relative to the
    module root where possible.
    """

    def __init__(
        self,
        id: str,
        name: str,
        parent: Optional["StrutsFacetConfiguration"] = None,
        files: Optional[Iterable[str]] = None,
        removed: bool = False,
    ):
        self.id = id
        self.name = name
        self.parent = parent
        self.removed = removed
        self._files: List[str] = []
        for file in files or ():
            self.add_file(file)

    def __repr__(self) -> str:
        return f"StrutsFileSet(id={self.id!r}, name={self.name!r}, files={self._files!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StrutsFileSet) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def files(self) -> List[str]:
        return list(self._files)

    def _normalize(self, file: Any) -> str:
        path = Path(file)
        root = self.parent.module_root if self.parent is not None else None
        if root is not None and path.is_absolute():
            try:
                path = path.relative_to(root)
            except ValueError:
                pass
        return path.as_posix()

    def has_file(self, file: Any) -> bool:
        return self._normalize(file) in self._files

    def add_file(self, file: Any) -> bool:
        """Add a file; returns False if it was already part of the set."""
        normalized = self._normalize(file)
        if normalized in self._files:
            return False
        self._files.append(normalized)
        return True

    def remove_file(self, file: Any) -> bool:
        normalized = self._normalize(file)
        if normalized not in self._files:
            return False
        self._files.remove(normalized)
        return True

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "name": self.name, "files": self.files}
        if self.removed:
            data["removed"] = True
        return data

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], parent: Optional["StrutsFacetConfiguration"] = None
    ) -> "StrutsFileSet":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            parent=parent,
            files=data.get("files") or [],
            removed=bool(data.get("removed", False)),
        )

    @staticmethod
    def get_unique_id(existing: Iterable["StrutsFileSet"]) -> str:
        """Next free ``s2fileset<n>`` id."""
        index = 0
        for file_set in existing:
            if file_set.id.startswith(FILE_SET_ID_PREFIX):
                suffix = file_set.id[len(FILE_SET_ID_PREFIX):]
                if suffix.isdigit():
                    index = max(index, int(suffix))
        return f"{FILE_SET_ID_PREFIX}{index + 1}"

    @staticmethod
    def get_unique_name(prefix: str, existing: Iterable["StrutsFileSet"]) -> str:
        """``prefix`` if free, otherwise ``"<prefix> <n>"`` with the next free n."""
        index = 0
        for file_set in existing:
            if file_set.name == prefix:
                index = max(index, 1)
            elif file_set.name.startswith(prefix + " "):
                suffix = file_set.name[len(prefix) + 1:]
                if suffix.isdigit():
                    index = max(index, int(suffix) + 1)
        return prefix if index == 0 else f"{prefix} {index}"
