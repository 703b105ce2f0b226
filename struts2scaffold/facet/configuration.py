"""
Per-module Struts2 facet configuration and its YAML persistence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..constants import FACET_STATE_DIR, FACET_STATE_FILE
from ..errors import FacetStateError
from .file_set import StrutsFileSet

logger = logging.getLogger(__name__)


class StrutsFacetConfiguration:
    """Holds the file sets of one module's Struts2 facet."""

    def __init__(self, module_root: Optional[Path] = None):
        self.module_root = Path(module_root) if module_root else None
        self._file_sets: List[StrutsFileSet] = []
        self.modification_count = 0

    @property
    def file_sets(self) -> List[StrutsFileSet]:
        return list(self._file_sets)

    @property
    def state_path(self) -> Optional[Path]:
        if self.module_root is None:
            return None
        return self.module_root / FACET_STATE_DIR / FACET_STATE_FILE

    def add_file_set(self, file_set: StrutsFileSet) -> None:
        if file_set in self._file_sets:
            raise ValueError(f"File set {file_set.id} already registered")
        file_set.parent = self
        self._file_sets.append(file_set)
        self.modification_count += 1

    def remove_file_set(self, file_set: StrutsFileSet) -> bool:
        if file_set not in self._file_sets:
            return False
        self._file_sets.remove(file_set)
        self.modification_count += 1
        return True

    def find_file_set(self, id: str) -> Optional[StrutsFileSet]:
        for file_set in self._file_sets:
            if file_set.id == id:
                return file_set
        return None

    def get_config_files(self) -> List[str]:
        """All files of all active file sets, without duplicates."""
        result: List[str] = []
        for file_set in self._file_sets:
            if file_set.removed:
                continue
            for file in file_set.files:
                if file not in result:
                    result.append(file)
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {"file_sets": [fs.to_dict() for fs in self._file_sets]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], module_root: Optional[Path] = None):
        config = cls(module_root)
        for item in data.get("file_sets") or []:
            config._file_sets.append(StrutsFileSet.from_dict(item, parent=config))
        return config

    @classmethod
    def load(cls, module_root: Path) -> "StrutsFacetConfiguration":
        """Load the persisted configuration, or an empty one if none exists."""
        config = cls(module_root)
        path = config.state_path
        if not path.exists():
            return config

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise FacetStateError(f"Invalid facet configuration {path}: {e}") from e

        if not isinstance(data, dict):
            raise FacetStateError(f"Invalid facet configuration {path}: expected a mapping")
        logger.debug("Loaded facet configuration from %s", path)
        return cls.from_dict(data, module_root)

    def save(self) -> Path:
        path = self.state_path
        if path is None:
            raise FacetStateError("Facet configuration has no module root to save to")
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        logger.debug("Saved facet configuration to %s", path)
        return path
