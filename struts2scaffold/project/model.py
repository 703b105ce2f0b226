"""
Filesystem-backed project model.

A Project is a directory holding one or more modules. Each module has an
ordered list of source roots and a web facet pointing at its web.xml.
Modules are taken from the project settings, or inferred from the directory
layout when none are configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..errors import UnknownModuleError
from ..notifications import NotificationBus
from ..webxml import WebAppDescriptor
from .lifecycle import StartupManager
from .transaction import TransactionManager

logger = logging.getLogger(__name__)

MAVEN_SOURCE_ROOTS = ["src/main/java", "src/main/resources"]
MAVEN_WEB_XML = "src/main/webapp/WEB-INF/web.xml"
PLAIN_SOURCE_ROOTS = ["src"]
PLAIN_WEB_XML = "web/WEB-INF/web.xml"


class FileSystemSourceTree:
    """SourceTree implementation over a module's directories."""

    def __init__(self, source_roots: List[Path]):
        self._source_roots = list(source_roots)

    def get_source_roots(self) -> List[Path]:
        return list(self._source_roots)

    def find_directory(self, root: Path) -> Optional[Path]:
        root = Path(root)
        return root if root.is_dir() else None

    def find_file(self, directory: Path, name: str) -> Optional[Path]:
        candidate = Path(directory) / name
        return candidate if candidate.is_file() else None


@dataclass
class WebFacet:
    """The web application part of a module."""

    web_xml: Path

    def get_root(self) -> Optional[WebAppDescriptor]:
        """Load the deployment descriptor, or None if the module has none."""
        if not self.web_xml.is_file():
            return None
        return WebAppDescriptor.load(self.web_xml)


@dataclass
class Module:
    """A module of a project."""

    name: str
    root: Path
    source_roots: List[Path] = field(default_factory=list)
    web_facet: Optional[WebFacet] = None

    @property
    def source_tree(self) -> FileSystemSourceTree:
        return FileSystemSourceTree(self.source_roots)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "root": str(self.root),
            "source_roots": [str(p) for p in self.source_roots],
            "web_xml": str(self.web_facet.web_xml) if self.web_facet else None,
        }


def _is_maven_layout(path: Path) -> bool:
    return (path / "pom.xml").exists() or (path / "src" / "main" / "java").is_dir()


def build_module(
    name: str,
    root: Path,
    source_roots: Optional[List[str]] = None,
    web_xml: Optional[str] = None,
) -> Module:
    """Create a module, filling in layout defaults for anything not given."""
    root = Path(root).resolve()
    maven = _is_maven_layout(root)

    if source_roots is None:
        source_roots = MAVEN_SOURCE_ROOTS if maven else PLAIN_SOURCE_ROOTS
        # only existing directories count as configured source roots
        roots = [root / r for r in source_roots if (root / r).is_dir()]
    else:
        roots = [root / r for r in source_roots]

    web_xml = web_xml or (MAVEN_WEB_XML if maven else PLAIN_WEB_XML)
    return Module(name=name, root=root, source_roots=roots, web_facet=WebFacet(root / web_xml))


class Project:
    """
    A project opened from disk.

    Owns the per-project services the scaffolding works against: the startup
    manager, the write transaction manager and the notification bus.
    """

    def __init__(
        self,
        root: Union[str, Path],
        modules: Optional[List[Module]] = None,
        notification_bus: Optional[NotificationBus] = None,
    ):
        self.root = Path(root).resolve()
        self.name = self.root.name
        self.modules: List[Module] = list(modules or [])
        self.startup_manager = StartupManager(self.name)
        self.transactions = TransactionManager()
        self.notification_bus = notification_bus or NotificationBus()

    @classmethod
    def open(
        cls,
        root: Union[str, Path],
        settings=None,
        notification_bus: Optional[NotificationBus] = None,
    ) -> "Project":
        """
        Open a project directory.

        Args:
            root: Project directory
            settings: Optional ProjectSettings with explicit modules or layout overrides
            notification_bus: Bus notifications are published on
        """
        root = Path(root).resolve()
        modules: List[Module] = []

        configured = getattr(settings, "modules", None) or []
        for entry in configured:
            modules.append(
                build_module(
                    entry.get("name") or Path(entry.get("path", ".")).name,
                    root / entry.get("path", "."),
                    entry.get("source_roots"),
                    entry.get("web_xml"),
                )
            )

        if not modules:
            modules.append(
                build_module(
                    root.name,
                    root,
                    getattr(settings, "source_roots", None),
                    getattr(settings, "web_xml", None),
                )
            )

        logger.debug("Opened project %s with modules %s", root, [m.name for m in modules])
        return cls(root, modules, notification_bus)

    def find_module(self, name: Optional[str] = None) -> Module:
        if not self.modules:
            raise UnknownModuleError(f"Project {self.name} has no modules")
        if name is None:
            return self.modules[0]
        for module in self.modules:
            if module.name == name:
                return module
        raise UnknownModuleError(
            f"Unknown module: {name}. Available: {[m.name for m in self.modules]}"
        )

    def initialize(self) -> None:
        """Finish opening the project and run the queued startup hooks."""
        self.startup_manager.mark_initialized()

    def close(self) -> None:
        self.startup_manager.dispose()
