"""Project model: modules, startup lifecycle and write transactions."""

from .lifecycle import StartupManager
from .model import FileSystemSourceTree, Module, Project, WebFacet, build_module
from .transaction import TransactionManager, WriteTransaction

__all__ = [
    "FileSystemSourceTree",
    "Module",
    "Project",
    "StartupManager",
    "TransactionManager",
    "WebFacet",
    "WriteTransaction",
    "build_module",
]
