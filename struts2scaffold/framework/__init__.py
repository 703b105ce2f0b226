"""Struts2 framework versions and the "Add Framework" support provider."""

from .provider import (
    ScaffoldResult,
    ScaffoldStatus,
    StrutsFrameworkSupportProvider,
    select_variant,
)
from .version_compare import compare_versions, is_newer
from .versions import FrameworkVersion, LibraryInfo, StrutsVersion

__all__ = [
    "FrameworkVersion",
    "LibraryInfo",
    "ScaffoldResult",
    "ScaffoldStatus",
    "StrutsFrameworkSupportProvider",
    "StrutsVersion",
    "compare_versions",
    "is_newer",
    "select_variant",
]
