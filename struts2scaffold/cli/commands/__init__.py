"""
CLI command handlers.

Organized by functional domain:
- scaffold.py: Version listing and adding Struts 2 support
- facet.py: Facet settings and file sets
- config.py: Configuration commands
"""

from .config import cmd_config
from .facet import cmd_facet, cmd_fileset, show_facet_settings
from .scaffold import cmd_add_framework, cmd_versions, format_scaffold_result

__all__ = [
    "cmd_add_framework",
    "cmd_config",
    "cmd_facet",
    "cmd_fileset",
    "cmd_versions",
    "format_scaffold_result",
    "show_facet_settings",
]
