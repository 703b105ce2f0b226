"""
struts2-scaffold - Add Struts 2 support to Java web projects

Creates a default struts.xml, registers it in a Struts 2 facet file set and
declares the struts2 filter in web.xml, the way an IDE's "Add Framework
Support" action does, from the command line or as a library.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Struts2Scaffold",
    "Struts2ScaffoldConfig",
    "StrutsFrameworkSupportProvider",
    "ScaffoldResult",
    "ScaffoldStatus",
]


def __getattr__(name):
    """Lazy loading of main API classes to prevent heavy imports at module level."""
    if name == "Struts2Scaffold":
        from .api import Struts2Scaffold

        return Struts2Scaffold

    if name == "Struts2ScaffoldConfig":
        from .config import Struts2ScaffoldConfig

        return Struts2ScaffoldConfig

    if name in {"StrutsFrameworkSupportProvider", "ScaffoldResult", "ScaffoldStatus"}:
        from .framework import provider

        return getattr(provider, name)

    raise AttributeError(f"module 'struts2scaffold' has no attribute '{name}'")
