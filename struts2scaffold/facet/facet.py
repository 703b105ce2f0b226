"""
The Struts2 facet attached to a module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .configuration import StrutsFacetConfiguration

if TYPE_CHECKING:
    from ..project.model import Module, WebFacet


class StrutsFacet:
    """Marks a module as using Struts2 and carries its configuration."""

    def __init__(self, module: "Module", configuration: Optional[StrutsFacetConfiguration] = None):
        self.module = module
        self.configuration = configuration or StrutsFacetConfiguration.load(module.root)

    @property
    def name(self) -> str:
        return f"Struts 2 ({self.module.name})"

    def get_web_facet(self) -> "WebFacet":
        return self.module.web_facet
