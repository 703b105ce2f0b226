"""Struts2 facet: per-module configuration and file sets."""

from .configuration import StrutsFacetConfiguration
from .facet import StrutsFacet
from .file_set import StrutsFileSet

__all__ = ["StrutsFacet", "StrutsFacetConfiguration", "StrutsFileSet"]
