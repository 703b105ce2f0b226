"""File templates used when adding Struts2 support."""

from .template_engine import FileTemplateManager

__all__ = ["FileTemplateManager"]
