"""web.xml deployment descriptor support."""

from .descriptor import FilterEntry, FilterMappingEntry, WebAppDescriptor

__all__ = ["FilterEntry", "FilterMappingEntry", "WebAppDescriptor"]
