"""Exception hierarchy for struts2-scaffold."""


class ScaffoldError(Exception):
    """Base class for all struts2-scaffold errors."""

    pass


class UnknownVersionError(ScaffoldError):
    """Raised when a framework version name is not known."""

    pass


class UnknownModuleError(ScaffoldError):
    """Raised when a module cannot be found in a project."""

    pass


class TemplateNotFoundError(ScaffoldError):
    """Raised when a named file template cannot be located."""

    pass


class HostInvariantError(ScaffoldError):
    """Raised when the project model is missing something it must provide."""

    pass


class TransactionError(ScaffoldError):
    """Raised on misuse of a write transaction."""

    pass


class WebDescriptorError(ScaffoldError):
    """Raised when a web.xml cannot be read, parsed or written."""

    pass


class FacetStateError(ScaffoldError):
    """Raised when the persisted facet configuration is unreadable."""

    pass
