"""
livecomponents Kernel — Exceptions

Raised only for programmer errors at the library seams. User-triggered
actions never raise; they come back as a rejected ActionResult.
"""


class ComponentError(Exception):
    """Base class for livecomponents errors."""
    pass


class DuplicateComponentError(ComponentError):
    """A component with the same id is already registered in the set."""
    pass


class UnknownFieldError(ComponentError):
    """configure() named a field the component does not have."""
    pass


class UnknownActionError(ComponentError):
    """Strict mode: an action name did not resolve to a handler."""
    pass


class TemplateNotFoundError(ComponentError):
    """No override or packaged template exists for a kind/variant pair."""
    pass
