"""Errors raised while registering, loading or checking listeners."""


class ListenerRegistryError(Exception):
    """Base class for listener registry errors."""


class RegistryClosedError(ListenerRegistryError):
    """Raised when a registry is modified or reused after its run started."""


class DuplicateListenerError(ListenerRegistryError):
    """Raised when the same listener instance is registered twice."""


class ListenerNotFoundError(Exception):
    """Raised when a listener plugin is not found."""


class LifecycleOrderError(Exception):
    """Raised by a strict order checker when events arrive out of order."""
