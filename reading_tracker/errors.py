"""Exception types raised by the reading tracker."""


class ReadingTrackerError(Exception):
    """Base class for all reading tracker errors."""


class ValidationError(ReadingTrackerError):
    """User input was rejected before reaching the library.

    The message is meant to be shown to the user as-is.
    """


class CatalogError(ReadingTrackerError):
    """The remote book catalog could not provide a usable answer."""


class CatalogNotFoundError(CatalogError):
    """The catalog response has no volume metadata envelope."""


class CatalogRequestError(CatalogError):
    """The catalog request failed (network, HTTP status, or API error)."""
