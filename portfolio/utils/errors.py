"""Error kinds raised by the service helpers and the client store.

Controllers translate these into HTTP responses; nothing below depends on
FastAPI.
"""


class PortfolioError(Exception):
    """Base class for portfolio errors."""


class NotFoundError(PortfolioError):
    """The requested record id does not exist."""


class ValidationFailedError(PortfolioError):
    """A required field is missing or a value is outside its allowed set."""


class StorageUnavailableError(PortfolioError):
    """The document store could not be reached or rejected the operation."""


class NotificationFailedError(PortfolioError):
    """Outbound mail delivery failed. The record it refers to is already saved."""
