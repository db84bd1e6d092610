"""
Error types raised by the storage layer.

Repositories translate driver exceptions into these classes so that
the service and API layers never depend on SQLAlchemy's exception
hierarchy.  The API maps them to HTTP statuses in ``main``.
"""


class UserApiError(Exception):
    """Base class for all application errors."""


class StorageError(UserApiError):
    """Base class for errors originating in the storage layer."""


class StorageUnavailable(StorageError):
    """The database is unreachable or failed to execute a statement."""


class ConstraintViolation(StorageError):
    """A write conflicted with a uniqueness or integrity constraint."""
