"""
Database exceptions.
"""


class DatabaseNotInitialized(Exception):
    """Raised when a session is requested before Database.init()."""
    pass


class DatabaseTransactionError(Exception):
    """Raised when committing a unit of work fails."""
    pass
