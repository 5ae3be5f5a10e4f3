"""
Data Access Errors

Typed outcomes raised by repositories so handlers can map them to HTTP status codes
without knowing which database driver is in use.
"""
from sqlalchemy.exc import IntegrityError

# Duplicate-key signals exposed by the supported drivers
MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_MESSAGE = "UNIQUE constraint failed"


class DataAccessError(Exception):
    """Base class for repository errors."""


class DuplicateRecordError(DataAccessError):
    """A unique constraint rejected the write."""

    def __init__(self, model: str, field: str, value):
        self.model = model
        self.field = field
        self.value = value
        super().__init__(f"{model} with {field}={value!r} already exists")


class RecordNotFoundError(DataAccessError):
    """No row matched the requested primary key."""

    def __init__(self, model: str, id_value):
        self.model = model
        self.id_value = id_value
        super().__init__(f"{model} {id_value} not found")


def is_duplicate_key_error(error: IntegrityError) -> bool:
    """
    Check whether an IntegrityError comes from a unique constraint.

    Inspects the wrapped DBAPI exception by capability rather than by class,
    so any of PyMySQL, psycopg2 or sqlite3 is recognised.

    Args:
        error: SQLAlchemy IntegrityError

    Returns:
        True for duplicate-key violations, False for other integrity failures
    """
    orig = getattr(error, "orig", None)
    if orig is None:
        return False

    pgcode = getattr(orig, "pgcode", None)
    if pgcode is not None:
        return pgcode == POSTGRES_UNIQUE_VIOLATION

    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True

    return SQLITE_UNIQUE_MESSAGE in str(orig)
