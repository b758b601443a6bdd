"""Translation of database failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from discuss.domain.error import LookupUnavailableError, StorageError


@contextmanager
def lookup_errors(operation: str) -> Iterator[None]:
    """Report an unreachable database during reads as LookupUnavailableError."""
    try:
        yield
    except OperationalError as e:
        logfire.error("Storage lookup failed", operation=operation, error=str(e))
        raise LookupUnavailableError("Comment storage is unavailable") from e


@contextmanager
def write_errors(operation: str) -> Iterator[None]:
    """Report rejected writes as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Storage write rejected", operation=operation, error=str(e))
        raise StorageError(f"Unable to {operation}") from e
