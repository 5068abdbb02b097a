"""Translation of SQLAlchemy failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from blogcraft.domain.error import BackendError


@contextmanager
def backend_operation(operation: str) -> Iterator[None]:
    """Run a database operation, raising BackendError on any SQLAlchemy failure.

    Args:
        operation: Name used in logs and on the raised error, e.g. "posts.find_many"

    Raises:
        BackendError: Wrapping the original SQLAlchemyError
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.warn("Database operation failed", operation=operation, error=str(e))
        raise BackendError(operation, str(e)) from e
