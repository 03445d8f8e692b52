"""Translation of storage failures into DataAccessError."""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from ordering.domain.exceptions import DataAccessError


logger = logging.getLogger(__name__)


@contextmanager
def translate_errors(operation: str):
    """
    Collapse any SQLAlchemy failure inside the block into DataAccessError.

    Usage:
        with translate_errors("select order"):
            result = await session.execute(...)
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"❌ {operation} failed: {e}")
        raise DataAccessError(f"{operation} failed: {e}") from e
