"""
Failure-atomic scope for multi-statement writes.

Everything executed on the session inside ``unit_of_work`` is committed
together when the block exits cleanly and rolled back when anything raises.
SQLAlchemy errors leave the block translated into the application error
taxonomy so routes only ever deal with ``AppError``.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from utils.exceptions import AppError, ConflictError, StorageError
from utils.logging import get_logger

logger = get_logger(__name__)

# MySQL ER_NO_REFERENCED_ROW_2
MYSQL_FK_VIOLATION = 1452


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_FK_VIOLATION:
        return True
    return "FOREIGN KEY constraint failed" in str(orig)


@contextmanager
def unit_of_work(
    db: Session,
    error_message: str = "Database error",
    conflict_message: Optional[str] = None,
) -> Iterator[Session]:
    try:
        yield db
        db.commit()
    except AppError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        if conflict_message and is_foreign_key_violation(e):
            logger.info("foreign_key_rejected", error=str(e.orig))
            raise ConflictError(conflict_message) from e
        logger.error("integrity_error", error=str(e.orig))
        raise StorageError(error_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("storage_error", error=str(e))
        raise StorageError(error_message) from e
