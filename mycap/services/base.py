"""Shared plumbing for services backed by a database session."""

import logging

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from mycap.errors import ConflictError, MyCapError, UnavailableError

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that own one session for one operation."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(
        self,
        conflict_message: str = "Resource already exists.",
        conflict_error: type[MyCapError] = ConflictError,
    ) -> None:
        """Commit the current unit of work.

        Integrity violations raise ``conflict_error(conflict_message)``; any
        other store failure becomes UnavailableError. The session is rolled
        back in both cases so nothing from the failed operation is persisted.
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity error on commit: {e.orig}")
            raise conflict_error(conflict_message) from e
        except DBAPIError as e:
            self.db.rollback()
            logger.error(f"Database error on commit: {e}")
            raise UnavailableError("Data store is unavailable.") from e
