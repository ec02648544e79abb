"""
Base service class providing common functionality for all services.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hostelcare.config.logging import get_logger
from hostelcare.core.exceptions import BaseAppException, ConflictError, InternalError


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Transaction management with rollback on any failure
    - Translation of raw database errors into the application taxonomy
    """

    def __init__(self, db_session: Session):
        """
        Initialize base service.

        Args:
            db_session: SQLAlchemy database session
        """
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__module__)

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(
        self,
        operation: str,
        conflict_message: str = "Operation conflicts with existing data",
    ) -> Iterator[Session]:
        """
        Run a unit of work atomically: commit on success, roll back on any
        exception so no partial effect survives.

        Application exceptions propagate unchanged. An IntegrityError means
        a database constraint rejected the write and becomes a ConflictError;
        any other SQLAlchemyError becomes an InternalError.

        Example:
            with self.transaction("allocate room"):
                ...
        """
        try:
            yield self.db
            self.db.commit()
            self._logger.debug(f"Transaction committed: {operation}")
        except BaseAppException:
            self._rollback(operation)
            raise
        except IntegrityError as e:
            self._rollback(operation)
            self._logger.warning(f"Integrity violation during {operation}: {e.orig}")
            raise ConflictError(conflict_message) from e
        except SQLAlchemyError as e:
            self._rollback(operation)
            self._logger.error(f"Database error during {operation}: {e}", exc_info=True)
            raise InternalError(f"Failed to {operation}") from e
        except Exception:
            self._rollback(operation)
            raise

    def _rollback(self, operation: str) -> None:
        """Rollback the current transaction, logging rollback errors."""
        try:
            self.db.rollback()
            self._logger.debug(f"Transaction rolled back: {operation}")
        except SQLAlchemyError as e:
            # Log but don't raise - rollback errors should not mask original error
            self._logger.warning(f"Rollback failed: {e}")
