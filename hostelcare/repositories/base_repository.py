"""
Base repository with the data-access operations shared by every table.

Repositories never commit: the calling service owns the transaction and
decides when to commit or roll back.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hostelcare.config.logging import get_logger
from hostelcare.models.base import Base

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository bound to one model and one session.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def get(self, entity_id: Any, for_update: bool = False) -> Optional[ModelType]:
        """
        Fetch by primary key.

        Args:
            entity_id: Primary key value
            for_update: Lock the row until the transaction ends (no-op on SQLite)
                and refresh any copy already in the session
        """
        if for_update:
            pk = self.model.__mapper__.primary_key[0]
            stmt = (
                select(self.model)
                .where(pk == entity_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            return self.db.execute(stmt).scalar_one_or_none()
        return self.db.get(self.model, entity_id)

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity and flush so generated keys are populated."""
        self.db.add(entity)
        self.db.flush()
        logger.debug(f"Staged {self.model.__name__}: {entity!r}")
        return entity

    def count(self, *criteria) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        return self.db.execute(stmt).scalar_one()
