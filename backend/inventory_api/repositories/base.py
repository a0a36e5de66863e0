"""
Base Repository implementation.
One delegated database call per operation; failures surface as UpstreamError.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import UpstreamError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")


class BaseRepository(ABC, Generic[ModelT]):
    """
    Abstract repository with list/get/create/update/delete.

    Subclasses must implement:
    - model: Return the SQLAlchemy model class
    """

    def __init__(self, db: Session):
        self._db = db

    @property
    @abstractmethod
    def model(self) -> type[ModelT]:
        """Return the SQLAlchemy model class."""
        ...

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def _base_query(self) -> Select:
        """Rows ordered by name for consistent listings."""
        return select(self.model).order_by(self.model.name, self.model.id)

    @contextmanager
    def _upstream(self, operation: str) -> Iterator[None]:
        """Translate driver failures into UpstreamError with the driver message."""
        try:
            yield
        except SQLAlchemyError as exc:
            self._db.rollback()
            message = str(getattr(exc, "orig", None) or exc)
            raise UpstreamError(
                "database",
                message,
                operation=operation,
                table=self.table,
            ) from exc

    def find_all(self) -> Sequence[ModelT]:
        """All rows, ordered by name."""
        with self._upstream("select"):
            return self._db.execute(self._base_query()).scalars().all()

    def find_by_id(self, entity_id: int) -> ModelT | None:
        """Row by primary key, or None."""
        with self._upstream("select"):
            return self._db.get(self.model, entity_id)

    def create(self, data: dict[str, Any]) -> ModelT:
        """Insert a normalized record. The database assigns id and timestamps."""
        entity = self.model(**data)
        with self._upstream("insert"):
            self._db.add(entity)
            safe_commit(self._db)
            self._db.refresh(entity)
        logger.debug("Row inserted", table=self.table, entity_id=entity.id)
        return entity

    def update(self, entity: ModelT, patch: dict[str, Any]) -> ModelT:
        """Merge a Patch onto an existing row. Omitted fields keep their values."""
        with self._upstream("update"):
            entity.apply_patch(patch)
            safe_commit(self._db)
            self._db.refresh(entity)
        logger.debug("Row updated", table=self.table, entity_id=entity.id, fields=sorted(patch))
        return entity

    def delete(self, entity: ModelT) -> None:
        """Hard delete."""
        entity_id = entity.id
        with self._upstream("delete"):
            self._db.delete(entity)
            safe_commit(self._db)
        logger.debug("Row deleted", table=self.table, entity_id=entity_id)
