"""
Base class and TimestampMixin for all SQLAlchemy ORM models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class TimestampMixin:
    """
    Mixin providing server-assigned timestamps and the creator reference.

    Fields added:
    - created_at, updated_at: set by the database on insert
    - created_by: optional id of the user who created the row

    Rows are hard-deleted; there is no soft-delete state.
    """

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
    created_by: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def apply_patch(self, patch: dict[str, Any]) -> None:
        """
        Merge normalized fields onto this row.
        Only keys present in the patch change; everything else is kept.
        """
        for field, value in patch.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        return f"<{class_name}(id={getattr(self, 'id', None)}, name={getattr(self, 'name', None)!r})>"
