"""
Ingredient Model.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import JSON, Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


# text[] on PostgreSQL, JSON elsewhere (SQLite in tests)
AllergenList = JSON().with_variant(ARRAY(Text), "postgresql")


class Ingredient(TimestampMixin, Base):
    """
    Ingredient or additive used in wine products.
    Category is free text; the UI offers a fixed option list.
    Inherits: created_at, updated_at, created_by from TimestampMixin.
    """

    __tablename__ = "ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    category: Mapped[Optional[str]] = mapped_column(Text)
    e_number: Mapped[Optional[str]] = mapped_column(Text)
    details: Mapped[Optional[str]] = mapped_column(Text)
    # Allergen tags; always a list, order irrelevant
    allergens: Mapped[list[str]] = mapped_column(AllergenList, nullable=False, default=list)
