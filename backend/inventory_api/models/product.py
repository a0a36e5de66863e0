"""
Product Model: a wine product with label, nutrition and operator details.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class Product(TimestampMixin, Base):
    """
    Wine product.
    Text columns are never empty strings: the write models store null instead.
    Inherits: created_at, updated_at, created_by from TimestampMixin.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)

    # Label
    brand: Mapped[Optional[str]] = mapped_column(Text)
    net_volume: Mapped[Optional[str]] = mapped_column(Text)
    vintage: Mapped[Optional[str]] = mapped_column(Text)
    wine_type: Mapped[Optional[str]] = mapped_column(Text)
    sugar_content: Mapped[Optional[str]] = mapped_column(Text)
    appellation: Mapped[Optional[str]] = mapped_column(Text)
    alcohol_content: Mapped[Optional[str]] = mapped_column(Text)
    packaging_gases: Mapped[Optional[str]] = mapped_column(Text)
    portion_size: Mapped[Optional[str]] = mapped_column(Text)

    # Nutrition per portion, kept as entered (e.g. "120", "≈5")
    kcal: Mapped[Optional[str]] = mapped_column(Text)
    kj: Mapped[Optional[str]] = mapped_column(Text)
    fat: Mapped[Optional[str]] = mapped_column(Text)
    carbohydrates: Mapped[Optional[str]] = mapped_column(Text)

    # Dietary flags
    organic: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    vegetarian: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    vegan: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Food business operator
    operator_type: Mapped[Optional[str]] = mapped_column(Text)
    operator_name: Mapped[Optional[str]] = mapped_column(Text)
    operator_address: Mapped[Optional[str]] = mapped_column(Text)
    operator_info: Mapped[Optional[str]] = mapped_column(Text)

    # Identification
    country_of_origin: Mapped[Optional[str]] = mapped_column(Text)
    sku: Mapped[Optional[str]] = mapped_column(Text)
    ean: Mapped[Optional[str]] = mapped_column(Text)

    # Links
    external_link: Mapped[Optional[str]] = mapped_column(Text)
    redirect_link: Mapped[Optional[str]] = mapped_column(Text)
    image_url: Mapped[Optional[str]] = mapped_column(Text)
