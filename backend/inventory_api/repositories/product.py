"""
Product Repository - Data access for products.
"""

from inventory_api.models import Product
from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for Product entities."""

    @property
    def model(self) -> type[Product]:
        return Product
