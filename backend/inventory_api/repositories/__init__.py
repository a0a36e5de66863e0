"""
Repository Pattern implementation.
Centralizes data access; every database failure becomes an UpstreamError.

Usage:
    from inventory_api.repositories import ProductRepository

    repo = ProductRepository(db)
    products = repo.find_all()
    product = repo.find_by_id(123)
"""

from .base import BaseRepository
from .product import ProductRepository
from .ingredient import IngredientRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "IngredientRepository",
    "UserRepository",
]
