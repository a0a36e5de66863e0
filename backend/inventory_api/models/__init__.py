"""
SQLAlchemy ORM Models Package.

- base: Base class and TimestampMixin
- product: Product
- ingredient: Ingredient
- user: User
"""

from .base import Base, TimestampMixin
from .product import Product
from .ingredient import Ingredient
from .user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "Product",
    "Ingredient",
    "User",
]
