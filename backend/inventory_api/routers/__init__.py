"""
API routers.
"""

from .auth import router as auth_router
from .ingredients import router as ingredients_router
from .products import router as products_router
from .public import health_router, lookups_router

__all__ = [
    "auth_router",
    "ingredients_router",
    "products_router",
    "health_router",
    "lookups_router",
]
