"""
Domain Services.

Services contain business logic and orchestrate operations.
They use Repositories for data access.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from inventory_api.services.domain import ProductService

    # In router
    service = ProductService(db)
    products = service.list_all()
"""

from .product_service import ProductService
from .ingredient_service import IngredientService
from .image_service import ImageService
from .auth_service import AuthService

__all__ = [
    "ProductService",
    "IngredientService",
    "ImageService",
    "AuthService",
]
