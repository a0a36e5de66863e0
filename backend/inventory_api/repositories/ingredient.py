"""
Ingredient Repository - Data access for ingredients.
"""

from inventory_api.models import Ingredient
from .base import BaseRepository


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for Ingredient entities."""

    @property
    def model(self) -> type[Ingredient]:
        return Ingredient
