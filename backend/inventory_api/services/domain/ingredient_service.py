"""
Ingredient Service.

Handles ingredient CRUD and spreadsheet import/export.
Updates 404 before the payload is validated.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from inventory_api.models import Ingredient
from inventory_api.repositories import IngredientRepository
from inventory_api.services.base_service import BaseCRUDService
from inventory_api.services.validation import validate_ingredient, validate_ingredient_patch
from shared.config.constants import INGREDIENT_HEADER_ALIASES, ExportColumns
from shared.utils.schemas import IngredientImportResult, IngredientOutput


class IngredientService(BaseCRUDService[Ingredient, IngredientOutput]):
    """
    Service for ingredient management.

    Business rules:
    - allergens is always a list, never null
    - category is free text; the option list is UI guidance only
    """

    check_exists_before_validation = True

    def __init__(self, db: Session):
        super().__init__(
            repo=IngredientRepository(db),
            output_schema=IngredientOutput,
            entity_name="Ingredient",
            validate=validate_ingredient,
            validate_patch=validate_ingredient_patch,
            export_columns=ExportColumns.INGREDIENTS,
            export_sheet="Ingredients",
            header_aliases=INGREDIENT_HEADER_ALIASES,
        )

    def import_ingredients(self, content: bytes, filename: str | None) -> IngredientImportResult:
        outcome = self.import_file(content, filename)
        return IngredientImportResult(
            imported=len(outcome.imported),
            errors=outcome.errors,
            ingredients=outcome.imported,
        )
