"""
Ingredient endpoints: CRUD and spreadsheet import/export.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from inventory_api.routers._common import get_app_settings, read_upload, spreadsheet_response
from inventory_api.services.domain import IngredientService
from shared.config.settings import Settings
from shared.infrastructure.db import get_db
from shared.utils.schemas import IngredientImportResult, IngredientOutput


router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


@router.get("", response_model=list[IngredientOutput])
def list_ingredients(db: Session = Depends(get_db)) -> list[IngredientOutput]:
    """List all ingredients ordered by name."""
    return IngredientService(db).list_all()


@router.get("/export")
def export_ingredients(db: Session = Depends(get_db)) -> Response:
    """Ingredients as an .xlsx workbook; allergens joined with ', '."""
    content = IngredientService(db).export_workbook()
    return spreadsheet_response(content, "ingredients.xlsx")


@router.post("/import", response_model=IngredientImportResult)
def import_ingredients(
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> IngredientImportResult:
    """Bulk create ingredients from the first sheet of an .xlsx or .csv file."""
    content = read_upload(file, settings.max_import_bytes)
    return IngredientService(db).import_ingredients(content, file.filename)


@router.get("/{ingredient_id}", response_model=IngredientOutput)
def get_ingredient(ingredient_id: int, db: Session = Depends(get_db)) -> IngredientOutput:
    return IngredientService(db).get_by_id(ingredient_id)


@router.post("", response_model=IngredientOutput, status_code=status.HTTP_201_CREATED)
def create_ingredient(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
) -> IngredientOutput:
    return IngredientService(db).create(payload)


@router.put("/{ingredient_id}", response_model=IngredientOutput)
def update_ingredient(
    ingredient_id: int,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
) -> IngredientOutput:
    """Partial update. Unknown ids 404 before the body is validated."""
    return IngredientService(db).update(ingredient_id, payload)


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ingredient(ingredient_id: int, db: Session = Depends(get_db)) -> Response:
    IngredientService(db).delete(ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
