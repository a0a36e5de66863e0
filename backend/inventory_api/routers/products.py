"""
Product endpoints: CRUD, spreadsheet import/export and product images.

Write bodies are taken as raw JSON and validated by the service against the
Pydantic write models, so a 400 reads "Invalid product data" and lists every
failing field at once.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from inventory_api.routers._common import (
    get_app_settings,
    get_storage,
    read_upload,
    spreadsheet_response,
)
from inventory_api.services.domain import ImageService, ProductService
from shared.config.settings import Settings
from shared.infrastructure.db import get_db
from shared.infrastructure.storage import Storage
from shared.utils.exceptions import ValidationError
from shared.utils.schemas import ImageResult, ProductImportResult, ProductOutput


router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductOutput])
def list_products(db: Session = Depends(get_db)) -> list[ProductOutput]:
    """List all products ordered by name."""
    return ProductService(db).list_all()


# Must be registered before /{product_id}
@router.get("/export")
def export_products(db: Session = Depends(get_db)) -> Response:
    """Products as an .xlsx workbook with a fixed column projection."""
    content = ProductService(db).export_workbook()
    return spreadsheet_response(content, "products.xlsx")


@router.post("/import", response_model=ProductImportResult)
def import_products(
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ProductImportResult:
    """Bulk create products from the first sheet of an .xlsx or .csv file."""
    content = read_upload(file, settings.max_import_bytes)
    return ProductService(db).import_products(content, file.filename)


@router.get("/{product_id}", response_model=ProductOutput)
def get_product(product_id: int, db: Session = Depends(get_db)) -> ProductOutput:
    """Get a single product by ID."""
    return ProductService(db).get_by_id(product_id)


@router.post("", response_model=ProductOutput, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
) -> ProductOutput:
    """Create a product."""
    return ProductService(db).create(payload)


@router.put("/{product_id}", response_model=ProductOutput)
def update_product(
    product_id: int,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
) -> ProductOutput:
    """Partial update: only the supplied fields change."""
    return ProductService(db).update(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)) -> Response:
    """Hard delete a product."""
    ProductService(db).delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Images
# =============================================================================


@router.post("/{product_id}/image", response_model=ImageResult)
def upload_product_image(
    product_id: int,
    image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> ImageResult:
    """Upload an image (image/*, max 5 MB) and attach it to the product."""
    if image is None:
        raise ValidationError("No image file provided")

    service = ImageService(db, storage, settings.max_image_bytes)
    return service.upload(product_id, image.file, image.filename, image.content_type)


@router.delete("/{product_id}/image", response_model=ImageResult)
def delete_product_image(
    product_id: int,
    db: Session = Depends(get_db),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> ImageResult:
    """Detach the product's image and delete the stored object."""
    return ImageService(db, storage, settings.max_image_bytes).remove(product_id)
