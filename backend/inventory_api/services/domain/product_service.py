"""
Product Service.

Handles product CRUD and spreadsheet import/export.
Updates validate the payload before looking the product up.

Usage:
    from inventory_api.services.domain import ProductService

    service = ProductService(db)
    products = service.list_all()
    product = service.create({"name": "Château Margaux", "vintage": 2015})
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from inventory_api.models import Product
from inventory_api.repositories import ProductRepository
from inventory_api.services.base_service import BaseCRUDService
from inventory_api.services.validation import validate_product, validate_product_patch
from shared.config.constants import PRODUCT_HEADER_ALIASES, ExportColumns
from shared.utils.schemas import ProductImportResult, ProductOutput


class ProductService(BaseCRUDService[Product, ProductOutput]):
    """Service for wine product management."""

    def __init__(self, db: Session):
        super().__init__(
            repo=ProductRepository(db),
            output_schema=ProductOutput,
            entity_name="Product",
            validate=validate_product,
            validate_patch=validate_product_patch,
            export_columns=ExportColumns.PRODUCTS,
            export_sheet="Products",
            header_aliases=PRODUCT_HEADER_ALIASES,
        )

    def import_products(self, content: bytes, filename: str | None) -> ProductImportResult:
        outcome = self.import_file(content, filename)
        return ProductImportResult(
            imported=len(outcome.imported),
            errors=outcome.errors,
            products=outcome.imported,
        )
