"""
Centralized constants for the backend application.

Usage:
    from shared.config.constants import ExportColumns

    for header, attr in ExportColumns.PRODUCTS:
        ...
"""

from typing import Final


# =============================================================================
# Spreadsheet import / export
# =============================================================================


class ExportColumns:
    """Fixed column projections (header -> entity attribute)."""

    PRODUCTS: Final[tuple[tuple[str, str], ...]] = (
        ("Name", "name"),
        ("Net Volume", "net_volume"),
        ("Vintage", "vintage"),
        ("Type", "wine_type"),
        ("Sugar Content", "sugar_content"),
        ("Appellation", "appellation"),
        ("SKU", "sku"),
    )

    INGREDIENTS: Final[tuple[tuple[str, str], ...]] = (
        ("Name", "name"),
        ("Category", "category"),
        ("E Number", "e_number"),
        ("Allergens", "allergens"),
        ("Details", "details"),
    )


# Header aliases, normalized (lowercase, no spaces/underscores/dashes) -> field
PRODUCT_HEADER_ALIASES: Final[dict[str, str]] = {
    "name": "name",
    "productname": "name",
    "netvolume": "net_volume",
    "volume": "net_volume",
    "vintage": "vintage",
    "year": "vintage",
    "winetype": "wine_type",
    "type": "wine_type",
    "sugarcontent": "sugar_content",
    "sugar": "sugar_content",
    "appellation": "appellation",
    "sku": "sku",
}

INGREDIENT_HEADER_ALIASES: Final[dict[str, str]] = {
    "name": "name",
    "ingredientname": "name",
    "category": "category",
    "enumber": "e_number",
    "ecode": "e_number",
    "allergens": "allergens",
    "allergen": "allergens",
    "details": "details",
    "description": "details",
}

XLSX_MEDIA_TYPE: Final[str] = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SPREADSHEET_MEDIA_TYPES: Final[frozenset[str]] = frozenset({
    XLSX_MEDIA_TYPE,
    "text/csv",
    "text/plain",
    "application/csv",
    "application/octet-stream",
})

SPREADSHEET_EXTENSIONS: Final[frozenset[str]] = frozenset({".xlsx", ".csv"})


# =============================================================================
# Image storage
# =============================================================================


class ImageStorage:
    """Key layout for product images in object storage."""

    KEY_TEMPLATE: Final[str] = "products/{product_id}/image_{timestamp}{ext}"
    DEFAULT_EXTENSION: Final[str] = ".jpg"
    MEDIA_TYPE_PREFIX: Final[str] = "image/"


# =============================================================================
# E numbers
# =============================================================================


# (first, last, category) inclusive ranges
E_NUMBER_RANGES: Final[tuple[tuple[int, int, str], ...]] = (
    (100, 199, "Colors"),
    (200, 299, "Preservatives"),
    (300, 399, "Antioxidants"),
    (400, 499, "Emulsifiers"),
    (500, 599, "Stabilizers"),
    (600, 699, "Flavor enhancers"),
    (700, 799, "Antibiotics"),
    (900, 999, "Miscellaneous"),
    (1000, 1599, "Additional chemicals"),
)
