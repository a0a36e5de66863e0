"""
Application services.

- validation: runs the Pydantic write models, flattens their errors
- spreadsheet: workbook codec
- transfer: spreadsheet import/export adapter
- domain: product, ingredient, image and auth services
"""

from .base_service import BaseCRUDService

__all__ = ["BaseCRUDService"]
