"""
Utilities module: Exceptions, validators.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    SpreadsheetError,
    UnsupportedMediaError,
    UpstreamError,
)
from shared.utils.validators import (
    validate_e_number,
    is_image_media_type,
    is_spreadsheet_upload,
)

__all__ = [
    # exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "SpreadsheetError",
    "UnsupportedMediaError",
    "UpstreamError",
    # validators
    "validate_e_number",
    "is_image_media_type",
    "is_spreadsheet_upload",
]
