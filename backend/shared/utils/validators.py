"""
Shared validators for uploads and advisory lookups.
"""

import os
from dataclasses import dataclass

from shared.config.constants import (
    E_NUMBER_RANGES,
    ImageStorage,
    SPREADSHEET_EXTENSIONS,
    SPREADSHEET_MEDIA_TYPES,
)


@dataclass(frozen=True)
class ENumberCheck:
    """Outcome of an E-number lookup."""

    is_valid: bool
    message: str
    category: str | None = None


def validate_e_number(code: str) -> ENumberCheck:
    """
    Check a food additive code such as "E330" against the known E-number ranges.

    Advisory only: ingredient writes never call this.

    Args:
        code: Raw code as typed by the user (case and surrounding spaces ignored)

    Returns:
        ENumberCheck with the additive category when the code is in range
    """
    clean = code.strip().upper()

    if not clean.startswith("E"):
        return ENumberCheck(False, 'E number must start with "E"')

    # Trailing letters mark sub-variants (E150a, E160c); only the digits matter
    digits = ""
    for char in clean[1:]:
        if not char.isdigit():
            break
        digits += char
    if not digits:
        return ENumberCheck(False, "Invalid E number format")

    number = int(digits)
    for first, last, category in E_NUMBER_RANGES:
        if first <= number <= last:
            return ENumberCheck(True, f"Valid E number ({category})", category)

    return ENumberCheck(False, "E number is out of valid range")


def is_image_media_type(content_type: str | None) -> bool:
    """True for any image/* media type."""
    return bool(content_type) and content_type.lower().startswith(ImageStorage.MEDIA_TYPE_PREFIX)


def is_spreadsheet_upload(filename: str | None, content_type: str | None) -> bool:
    """
    Accept a spreadsheet by media type or by extension.

    Browsers frequently send CSV and XLSX as application/octet-stream,
    so the extension is checked first. A file without an extension is
    accepted on its media type alone.
    """
    extension = os.path.splitext(filename or "")[1].lower()
    if extension in SPREADSHEET_EXTENSIONS:
        return True
    return not extension and (content_type or "").lower() in SPREADSHEET_MEDIA_TYPES
