"""
Lookup endpoints for the form UI: option lists and E-number checks.
Neither is enforced on writes.
"""

from fastapi import APIRouter, Depends

from inventory_api.routers._common import get_app_settings
from shared.config.settings import Settings
from shared.utils.schemas import ConfigOutput, ENumberOutput
from shared.utils.validators import validate_e_number


router = APIRouter(prefix="/api", tags=["lookups"])


@router.get("/config", response_model=ConfigOutput)
def get_config(settings: Settings = Depends(get_app_settings)) -> ConfigOutput:
    """Option lists and upload limits for the form UI."""
    return ConfigOutput(
        wine_type_options=settings.wine_type_options,
        operator_type_options=settings.operator_type_options,
        category_options=settings.category_options,
        allergen_options=settings.allergen_options,
        max_image_bytes=settings.max_image_bytes,
        max_import_bytes=settings.max_import_bytes,
    )


@router.get("/e-numbers/{code}", response_model=ENumberOutput)
def check_e_number(code: str) -> ENumberOutput:
    """Advisory check of a food additive code such as E330."""
    check = validate_e_number(code)
    return ENumberOutput(
        code=code.strip().upper(),
        is_valid=check.is_valid,
        message=check.message,
        category=check.category,
    )
