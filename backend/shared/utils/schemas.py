"""
Shared Pydantic schemas used across the application.

Write models normalize as they validate: text is trimmed and blank optional
text becomes None, nutrition numbers are stored as text, null flags become
False on create and a comma-separated allergen string is split into a list.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
)
from pydantic_core import PydanticCustomError


# =============================================================================
# Normalizing Field Types
# =============================================================================


def _required_text(value: str) -> str:
    trimmed = value.strip()
    if not trimmed:
        raise PydanticCustomError("too_small", "Name is required")
    return trimmed


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _number_as_text(value: Any) -> Any:
    # bool is an int subclass
    if isinstance(value, bool):
        raise PydanticCustomError("string_type", "Input should be a number or a string")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return value


def _null_is_false(value: Any) -> Any:
    return False if value is None else value


def _split_allergens(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(",")
    return value


def _clean_allergens(values: list[str]) -> list[str]:
    return [v.strip() for v in values if v.strip()]


RequiredText = Annotated[StrictStr, AfterValidator(_required_text)]
OptionalText = Annotated[Optional[StrictStr], AfterValidator(_blank_to_none)]
NumericText = Annotated[
    Optional[StrictStr],
    BeforeValidator(_number_as_text),
    AfterValidator(_blank_to_none),
]
Flag = Annotated[StrictBool, BeforeValidator(_null_is_false)]
Allergens = Annotated[
    list[StrictStr],
    BeforeValidator(_split_allergens),
    AfterValidator(_clean_allergens),
]


# =============================================================================
# Entity Writes
# =============================================================================


class ProductCreate(BaseModel):
    """Full product record. Unknown keys are ignored; id and timestamps are server-side."""

    name: RequiredText
    brand: OptionalText = None
    net_volume: OptionalText = None
    vintage: OptionalText = None
    wine_type: OptionalText = None
    sugar_content: OptionalText = None
    appellation: OptionalText = None
    alcohol_content: OptionalText = None
    packaging_gases: OptionalText = None
    portion_size: OptionalText = None
    kcal: NumericText = None
    kj: NumericText = None
    fat: NumericText = None
    carbohydrates: NumericText = None
    organic: Flag = False
    vegetarian: Flag = False
    vegan: Flag = False
    operator_type: OptionalText = None
    operator_name: OptionalText = None
    operator_address: OptionalText = None
    operator_info: OptionalText = None
    country_of_origin: OptionalText = None
    sku: OptionalText = None
    ean: OptionalText = None
    external_link: OptionalText = None
    redirect_link: OptionalText = None
    image_url: OptionalText = None
    created_by: Optional[StrictInt] = None


class ProductUpdate(ProductCreate):
    """
    Partial product update, applied with ``model_dump(exclude_unset=True)``.

    An absent key keeps the stored value. Name and flags cannot be set to null.
    """

    name: RequiredText = None
    organic: StrictBool = None
    vegetarian: StrictBool = None
    vegan: StrictBool = None


class IngredientCreate(BaseModel):
    """Full ingredient record. Allergens accept a list or a comma-separated string."""

    name: RequiredText
    category: OptionalText = None
    e_number: OptionalText = None
    details: OptionalText = None
    allergens: Allergens = Field(default_factory=list)
    created_by: Optional[StrictInt] = None


class IngredientUpdate(IngredientCreate):
    """Partial ingredient update, applied with ``model_dump(exclude_unset=True)``."""

    name: RequiredText = None


# =============================================================================
# Entity Outputs
# =============================================================================


class ProductOutput(BaseModel):
    """Product as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: Optional[str] = None
    net_volume: Optional[str] = None
    vintage: Optional[str] = None
    wine_type: Optional[str] = None
    sugar_content: Optional[str] = None
    appellation: Optional[str] = None
    alcohol_content: Optional[str] = None
    packaging_gases: Optional[str] = None
    portion_size: Optional[str] = None
    kcal: Optional[str] = None
    kj: Optional[str] = None
    fat: Optional[str] = None
    carbohydrates: Optional[str] = None
    organic: bool = False
    vegetarian: bool = False
    vegan: bool = False
    operator_type: Optional[str] = None
    operator_name: Optional[str] = None
    operator_address: Optional[str] = None
    operator_info: Optional[str] = None
    country_of_origin: Optional[str] = None
    sku: Optional[str] = None
    ean: Optional[str] = None
    external_link: Optional[str] = None
    redirect_link: Optional[str] = None
    image_url: Optional[str] = None
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class IngredientOutput(BaseModel):
    """Ingredient as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: Optional[str] = None
    e_number: Optional[str] = None
    details: Optional[str] = None
    allergens: list[str] = Field(default_factory=list)
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Import / Upload Results
# =============================================================================


class ProductImportResult(BaseModel):
    """Outcome of a product spreadsheet import. Row errors are non-fatal."""

    success: bool = True
    imported: int
    errors: list[str]
    products: list[ProductOutput]


class IngredientImportResult(BaseModel):
    """Outcome of an ingredient spreadsheet import. Row errors are non-fatal."""

    success: bool = True
    imported: int
    errors: list[str]
    ingredients: list[IngredientOutput]


class ImageResult(BaseModel):
    """Product image upload/removal outcome."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    image_url: Optional[str] = Field(default=None, serialization_alias="imageUrl")


# =============================================================================
# Authentication Schemas (mock flow)
# =============================================================================


class RegisterRequest(BaseModel):
    """Registration body. Every credential is accepted."""

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login body. Every credential is accepted."""

    email: Optional[str] = None
    password: Optional[str] = None


class UserInfo(BaseModel):
    """Basic user information included in auth responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: str
    is_email_confirmed: bool = Field(default=True, serialization_alias="isEmailConfirmed")


class AuthResponse(BaseModel):
    """Register/login response with a demo token."""

    success: bool = True
    user: UserInfo
    token: str
    message: str


# =============================================================================
# Lookups
# =============================================================================


class ENumberOutput(BaseModel):
    """Advisory E-number check."""

    model_config = ConfigDict(populate_by_name=True)

    code: str
    is_valid: bool = Field(serialization_alias="isValid")
    message: str
    category: Optional[str] = None


class ConfigOutput(BaseModel):
    """Option lists offered by the form UI. Not enforced on writes."""

    wine_type_options: list[str]
    operator_type_options: list[str]
    category_options: list[str]
    allergen_options: list[str]
    max_image_bytes: int
    max_import_bytes: int
