"""
Write-payload validation for products and ingredients.

The Pydantic write models in ``shared.utils.schemas`` normalize every field;
this module runs them and flattens Pydantic's errors into
``{field, message, code}`` entries so a 400 lists every failing field.

Usage:
    from inventory_api.services.validation import validate_product

    result = validate_product(payload)
    if not result.ok:
        raise ValidationError("Invalid product data", errors=result.errors)
    product = repo.create(result.data)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shared.utils.schemas import (
    IngredientCreate,
    IngredientUpdate,
    ProductCreate,
    ProductUpdate,
)

# Mapping of supplied field name -> normalized new value
Patch = dict[str, Any]


@dataclass(frozen=True)
class FieldError:
    """One rejected field. ``field`` is a dotted path (``allergens.2``)."""

    field: str
    message: str
    code: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass
class ValidationResult:
    """Either normalized data (ok) or every field error found."""

    ok: bool
    data: dict[str, Any] | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


def field_errors(exc: PydanticValidationError) -> list[FieldError]:
    """Pydantic errors as dotted-path field errors. A non-object body has field ''."""
    return [
        FieldError(".".join(str(part) for part in err["loc"]), err["msg"], err["type"])
        for err in exc.errors()
    ]


def _run(model: type[BaseModel], raw: Any, *, partial: bool) -> ValidationResult:
    try:
        parsed = model.model_validate(raw)
    except PydanticValidationError as exc:
        return ValidationResult(ok=False, errors=field_errors(exc))
    return ValidationResult(ok=True, data=parsed.model_dump(exclude_unset=partial))


def validate_product(raw: Any) -> ValidationResult:
    """Full product record for insert. Missing optional fields become null/False."""
    return _run(ProductCreate, raw, partial=False)


def validate_product_patch(raw: Any) -> ValidationResult:
    """Product Patch: only the supplied fields, each normalized."""
    return _run(ProductUpdate, raw, partial=True)


def validate_ingredient(raw: Any) -> ValidationResult:
    """Full ingredient record for insert. Missing allergens become []."""
    return _run(IngredientCreate, raw, partial=False)


def validate_ingredient_patch(raw: Any) -> ValidationResult:
    """Ingredient Patch: only the supplied fields, each normalized."""
    return _run(IngredientUpdate, raw, partial=True)
