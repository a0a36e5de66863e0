"""
Tests for the product/ingredient write models and validation results.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from inventory_api.services.validation import (
    validate_ingredient,
    validate_ingredient_patch,
    validate_product,
    validate_product_patch,
)
from shared.utils.schemas import IngredientCreate, ProductCreate


NULLABLE_PRODUCT_FIELDS = [
    name
    for name in ProductCreate.model_fields
    if name not in ("name", "organic", "vegetarian", "vegan")
]


class TestFieldTypes:
    """Per-field normalization inside the write models."""

    @pytest.mark.parametrize("value", ["", "   ", None, "\t\n"])
    def test_optional_text_blank_becomes_none(self, value):
        assert ProductCreate(name="X", brand=value).brand is None

    def test_optional_text_is_trimmed(self):
        assert ProductCreate(name="X", brand="  Bordeaux ").brand == "Bordeaux"

    def test_optional_text_rejects_numbers(self):
        with pytest.raises(PydanticValidationError) as exc:
            ProductCreate(name="X", brand=12)
        assert exc.value.errors()[0]["type"] == "string_type"

    def test_required_text_trimmed(self):
        assert ProductCreate(name="  Merlot  ").name == "Merlot"

    @pytest.mark.parametrize("value", ["", "    "])
    def test_required_text_blank_rejected(self, value):
        with pytest.raises(PydanticValidationError) as exc:
            ProductCreate(name=value)
        error = exc.value.errors()[0]
        assert (error["loc"], error["msg"], error["type"]) == (("name",), "Name is required", "too_small")

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, "5"),
            (5.0, "5"),
            (5.5, "5.5"),
            (" 120 ", "120"),
            ("", None),
            ("  ", None),
            (None, None),
            ("≈5", "≈5"),
            ("abc", "abc"),
        ],
    )
    def test_numeric_text(self, value, expected):
        assert ProductCreate(name="X", kcal=value).kcal == expected

    def test_numeric_text_rejects_booleans(self):
        with pytest.raises(PydanticValidationError):
            ProductCreate(name="X", kcal=True)

    def test_flag_null_is_false_on_create(self):
        product = ProductCreate(name="X", organic=None, vegan=True)
        assert product.organic is False
        assert product.vegan is True
        assert product.vegetarian is False

    def test_flag_rejects_strings(self):
        with pytest.raises(PydanticValidationError) as exc:
            ProductCreate(name="X", organic="yes")
        assert exc.value.errors()[0]["type"] == "bool_type"

    def test_allergens_from_comma_string(self):
        assert IngredientCreate(name="X", allergens="gluten, dairy").allergens == ["gluten", "dairy"]

    def test_allergens_drop_empty_pieces(self):
        assert IngredientCreate(name="X", allergens=" gluten ,, ,dairy,").allergens == ["gluten", "dairy"]

    def test_allergens_list_trimmed_and_duplicates_kept(self):
        assert IngredientCreate(name="X", allergens=[" milk", "milk ", ""]).allergens == ["milk", "milk"]

    def test_allergens_none_is_empty_list(self):
        assert IngredientCreate(name="X", allergens=None).allergens == []


class TestValidateProduct:
    """Create-time product validation."""

    def test_minimal_product_gets_defaults(self):
        result = validate_product({"name": " Rioja "})
        assert result.ok
        assert result.data["name"] == "Rioja"
        for field in NULLABLE_PRODUCT_FIELDS:
            assert result.data[field] is None
        assert result.data["organic"] is False
        assert result.data["vegetarian"] is False
        assert result.data["vegan"] is False

    def test_empty_name_reports_name_field(self):
        result = validate_product({"name": ""})
        assert not result.ok
        assert [e.field for e in result.errors] == ["name"]
        assert result.messages == ["Name is required"]

    def test_missing_name(self):
        result = validate_product({"brand": "Acme"})
        assert not result.ok
        assert result.errors[0].field == "name"
        assert result.errors[0].code == "missing"

    def test_reports_every_failing_field(self):
        result = validate_product({"name": "  ", "organic": "yes", "brand": 7})
        assert not result.ok
        assert {e.field for e in result.errors} == {"name", "organic", "brand"}

    def test_unknown_keys_dropped(self):
        result = validate_product({"name": "X", "price": 10, "id": 99})
        assert result.ok
        assert "price" not in result.data
        assert "id" not in result.data

    def test_non_object_rejected(self):
        result = validate_product(["name"])
        assert not result.ok
        assert result.errors[0].field == ""
        assert result.errors[0].code == "model_type"

    def test_nutrition_numbers_stored_as_text(self):
        result = validate_product({"name": "X", "kcal": 85, "fat": 0.0, "kj": "356 "})
        assert result.ok
        assert result.data["kcal"] == "85"
        assert result.data["fat"] == "0"
        assert result.data["kj"] == "356"

    def test_enumerated_fields_not_enforced(self):
        result = validate_product({"name": "X", "wine_type": "Orange", "operator_type": "Anything"})
        assert result.ok
        assert result.data["wine_type"] == "Orange"

    def test_normalizing_twice_is_stable(self):
        raw = {"name": " A ", "brand": "  ", "sku": " S1 ", "kcal": 5.0, "vegan": True}
        first = validate_product(raw).data
        second = validate_product(first).data
        assert first == second

    def test_error_dict_shape(self):
        result = validate_product({"name": "X", "sku": 42})
        assert result.errors[0].to_dict() == {
            "field": "sku",
            "message": "Input should be a valid string",
            "code": "string_type",
        }


class TestValidateProductPatch:
    """Partial product updates."""

    def test_only_supplied_fields(self):
        result = validate_product_patch({"sku": " X "})
        assert result.ok
        assert result.data == {"sku": "X"}

    def test_empty_patch(self):
        result = validate_product_patch({})
        assert result.ok
        assert result.data == {}

    def test_explicit_blank_clears_field(self):
        result = validate_product_patch({"brand": ""})
        assert result.data == {"brand": None}

    def test_name_rules_still_apply(self):
        result = validate_product_patch({"name": "   "})
        assert not result.ok
        assert result.errors[0].field == "name"

    def test_null_name_rejected(self):
        result = validate_product_patch({"name": None})
        assert not result.ok
        assert result.errors[0].field == "name"

    def test_null_flag_rejected(self):
        result = validate_product_patch({"organic": None})
        assert not result.ok
        assert result.errors[0].field == "organic"

    def test_flag_set(self):
        assert validate_product_patch({"vegan": False}).data == {"vegan": False}


class TestValidateIngredient:
    """Ingredient validation."""

    def test_trims_e_number(self):
        result = validate_ingredient({"name": "Citric Acid", "e_number": " E330 ", "allergens": []})
        assert result.ok
        assert result.data["e_number"] == "E330"
        assert result.data["allergens"] == []

    def test_allergens_default_to_empty_list(self):
        result = validate_ingredient({"name": "Yeast"})
        assert result.data["allergens"] == []
        assert result.data["category"] is None

    def test_allergen_string_split(self):
        result = validate_ingredient({"name": "Fining", "allergens": "milk, eggs"})
        assert result.data["allergens"] == ["milk", "eggs"]

    def test_bad_allergen_element_path(self):
        result = validate_ingredient({"name": "Fining", "allergens": ["milk", 1, None]})
        assert not result.ok
        assert [e.field for e in result.errors] == ["allergens.1", "allergens.2"]

    def test_every_field_reported(self):
        result = validate_ingredient(
            {"name": "  ", "category": 5, "allergens": [1, "x"], "created_by": "a"}
        )
        assert [e.field for e in result.errors] == ["name", "category", "allergens.0", "created_by"]

    def test_patch_leaves_allergens_out(self):
        result = validate_ingredient_patch({"details": "Used for fining"})
        assert result.data == {"details": "Used for fining"}

    def test_created_by(self):
        assert validate_ingredient({"name": "A", "created_by": 3}).data["created_by"] == 3
        assert not validate_ingredient({"name": "A", "created_by": "3"}).ok
