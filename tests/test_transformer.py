"""
Tests for the crumb → schema.org Recipe transformer.

These tests validate that:
- Field mapping matches the published examples
- Optional fields are left out rather than set to null
- Unnamed ingredients never reach the output
- Malformed records raise RecipeShapeError
"""

import copy
import json

import pytest

from crumb_converter.exceptions import RecipeShapeError
from crumb_converter.models.crumb import CrumbRecipe
from crumb_converter.services.transformer import format_ingredient, parse_record, transform

from conftest import FAKE_JPG_B64


def _record(**overrides):
    record = {"name": "Test", "images": [], "ingredients": [], "steps": []}
    record.update(overrides)
    return record


def _ingredient(name, amount=None, unit=None):
    item = {"ingredient": {"name": name}}
    if amount is not None:
        item["quantity"] = {"amount": amount, "quantityType": unit}
    return item


# ═══════════════════════════════════════════════════════════════════
# TESTS: document shape
# ═══════════════════════════════════════════════════════════════════

class TestDocumentShape:

    def test_tea_example(self, tea_record):
        doc = transform(tea_record)

        assert doc["@context"] == "https://schema.org"
        assert doc["@type"] == "Recipe"
        assert doc["name"] == "Tea"
        assert doc["image"] == []
        assert doc["recipeYield"] == "2 servings"
        assert doc["recipeIngredient"] == ["1 cup water"]
        assert doc["recipeInstructions"] == [{"@type": "HowToStep", "text": "Boil"}]

    def test_absent_fields_are_omitted_not_null(self, tea_record):
        doc = transform(tea_record)

        for key in ("prepTime", "cookTime", "totalTime"):
            assert key not in doc
        assert None not in doc.values()

    def test_transform_is_deterministic(self, cake_record):
        first = json.dumps(transform(cake_record))
        second = json.dumps(transform(cake_record))
        assert first == second

    def test_input_record_is_not_modified(self, cake_record):
        original = copy.deepcopy(cake_record)
        transform(cake_record)
        assert cake_record == original

    def test_unknown_fields_are_ignored(self, cake_record):
        doc = transform(cake_record)
        assert "tags" not in doc

    def test_missing_name_is_left_out(self):
        record = _record()
        del record["name"]
        doc = transform(record)
        assert "name" not in doc

    def test_accepts_parsed_record(self, tea_record):
        parsed = CrumbRecipe.model_validate(tea_record)
        assert transform(parsed) == transform(tea_record)

    def test_no_serves_means_no_yield(self):
        assert "recipeYield" not in transform(_record())

    def test_float_serves_renders_like_json(self):
        assert transform(_record(serves=4.0))["recipeYield"] == "4 servings"


# ═══════════════════════════════════════════════════════════════════
# TESTS: times
# ═══════════════════════════════════════════════════════════════════

class TestTimes:

    def test_explicit_prep_and_cook(self, cake_record):
        doc = transform(cake_record)
        assert doc["prepTime"] == "PT20M"
        assert doc["cookTime"] == "PT45M"
        assert doc["totalTime"] == "PT65M"

    def test_duration_and_cooking_duration(self):
        doc = transform(_record(duration=30, cookingDuration=10))

        assert doc["cookTime"] == "PT10M"
        assert doc["totalTime"] == "PT30M"
        # prep falls back to duration minus cooking duration
        assert doc["prepTime"] == "PT20M"

    def test_duration_alone_gives_only_total(self):
        doc = transform(_record(duration=30))

        assert doc["totalTime"] == "PT30M"
        assert "prepTime" not in doc
        assert "cookTime" not in doc

    def test_no_times_at_all(self):
        doc = transform(_record())

        for key in ("prepTime", "cookTime", "totalTime"):
            assert key not in doc
        assert "undefined" not in json.dumps(doc)

    def test_duration_wins_over_derived_total(self):
        doc = transform(_record(duration=90, preparationTime=10, cookingDuration=20))
        assert doc["totalTime"] == "PT90M"
        assert doc["prepTime"] == "PT10M"


# ═══════════════════════════════════════════════════════════════════
# TESTS: image
# ═══════════════════════════════════════════════════════════════════

class TestImage:

    def test_only_first_image_is_kept(self, cake_record):
        doc = transform(cake_record)
        assert doc["image"] == [f"data:image/jpeg;base64,{FAKE_JPG_B64}"]

    def test_payload_slashes_are_untouched(self):
        doc = transform(_record(images=["ab/cd//ef=="]))
        assert doc["image"] == ["data:image/jpeg;base64,ab/cd//ef=="]

    def test_empty_first_image_gives_empty_list(self):
        assert transform(_record(images=[""]))["image"] == []


# ═══════════════════════════════════════════════════════════════════
# TESTS: ingredients
# ═══════════════════════════════════════════════════════════════════

class TestIngredients:

    def test_cake_ingredient_lines(self, cake_record):
        doc = transform(cake_record)
        assert doc["recipeIngredient"] == [
            "225g self-raising flour",
            "4 eggs",
            "1 pinch salt",
            "icing sugar",
        ]

    def test_unnamed_ingredient_is_excluded(self):
        record = _record(ingredients=[
            _ingredient("Flour", 200, "GRAMS"),
            _ingredient("", 5, "GRAMS"),
            _ingredient("Milk", 300, "MILLS"),
        ])
        doc = transform(record)

        assert doc["recipeIngredient"] == ["200g flour", "300ml milk"]
        assert not any(line.startswith("5") for line in doc["recipeIngredient"])

    @pytest.mark.parametrize("names", [
        [],
        [""],
        ["", "", ""],
        ["Salt", "", "Pepper"],
        ["Salt", "Pepper"],
    ])
    def test_output_length_matches_named_ingredients(self, names):
        record = _record(ingredients=[_ingredient(name, 1, "ITEM") for name in names])
        doc = transform(record)
        assert len(doc["recipeIngredient"]) == len([n for n in names if n != ""])

    @pytest.mark.parametrize("unit,expected", [
        ("GRAMS", "2g butter"),
        ("KGS", "2kg butter"),
        ("LITRES", "2l butter"),
        ("MILLS", "2ml butter"),
        ("ITEM", "2 butter"),
        ("PINCH", "2 pinch butter"),
        ("TABLESPOON", "2tbsp butter"),
        ("TEASPOON", "2tsp butter"),
        ("CUP", "2 cup butter"),
        ("OUNCES", "2OUNCES butter"),
    ])
    def test_units(self, unit, expected):
        item = parse_record(_record(ingredients=[_ingredient("Butter", 2, unit)])).ingredients[0]
        assert format_ingredient(item) == expected

    def test_fractional_amount(self):
        doc = transform(_record(ingredients=[_ingredient("Sugar", 1.5, "CUP")]))
        assert doc["recipeIngredient"] == ["1.5 cup sugar"]

    def test_name_is_lower_cased_without_quantity(self):
        doc = transform(_record(ingredients=[_ingredient("Black PEPPER")]))
        assert doc["recipeIngredient"] == ["black pepper"]


# ═══════════════════════════════════════════════════════════════════
# TESTS: instructions
# ═══════════════════════════════════════════════════════════════════

class TestInstructions:

    def test_steps_keep_their_order(self, cake_record):
        doc = transform(cake_record)
        assert [step["text"] for step in doc["recipeInstructions"]] == [
            "Heat the oven to 180C.",
            "Beat everything together.",
            "Bake, then drizzle.",
        ]
        assert all(step["@type"] == "HowToStep" for step in doc["recipeInstructions"])

    def test_steps_carry_only_type_and_text(self, tea_record):
        step = transform(tea_record)["recipeInstructions"][0]
        assert set(step) == {"@type", "text"}


# ═══════════════════════════════════════════════════════════════════
# TESTS: malformed records
# ═══════════════════════════════════════════════════════════════════

class TestShapeErrors:

    @pytest.mark.parametrize("field", ["images", "ingredients", "steps"])
    def test_missing_sequence_raises(self, tea_record, field):
        del tea_record[field]

        with pytest.raises(RecipeShapeError) as exc_info:
            transform(tea_record)

        assert field in exc_info.value.fields
        assert exc_info.value.recipe_name == "Tea"

    def test_ingredient_without_name_raises(self):
        record = _record(ingredients=[{"ingredient": {}}])

        with pytest.raises(RecipeShapeError) as exc_info:
            transform(record)

        assert "ingredients.0.ingredient.name" in exc_info.value.fields

    def test_non_mapping_record_raises(self):
        with pytest.raises(RecipeShapeError):
            transform(["not", "a", "record"])
