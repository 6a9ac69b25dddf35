"""
Recipe Transformer - crumb record to schema.org Recipe.

Pure functions only: no I/O, no hidden state. The same record always yields
the same document.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..constants import HOW_TO_STEP_TYPE, IMAGE_DATA_URI_PREFIX, RECIPE_TYPE, SCHEMA_CONTEXT
from ..exceptions import RecipeShapeError
from ..models.crumb import CrumbIngredient, CrumbRecipe, CrumbStep
from .timing import format_number, recipe_times, to_iso_duration
from .units import unit_suffix

logger = logging.getLogger(__name__)


def parse_record(record: Union[CrumbRecipe, Mapping[str, Any]]) -> CrumbRecipe:
    """Parse a raw crumb mapping, raising RecipeShapeError when it is malformed."""
    if isinstance(record, CrumbRecipe):
        return record

    try:
        return CrumbRecipe.model_validate(record)
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) or "record" for error in e.errors()]
        name = record.get("name") if isinstance(record, Mapping) else None
        raise RecipeShapeError(fields, recipe_name=name if isinstance(name, str) else None) from e


def build_image(images: List[str]) -> List[str]:
    """Wrap the first image payload as a JPEG data URI."""
    first_image = images[0] if images else None
    if not first_image:
        return []
    return [f"{IMAGE_DATA_URI_PREFIX}{first_image}"]


def format_ingredient(item: CrumbIngredient) -> Optional[str]:
    """Render an ingredient line, or None when the ingredient has no name."""
    name = item.ingredient.name
    if name == "":
        return None

    quantity = item.quantity
    if quantity is None:
        return name.lower()

    return f"{format_number(quantity.amount)}{unit_suffix(quantity.quantityType)} {name.lower()}"


def build_ingredients(ingredients: List[CrumbIngredient]) -> List[str]:
    lines = [format_ingredient(item) for item in ingredients]
    return [line for line in lines if line is not None]


def build_instructions(steps: List[CrumbStep]) -> List[Dict[str, str]]:
    instructions = []
    for step in steps:
        instruction = {"@type": HOW_TO_STEP_TYPE}
        if step.step is not None:
            instruction["text"] = step.step
        instructions.append(instruction)
    return instructions


def transform(record: Union[CrumbRecipe, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Convert one crumb record into a candidate schema.org Recipe document.

    Args:
        record: Raw crumb mapping (as decoded from JSON) or a parsed CrumbRecipe

    Returns:
        Dict: JSON-LD document; optional fields with no value are left out

    Raises:
        RecipeShapeError: If images, ingredients or steps are missing or malformed
    """
    recipe = parse_record(record)
    times = recipe_times(recipe)

    document: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": RECIPE_TYPE,
    }
    if recipe.name is not None:
        document["name"] = recipe.name
    document["image"] = build_image(recipe.images)

    optional_fields = {
        "prepTime": to_iso_duration(times.prep),
        "cookTime": to_iso_duration(times.cook),
        "totalTime": to_iso_duration(times.total),
        "recipeYield": f"{format_number(recipe.serves)} servings" if recipe.serves is not None else None,
    }
    document.update({key: value for key, value in optional_fields.items() if value is not None})

    ingredients = build_ingredients(recipe.ingredients)
    dropped = len(recipe.ingredients) - len(ingredients)
    if dropped:
        logger.debug(f"Dropped {dropped} unnamed ingredient(s) from '{recipe.name}'")

    document["recipeIngredient"] = ingredients
    document["recipeInstructions"] = build_instructions(recipe.steps)
    return document
