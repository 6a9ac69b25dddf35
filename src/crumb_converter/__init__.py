"""Crumb converter package for turning .crumb recipe exports into schema.org Recipe JSON-LD."""

from .converter import RecipeConverter
from .exceptions import CrumbConverterError, RecipeLoadError, RecipeShapeError
from .loader import load_recipes
from .models.schema_org import RecipeDocument, SchemaViolation
from .services.timing import RecipeTimes, derive_times
from .services.transformer import transform
from .services.validator import is_valid, validate
from .writer import write_recipe, write_recipe_image

__all__ = [
    "transform",
    "validate",
    "is_valid",
    "derive_times",
    "RecipeTimes",
    "RecipeDocument",
    "SchemaViolation",
    "RecipeConverter",
    "load_recipes",
    "write_recipe",
    "write_recipe_image",
    "CrumbConverterError",
    "RecipeShapeError",
    "RecipeLoadError",
]
