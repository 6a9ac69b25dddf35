"""Exceptions for crumb converter package."""

from typing import List, Optional


class CrumbConverterError(Exception):
    """Base class for all errors raised by the converter."""
    pass


class RecipeShapeError(CrumbConverterError):
    """Raised when a crumb record lacks a required structural field."""

    def __init__(self, fields: List[str], recipe_name: Optional[str] = None):
        self.fields = fields
        self.recipe_name = recipe_name
        label = f"'{recipe_name}'" if recipe_name else "record"
        super().__init__(f"Malformed crumb {label}: invalid or missing {', '.join(fields)}")


class RecipeLoadError(CrumbConverterError):
    """Raised when a crumb file cannot be read or decoded."""
    pass
