"""Discovery and decoding of .crumb recipe files."""

import json
import logging
from pathlib import Path
from typing import List, Union

from .constants import CRUMB_EXTENSION
from .exceptions import RecipeLoadError
from .models.conversion import SourceRecipe

logger = logging.getLogger(__name__)


def safe_recipe_name(file_name: str) -> str:
    """Turn a crumb file name into a folder-safe recipe name."""
    return file_name.replace("|", "-").replace(CRUMB_EXTENSION, "", 1)


def load_recipe_file(path: Path) -> SourceRecipe:
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = json.load(f)
    except json.JSONDecodeError as e:
        raise RecipeLoadError(f"Invalid JSON in {path.name}: {e}") from e
    except OSError as e:
        raise RecipeLoadError(f"Could not read {path.name}: {e}") from e

    if not isinstance(content, dict):
        raise RecipeLoadError(f"Expected a JSON object in {path.name}, got {type(content).__name__}")

    return SourceRecipe(name=safe_recipe_name(path.name), content=content)


def load_recipes(directory: Union[str, Path]) -> List[SourceRecipe]:
    """
    Load every .crumb file of a directory, sorted by file name.

    Raises:
        RecipeLoadError: If the directory is missing or a file cannot be decoded
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise RecipeLoadError(f"Recipe directory not found: {directory}")

    recipe_files = sorted(
        path for path in directory.iterdir()
        if path.is_file() and path.name.endswith(CRUMB_EXTENSION)
    )
    logger.info(f"Found {len(recipe_files)} crumb files in {directory}")

    return [load_recipe_file(path) for path in recipe_files]
