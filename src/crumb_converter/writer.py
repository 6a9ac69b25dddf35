"""Persistence of converted recipes: recipe.json and full.jpg per recipe folder."""

import base64
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .constants import IMAGE_FILE_NAME, RECIPE_FILE_NAME

logger = logging.getLogger(__name__)


def decode_first_image(document: Mapping[str, Any]) -> Optional[bytes]:
    """Decode the first data-URI image of a document, None when there is none."""
    images = document.get("image") or []
    if not images or not images[0]:
        return None

    _, base64_data = images[0].split(",", 1)
    return base64.b64decode(base64_data)


def write_recipe_image(document: Mapping[str, Any], folder: Union[str, Path]) -> Optional[Path]:
    image_data = decode_first_image(document)
    if image_data is None:
        return None

    image_path = Path(folder) / IMAGE_FILE_NAME
    image_path.write_bytes(image_data)
    logger.debug(f"Image saved to: {image_path}")
    return image_path


def write_recipe(document: Mapping[str, Any], output_dir: Union[str, Path], name: str) -> Path:
    """
    Write a document and its image into `<output_dir>/<name>/`

    Returns:
        Path: The recipe folder
    """
    folder = Path(output_dir) / name
    folder.mkdir(parents=True, exist_ok=True)

    write_recipe_image(document, folder)

    json_path = folder / RECIPE_FILE_NAME
    with open(json_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(document, ensure_ascii=False, separators=(",", ":")))

    logger.debug(f"Recipe saved to: {json_path}")
    return folder
