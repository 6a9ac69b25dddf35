import base64
import io
import json

import pytest
from rich.console import Console

# Minimal 1x1 JPEG, base64 without data-URI header as stored in crumb files
FAKE_JPG_B64 = "/9j/4AAQSkZJRgABAQEAYABgAAD/2wBDAP//////////////////////////////////////////////////////////////////////////////////////wAALCAABAAEBAREA/8QAJgABAAAAAAAAAAAAAAAAAAAAAxABAAAAAAAAAAAAAAAAAAAAAP/aAAgBAQAAPwBH/9k="
FAKE_JPG = base64.b64decode(FAKE_JPG_B64)


@pytest.fixture
def tea_record():
    return {
        "name": "Tea",
        "images": [],
        "ingredients": [
            {"ingredient": {"name": "Water"}, "quantity": {"amount": 1, "quantityType": "CUP"}},
        ],
        "steps": [{"step": "Boil"}],
        "serves": 2,
    }


@pytest.fixture
def cake_record():
    return {
        "name": "Lemon Drizzle Cake",
        "images": [FAKE_JPG_B64, "c2Vjb25kIGltYWdl"],
        "preparationTime": 20,
        "cookingDuration": 45,
        "serves": 8,
        "ingredients": [
            {"ingredient": {"name": "Self-Raising Flour"}, "quantity": {"amount": 225, "quantityType": "GRAMS"}},
            {"ingredient": {"name": "Eggs"}, "quantity": {"amount": 4, "quantityType": "ITEM"}},
            {"ingredient": {"name": "Salt"}, "quantity": {"amount": 1, "quantityType": "PINCH"}},
            {"ingredient": {"name": ""}, "quantity": {"amount": 5, "quantityType": "GRAMS"}},
            {"ingredient": {"name": "Icing Sugar"}},
        ],
        "steps": [
            {"step": "Heat the oven to 180C."},
            {"step": "Beat everything together."},
            {"step": "Bake, then drizzle."},
        ],
        "tags": ["baking"],
    }


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def crumb_dir(tmp_path, tea_record, cake_record):
    """A directory of crumb files, including one with a pipe in its name."""
    directory = tmp_path / "recipes"
    directory.mkdir()
    (directory / "tea.crumb").write_text(json.dumps(tea_record), encoding="utf-8")
    (directory / "cakes|lemon drizzle.crumb").write_text(json.dumps(cake_record), encoding="utf-8")
    (directory / "notes.txt").write_text("not a recipe", encoding="utf-8")
    return directory
