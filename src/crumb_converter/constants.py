"""Constants for crumb converter package."""

import os

from dotenv import load_dotenv

load_dotenv()

# schema.org JSON-LD literals
SCHEMA_CONTEXT = "https://schema.org"
RECIPE_TYPE = "Recipe"
HOW_TO_STEP_TYPE = "HowToStep"

# Source images are always JPEG payloads without a data-URI header
IMAGE_DATA_URI_PREFIX = "data:image/jpeg;base64,"

CRUMB_EXTENSION = ".crumb"
RECIPE_FILE_NAME = "recipe.json"
IMAGE_FILE_NAME = "full.jpg"

# Directories used by the command-line interface, overridable through .env
DEFAULT_INPUT_DIR = os.getenv("CRUMB_INPUT_DIR", "assets/recipes")
DEFAULT_OUTPUT_DIR = os.getenv("CRUMB_OUTPUT_DIR", "output")
