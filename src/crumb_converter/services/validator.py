"""
Recipe Validator - schema.org Recipe contract checks.

The contract itself lives in models/schema_org.py; this module only runs a
candidate document through it and turns pydantic errors into field paths.
Validation never raises for a bad document and has no side effects.
"""

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from ..models.schema_org import FieldViolation, RecipeDocument, SchemaViolation

logger = logging.getLogger(__name__)

# The contract as JSON Schema, for consumers outside Python
RECIPE_JSON_SCHEMA = RecipeDocument.model_json_schema(by_alias=True)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc) or "document"


def validate(document: Mapping[str, Any]) -> Union[RecipeDocument, SchemaViolation]:
    """
    Check a candidate document against the schema.org Recipe contract

    Args:
        document: Candidate JSON-LD document

    Returns:
        RecipeDocument if the document is valid, SchemaViolation listing every
        violated field path otherwise
    """
    try:
        return RecipeDocument.model_validate(document)
    except ValidationError as e:
        violations = [
            FieldViolation(field=_field_path(error["loc"]), message=error["msg"], type=error["type"])
            for error in e.errors()
        ]
        logger.debug(f"Document violates the Recipe contract: {[v.field for v in violations]}")
        return SchemaViolation(violations=violations)


def is_valid(document: Mapping[str, Any]) -> bool:
    return isinstance(validate(document), RecipeDocument)
