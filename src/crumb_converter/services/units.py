"""
Quantity unit lookup for crumb ingredient lines.

The crumb exporter tags every quantity with a unit enum. Known tags map to the
suffix rendered right after the amount; any other tag is rendered verbatim.
Some suffixes carry their own leading space ("1 cup") while the metric ones
stick to the amount ("250g").
"""

from typing import Optional

QUANTITY_UNITS = {
    # Weights
    "GRAMS": "g",
    "KGS": "kg",
    # Volumes
    "LITRES": "l",
    "MILLS": "ml",
    "TABLESPOON": "tbsp",
    "TEASPOON": "tsp",
    "CUP": " cup",
    # Countable
    "ITEM": "",
    "PINCH": " pinch",
}


def unit_suffix(quantity_type: Optional[str]) -> str:
    """Return the suffix for a unit tag, passing unknown tags through unchanged."""
    if quantity_type is None:
        return ""
    return QUANTITY_UNITS.get(quantity_type, quantity_type)
