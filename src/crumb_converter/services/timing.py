"""
Recipe timing derivation.

Crumb records store durations as raw minutes and not every record carries all
three. The helpers here work out prep, cook and total minutes from whatever is
present and render them as ISO 8601 durations. A value is only ever computed
from values that exist; anything else stays None.
"""

from typing import NamedTuple, Optional, Union

from ..models.crumb import CrumbRecipe

Minutes = Union[int, float]


class RecipeTimes(NamedTuple):
    prep: Optional[Minutes]
    cook: Optional[Minutes]
    total: Optional[Minutes]


def format_number(value: Minutes) -> str:
    """Render a number the way it appears in JSON (30, not 30.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def derive_times(
    preparation_time: Optional[Minutes],
    cooking_duration: Optional[Minutes],
    duration: Optional[Minutes],
) -> RecipeTimes:
    """
    Derive prep, cook and total minutes.

    Prep falls back to `duration - cooking_duration` when no explicit
    preparation time is given. Total falls back to prep + cook.
    """
    prep = preparation_time
    if prep is None and duration is not None and cooking_duration is not None:
        # duration minus cooking time; the reversed order yields negative prep times
        prep = duration - cooking_duration

    cook = cooking_duration

    total = duration
    if total is None and prep is not None and cook is not None:
        total = prep + cook

    return RecipeTimes(prep=prep, cook=cook, total=total)


def recipe_times(recipe: CrumbRecipe) -> RecipeTimes:
    return derive_times(recipe.preparationTime, recipe.cookingDuration, recipe.duration)


def to_iso_duration(minutes: Optional[Minutes]) -> Optional[str]:
    """Format minutes as an ISO 8601 duration ("PT20M"), None when absent."""
    if minutes is None:
        return None
    return f"PT{format_number(minutes)}M"
