"""
Crumb Models - the proprietary recipe record format.

A `.crumb` file is a JSON export with durations in raw minutes, quantity units
as enum tags and images as bare base64 JPEG payloads. Only the fields the
converter reads are modelled; everything else in the export is ignored.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class CrumbModel(BaseModel):
    """Base for crumb models: unknown export fields are dropped."""

    model_config = ConfigDict(extra="ignore")


class CrumbIngredientRef(CrumbModel):
    """The ingredient an ingredient line refers to"""
    name: str


class CrumbQuantity(CrumbModel):
    """Amount and unit tag of an ingredient line"""
    amount: Number
    quantityType: Optional[str] = Field(
        default=None,
        description="Unit tag (GRAMS, KGS, CUP, ...); unknown tags are passed through"
    )


class CrumbIngredient(CrumbModel):
    ingredient: CrumbIngredientRef
    quantity: Optional[CrumbQuantity] = None


class CrumbStep(CrumbModel):
    step: Optional[str] = None


class CrumbRecipe(CrumbModel):
    """A recipe record as stored in a .crumb file."""

    name: Optional[str] = None
    images: List[str]
    duration: Optional[Number] = Field(
        default=None,
        description="Total time in minutes; wins over the derived total"
    )
    cookingDuration: Optional[Number] = Field(
        default=None,
        description="Cooking time in minutes"
    )
    preparationTime: Optional[Number] = Field(
        default=None,
        description="Explicit preparation time in minutes"
    )
    serves: Optional[Number] = None
    ingredients: List[CrumbIngredient]
    steps: List[CrumbStep]
