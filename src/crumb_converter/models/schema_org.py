"""
schema.org Recipe Models - the contract every converted document must satisfy.

Field names follow the JSON-LD vocabulary, so `@context` and `@type` are
declared through aliases. Nested objects are optional, but once present their
own required fields become mandatory.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SchemaOrgModel(BaseModel):
    """Base for schema.org models: immutable, addressed by JSON-LD names."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        """Optional fields must be left out, not set to null."""
        if value is None:
            raise ValueError("must be omitted instead of null")
        return value


class Person(SchemaOrgModel):
    type: Literal["Person"] = Field(alias="@type")
    name: str


class NutritionInformation(SchemaOrgModel):
    type: Literal["NutritionInformation"] = Field(alias="@type")
    calories: Optional[str] = None
    carbohydrateContent: Optional[str] = None
    cholesterolContent: Optional[str] = None
    fatContent: Optional[str] = None
    fiberContent: Optional[str] = None
    proteinContent: Optional[str] = None
    saturatedFatContent: Optional[str] = None
    servingSize: Optional[str] = None
    sodiumContent: Optional[str] = None
    sugarContent: Optional[str] = None
    transFatContent: Optional[str] = None
    unsaturatedFatContent: Optional[str] = None


class AggregateRating(SchemaOrgModel):
    type: Literal["AggregateRating"] = Field(alias="@type")
    ratingValue: str
    reviewCount: str


class HowToStep(SchemaOrgModel):
    """A single instruction of the recipe"""
    type: Literal["HowToStep"] = Field(alias="@type")
    name: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None


class RecipeDocument(SchemaOrgModel):
    """A schema.org Recipe in JSON-LD form."""

    context: Literal["https://schema.org"] = Field(alias="@context")
    type: Literal["Recipe"] = Field(alias="@type")
    name: str
    image: List[str] = Field(description="Data URIs of the recipe images")
    author: Optional[Person] = None
    datePublished: Optional[str] = None
    description: Optional[str] = None
    recipeCuisine: Optional[str] = None
    prepTime: Optional[str] = Field(
        default=None,
        description="Preparation time in ISO 8601 duration format (e.g., 'PT20M')"
    )
    cookTime: Optional[str] = Field(
        default=None,
        description="Cooking time in ISO 8601 duration format (e.g., 'PT30M')"
    )
    totalTime: Optional[str] = Field(
        default=None,
        description="Total time in ISO 8601 duration format (e.g., 'PT50M')"
    )
    keywords: Optional[str] = None
    recipeYield: Optional[str] = None
    recipeCategory: Optional[str] = None
    nutrition: Optional[NutritionInformation] = None
    aggregateRating: Optional[AggregateRating] = None
    recipeIngredient: Optional[List[str]] = None
    recipeInstructions: Optional[List[HowToStep]] = None

    def to_jsonld(self) -> dict:
        """Dump back to JSON-LD, leaving absent fields out entirely."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FieldViolation(BaseModel):
    """One field of a candidate document that breaks the contract"""
    field: str
    message: str
    type: str


class SchemaViolation(BaseModel):
    """Result of validating a document that does not satisfy the contract."""

    violations: List[FieldViolation]

    @property
    def fields(self) -> List[str]:
        return [violation.field for violation in self.violations]
