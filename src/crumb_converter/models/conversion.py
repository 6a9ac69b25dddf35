from datetime import datetime
from typing import Any, Dict, List
from pydantic import BaseModel, Field


class SourceRecipe(BaseModel):
    name: str
    content: Dict[str, Any]


class RecipeError(BaseModel):
    name: str
    error: str
    timestamp: datetime


class ConversionMetrics(BaseModel):
    success_count: int = 0
    failure_count: int = 0
    invalid_count: int = 0  # documents breaking the Recipe contract
    skip_count: int = 0
    errors: List[RecipeError] = []
    start_time: datetime = Field(default_factory=datetime.now)

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count + self.skip_count
