"""Schemas for meal recommendations, meal records and statistics."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Dict, List

from .recipe_schema import RecipeOut


class RecommendedMealsResponse(BaseModel):
    """One recipe per meal slot, keyed by slot character (B, L, D)."""

    meals: Dict[str, RecipeOut]


class OmissionRequest(BaseModel):
    omit_recipe_ids: List[int] = Field(default=[], examples=[[3, 7]], description="Recipes to skip, e.g. already rejected")


class ChooseMealRequest(BaseModel):
    recipe_id: int = Field(..., examples=[4])


class MealRecordResponse(BaseModel):
    id: int
    recipe_id: int
    recipe_name: str
    meal_slot: str
    diet_plan_id: int
    eaten_at: datetime


class PopularRecipe(BaseModel):
    recipe: RecipeOut
    times_chosen: int


class PopularRecipesResponse(BaseModel):
    recipes: List[PopularRecipe]
