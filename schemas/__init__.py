"""Pydantic schema package for request and response models."""

from .recipe_schema import IngredientIn, IngredientOut, NutrientsOut, RecipeIn, RecipeOut
from .diet_plan_schema import DietPlanIn, DietPlanOut
from .recommendation_schema import (
    ChooseMealRequest,
    MealRecordResponse,
    OmissionRequest,
    PopularRecipe,
    PopularRecipesResponse,
    RecommendedMealsResponse,
)

__all__ = [
    "IngredientIn",
    "IngredientOut",
    "NutrientsOut",
    "RecipeIn",
    "RecipeOut",
    "DietPlanIn",
    "DietPlanOut",
    "ChooseMealRequest",
    "MealRecordResponse",
    "OmissionRequest",
    "PopularRecipe",
    "PopularRecipesResponse",
    "RecommendedMealsResponse",
]
