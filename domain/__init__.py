"""Domain package: recipe, ingredient, plan and recommendation value objects."""

from .models import (
    MEAL_SLOT_SHARES,
    ZERO_NUTRIENTS,
    DietPlan,
    Ingredient,
    IngredientSearchParam,
    MealRecord,
    MealSlot,
    NutrientProfile,
    Recipe,
    RecommendationRequest,
    decode_tags,
    encode_tags,
)

__all__ = [
    "MEAL_SLOT_SHARES",
    "ZERO_NUTRIENTS",
    "DietPlan",
    "Ingredient",
    "IngredientSearchParam",
    "MealRecord",
    "MealSlot",
    "NutrientProfile",
    "Recipe",
    "RecommendationRequest",
    "decode_tags",
    "encode_tags",
]
