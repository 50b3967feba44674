"""Meal recommendation endpoints.

A slot without any feasible recipe answers 409 (`no_optimal_solution`); a
missing active plan answers 404. Both are distinct from server faults.
"""

from datetime import datetime
from fastapi import APIRouter, Depends
from typing import Optional

from database.deps import get_meal_recommendation_service
from domain.models import MealSlot, Recipe
from schemas import (
    ChooseMealRequest,
    MealRecordResponse,
    OmissionRequest,
    RecipeOut,
    RecommendedMealsResponse,
)
from services.meal_recommendation_service import MealRecommendationService

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("", response_model=RecommendedMealsResponse)
def get_recommended_meals(service: MealRecommendationService = Depends(get_meal_recommendation_service)):
    """Recommend breakfast, lunch and dinner for the active plan, all or nothing."""
    meals = service.get_recommended_meals()
    return RecommendedMealsResponse(meals={slot.value: RecipeOut.from_domain(r) for slot, r in meals.items()})


@router.post("/{meal_slot}", response_model=RecipeOut)
def get_recommended_meal(meal_slot: MealSlot, payload: Optional[OmissionRequest] = None,
                         service: MealRecommendationService = Depends(get_meal_recommendation_service)):
    """Recommend a recipe for one slot, skipping the given recipe ids."""
    omit_ids = payload.omit_recipe_ids if payload else []
    recipe = service.get_recommended_meal(meal_slot, [Recipe(id=i) for i in omit_ids])
    return RecipeOut.from_domain(recipe)


@router.post("/{meal_slot}/choose", response_model=MealRecordResponse, status_code=201)
def choose_meal(meal_slot: MealSlot, payload: ChooseMealRequest,
                service: MealRecommendationService = Depends(get_meal_recommendation_service)):
    """Record that a recipe was eaten for the slot under the active plan."""
    record = service.choose_meal(meal_slot, payload.recipe_id, datetime.utcnow())
    return MealRecordResponse(
        id=record.id,
        recipe_id=record.recipe.id,
        recipe_name=record.recipe.name,
        meal_slot=record.meal_slot.value,
        diet_plan_id=record.diet_plan_id,
        eaten_at=record.eaten_at,
    )
