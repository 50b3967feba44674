"""Statistics endpoints."""

from fastapi import APIRouter, Depends

from database.deps import get_statistic_service
from schemas import PopularRecipe, PopularRecipesResponse, RecipeOut
from services.statistic_service import DEFAULT_POPULAR_LIMIT, StatisticService

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("/popular-recipes", response_model=PopularRecipesResponse)
def get_popular_recipes(limit: int = DEFAULT_POPULAR_LIMIT, service: StatisticService = Depends(get_statistic_service)):
    """Most often chosen recipes, most popular first."""
    ranked = service.get_most_popular_recipes(limit)
    return PopularRecipesResponse(
        recipes=[PopularRecipe(recipe=RecipeOut.from_domain(r), times_chosen=n) for r, n in ranked]
    )
