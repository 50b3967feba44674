"""FastAPI dependencies for DB sessions and the services built on them.

`get_db_write` and `get_db_read` yield request-scoped sessions; the service
factories wire repositories onto those sessions so routers only ask for the
service they need.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_read_session, get_write_session
from .repositories import DietPlanRepository, MealRecordRepository, RecipeRepository
from services.diet_plan_service import DietPlanService
from services.meal_recommendation_service import MealRecommendationService
from services.recipe_service import RecipeService
from services.statistic_service import StatisticService


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()


def get_recipe_service(db: Session = Depends(get_db_write)) -> RecipeService:
    return RecipeService(RecipeRepository(db))


def get_diet_plan_service(db: Session = Depends(get_db_write)) -> DietPlanService:
    return DietPlanService(DietPlanRepository(db))


def get_meal_recommendation_service(db: Session = Depends(get_db_write)) -> MealRecommendationService:
    return MealRecommendationService(RecipeRepository(db), DietPlanRepository(db), MealRecordRepository(db))


def get_statistic_service(db: Session = Depends(get_db_read)) -> StatisticService:
    return StatisticService(MealRecordRepository(db))
