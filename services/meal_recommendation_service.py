"""Meal recommendation service.

Fetches the active plan and a snapshot of the non-deleted recipes, then hands
both to the stateless `RecommendationEngine`. Also records chosen meals, which
feed the popularity statistics.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from core.exceptions import InvalidInputError, NotFoundError
from core.logger import get_logger
from domain.models import MealRecord, MealSlot, Recipe
from services.recommendation_engine import RecommendationEngine, recommendation_engine

logger = get_logger("services.meal_recommendation_service")


class MealRecommendationService:

    def __init__(self, recipe_repository, plan_repository, record_repository=None,
                 engine: Optional[RecommendationEngine] = None):
        self.recipe_repository = recipe_repository
        self.plan_repository = plan_repository
        self.record_repository = record_repository
        self.engine = engine or recommendation_engine

    def _candidate_pool(self):
        return self.recipe_repository.list_recipes(include_deleted=False)

    def get_recommended_meals(self) -> Dict[MealSlot, Recipe]:
        """One recipe per slot for today's active plan.

        Raises:
            NotFoundError: no active plan.
            NoOptimalSolutionError: some slot has no candidate.
        """
        plan = self.plan_repository.get_active_plan()
        return self.engine.get_recommended_meals(plan, self._candidate_pool())

    def get_recommended_meal(self, meal_slot: MealSlot, omissions: Iterable[Recipe] = ()) -> Recipe:
        """Best recipe for one slot, skipping `omissions` (e.g. already rejected)."""
        if not isinstance(meal_slot, MealSlot):
            raise InvalidInputError("Meal slot must be one of breakfast, lunch or dinner", argument="meal_slot")
        plan = self.plan_repository.get_active_plan()
        return self.engine.recommend_for_plan(plan, meal_slot, self._candidate_pool(), omissions)

    def choose_meal(self, meal_slot: MealSlot, recipe_id: int, now: datetime) -> MealRecord:
        """Record that `recipe_id` was eaten as `meal_slot` under the active plan."""
        if self.record_repository is None:
            raise InvalidInputError("No meal record repository configured", argument="record_repository")
        plan = self.plan_repository.get_active_plan()
        recipe = self.recipe_repository.get(recipe_id)
        if recipe is None or recipe.deleted:
            raise NotFoundError("Recipe", recipe_id)
        record = self.record_repository.create(recipe, meal_slot, now, plan.id)
        logger.info("Recorded %s as %s under plan %s", recipe.name, meal_slot.label, plan.id)
        return record
