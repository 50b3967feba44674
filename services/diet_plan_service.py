"""Diet plan service: create plans and switch the active one."""

from datetime import datetime
from typing import List

from core.exceptions import NotFoundError
from core.logger import get_logger
from domain.models import DietPlan
from services.recipe_validation import validate_diet_plan

logger = get_logger("services.diet_plan_service")


class DietPlanService:

    def __init__(self, repository):
        self.repository = repository

    def create(self, plan: DietPlan) -> DietPlan:
        validate_diet_plan(plan).raise_if_invalid()
        return self.repository.create(plan)

    def list(self) -> List[DietPlan]:
        return self.repository.list_plans()

    def get_active(self) -> DietPlan:
        """Raises `NotFoundError` when no plan is active."""
        return self.repository.get_active_plan()

    def switch_to(self, plan_id: int, now: datetime) -> DietPlan:
        """Make `plan_id` the active plan from `now` on.

        The current time is supplied by the caller.
        """
        plan = self.repository.switch_to(plan_id, now)
        if plan is None:
            raise NotFoundError("Diet plan", plan_id)
        logger.info("Switched active diet plan to %s (%s)", plan.id, plan.name)
        return plan
