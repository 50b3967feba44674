"""Recommendation engine service.

Selects, for a meal slot, the recipe whose aggregate nutrients deviate least
from a target profile. The engine is a pure function of its arguments: it
keeps no state between calls and never talks to the database, so callers hand
it a snapshot of the candidate pool.

Deviation score
---------------
Weighted sum of absolute differences between candidate and target::

    score = 1 * |d kcal| + 4 * |d protein g| + 4 * |d carbs g| + 9 * |d fat g|

The gram weights are the Atwater energy factors, which puts every term in
kcal. Lower is better. Scores closer than `SCORE_EPSILON` are ties, broken by
recipe name and then id, so the pick never depends on pool order.
"""

from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from core.exceptions import InvalidInputError, NoOptimalSolutionError, NotFoundError
from core.logger import get_logger
from domain.models import DietPlan, MealSlot, NutrientProfile, Recipe, RecommendationRequest

logger = get_logger("services.recommendation_engine")

# Order matches NutrientProfile.as_tuple().
DEVIATION_WEIGHTS: Dict[str, float] = {
    "calories": 1.0,
    "protein_g": 4.0,
    "carbs_g": 4.0,
    "fat_g": 9.0,
}
SCORE_EPSILON = 1e-9


def _recipe_key(recipe: Recipe):
    return ("id", recipe.id) if recipe.id is not None else ("name", recipe.name)


def _tie_break_key(recipe: Recipe):
    # unsaved recipes sharing a name are ordered by content
    return (
        recipe.name or "",
        recipe.id if recipe.id is not None else -1,
        recipe.description or "",
        recipe.nutrients.as_tuple(),
        recipe.duration if recipe.duration is not None else -1,
        recipe.tags_as_string,
    )


def _is_complete(profile) -> bool:
    """True for a profile whose every component is a finite number."""
    if not isinstance(profile, NutrientProfile):
        return False
    try:
        values = np.array(profile.as_tuple(), dtype=float)
    except (TypeError, ValueError):
        return False
    return bool(np.isfinite(values).all())


class RecommendationEngine:
    """Deterministic best-fit recipe selection."""

    def __init__(self, weights: Optional[Dict[str, float]] = None, epsilon: float = SCORE_EPSILON):
        """Initialize the recommendation engine.

        Parameters
        ----------
        weights: dict, optional
            Per-nutrient deviation weights keyed like `DEVIATION_WEIGHTS`.
        epsilon: float
            Scores closer than this are treated as equal.
        """
        weights = weights or DEVIATION_WEIGHTS
        self.weights = np.array([weights[k] for k in DEVIATION_WEIGHTS], dtype=float)
        self.epsilon = epsilon

    def deviation_scores(self, candidates: Sequence[Recipe], target: NutrientProfile) -> np.ndarray:
        """Return the deviation score of every candidate against `target`."""
        if not candidates:
            return np.zeros(0, dtype=float)
        matrix = np.array([c.nutrients.as_tuple() for c in candidates], dtype=float)
        return np.abs(matrix - np.array(target.as_tuple(), dtype=float)) @ self.weights

    def deviation_score(self, recipe: Recipe, target: NutrientProfile) -> float:
        return float(self.deviation_scores([recipe], target)[0])

    def filter_candidates(self, request: RecommendationRequest, candidate_pool: Iterable[Recipe]) -> List[Recipe]:
        """Drop deleted recipes, recipes not tagged for the slot and omissions."""
        omitted = {_recipe_key(r) for r in request.omissions if r is not None}
        pool = [r for r in candidate_pool if r is not None]
        out = [
            r for r in pool
            if not r.deleted and r.is_tagged(request.meal_slot) and _recipe_key(r) not in omitted
        ]
        logger.debug("Filtered candidates for %s: %s -> %s", request.meal_slot.label, len(pool), len(out))
        return out

    def _check_request(self, request: RecommendationRequest, candidate_pool) -> None:
        if request is None:
            raise InvalidInputError("Recommendation request cannot be null", argument="request")
        if not isinstance(request.meal_slot, MealSlot):
            raise InvalidInputError("Meal slot must be one of breakfast, lunch or dinner", argument="meal_slot")
        if not _is_complete(request.target):
            raise InvalidInputError("Target nutrient profile must have a finite value for every nutrient", argument="target")
        if candidate_pool is None:
            raise InvalidInputError("Candidate pool cannot be null", argument="candidate_pool")

    def recommend(self, request: RecommendationRequest, candidate_pool: Iterable[Recipe]) -> Recipe:
        """Return the best-fitting recipe for the request.

        Raises:
            InvalidInputError: request, slot, target or pool missing.
            NoOptimalSolutionError: no candidate survives the filters.
        """
        self._check_request(request, candidate_pool)
        candidates = self.filter_candidates(request, candidate_pool)
        if not candidates:
            logger.info("No candidates left for %s", request.meal_slot.label)
            raise NoOptimalSolutionError(request.meal_slot)

        candidates.sort(key=_tie_break_key)
        scores = self.deviation_scores(candidates, request.target)
        best = 0
        for i in range(1, len(candidates)):
            # strictly better by more than epsilon; ties keep the earlier (smaller) name
            if scores[i] < scores[best] - self.epsilon:
                best = i
        selected = candidates[best]
        logger.debug("Selected %s for %s (score=%.3f of %s candidates)",
                     selected.name, request.meal_slot.label, scores[best], len(candidates))
        return selected

    def _check_plan(self, plan: Optional[DietPlan]) -> None:
        if plan is None:
            raise NotFoundError("Active diet plan")
        if not _is_complete(plan.daily):
            raise InvalidInputError("Daily target of the diet plan must have a finite value for every nutrient", argument="plan")

    def recommend_for_plan(self, plan: Optional[DietPlan], meal_slot: MealSlot, candidate_pool: Iterable[Recipe],
                           omissions: Iterable[Recipe] = ()) -> Recipe:
        """Best recipe for one slot of `plan`, using the slot's share of the daily target."""
        self._check_plan(plan)
        if not isinstance(meal_slot, MealSlot):
            raise InvalidInputError("Meal slot must be one of breakfast, lunch or dinner", argument="meal_slot")
        request = RecommendationRequest(meal_slot=meal_slot, target=plan.target_for(meal_slot), omissions=tuple(omissions or ()))
        return self.recommend(request, candidate_pool)

    def get_recommended_meals(self, plan: Optional[DietPlan], candidate_pool: Iterable[Recipe]) -> Dict[MealSlot, Recipe]:
        """Recommend one recipe per meal slot for the plan's per-slot targets.

        All or nothing: if any slot has no candidate the whole call raises
        `NoOptimalSolutionError`.
        """
        self._check_plan(plan)
        if candidate_pool is None:
            raise InvalidInputError("Candidate pool cannot be null", argument="candidate_pool")
        pool = list(candidate_pool)
        meals = {}
        for slot in MealSlot:
            meals[slot] = self.recommend_for_plan(plan, slot, pool)
        logger.info("Recommended meals for plan %s: %s", plan.id,
                    {slot.label: recipe.name for slot, recipe in meals.items()})
        return meals


# export a default instance
recommendation_engine = RecommendationEngine()
