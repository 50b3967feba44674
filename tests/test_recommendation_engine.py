"""Unit tests for the deterministic recommendation engine."""

from itertools import permutations

import pytest

from core.exceptions import InvalidInputError, NoOptimalSolutionError, NotFoundError
from domain.models import DietPlan, Ingredient, MealSlot, NutrientProfile, Recipe, RecommendationRequest, decode_tags
from services.recommendation_engine import RecommendationEngine

B, L, D = MealSlot.BREAKFAST, MealSlot.LUNCH, MealSlot.DINNER


def recipe(name, calories, protein=0.0, carbs=0.0, fat=0.0, tags="BLD", id=None, deleted=False):
    """A recipe whose aggregate nutrients equal the given values (one 100 g ingredient)."""
    single = Ingredient(name=name, amount=1, unit_name="portion", unit_grams=100,
                        per_100g=NutrientProfile(calories, protein, carbs, fat))
    return Recipe(id=id, name=name, duration=10, description="-", tags=decode_tags(tags),
                  ingredients=[single], deleted=deleted)


def request(slot=B, calories=500.0, protein=0.0, carbs=0.0, fat=0.0, omissions=()):
    return RecommendationRequest(meal_slot=slot, target=NutrientProfile(calories, protein, carbs, fat), omissions=omissions)


@pytest.fixture
def engine():
    return RecommendationEngine()


def test_deviation_score_weights_grams_by_energy_factors(engine):
    candidate = recipe("A", 100, protein=10, carbs=20, fat=5)
    target = NutrientProfile(50, 0, 0, 0)
    assert engine.deviation_score(candidate, target) == pytest.approx(50 + 4 * 10 + 4 * 20 + 9 * 5)


def test_recommends_closest_recipe(engine):
    pool = [recipe("Light", 400, id=1), recipe("Close", 520, id=2), recipe("Heavy", 800, id=3)]
    assert engine.recommend(request(calories=500), pool).name == "Close"


def test_only_recipes_tagged_for_the_slot_are_considered(engine):
    pool = [recipe("Dinner only", 500, tags="D", id=1), recipe("Breakfast", 900, tags="B", id=2)]
    assert engine.recommend(request(slot=B, calories=500), pool).name == "Breakfast"


def test_deleted_recipes_are_skipped(engine):
    pool = [recipe("Gone", 500, id=1, deleted=True), recipe("Kept", 700, id=2)]
    assert engine.recommend(request(calories=500), pool).name == "Kept"


def test_omitted_recipes_are_skipped_by_id(engine):
    best = recipe("Best", 500, id=1)
    pool = [best, recipe("Second", 600, id=2)]
    omit = Recipe(id=1)
    assert engine.recommend(request(calories=500, omissions=[omit]), pool).name == "Second"


def test_unsaved_omissions_are_matched_by_name(engine):
    pool = [recipe("Best", 500), recipe("Second", 600)]
    assert engine.recommend(request(calories=500, omissions=[recipe("Best", 1)]), pool).name == "Second"


def test_empty_pool_raises_no_optimal_solution(engine):
    with pytest.raises(NoOptimalSolutionError) as exc_info:
        engine.recommend(request(), [])
    assert exc_info.value.details == {"meal_slot": "B"}


def test_fully_filtered_pool_raises_no_optimal_solution(engine):
    pool = [recipe("Lunch", 500, tags="L", id=1), recipe("Deleted", 500, id=2, deleted=True), recipe("Omitted", 500, id=3)]
    with pytest.raises(NoOptimalSolutionError):
        engine.recommend(request(slot=B, omissions=[Recipe(id=3)]), pool)


@pytest.mark.parametrize("bad_request", [
    None,
    RecommendationRequest(meal_slot=None, target=NutrientProfile(500)),
    RecommendationRequest(meal_slot="", target=NutrientProfile(500)),
    RecommendationRequest(meal_slot=MealSlot.LUNCH, target=None),
])
def test_malformed_request_raises_invalid_input(engine, bad_request):
    with pytest.raises(InvalidInputError):
        engine.recommend(bad_request, [recipe("Any", 500)])


def test_null_pool_raises_invalid_input(engine):
    with pytest.raises(InvalidInputError):
        engine.recommend(request(), None)


def test_equal_scores_prefer_smaller_name(engine):
    pool = [recipe("Beta", 450, id=1), recipe("Alpha", 550, id=2)]
    assert engine.recommend(request(calories=500), pool).name == "Alpha"


def test_scores_within_epsilon_are_ties(engine):
    pool = [recipe("Zeta", 500.0, id=1), recipe("Alpha", 500.000000000001, id=2)]
    assert engine.recommend(request(calories=0), pool).name == "Alpha"


def test_same_name_ties_fall_back_to_id(engine):
    pool = [recipe("Soup", 500, id=9), recipe("Soup", 500, id=4)]
    assert engine.recommend(request(calories=500), pool).id == 4


def test_result_does_not_depend_on_pool_order(engine):
    pool = [
        recipe("Delta", 480, protein=20, id=1),
        recipe("Alpha", 520, protein=20, id=2),
        recipe("Charlie", 500, protein=22, id=3),
        recipe("Bravo", 500, protein=15, id=4),
    ]
    picks = {engine.recommend(request(calories=500, protein=20), list(p)).id for p in permutations(pool)}
    assert picks == {3}


def test_custom_weights(engine):
    protein_only = RecommendationEngine(weights={"calories": 0.0, "protein_g": 1.0, "carbs_g": 0.0, "fat_g": 0.0})
    pool = [recipe("Calorie match", 500, protein=0, id=1), recipe("Protein match", 900, protein=30, id=2)]
    target = request(calories=500, protein=30)
    assert engine.recommend(target, pool).name == "Calorie match"
    assert protein_only.recommend(target, pool).name == "Protein match"


def test_recommended_meals_cover_every_slot_in_order(engine):
    plan = DietPlan(id=1, name="Plan", daily=NutrientProfile(2000, 0, 0, 0))
    pool = [
        recipe("Porridge", 500, tags="B", id=1),
        recipe("Pancakes", 900, tags="B", id=2),
        recipe("Salad", 800, tags="L", id=3),
        recipe("Stew", 700, tags="LD", id=4),
    ]

    meals = engine.get_recommended_meals(plan, pool)

    assert list(meals) == [B, L, D]
    assert [r.name for r in meals.values()] == ["Porridge", "Salad", "Stew"]


def test_recommended_meals_are_all_or_nothing(engine):
    plan = DietPlan(id=1, name="Plan", daily=NutrientProfile(2000, 0, 0, 0))
    pool = [recipe("Porridge", 500, tags="B", id=1), recipe("Salad", 800, tags="L", id=2)]
    with pytest.raises(NoOptimalSolutionError) as exc_info:
        engine.get_recommended_meals(plan, pool)
    assert exc_info.value.details == {"meal_slot": "D"}


def test_recommended_meals_without_plan_raise_not_found(engine):
    with pytest.raises(NotFoundError):
        engine.get_recommended_meals(None, [recipe("Any", 500)])


@pytest.mark.parametrize("target", [
    NutrientProfile(calories=500, protein_g=None),
    NutrientProfile(calories=float("nan")),
    NutrientProfile(calories=float("inf")),
])
def test_incomplete_target_raises_invalid_input(engine, target):
    pool = [recipe("Aaa", 5000, id=1), recipe("Zzz", 500, id=2)]
    with pytest.raises(InvalidInputError) as exc_info:
        engine.recommend(RecommendationRequest(meal_slot=B, target=target), pool)
    assert exc_info.value.details == {"argument": "target"}


@pytest.mark.parametrize("daily", [None, NutrientProfile(calories=2000, fat_g=None)])
def test_plan_without_complete_daily_target_raises_invalid_input(engine, daily):
    plan = DietPlan(id=1, name="Broken", daily=daily)
    with pytest.raises(InvalidInputError):
        engine.get_recommended_meals(plan, [recipe("Any", 500)])


def test_unsaved_recipes_sharing_a_name_do_not_depend_on_pool_order(engine):
    small, large = recipe("Soup", 400), recipe("Soup", 600)
    first = engine.recommend(request(calories=500), [small, large])
    second = engine.recommend(request(calories=500), [large, small])
    assert first == second == small


def test_null_entries_in_pool_are_skipped(engine):
    assert engine.recommend(request(calories=500), [None, recipe("Kept", 700, id=1), None]).name == "Kept"


def test_recommend_for_plan_uses_the_slot_share(engine):
    plan = DietPlan(id=1, name="Plan", daily=NutrientProfile(2000, 0, 0, 0))
    pool = [recipe("Small lunch", 500, tags="L", id=1), recipe("Big lunch", 800, tags="L", id=2)]
    assert engine.recommend_for_plan(plan, L, pool).name == "Big lunch"


def test_no_solution_message_names_the_slot(engine):
    with pytest.raises(NoOptimalSolutionError) as exc_info:
        engine.recommend(request(slot=D), [recipe("Porridge", 500, tags="B", id=1)])
    assert exc_info.value.message == "No suitable recipe found for dinner"
