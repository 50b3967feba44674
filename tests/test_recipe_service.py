"""Service-level tests for recipes and diet plans with mocked repositories."""

from dataclasses import replace
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from core.exceptions import NotFoundError, ValidationError
from domain.models import DietPlan, Ingredient, IngredientSearchParam, MealSlot, NutrientProfile, Recipe
from services.diet_plan_service import DietPlanService
from services.recipe_service import RecipeService


EGG = Ingredient(id=7, name="Egg", amount=None, unit_name="piece", unit_grams=50.0,
                 per_100g=NutrientProfile(143.0, 12.6, 0.7, 9.5))


def custom_line(name="Watermelon"):
    return Ingredient(name=name, amount=2.0, unit_name="piece", unit_grams=120.0,
                      per_100g=NutrientProfile(30.0, 0.6, 7.6, 0.2))


def new_recipe(**overrides):
    fields = dict(name="Omelette", duration=15, description="Whisk and fry", tags={MealSlot.BREAKFAST},
                  ingredients=[custom_line()])
    fields.update(overrides)
    return Recipe(**fields)


@pytest.fixture
def repository():
    repo = MagicMock()
    repo.get_catalog_ingredient.side_effect = lambda i: EGG if i == EGG.id else None
    repo.create.side_effect = lambda recipe: replace(recipe, id=1)
    return repo


@pytest.fixture
def service(repository):
    return RecipeService(repository)


def test_invalid_recipe_never_reaches_the_repository(service, repository):
    recipe = Recipe(name="x" * 256, duration=0, description="", tags=set(), ingredients=[])

    with pytest.raises(ValidationError) as exc_info:
        service.create(recipe)

    assert len(exc_info.value.errors) == 5
    assert exc_info.value.status_code == 400
    repository.create.assert_not_called()


def test_valid_recipe_is_created(service, repository):
    created = service.create(new_recipe())
    assert created.id == 1
    repository.create.assert_called_once()


def test_catalog_lines_take_unit_and_nutrients_from_the_catalog(service, repository):
    line = Ingredient(id=EGG.id, amount=3)

    created = service.create(new_recipe(ingredients=[line]))

    stored_line = created.ingredients[0]
    assert stored_line.name == "Egg"
    assert stored_line.amount == 3
    assert stored_line.per_100g == EGG.per_100g
    repository.get_catalog_ingredient.assert_called_once_with(EGG.id)


def test_unknown_catalog_id_is_not_found(service, repository):
    with pytest.raises(NotFoundError) as exc_info:
        service.create(new_recipe(ingredients=[Ingredient(id=999, amount=1)]))
    assert exc_info.value.details == {"resource": "Ingredient", "id": 999}
    repository.create.assert_not_called()


def test_duplicate_catalog_lines_are_rejected(service, repository):
    lines = [Ingredient(id=EGG.id, amount=1), Ingredient(id=EGG.id, amount=2)]
    with pytest.raises(ValidationError) as exc_info:
        service.create(new_recipe(ingredients=lines))
    assert exc_info.value.errors == ["The ingredient 'Egg' can only be added once to the recipe."]


def test_update_of_missing_recipe_is_not_found(service, repository):
    repository.update.return_value = None
    with pytest.raises(NotFoundError):
        service.update(new_recipe(id=42))


def test_update_without_id_is_not_found(service, repository):
    with pytest.raises(NotFoundError):
        service.update(new_recipe())
    repository.update.assert_not_called()


def test_invalid_update_is_rejected_before_lookup(service, repository):
    with pytest.raises(ValidationError):
        service.update(new_recipe(id=42, description=""))
    repository.update.assert_not_called()


def test_get_missing_recipe_is_not_found(service, repository):
    repository.get.return_value = None
    with pytest.raises(NotFoundError) as exc_info:
        service.get(5)
    assert exc_info.value.message == "Recipe with id '5' not found"


def test_delete_missing_recipe_is_not_found(service, repository):
    repository.delete.return_value = False
    with pytest.raises(NotFoundError):
        service.delete(5)


def test_short_search_term_is_rejected(service, repository):
    with pytest.raises(ValidationError) as exc_info:
        service.search_ingredients(IngredientSearchParam(name=" Eg "))
    assert exc_info.value.errors == ["Enter at least 3 characters in the field 'Ingredient Name'"]
    repository.search_ingredients.assert_not_called()


def test_search_passes_term_to_repository(service, repository):
    repository.search_ingredients.return_value = [EGG]
    assert service.search_ingredients(IngredientSearchParam(name="egg")) == [EGG]
    repository.search_ingredients.assert_called_once_with("egg")


def test_invalid_diet_plan_is_not_stored():
    repository = MagicMock()
    plan = DietPlan(name="", daily=NutrientProfile(0, -1, 0, 0))

    with pytest.raises(ValidationError) as exc_info:
        DietPlanService(repository).create(plan)

    assert exc_info.value.errors == [
        "Enter at least 1 characters in the field 'Diet plan name'",
        "Enter a value that is greater than 0.0 in the field 'Energy (kcal)'",
        "Enter a value that is greater than or equal to 0.0 in the field 'Proteins'",
    ]
    repository.create.assert_not_called()


def test_switching_to_unknown_plan_is_not_found():
    repository = MagicMock()
    repository.switch_to.return_value = None
    with pytest.raises(NotFoundError):
        DietPlanService(repository).switch_to(3, datetime(2024, 1, 1))
