"""Recipe service: validated writes and pass-through reads over recipes.

Writes validate the whole recipe first and raise `ValidationError` carrying
every violation, in which case the repository is never called.
"""

from dataclasses import replace
from typing import List, Optional

from core.exceptions import NotFoundError
from core.logger import get_logger
from domain.models import Ingredient, IngredientSearchParam, Recipe
from services.recipe_validation import validate_ingredient_search, validate_recipe

logger = get_logger("services.recipe_service")


class RecipeService:
    """Recipe use cases on top of a recipe repository."""

    def __init__(self, repository):
        self.repository = repository

    def get(self, recipe_id: int) -> Recipe:
        recipe = self.repository.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    def list(self, include_deleted: bool = False) -> List[Recipe]:
        return self.repository.list_recipes(include_deleted=include_deleted)

    def resolve_catalog_ingredients(self, recipe: Recipe) -> Recipe:
        """Fill unit and nutrients of catalog ingredient lines from the catalog.

        Only the amount of a catalog line comes from the caller.

        Raises:
            NotFoundError: a line references an unknown catalog id.
        """
        if recipe is None or not recipe.ingredients:
            return recipe
        resolved = []
        for ingredient in recipe.ingredients:
            if ingredient is None or ingredient.is_custom:
                resolved.append(ingredient)
                continue
            stored = self.repository.get_catalog_ingredient(ingredient.id)
            if stored is None:
                raise NotFoundError("Ingredient", ingredient.id)
            resolved.append(stored.with_amount(ingredient.amount))
        return replace(recipe, ingredients=resolved)

    def create(self, recipe: Recipe) -> Recipe:
        recipe = self.resolve_catalog_ingredients(recipe)
        validate_recipe(recipe).raise_if_invalid()
        return self.repository.create(recipe)

    def update(self, recipe: Recipe) -> Recipe:
        """Replace a stored recipe, ingredient list included.

        Raises:
            ValidationError: the new state is invalid.
            NotFoundError: no recipe with that id exists.
        """
        recipe = self.resolve_catalog_ingredients(recipe)
        validate_recipe(recipe).raise_if_invalid()
        if recipe.id is None:
            raise NotFoundError("Recipe", None)
        updated = self.repository.update(recipe)
        if updated is None:
            raise NotFoundError("Recipe", recipe.id)
        return updated

    def delete(self, recipe_id: int) -> None:
        if not self.repository.delete(recipe_id):
            raise NotFoundError("Recipe", recipe_id)

    def search_ingredients(self, param: Optional[IngredientSearchParam]) -> List[Ingredient]:
        validate_ingredient_search(param).raise_if_invalid()
        results = self.repository.search_ingredients(param.name)
        logger.debug("Ingredient search '%s': %s hit(s)", param.name.strip(), len(results))
        return results
