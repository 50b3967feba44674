"""Recipe and ingredient catalog endpoints.

Writes go through `RecipeService`, which validates the whole recipe and
answers 400 with every violation, in order, under `details.errors`.
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from core.logger import get_logger
from database.deps import get_recipe_service
from domain.models import IngredientSearchParam
from schemas import IngredientOut, RecipeIn, RecipeOut
from services.recipe_service import RecipeService

logger = get_logger("api.recipes")
router = APIRouter(prefix="/api", tags=["recipes"])


@router.get("/recipes", response_model=List[RecipeOut])
def list_recipes(include_deleted: bool = False, service: RecipeService = Depends(get_recipe_service)):
    """Return all recipes, hiding logically deleted ones unless asked."""
    return [RecipeOut.from_domain(r) for r in service.list(include_deleted=include_deleted)]


@router.get("/recipes/{recipe_id}", response_model=RecipeOut)
def get_recipe(recipe_id: int, service: RecipeService = Depends(get_recipe_service)):
    return RecipeOut.from_domain(service.get(recipe_id))


@router.post("/recipes", response_model=RecipeOut, status_code=201)
def create_recipe(payload: RecipeIn, service: RecipeService = Depends(get_recipe_service)):
    """Create a recipe.

    Raises:
        ValidationError: One or more fields are invalid.
        NotFoundError: An ingredient line references an unknown catalog id.
    """
    recipe = service.create(payload.to_domain())
    logger.info("Recipe created: %s (%s)", recipe.id, recipe.name)
    return RecipeOut.from_domain(recipe)


@router.put("/recipes/{recipe_id}", response_model=RecipeOut)
def update_recipe(recipe_id: int, payload: RecipeIn, service: RecipeService = Depends(get_recipe_service)):
    """Replace a recipe, including its whole ingredient list."""
    return RecipeOut.from_domain(service.update(payload.to_domain(recipe_id)))


@router.delete("/recipes/{recipe_id}", status_code=204)
def delete_recipe(recipe_id: int, service: RecipeService = Depends(get_recipe_service)):
    """Logically delete a recipe; meal history keeps referring to it."""
    service.delete(recipe_id)


@router.get("/ingredients", response_model=List[IngredientOut])
def search_ingredients(name: str = Query(..., description="3 to 20 characters"),
                       service: RecipeService = Depends(get_recipe_service)):
    """Search the ingredient catalog by name."""
    return [IngredientOut.from_domain(i) for i in service.search_ingredients(IngredientSearchParam(name=name))]
