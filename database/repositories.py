"""Repositories mapping ORM rows to domain objects.

These are the persistence collaborators the services depend on. They return
domain dataclasses only, never ORM instances, so nothing outside this package
touches a session.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import BaseRepository
from database import models
from domain.models import (
    DietPlan,
    Ingredient,
    MealRecord,
    MealSlot,
    NutrientProfile,
    Recipe,
    decode_tags,
    encode_tags,
)

logger = get_logger("database.repositories")

SEARCH_RESULT_LIMIT = 20


def catalog_ingredient_to_domain(row: models.Ingredient, amount: Optional[float] = None) -> Ingredient:
    return Ingredient(
        id=row.id,
        name=row.name,
        amount=amount,
        unit_name=row.unit_name,
        unit_grams=row.unit_grams,
        per_100g=NutrientProfile(calories=row.energy_kcal, protein_g=row.protein, carbs_g=row.carbs, fat_g=row.fat),
    )


def recipe_ingredient_to_domain(row: models.RecipeIngredient) -> Ingredient:
    if row.ingredient_id is not None:
        return catalog_ingredient_to_domain(row.catalog_ingredient, amount=row.amount)
    return Ingredient(
        name=row.name,
        amount=row.amount,
        unit_name=row.unit_name,
        unit_grams=row.unit_grams,
        per_100g=NutrientProfile(calories=row.energy_kcal, protein_g=row.protein, carbs_g=row.carbs, fat_g=row.fat),
    )


def recipe_to_domain(row: models.Recipe) -> Recipe:
    return Recipe(
        id=row.id,
        name=row.name,
        duration=row.duration,
        description=row.description,
        tags=decode_tags(row.tags),
        ingredients=[recipe_ingredient_to_domain(i) for i in row.ingredients],
        deleted=bool(row.deleted),
    )


def _ingredient_row(ingredient: Ingredient, position: int) -> models.RecipeIngredient:
    if not ingredient.is_custom:
        return models.RecipeIngredient(ingredient_id=ingredient.id, position=position, amount=ingredient.amount)
    per_100g = ingredient.per_100g
    return models.RecipeIngredient(
        position=position,
        amount=ingredient.amount,
        name=ingredient.name,
        unit_name=ingredient.unit_name,
        unit_grams=ingredient.unit_grams,
        energy_kcal=per_100g.calories,
        protein=per_100g.protein_g,
        carbs=per_100g.carbs_g,
        fat=per_100g.fat_g,
    )


def diet_plan_to_domain(row: models.DietPlan) -> DietPlan:
    return DietPlan(
        id=row.id,
        name=row.name,
        daily=NutrientProfile(calories=row.energy_kcal, protein_g=row.protein, carbs_g=row.carbs, fat_g=row.fat),
        from_date=row.from_date,
        to_date=row.to_date,
    )


class RecipeRepository(BaseRepository[models.Recipe]):
    """Recipes and the ingredient catalog."""

    def __init__(self, session: Session):
        super().__init__(models.Recipe, session)

    def _query(self):
        return self.session.query(models.Recipe).options(
            selectinload(models.Recipe.ingredients).selectinload(models.RecipeIngredient.catalog_ingredient)
        )

    def list_recipes(self, include_deleted: bool = False) -> List[Recipe]:
        with self.guard("list"):
            query = self._query()
            if not include_deleted:
                query = query.filter(models.Recipe.deleted.is_(False))
            return [recipe_to_domain(r) for r in query.order_by(models.Recipe.id).all()]

    def get(self, recipe_id: int) -> Optional[Recipe]:
        row = self.get_by_id(recipe_id)
        return recipe_to_domain(row) if row is not None else None

    def create(self, recipe: Recipe) -> Recipe:
        row = models.Recipe(
            name=recipe.name,
            duration=recipe.duration,
            description=recipe.description,
            tags=encode_tags(recipe.tags),
            deleted=False,
        )
        row.ingredients = [_ingredient_row(i, pos) for pos, i in enumerate(recipe.ingredients)]
        row = self.add(row)
        logger.info("Created recipe %s (%s)", row.id, row.name)
        return recipe_to_domain(row)

    def update(self, recipe: Recipe) -> Optional[Recipe]:
        """Replace every field and the whole ingredient list of a recipe."""
        with self.guard("update"):
            row = self.session.get(models.Recipe, recipe.id)
            if row is None:
                return None
            row.name = recipe.name
            row.duration = recipe.duration
            row.description = recipe.description
            row.tags = encode_tags(recipe.tags)
            row.ingredients.clear()
            # old lines must be gone before re-adding the same catalog ids
            self.session.flush()
            row.ingredients.extend(_ingredient_row(i, pos) for pos, i in enumerate(recipe.ingredients))
            self.session.commit()
            self.session.refresh(row)
            logger.info("Updated recipe %s (%s)", row.id, row.name)
            return recipe_to_domain(row)

    def delete(self, recipe_id: int) -> bool:
        """Mark a recipe deleted. Returns False when it does not exist."""
        with self.guard("delete"):
            row = self.session.get(models.Recipe, recipe_id)
            if row is None:
                return False
            row.deleted = True
            self.session.commit()
        logger.info("Marked recipe %s deleted", recipe_id)
        return True

    def get_catalog_ingredient(self, ingredient_id: int) -> Optional[Ingredient]:
        with self.guard("get_ingredient"):
            row = self.session.get(models.Ingredient, ingredient_id)
        return catalog_ingredient_to_domain(row) if row is not None else None

    def search_ingredients(self, name: str) -> List[Ingredient]:
        """Catalog ingredients whose name contains `name`, case-insensitively."""
        with self.guard("search"):
            rows = (
                self.session.query(models.Ingredient)
                .filter(models.Ingredient.name.ilike(f"%{name.strip()}%"))
                .order_by(models.Ingredient.name)
                .limit(SEARCH_RESULT_LIMIT)
                .all()
            )
        return [catalog_ingredient_to_domain(r) for r in rows]


class DietPlanRepository(BaseRepository[models.DietPlan]):

    def __init__(self, session: Session):
        super().__init__(models.DietPlan, session)

    def create(self, plan: DietPlan) -> DietPlan:
        row = self.add(models.DietPlan(
            name=plan.name,
            energy_kcal=plan.daily.calories,
            protein=plan.daily.protein_g,
            carbs=plan.daily.carbs_g,
            fat=plan.daily.fat_g,
            from_date=plan.from_date,
            to_date=plan.to_date,
        ))
        logger.info("Created diet plan %s (%s)", row.id, row.name)
        return diet_plan_to_domain(row)

    def list_plans(self) -> List[DietPlan]:
        return [diet_plan_to_domain(r) for r in self.get_all()]

    def get(self, plan_id: int) -> Optional[DietPlan]:
        row = self.get_by_id(plan_id)
        return diet_plan_to_domain(row) if row is not None else None

    def _active_row(self) -> Optional[models.DietPlan]:
        return (
            self.session.query(models.DietPlan)
            .filter(models.DietPlan.from_date.isnot(None), models.DietPlan.to_date.is_(None))
            .order_by(models.DietPlan.from_date.desc(), models.DietPlan.id.desc())
            .first()
        )

    def get_active_plan(self) -> DietPlan:
        """Return the active plan.

        Raises:
            NotFoundError: no plan is active.
        """
        with self.guard("get_active"):
            row = self._active_row()
        if row is None:
            raise NotFoundError("Active diet plan")
        return diet_plan_to_domain(row)

    def switch_to(self, plan_id: int, now: datetime) -> Optional[DietPlan]:
        """End the active plan at `now` and start `plan_id` at `now`."""
        with self.guard("switch"):
            row = self.session.get(models.DietPlan, plan_id)
            if row is None:
                return None
            active = self._active_row()
            if active is not None and active.id != row.id:
                active.to_date = now
            row.from_date = now
            row.to_date = None
            self.session.commit()
            self.session.refresh(row)
        logger.info("Diet plan %s is now active", plan_id)
        return diet_plan_to_domain(row)


class MealRecordRepository(BaseRepository[models.MealRecord]):

    def __init__(self, session: Session):
        super().__init__(models.MealRecord, session)

    def create(self, recipe: Recipe, meal_slot: MealSlot, eaten_at: datetime, diet_plan_id: Optional[int]) -> MealRecord:
        row = self.add(models.MealRecord(
            recipe_id=recipe.id,
            diet_plan_id=diet_plan_id,
            meal_slot=meal_slot.value,
            eaten_at=eaten_at,
        ))
        return MealRecord(id=row.id, recipe=recipe, meal_slot=meal_slot, eaten_at=row.eaten_at, diet_plan_id=diet_plan_id)

    def most_popular(self, limit: int) -> List[Tuple[Recipe, int]]:
        """Recipes by number of meal records, most eaten first, then by name."""
        with self.guard("most_popular"):
            times = func.count(models.MealRecord.id).label("times")
            rows = (
                self.session.query(models.Recipe, times)
                .join(models.MealRecord, models.MealRecord.recipe_id == models.Recipe.id)
                .group_by(models.Recipe.id)
                .order_by(times.desc(), models.Recipe.name)
                .limit(limit)
                .all()
            )
            return [(recipe_to_domain(recipe), count) for recipe, count in rows]
