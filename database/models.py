"""SQLAlchemy ORM models for the diet planner.

Tables: the shared ingredient catalog, recipes with their ingredient lines,
diet plans and the meal records eaten under them. Models stay behavior-free;
mapping to domain objects lives in `database.repositories`.
"""

from sqlalchemy import Boolean, Column, Integer, String, Float, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

Base = declarative_base()


class Ingredient(Base):
    """Catalog ingredient with its unit and per-100 g nutrients."""

    __tablename__ = "ingredients"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    unit_name = Column(String(50), nullable=False)
    unit_grams = Column(Float, nullable=False)
    energy_kcal = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fat = Column(Float, nullable=False)


class Recipe(Base):
    """Recipe row. Tags are stored in their one-character-per-tag form.

    Recipes are never physically deleted once created; `deleted` hides them.
    """

    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    duration = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    tags = Column(String(3), nullable=False)
    deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )


class RecipeIngredient(Base):
    """One ingredient line of a recipe.

    Either references a catalog ingredient (`ingredient_id`) or carries the
    custom ingredient's own name, unit and nutrients.
    """

    __tablename__ = "recipe_ingredients"
    __table_args__ = (UniqueConstraint("recipe_id", "ingredient_id"),)

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=True)
    position = Column(Integer, nullable=False, default=0)
    amount = Column(Float, nullable=False)
    name = Column(String(255), nullable=True)
    unit_name = Column(String(50), nullable=True)
    unit_grams = Column(Float, nullable=True)
    energy_kcal = Column(Float, nullable=True)
    protein = Column(Float, nullable=True)
    carbs = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)

    recipe = relationship("Recipe", back_populates="ingredients")
    catalog_ingredient = relationship("Ingredient")


class DietPlan(Base):
    """Daily nutrient targets; active while `from_date` is set and `to_date` is not."""

    __tablename__ = "diet_plans"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    energy_kcal = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fat = Column(Float, nullable=False)
    from_date = Column(DateTime, nullable=True)
    to_date = Column(DateTime, nullable=True)


class MealRecord(Base):
    """A recipe chosen for a meal slot under a diet plan."""

    __tablename__ = "meal_records"
    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    diet_plan_id = Column(Integer, ForeignKey("diet_plans.id"), nullable=True)
    meal_slot = Column(String(1), nullable=False)
    eaten_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    recipe = relationship("Recipe")
