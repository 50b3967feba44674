"""Schemas for recipe and ingredient requests and responses.

Request fields are optional and unconstrained on purpose: domain validation
reports every violation at once, which pydantic constraints would pre-empt.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from domain.models import Ingredient, NutrientProfile, Recipe, decode_tags


class NutrientsOut(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_domain(cls, profile: NutrientProfile) -> "NutrientsOut":
        return cls(calories=profile.calories, protein=profile.protein_g, carbs=profile.carbs_g, fat=profile.fat_g)


class IngredientIn(BaseModel):
    """An ingredient line: a catalog `id` plus amount, or a custom ingredient."""

    id: Optional[int] = Field(None, examples=[4], description="Catalog ingredient id; omit for a custom ingredient")
    amount: Optional[float] = Field(None, examples=[2.0], description="Amount in units of the ingredient")
    name: Optional[str] = Field(None, examples=["Homemade granola"])
    unit_name: Optional[str] = Field(None, examples=["cup"])
    unit_grams: Optional[float] = Field(None, examples=[60.0], description="Grams per unit")
    energy_kcal: Optional[float] = Field(None, examples=[450.0], description="kcal per 100 g")
    protein: Optional[float] = Field(None, examples=[10.0], description="g per 100 g")
    carbs: Optional[float] = Field(None, examples=[60.0], description="g per 100 g")
    fat: Optional[float] = Field(None, examples=[18.0], description="g per 100 g")

    def to_domain(self) -> Ingredient:
        return Ingredient(
            id=self.id,
            name=self.name,
            amount=self.amount,
            unit_name=self.unit_name,
            unit_grams=self.unit_grams,
            per_100g=NutrientProfile(
                calories=self.energy_kcal,
                protein_g=self.protein,
                carbs_g=self.carbs,
                fat_g=self.fat,
            ),
        )


class RecipeIn(BaseModel):
    """Full recipe state for create and replace."""

    name: Optional[str] = Field(None, examples=["Blueberry Oatmeal"])
    duration: Optional[float] = Field(None, examples=[10], description="Preparation time in minutes")
    description: Optional[str] = Field(None, examples=["Simmer the oats in milk."])
    tags: str = Field("", examples=["BL"], description="One character per meal slot: B, L, D")
    ingredients: Optional[List[IngredientIn]] = None

    def to_domain(self, recipe_id: Optional[int] = None) -> Recipe:
        return Recipe(
            id=recipe_id,
            name=self.name,
            duration=self.duration,
            description=self.description,
            tags=decode_tags(self.tags),
            ingredients=None if self.ingredients is None else [i.to_domain() for i in self.ingredients],
        )


class IngredientOut(BaseModel):
    id: Optional[int]
    name: str
    amount: Optional[float] = None
    unit_name: str
    unit_grams: float
    per_100g: NutrientsOut

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientOut":
        return cls(
            id=ingredient.id,
            name=ingredient.name,
            amount=ingredient.amount,
            unit_name=ingredient.unit_name,
            unit_grams=ingredient.unit_grams,
            per_100g=NutrientsOut.from_domain(ingredient.per_100g),
        )


class RecipeOut(BaseModel):
    """Stored recipe with its aggregate nutrients (unrounded)."""

    id: int
    name: str
    duration: float
    description: str
    tags: str
    deleted: bool
    nutrients: NutrientsOut
    ingredients: List[IngredientOut]

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeOut":
        return cls(
            id=recipe.id,
            name=recipe.name,
            duration=recipe.duration,
            description=recipe.description,
            tags=recipe.tags_as_string,
            deleted=recipe.deleted,
            nutrients=NutrientsOut.from_domain(recipe.nutrients),
            ingredients=[IngredientOut.from_domain(i) for i in recipe.ingredients],
        )
