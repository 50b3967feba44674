"""Schemas for diet plans."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional

from domain.models import DietPlan, NutrientProfile
from .recipe_schema import NutrientsOut


class DietPlanIn(BaseModel):
    """Daily targets of a new diet plan."""

    name: Optional[str] = Field(None, examples=["Lean summer"])
    energy_kcal: Optional[float] = Field(None, examples=[2000.0], description="Daily energy target")
    protein: Optional[float] = Field(None, examples=[150.0], description="Daily protein in g")
    carbs: Optional[float] = Field(None, examples=[200.0], description="Daily carbohydrates in g")
    fat: Optional[float] = Field(None, examples=[67.0], description="Daily fat in g")

    def to_domain(self) -> DietPlan:
        return DietPlan(
            name=self.name,
            daily=NutrientProfile(calories=self.energy_kcal, protein_g=self.protein, carbs_g=self.carbs, fat_g=self.fat),
        )


class DietPlanOut(BaseModel):
    id: int
    name: str
    daily: NutrientsOut
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    active: bool

    @classmethod
    def from_domain(cls, plan: DietPlan) -> "DietPlanOut":
        return cls(
            id=plan.id,
            name=plan.name,
            daily=NutrientsOut.from_domain(plan.daily),
            from_date=plan.from_date,
            to_date=plan.to_date,
            active=plan.is_active,
        )
