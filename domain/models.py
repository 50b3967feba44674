"""Domain value objects for recipes, ingredients, plans and recommendations.

These are plain frozen dataclasses with no persistence or HTTP concerns.
Fields are typed as optional where user input may still be missing, because
validation reports null fields instead of refusing to build the object.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from core.exceptions import InvalidFormatError


class MealSlot(str, Enum):
    """Meal of the day; doubles as a recipe tag.

    Declaration order is the encoding order of `encode_tags`.
    """

    BREAKFAST = "B"
    LUNCH = "L"
    DINNER = "D"

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Share of the daily plan target allotted to each slot.
MEAL_SLOT_SHARES: Dict[MealSlot, float] = {
    MealSlot.BREAKFAST: 0.25,
    MealSlot.LUNCH: 0.40,
    MealSlot.DINNER: 0.35,
}


def encode_tags(tags: Iterable[MealSlot]) -> str:
    """Serialize a tag set, one character per tag, in `MealSlot` order."""
    present = set(tags)
    return "".join(slot.value for slot in MealSlot if slot in present)


def decode_tags(text: str) -> FrozenSet[MealSlot]:
    """Parse a tag string produced by `encode_tags`.

    Any permutation is accepted. Repeated characters collapse into one tag,
    since the result is a set.

    Raises:
        InvalidFormatError: `text` is None or holds an unknown character.
    """
    if text is None:
        raise InvalidFormatError("Tag string cannot be null")
    tags = set()
    for char in text:
        try:
            tags.add(MealSlot(char))
        except ValueError:
            raise InvalidFormatError(f"Unknown tag character '{char}'", value=text) from None
    return frozenset(tags)


@dataclass(frozen=True)
class NutrientProfile:
    """Energy and macronutrients, either per 100 g or as an absolute amount."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0

    def __add__(self, other: "NutrientProfile") -> "NutrientProfile":
        if not isinstance(other, NutrientProfile):
            return NotImplemented
        return NutrientProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
        )

    def scaled(self, factor: float) -> "NutrientProfile":
        return NutrientProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
        )

    def for_mass(self, mass_g: float) -> "NutrientProfile":
        """Absolute nutrients of `mass_g` grams, reading self as per-100 g values."""
        return NutrientProfile(
            calories=self.calories * mass_g / 100,
            protein_g=self.protein_g * mass_g / 100,
            carbs_g=self.carbs_g * mass_g / 100,
            fat_g=self.fat_g * mass_g / 100,
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.calories, self.protein_g, self.carbs_g, self.fat_g)


ZERO_NUTRIENTS = NutrientProfile()


@dataclass(frozen=True)
class Ingredient:
    """An ingredient line of a recipe.

    `id` is the catalog id; custom ingredients typed in by the user have none
    and carry their own unit and per-100 g values.
    """

    name: Optional[str] = None
    amount: Optional[float] = None
    unit_name: Optional[str] = None
    unit_grams: Optional[float] = None
    per_100g: NutrientProfile = ZERO_NUTRIENTS
    id: Optional[int] = None

    @property
    def is_custom(self) -> bool:
        return self.id is None

    @property
    def mass_g(self) -> float:
        return self.amount * self.unit_grams

    @property
    def nutrients(self) -> NutrientProfile:
        return self.per_100g.for_mass(self.mass_g)

    def with_amount(self, amount: float) -> "Ingredient":
        return replace(self, amount=amount)


@dataclass(frozen=True)
class Recipe:
    """A recipe with its tags and ingredient list.

    Lists and sets passed in are frozen to tuples/frozensets. `ingredients`
    stays None when no list was supplied at all, which validation reports
    separately from an empty list.
    """

    name: Optional[str] = None
    duration: Optional[float] = None
    description: Optional[str] = None
    tags: FrozenSet[MealSlot] = frozenset()
    ingredients: Optional[Tuple[Ingredient, ...]] = ()
    id: Optional[int] = None
    deleted: bool = False

    def __post_init__(self):
        object.__setattr__(self, "tags", frozenset(self.tags or ()))
        if self.ingredients is not None:
            object.__setattr__(self, "ingredients", tuple(self.ingredients))

    @property
    def nutrients(self) -> NutrientProfile:
        """Sum of the ingredient contributions, unrounded."""
        total = ZERO_NUTRIENTS
        for ingredient in self.ingredients or ():
            total = total + ingredient.nutrients
        return total

    @property
    def tags_as_string(self) -> str:
        return encode_tags(self.tags)

    def is_tagged(self, slot: MealSlot) -> bool:
        return slot in self.tags


@dataclass(frozen=True)
class DietPlan:
    """Daily nutrient targets. Active while started and not yet ended."""

    name: Optional[str] = None
    daily: NutrientProfile = ZERO_NUTRIENTS
    id: Optional[int] = None
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.from_date is not None and self.to_date is None

    def target_for(self, slot: MealSlot) -> NutrientProfile:
        return self.daily.scaled(MEAL_SLOT_SHARES[slot])


@dataclass(frozen=True)
class IngredientSearchParam:
    name: Optional[str] = None


@dataclass(frozen=True)
class RecommendationRequest:
    """Ask for the best recipe for `meal_slot`, skipping `omissions`."""

    meal_slot: Optional[MealSlot]
    target: Optional[NutrientProfile]
    omissions: Tuple[Recipe, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "omissions", tuple(self.omissions or ()))


@dataclass(frozen=True)
class MealRecord:
    """A recipe eaten in a meal slot while a diet plan was active."""

    recipe: Recipe
    meal_slot: MealSlot
    eaten_at: datetime
    diet_plan_id: Optional[int] = None
    id: Optional[int] = None
