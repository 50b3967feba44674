"""Field validation for recipes, ingredient searches and diet plans.

Each validator runs its checks in a fixed order and collects every violation
in a `ValidationContext`; none of them raise. Services call
`ctx.raise_if_invalid()` before touching persistence.
"""

from typing import Optional

from core.validation import ValidationContext
from domain.models import DietPlan, Ingredient, IngredientSearchParam, Recipe

NAME_MAX_LENGTH = 255
DURATION_MAX = 255
NUTRIENT_MAX_PER_100G = 100
SEARCH_NAME_MIN_LENGTH = 3
SEARCH_NAME_MAX_LENGTH = 20


def _display_name(ingredient: Ingredient) -> str:
    # An invalid name is reported by its own check; don't repeat it in every label.
    name = ingredient.name
    if name is None or not name.strip() or len(name) > NAME_MAX_LENGTH:
        return ""
    return name


def _check_name(ctx: ValidationContext, label: str, value: Optional[str]) -> None:
    if ctx.check_not_null(label, value):
        if ctx.check_max_length(label, value, NAME_MAX_LENGTH):
            ctx.check_min_length(label, value, 1)


def validate_ingredient(ingredient: Ingredient, ctx: ValidationContext, seen_ids: Optional[set] = None) -> bool:
    """Validate one ingredient line into `ctx`.

    Labels follow "<Field> of ingredient <Name>". Custom ingredients also have
    their unit and energy checked; catalog ones reuse the stored unit.
    Returns True when no message was added.
    """
    before = len(ctx.errors)
    name = _display_name(ingredient)

    def label(field: str) -> str:
        return f"{field} of ingredient {name}"

    if ctx.check_not_null(label("Amount"), ingredient.amount):
        ctx.check_greater_than(label("Amount"), ingredient.amount, 0)

    _check_name(ctx, label("Name"), ingredient.name)

    per_100g = ingredient.per_100g
    if ingredient.is_custom:
        if ctx.check_not_null(label("Unit grams"), ingredient.unit_grams):
            ctx.check_greater_than(label("Unit grams"), ingredient.unit_grams, 0)
        if ctx.check_not_null(label("Unit name"), ingredient.unit_name):
            ctx.check_min_length(label("Unit name"), ingredient.unit_name, 1)

    if ctx.check_not_null(label("Nutrients"), per_100g):
        if ingredient.is_custom and ctx.check_not_null(label("Energy (kcal)"), per_100g.calories):
            ctx.check_at_least(label("Energy (kcal)"), per_100g.calories, 0)

        macros = (
            ("Carbohydrates", per_100g.carbs_g),
            ("Fats", per_100g.fat_g),
            ("Proteins", per_100g.protein_g),
        )
        for field, value in macros:
            if not ctx.check_not_null(label(field), value):
                continue
            if ingredient.is_custom or ctx.check_at_least(label(field), value, 0):
                ctx.check_at_most(label(field), value, NUTRIENT_MAX_PER_100G)

        if all(value is not None for _, value in macros):
            ctx.check_at_most(
                label("Sum of carbohydrates, fats and proteins"),
                sum(value for _, value in macros),
                NUTRIENT_MAX_PER_100G,
            )

    if seen_ids is not None and not ingredient.is_custom:
        ctx.add_error_if_invalid(
            f"The ingredient '{name}' can only be added once to the recipe.",
            ingredient.id not in seen_ids,
        )
        seen_ids.add(ingredient.id)

    return len(ctx.errors) == before


def validate_recipe(recipe: Recipe, ctx: Optional[ValidationContext] = None) -> ValidationContext:
    """Collect every violation of `recipe` and its ingredient list.

    Order: name, duration, description, tags, ingredient list, then each
    ingredient in list order. A null or empty ingredient list produces one
    message and no per-ingredient checks.
    """
    ctx = ctx if ctx is not None else ValidationContext()
    if not ctx.check_not_null("Recipe", recipe):
        return ctx

    _check_name(ctx, "Recipe name", recipe.name)

    if ctx.check_not_null("Duration", recipe.duration):
        if ctx.check_greater_than("Duration", recipe.duration, 0):
            ctx.check_smaller_than("Duration", recipe.duration, DURATION_MAX)

    if ctx.check_not_null("Description", recipe.description):
        ctx.check_min_length("Description", recipe.description, 1)

    ctx.add_error_if_invalid("Select at least one tag (breakfast, lunch or dinner)", bool(recipe.tags))

    if not ctx.check_not_null("Ingredient Selection", recipe.ingredients):
        return ctx
    if not ctx.add_error_if_invalid("Select at least one ingredient for the recipe.", len(recipe.ingredients) > 0):
        return ctx

    seen_ids = set()
    for ingredient in recipe.ingredients:
        if not ctx.check_not_null("Ingredient", ingredient):
            continue
        validate_ingredient(ingredient, ctx, seen_ids)
    return ctx


def validate_ingredient_search(param: Optional[IngredientSearchParam], ctx: Optional[ValidationContext] = None) -> ValidationContext:
    """Catalog search terms must be 3 to 20 characters once trimmed."""
    ctx = ctx if ctx is not None else ValidationContext()
    if not ctx.check_not_null("Ingredient Search Param", param):
        return ctx
    if ctx.check_not_null("Ingredient Name", param.name):
        term = param.name.strip()
        if ctx.check_min_length("Ingredient Name", term, SEARCH_NAME_MIN_LENGTH):
            ctx.check_max_length("Ingredient Name", term, SEARCH_NAME_MAX_LENGTH)
    return ctx


def validate_diet_plan(plan: Optional[DietPlan], ctx: Optional[ValidationContext] = None) -> ValidationContext:
    ctx = ctx if ctx is not None else ValidationContext()
    if not ctx.check_not_null("Diet plan", plan):
        return ctx

    _check_name(ctx, "Diet plan name", plan.name)
    if not ctx.check_not_null("Daily target", plan.daily):
        return ctx

    daily = plan.daily
    if ctx.check_not_null("Energy (kcal)", daily.calories):
        ctx.check_greater_than("Energy (kcal)", daily.calories, 0)
    for field, value in (("Proteins", daily.protein_g), ("Carbohydrates", daily.carbs_g), ("Fats", daily.fat_g)):
        if ctx.check_not_null(field, value):
            ctx.check_at_least(field, value, 0)
    return ctx
