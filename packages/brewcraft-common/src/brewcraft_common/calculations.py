"""
Brewing calculations.

Standard homebrew formulas that turn a recipe's ingredient list into
gravity, alcohol, bitterness, colour and nutrition figures:

- Gravity: extract points at a fixed 75% brewhouse efficiency
- Final gravity: apparent attenuation of the first yeast in the recipe
- ABV: (OG - FG) x 131.25
- IBU: Tinseth utilisation (bigness factor x boil time factor)
- SRM: Morey equation over malt colour units
- Nutrition: real extract based calories and carbohydrates per 12 oz

All functions are pure and total over their numeric domain; none of them
raise or log.
"""

import math
from collections.abc import Iterable

from brewcraft_common.models import (
    DerivedValues,
    DisplayValues,
    HopUse,
    IngredientType,
    Recipe,
    RecipeIngredient,
)
from brewcraft_common.units import to_ounces, to_pounds


BREWHOUSE_EFFICIENCY = 0.75
DEFAULT_ATTENUATION = 75
ABV_FACTOR = 131.25

# Tinseth utilisation constants
BIGNESS_COEFFICIENT = 1.65
BIGNESS_BASE = 0.000125
BOIL_TIME_CURVE = -0.04
BOIL_TIME_DIVISOR = 4.15
IBU_UNIT_FACTOR = 7490

# Morey equation
MOREY_COEFFICIENT = 1.4922
MOREY_EXPONENT = 0.6859

# Upper SRM bound (inclusive) -> swatch colour
SRM_COLORS: tuple[tuple[float, str], ...] = (
    (2, "#FFE699"),
    (4, "#FFD878"),
    (6, "#FFCA5A"),
    (8, "#FFBF42"),
    (10, "#FBB123"),
    (12, "#F8A600"),
    (14, "#F39C00"),
    (16, "#EA8F00"),
    (18, "#E58500"),
    (20, "#DE7C00"),
    (24, "#D77200"),
    (28, "#CF6900"),
    (32, "#CB6200"),
    (36, "#C35900"),
    (40, "#BB5100"),
)
DARKEST_SRM_COLOR = "#8D4C32"


def _per_gallon(amount: float, batch_size: float) -> float:
    """Divide by the batch size, giving inf (or nan for 0/0) on an empty batch."""
    if batch_size == 0:
        return math.copysign(math.inf, amount) if amount else math.nan
    return amount / batch_size


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to ``digits`` decimals with halves going towards +infinity.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


# Gravity & alcohol

def calculate_og(ingredients: Iterable[RecipeIngredient], batch_size: float) -> float:
    """
    Estimate original gravity from the malt bill.

    Args:
        ingredients: Recipe lines; only malts with a PPG contribute
        batch_size: Batch size in US gallons

    Returns:
        Specific gravity, e.g. 1.052
    """
    total_points = 0.0
    for line in ingredients:
        if line.type != IngredientType.MALT or not line.ingredient.ppg:
            continue
        pounds = to_pounds(line.amount, line.unit)
        points = line.ingredient.ppg * pounds * BREWHOUSE_EFFICIENCY
        total_points += _per_gallon(points, batch_size)

    return 1 + (total_points / 1000)


def calculate_fg(og: float, ingredients: Iterable[RecipeIngredient]) -> float:
    """
    Estimate final gravity from the first yeast's attenuation.

    Only the first yeast line is considered; blends are not modelled.
    Without a yeast (or an attenuation figure) 75% is assumed.
    """
    yeast = next((line for line in ingredients if line.type == IngredientType.YEAST), None)
    attenuation = (yeast.ingredient.attenuation if yeast else None) or DEFAULT_ATTENUATION
    return og - ((og - 1) * (attenuation / 100))


def calculate_abv(og: float, fg: float) -> float:
    """Alcohol by volume percentage from a gravity pair."""
    return (og - fg) * ABV_FACTOR


# Bitterness

def hop_utilization(boil_time: float, og: float) -> float:
    """
    Tinseth hop utilisation for a boil addition.

    Args:
        boil_time: Minutes in the boil
        og: Wort gravity the hops are boiled in

    Returns:
        Utilisation as a fraction
    """
    bigness_factor = BIGNESS_COEFFICIENT * math.pow(BIGNESS_BASE, og - 1)
    boil_time_factor = (1 - math.exp(BOIL_TIME_CURVE * boil_time)) / BOIL_TIME_DIVISOR
    return bigness_factor * boil_time_factor


def calculate_ibu(
    ingredients: Iterable[RecipeIngredient],
    batch_size: float,
    og: float,
) -> float:
    """
    Total bitterness from boil additions.

    Whirlpool and dry hop additions add nothing, and hops with no alpha acid
    figure (neither override nor catalog value) are skipped. The result is
    not clamped. Alpha acid is a percentage and enters the formula as a
    fraction (5.5 -> 0.055).

    Args:
        ingredients: Recipe lines
        batch_size: Batch size in US gallons
        og: Original gravity of the wort

    Returns:
        International Bitterness Units
    """
    total_ibu = 0.0
    for line in ingredients:
        if line.type != IngredientType.HOP:
            continue
        if line.hop_use != HopUse.BOIL or not line.boil_time:
            continue

        alpha_acid = line.effective_alpha_acid
        if not alpha_acid:
            continue

        ounces = to_ounces(line.amount, line.unit)
        utilization = hop_utilization(line.boil_time, og)
        total_ibu += _per_gallon(
            ounces * (alpha_acid / 100) * utilization * IBU_UNIT_FACTOR, batch_size
        )

    return total_ibu


# Colour

def calculate_srm(ingredients: Iterable[RecipeIngredient], batch_size: float) -> float:
    """
    Beer colour using the Morey equation.

    A grist with no colour data returns 0 rather than raising a
    non-positive base to a fractional power.
    """
    total_mcu = 0.0
    for line in ingredients:
        if line.type != IngredientType.MALT or not line.ingredient.lovibond:
            continue
        pounds = to_pounds(line.amount, line.unit)
        total_mcu += _per_gallon(pounds * line.ingredient.lovibond, batch_size)

    if total_mcu <= 0:
        return 0.0
    return MOREY_COEFFICIENT * math.pow(total_mcu, MOREY_EXPONENT)


def srm_to_color(srm: float) -> str:
    """
    Map an SRM value to a hex colour swatch.

    Args:
        srm: Beer colour in SRM

    Returns:
        Hex colour string such as ``#FBB123``
    """
    for upper_bound, color in SRM_COLORS:
        if srm <= upper_bound:
            return color
    return DARKEST_SRM_COLOR


# Nutrition

def gravity_to_plato(gravity: float) -> float:
    """Approximate degrees Plato as gravity points / 4."""
    return (gravity - 1) * 1000 / 4


def calculate_calories(og: float, fg: float, abv: float) -> float:
    """Calories per 12 oz serving."""
    real_extract = (0.1808 * og) + (0.8192 * fg) - 1.0004
    return ((6.9 * abv) + 4.0 * (real_extract - 0.1)) * fg * 3.55


def calculate_carbs(og: float, fg: float) -> float:
    """Carbohydrates per 12 oz serving, in grams."""
    real_extract = (0.1808 * gravity_to_plato(og)) + (0.8192 * gravity_to_plato(fg))
    return real_extract * 3.55


# Aggregate

def calculate_recipe_values(recipe: Recipe) -> DerivedValues:
    """
    Compute every derived value for a recipe.

    Values are calculated in dependency order (OG, FG, ABV, IBU, SRM,
    calories, carbs) and rounded for display. The recipe is not modified.

    Args:
        recipe: The recipe to evaluate

    Returns:
        DerivedValues snapshot
    """
    ingredients = recipe.ingredients
    og = calculate_og(ingredients, recipe.batch_size)
    fg = calculate_fg(og, ingredients)
    abv = calculate_abv(og, fg)
    ibu = calculate_ibu(ingredients, recipe.batch_size, og)
    srm = calculate_srm(ingredients, recipe.batch_size)
    calories = calculate_calories(og, fg, abv)
    carbs = calculate_carbs(og, fg)

    return DerivedValues(
        original_gravity=round_half_up(og, 3),
        final_gravity=round_half_up(fg, 3),
        abv=round_half_up(abv, 1),
        ibu=int(round_half_up(ibu)),
        srm=round_half_up(srm, 1),
        calories_per_12oz=int(round_half_up(calories)),
        carbs_per_12oz=round_half_up(carbs, 1),
    )


def resolve_display_values(recipe: Recipe) -> DisplayValues:
    """
    Pick the values to show for a recipe.

    Gravities prefer measured readings, then the saved snapshot, then a
    fresh calculation. When both readings are present ABV, calories and
    carbohydrates are derived from them; the estimate stays on the recipe.
    """
    calculated = calculate_recipe_values(recipe)

    def _pick(*values: float | None) -> float:
        return next((v for v in values if v is not None), 0.0)

    og = _pick(recipe.actual_og, recipe.original_gravity, calculated.original_gravity)
    fg = _pick(recipe.actual_fg, recipe.final_gravity, calculated.final_gravity)

    if recipe.uses_actual_readings:
        abv = calculate_abv(recipe.actual_og, recipe.actual_fg)
        calories = calculate_calories(recipe.actual_og, recipe.actual_fg, abv)
        carbs = calculate_carbs(recipe.actual_og, recipe.actual_fg)
    else:
        abv = _pick(recipe.abv, calculated.abv)
        calories = _pick(recipe.calories_per_12oz, calculated.calories_per_12oz)
        carbs = _pick(recipe.carbs_per_12oz, calculated.carbs_per_12oz)

    return DisplayValues(
        original_gravity=og,
        final_gravity=fg,
        abv=abv,
        ibu=_pick(recipe.ibu, calculated.ibu),
        srm=_pick(recipe.srm, calculated.srm),
        calories_per_12oz=calories,
        carbs_per_12oz=carbs,
        uses_actual=recipe.uses_actual_readings,
    )
