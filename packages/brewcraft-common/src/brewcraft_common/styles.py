"""
Beer style matching.

Scores a recipe against every style in a catalog. Each of five parameters
earns part of its weight depending on where the recipe's value falls:

- inside the range: 70-100% of the weight, highest at the midpoint
- within a tolerance band (15% of the range width) outside it: up to 50%,
  falling to nothing at the edge of the band
- further out: nothing

Ingredient names then add small bonuses for tell-tale ingredients (roasted
malt in a stout, American hops in a pale ale). Confidence is capped at 100.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from brewcraft_common.calculations import calculate_recipe_values, round_half_up
from brewcraft_common.catalog import BrewingCatalog, default_catalog
from brewcraft_common.models import BeerStyle, DerivedValues, Recipe, StyleMatch


logger = logging.getLogger(__name__)

TOLERANCE = 0.15
CENTER_FALLOFF = 0.3
NEAR_MISS_SHARE = 0.5
MAX_CONFIDENCE = 100
DEFAULT_MATCH_LIMIT = 5

# (label, DerivedValues field, BeerStyle range field, weight); weights sum to 100
WEIGHTED_PARAMETERS: tuple[tuple[str, str, str, float], ...] = (
    ("SRM", "srm", "srm_range", 30),
    ("ABV", "abv", "abv_range", 25),
    ("IBU", "ibu", "ibu_range", 25),
    ("OG", "original_gravity", "og_range", 10),
    ("FG", "final_gravity", "fg_range", 10),
)

AMERICAN_HOPS = ("cascade", "centennial", "citra", "mosaic", "amarillo")


@dataclass(frozen=True)
class IngredientBonus:
    """Bonus points for a style when any ingredient name contains a keyword."""

    points: int
    keywords: tuple[str, ...]
    style_names: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()

    def applies_to(self, style: BeerStyle) -> bool:
        return style.name in self.style_names or style.category in self.categories

    def found_in(self, ingredient_names: Iterable[str]) -> bool:
        return any(k in name for name in ingredient_names for k in self.keywords)


INGREDIENT_BONUSES: tuple[IngredientBonus, ...] = (
    IngredientBonus(10, ("wheat",), style_names=("Wheat Beer",)),
    IngredientBonus(10, ("roasted", "black", "chocolate"), categories=("Stout", "Porter")),
    IngredientBonus(5, ("belgian", "candi"), categories=("Belgian",)),
    IngredientBonus(5, AMERICAN_HOPS, categories=("IPA", "Pale Ale")),
)


def score_parameter(
    value: float,
    value_range: tuple[float, float],
    weight: float,
    tolerance: float = TOLERANCE,
) -> float:
    """
    Graduated score for one parameter against an inclusive range.

    Args:
        value: The recipe's value
        value_range: Style (min, max)
        weight: Maximum points for this parameter
        tolerance: Near-miss band as a fraction of the range width

    Returns:
        Points between 0 and ``weight``
    """
    low, high = value_range
    range_size = high - low

    if low <= value <= high:
        if range_size == 0:
            return float(weight)
        distance_from_center = abs(value - (low + high) / 2)
        return weight * (1 - (distance_from_center / (range_size / 2)) * CENTER_FALLOFF)

    tolerance_band = range_size * tolerance
    if tolerance_band <= 0:
        return 0.0

    if low - tolerance_band <= value < low:
        distance_outside = low - value
    elif high < value <= high + tolerance_band:
        distance_outside = value - high
    else:
        return 0.0

    return weight * (1 - distance_outside / tolerance_band) * NEAR_MISS_SHARE


def ingredient_bonus(style: BeerStyle, ingredient_names: list[str]) -> int:
    """Sum of bonuses that apply to ``style`` given lower-cased ingredient names."""
    return sum(
        bonus.points
        for bonus in INGREDIENT_BONUSES
        if bonus.applies_to(style) and bonus.found_in(ingredient_names)
    )


def score_style(
    style: BeerStyle,
    values: DerivedValues,
    ingredient_names: list[str],
) -> StyleMatch:
    """Score one style against a recipe's derived values."""
    score = 0.0
    matched: list[str] = []
    for label, value_field, range_field, weight in WEIGHTED_PARAMETERS:
        points = score_parameter(getattr(values, value_field), getattr(style, range_field), weight)
        if points > weight / 2:
            matched.append(label)
        score += points

    score = min(MAX_CONFIDENCE, max(0.0, score + ingredient_bonus(style, ingredient_names)))
    return StyleMatch(
        style=style.name,
        confidence=int(round_half_up(score)),
        matches=matched,
    )


def match_styles(
    recipe: Recipe,
    catalog: BrewingCatalog | None = None,
    limit: int = DEFAULT_MATCH_LIMIT,
) -> list[StyleMatch]:
    """
    Rank catalog styles by how well they fit a recipe.

    Args:
        recipe: The recipe to classify
        catalog: Style source; the default catalog when omitted
        limit: Number of matches to return

    Returns:
        Best matches first; ties keep catalog order
    """
    if catalog is None:
        catalog = default_catalog()

    values = calculate_recipe_values(recipe)
    ingredient_names = [line.ingredient.name.lower() for line in recipe.ingredients]

    matches = [score_style(style, values, ingredient_names) for style in catalog.styles]
    matches.sort(key=lambda m: m.confidence, reverse=True)

    if matches:
        logger.debug(
            "Best style for %r: %s (%d%%)",
            recipe.name,
            matches[0].style,
            matches[0].confidence,
        )
    return matches[:limit]
