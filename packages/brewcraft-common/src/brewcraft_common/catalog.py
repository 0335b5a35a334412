"""
Brewing reference catalog.

A BrewingCatalog bundles the beer style table and the ingredient list that
the calculation and matching code reads. It is immutable; adding custom
ingredients yields a new catalog. Pass a catalog explicitly wherever a
custom style table or ingredient set is needed (tests, user libraries).
"""

from dataclasses import dataclass, replace
from datetime import datetime
from functools import lru_cache
from typing import Any, Iterable

from brewcraft_common.default_ingredients import DEFAULT_INGREDIENTS
from brewcraft_common.default_styles import BEER_STYLES
from brewcraft_common.exceptions import MatchingError
from brewcraft_common.matching import best_match, match_objects, normalise_ingredient_name
from brewcraft_common.models import (
    CUSTOM_INGREDIENT_PREFIX,
    BeerStyle,
    Ingredient,
    IngredientType,
)

STYLE_MATCH_THRESHOLD = 0.85


@dataclass(frozen=True)
class BrewingCatalog:
    """Immutable style and ingredient reference data."""

    styles: tuple[BeerStyle, ...] = ()
    ingredients: tuple[Ingredient, ...] = ()

    def ingredients_by_type(self, ingredient_type: IngredientType | str) -> list[Ingredient]:
        """Get all ingredients of one type, in catalog order."""
        ingredient_type = IngredientType(ingredient_type)
        return [i for i in self.ingredients if i.type == ingredient_type]

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        return next((i for i in self.ingredients if i.id == ingredient_id), None)

    def get_style(self, name: str) -> BeerStyle | None:
        """Look up a style by name, ignoring case."""
        wanted = name.strip().lower()
        return next((s for s in self.styles if s.name.lower() == wanted), None)

    def find_style(self, name: str, threshold: float = STYLE_MATCH_THRESHOLD) -> BeerStyle | None:
        """
        Look up a style by name, tolerating typos.

        An exact (case-insensitive) name wins; otherwise the closest name
        scoring at least ``threshold`` is used.
        """
        exact = self.get_style(name)
        if exact is not None:
            return exact
        found = best_match(name, [s.name for s in self.styles], threshold)
        if found is None:
            return None
        return self.get_style(found[0])

    def styles_in_category(self, category: str) -> list[BeerStyle]:
        wanted = category.strip().lower()
        return [s for s in self.styles if s.category.lower() == wanted]

    def with_ingredients(self, extra: Iterable[Ingredient]) -> "BrewingCatalog":
        """
        Return a catalog with ``extra`` merged in.

        An ingredient whose id already exists replaces the existing entry in
        place; new ids are appended.
        """
        merged = {i.id: i for i in self.ingredients}
        for ingredient in extra:
            merged[ingredient.id] = ingredient
        return replace(self, ingredients=tuple(merged.values()))

    def search_ingredients(
        self,
        query: str,
        ingredient_type: IngredientType | str | None = None,
        threshold: float = 0.6,
        limit: int = 10,
    ) -> list[tuple[Ingredient, float]]:
        """
        Search ingredients by name.

        Names containing the query (case-insensitive) rank first with a
        confidence of 1.0, followed by fuzzy matches.

        Args:
            query: Search text
            ingredient_type: Optional filter by type
            threshold: Minimum fuzzy match confidence (0.0 to 1.0)
            limit: Maximum number of results

        Returns:
            List of (ingredient, confidence) tuples
        """
        if not query or not query.strip():
            return []

        candidates = (
            self.ingredients_by_type(ingredient_type)
            if ingredient_type is not None
            else list(self.ingredients)
        )

        needle = query.strip().lower()
        results: list[tuple[Ingredient, float]] = [
            (i, 1.0) for i in candidates if needle in i.name.lower()
        ][:limit]
        seen = {i.id for i, _ in results}

        fuzzy = match_objects(
            normalise_ingredient_name(query),
            candidates,
            key=lambda i: i.name,
            threshold=threshold,
            limit=limit,
        )
        for ingredient, confidence in fuzzy:
            if len(results) >= limit:
                break
            if ingredient.id not in seen:
                results.append((ingredient, confidence))
                seen.add(ingredient.id)

        return results

    def find_ingredient(
        self,
        name: str,
        ingredient_type: IngredientType | str | None = None,
        threshold: float = 0.8,
    ) -> Ingredient:
        """
        Resolve a free-text name to a single catalog ingredient.

        Raises:
            MatchingError: If nothing matches above ``threshold``
        """
        canonical = normalise_ingredient_name(name)
        pool = (
            self.ingredients_by_type(ingredient_type)
            if ingredient_type is not None
            else list(self.ingredients)
        )
        exact = next((i for i in pool if i.name.lower() == canonical), None)
        if exact is not None:
            return exact

        matches = match_objects(canonical, pool, key=lambda i: i.name, threshold=threshold, limit=1)
        if not matches:
            raise MatchingError(f"No ingredient matching '{name}'")
        return matches[0][0]


@lru_cache(maxsize=1)
def default_catalog() -> BrewingCatalog:
    """The built-in style table and default ingredients."""
    return BrewingCatalog(styles=BEER_STYLES, ingredients=DEFAULT_INGREDIENTS)


def create_custom_ingredient(
    name: str,
    ingredient_type: IngredientType | str,
    now: datetime,
    **attributes: Any,
) -> Ingredient:
    """
    Create a user-defined ingredient.

    The id is ``custom-<type>-<epoch milliseconds>`` so that custom entries
    are recognisable wherever they end up.

    Args:
        name: Display name
        ingredient_type: malt, hop, yeast or adjunct
        now: Creation time used for the id
        **attributes: Type-specific fields (lovibond, ppg, alpha_acid, ...)

    Returns:
        New Ingredient
    """
    ingredient_type = IngredientType(ingredient_type)
    stamp = int(now.timestamp() * 1000)
    return Ingredient(
        id=f"{CUSTOM_INGREDIENT_PREFIX}{ingredient_type.value}-{stamp}",
        name=name.strip(),
        type=ingredient_type,
        **attributes,
    )
