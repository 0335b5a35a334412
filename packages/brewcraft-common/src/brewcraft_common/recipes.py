"""
Recipe lifecycle helpers.

Plain copy operations over frozen Recipe values: creating, saving,
duplicating, cloning and promoting recipes, plus the shopping list and
yield totals. Each operation takes the current time (and new ids) from the
caller and returns new Recipe objects; nothing is persisted here.
"""

from dataclasses import dataclass
from datetime import datetime

from brewcraft_common.calculations import calculate_recipe_values
from brewcraft_common.exceptions import ValidationError
from brewcraft_common.models import IngredientType, Recipe, YieldEntry, YieldType
from brewcraft_common.units import fl_oz_to_gal


DEFAULT_BATCH_SIZE = 5.0
DEFAULT_BOIL_TIME = 60
COPY_SUFFIX = " (Copy)"
CLONE_SUFFIX = " (Clone)"

SHOPPING_ORDER = (
    IngredientType.MALT,
    IngredientType.HOP,
    IngredientType.YEAST,
    IngredientType.ADJUNCT,
)

YIELD_GALLONS: dict[YieldType, float] = {
    YieldType.GALLONS: 1.0,
    YieldType.BOTTLES_22OZ: fl_oz_to_gal(22),
    YieldType.BOTTLES_12OZ: fl_oz_to_gal(12),
    YieldType.CORNELIUS_KEG: 5.0,
}


def make_recipe_id(now: datetime) -> str:
    """Recipe id in the ``recipe-<epoch ms>`` form."""
    return f"recipe-{int(now.timestamp() * 1000)}"


def new_recipe(now: datetime, recipe_id: str | None = None, name: str = "") -> Recipe:
    """A blank 5 gallon, 60 minute boil recipe brewed today."""
    return Recipe(
        id=recipe_id or make_recipe_id(now),
        name=name,
        batch_size=DEFAULT_BATCH_SIZE,
        boil_time=DEFAULT_BOIL_TIME,
        brew_date=now,
        created_at=now,
        updated_at=now,
    )


def prepare_for_save(recipe: Recipe, now: datetime) -> Recipe:
    """Attach a fresh derived-values snapshot and stamp the update time."""
    values = calculate_recipe_values(recipe)
    return recipe.model_copy(
        update={
            **values.model_dump(),
            "created_at": recipe.created_at or now,
            "updated_at": now,
        }
    )


def duplicate_recipe(recipe: Recipe, now: datetime, new_id: str | None = None) -> Recipe:
    """
    Copy a recipe as an unrelated new recipe.

    Brew-specific data (dates, readings), clone links and the favourite flag
    are not carried over.
    """
    return recipe.model_copy(
        update={
            "id": new_id or make_recipe_id(now),
            "name": f"{recipe.name}{COPY_SUFFIX}",
            "brew_date": now,
            "created_at": now,
            "updated_at": now,
            "yeast_pitch_date": None,
            "bottling_date": None,
            "actual_og": None,
            "actual_fg": None,
            "parent_recipe_id": None,
            "parent_recipe_name": None,
            "clone_ids": [],
            "is_favorite": False,
        },
        deep=True,
    )


def clone_recipe(
    recipe: Recipe,
    now: datetime,
    new_id: str | None = None,
) -> tuple[Recipe, Recipe]:
    """
    Clone a recipe as a tracked variation.

    Returns:
        (clone, parent) where the parent lists the new clone id
    """
    clone_id = new_id or make_recipe_id(now)
    clone = recipe.model_copy(
        update={
            "id": clone_id,
            "name": f"{recipe.name}{CLONE_SUFFIX}",
            "brew_date": now,
            "created_at": now,
            "updated_at": now,
            "parent_recipe_id": recipe.id,
            "parent_recipe_name": recipe.name,
            "clone_ids": [],
        },
        deep=True,
    )
    parent = recipe.model_copy(
        update={"clone_ids": [*recipe.clone_ids, clone_id], "updated_at": now}
    )
    return clone, parent


def promote_to_master(
    recipe: Recipe,
    parent: Recipe,
    siblings: list[Recipe],
    now: datetime,
) -> list[Recipe]:
    """
    Make a clone the master of its family.

    The promoted recipe loses its parent link and adopts the old parent and
    every sibling clone; the old parent and the siblings point at it.

    Args:
        recipe: The clone being promoted
        parent: Its current parent
        siblings: Other clones of the parent (unknown ids are ignored)
        now: Update time

    Returns:
        [promoted, demoted parent, *re-parented siblings]

    Raises:
        ValidationError: If ``recipe`` is not a clone of ``parent``
    """
    if recipe.parent_recipe_id != parent.id:
        raise ValidationError(f"Recipe '{recipe.id}' is not a clone of '{parent.id}'")

    sibling_ids = [cid for cid in parent.clone_ids if cid != recipe.id]
    promoted = recipe.model_copy(
        update={
            "parent_recipe_id": None,
            "parent_recipe_name": None,
            "clone_ids": [parent.id, *sibling_ids],
            "updated_at": now,
        }
    )
    demoted = parent.model_copy(
        update={
            "parent_recipe_id": recipe.id,
            "parent_recipe_name": recipe.name,
            "clone_ids": [],
            "updated_at": now,
        }
    )
    reparented = [
        sibling.model_copy(
            update={
                "parent_recipe_id": recipe.id,
                "parent_recipe_name": recipe.name,
                "updated_at": now,
            }
        )
        for sibling in siblings
        if sibling.id in sibling_ids
    ]
    return [promoted, demoted, *reparented]


def toggle_favorite(recipe: Recipe, now: datetime) -> Recipe:
    return recipe.model_copy(update={"is_favorite": not recipe.is_favorite, "updated_at": now})


@dataclass(frozen=True)
class ShoppingItem:
    """One line of a shopping list."""

    name: str
    amount: float
    unit: str
    type: IngredientType


def shopping_list(recipe: Recipe) -> dict[IngredientType, list[ShoppingItem]]:
    """Recipe lines grouped by ingredient type, malts first."""
    grouped: dict[IngredientType, list[ShoppingItem]] = {}
    for ingredient_type in SHOPPING_ORDER:
        items = [
            ShoppingItem(
                name=line.ingredient.name,
                amount=line.amount,
                unit=line.unit.value,
                type=ingredient_type,
            )
            for line in recipe.ingredients
            if line.type == ingredient_type
        ]
        if items:
            grouped[ingredient_type] = items
    return grouped


def total_yield_gallons(entries: list[YieldEntry]) -> float:
    """Total packaged volume across yield records, in US gallons."""
    return sum(YIELD_GALLONS[entry.type] * entry.amount for entry in entries)
