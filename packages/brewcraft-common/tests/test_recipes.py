"""
Tests for recipe lifecycle helpers.
"""

from datetime import datetime, timezone

import pytest
from brewcraft_common.catalog import default_catalog
from brewcraft_common.exceptions import ValidationError
from brewcraft_common.models import (
    HopUse,
    IngredientType,
    Recipe,
    RecipeIngredient,
    Unit,
    YieldEntry,
    YieldType,
)
from brewcraft_common.recipes import (
    clone_recipe,
    duplicate_recipe,
    make_recipe_id,
    new_recipe,
    prepare_for_save,
    promote_to_master,
    shopping_list,
    toggle_favorite,
    total_yield_gallons,
)


NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
LATER = datetime(2024, 3, 2, 12, 0, tzinfo=timezone.utc)


def line(ingredient_id: str, amount: float, unit: Unit = Unit.LB, **usage) -> RecipeIngredient:
    return RecipeIngredient(
        ingredient=default_catalog().get_ingredient(ingredient_id),
        amount=amount,
        unit=unit,
        **usage,
    )


def brewed_recipe() -> Recipe:
    return Recipe(
        id="r1",
        name="Porch Pale",
        ingredients=[
            line("y1", 1, Unit.PACKET),
            line("h1", 1, Unit.OZ, hop_use=HopUse.BOIL, boil_time=60),
            line("a1", 5, Unit.OZ),
            line("m1", 10),
        ],
        brew_date=NOW,
        bottling_date=NOW,
        actual_og=1.052,
        actual_fg=1.010,
        is_favorite=True,
        created_at=NOW,
    )


class TestNewRecipe:
    """Tests for blank recipes."""

    def test_defaults(self):
        recipe = new_recipe(NOW)
        assert recipe.batch_size == 5.0
        assert recipe.boil_time == 60
        assert recipe.ingredients == []
        assert recipe.brew_date == NOW

    def test_generated_id(self):
        assert new_recipe(NOW).id == make_recipe_id(NOW)
        assert make_recipe_id(NOW).startswith("recipe-")

    def test_explicit_id(self):
        assert new_recipe(NOW, recipe_id="abc").id == "abc"


class TestPrepareForSave:
    """Tests for attaching the derived-values snapshot."""

    def test_snapshot_attached(self):
        saved = prepare_for_save(brewed_recipe(), LATER)
        assert saved.original_gravity is not None
        assert saved.ibu is not None
        assert saved.srm is not None
        assert saved.updated_at == LATER

    def test_created_at_kept(self):
        assert prepare_for_save(brewed_recipe(), LATER).created_at == NOW

    def test_created_at_filled(self):
        saved = prepare_for_save(Recipe(id="r1"), LATER)
        assert saved.created_at == LATER


class TestDuplicateRecipe:
    """Tests for duplicating a recipe."""

    def test_copy(self):
        copy = duplicate_recipe(brewed_recipe(), LATER, new_id="r2")
        assert copy.id == "r2"
        assert copy.name == "Porch Pale (Copy)"
        assert copy.ingredients == brewed_recipe().ingredients

    def test_brew_data_cleared(self):
        copy = duplicate_recipe(brewed_recipe(), LATER, new_id="r2")
        assert copy.bottling_date is None
        assert copy.actual_og is None
        assert copy.actual_fg is None
        assert copy.is_favorite is False
        assert copy.brew_date == LATER

    def test_clone_links_cleared(self):
        source = brewed_recipe().model_copy(
            update={"parent_recipe_id": "r0", "clone_ids": ["r5"]}
        )
        copy = duplicate_recipe(source, LATER, new_id="r2")
        assert copy.parent_recipe_id is None
        assert copy.clone_ids == []


class TestCloneRecipe:
    """Tests for tracked variations."""

    def test_clone_links(self):
        clone, parent = clone_recipe(brewed_recipe(), LATER, new_id="r2")
        assert clone.id == "r2"
        assert clone.name == "Porch Pale (Clone)"
        assert clone.parent_recipe_id == "r1"
        assert clone.parent_recipe_name == "Porch Pale"
        assert parent.clone_ids == ["r2"]

    def test_source_unchanged(self):
        source = brewed_recipe()
        clone_recipe(source, LATER, new_id="r2")
        assert source.clone_ids == []

    def test_second_clone_appends(self):
        _, parent = clone_recipe(brewed_recipe(), LATER, new_id="r2")
        _, parent = clone_recipe(parent, LATER, new_id="r3")
        assert parent.clone_ids == ["r2", "r3"]


class TestPromoteToMaster:
    """Tests for promoting a clone."""

    def test_family_rewired(self):
        first, parent = clone_recipe(brewed_recipe(), NOW, new_id="r2")
        second, parent = clone_recipe(parent, NOW, new_id="r3")

        promoted, demoted, sibling = promote_to_master(first, parent, [second], LATER)

        assert promoted.id == "r2"
        assert promoted.parent_recipe_id is None
        assert promoted.clone_ids == ["r1", "r3"]
        assert demoted.parent_recipe_id == "r2"
        assert demoted.clone_ids == []
        assert sibling.parent_recipe_id == "r2"
        assert sibling.parent_recipe_name == "Porch Pale (Clone)"

    def test_not_a_clone(self):
        with pytest.raises(ValidationError):
            promote_to_master(brewed_recipe(), Recipe(id="other"), [], LATER)


class TestFavoritesAndYield:
    """Tests for small recipe helpers."""

    def test_toggle_favorite(self):
        recipe = brewed_recipe()
        assert toggle_favorite(recipe, LATER).is_favorite is False
        assert toggle_favorite(toggle_favorite(recipe, LATER), LATER).is_favorite is True

    def test_total_yield(self):
        entries = [
            YieldEntry(id="1", type=YieldType.CORNELIUS_KEG, amount=1),
            YieldEntry(id="2", type=YieldType.BOTTLES_12OZ, amount=32),
        ]
        assert total_yield_gallons(entries) == pytest.approx(8.0)

    def test_empty_yield(self):
        assert total_yield_gallons([]) == 0


class TestShoppingList:
    """Tests for the shopping list."""

    def test_grouped_in_brewing_order(self):
        groups = shopping_list(brewed_recipe())
        assert list(groups) == [
            IngredientType.MALT,
            IngredientType.HOP,
            IngredientType.YEAST,
            IngredientType.ADJUNCT,
        ]

    def test_items(self):
        malt = shopping_list(brewed_recipe())[IngredientType.MALT][0]
        assert malt.name == "2-Row Pale Malt"
        assert malt.amount == 10
        assert malt.unit == "lb"

    def test_missing_groups_omitted(self):
        recipe = Recipe(id="r1", ingredients=[line("m1", 10)])
        assert list(shopping_list(recipe)) == [IngredientType.MALT]
