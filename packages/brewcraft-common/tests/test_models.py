"""
Tests for brewcraft-common data models.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from brewcraft_common.models import (
    BeerStyle,
    Flocculation,
    HopUse,
    Ingredient,
    IngredientType,
    Recipe,
    RecipeIngredient,
    StyleMatch,
    Unit,
)


def cascade(**overrides) -> Ingredient:
    fields = {"id": "h1", "name": "Cascade", "type": IngredientType.HOP, "alpha_acid": 5.5}
    fields.update(overrides)
    return Ingredient(**fields)


class TestIngredient:
    """Tests for the Ingredient model."""

    def test_create_malt(self):
        malt = Ingredient(id="m1", name="2-Row", type=IngredientType.MALT, lovibond=1.8, ppg=37)
        assert malt.type == IngredientType.MALT
        assert malt.ppg == 37
        assert malt.alpha_acid is None

    def test_create_yeast(self):
        yeast = Ingredient(
            id="y1",
            name="US-05",
            type="yeast",
            attenuation=78,
            flocculation="medium",
            temp_range=(59, 75),
        )
        assert yeast.type == IngredientType.YEAST
        assert yeast.flocculation == Flocculation.MEDIUM
        assert yeast.temp_range == (59, 75)

    def test_temp_range_must_be_ordered(self):
        with pytest.raises(PydanticValidationError):
            Ingredient(id="y1", name="Bad", type="yeast", temp_range=(75, 59))

    def test_alpha_acid_is_a_percentage(self):
        with pytest.raises(PydanticValidationError):
            cascade(alpha_acid=120)

    def test_id_required(self):
        with pytest.raises(PydanticValidationError):
            cascade(id="")

    def test_frozen(self):
        hop = cascade()
        with pytest.raises(PydanticValidationError):
            hop.alpha_acid = 7.0

    def test_is_custom(self):
        assert cascade(id="custom-hop-1700000000000").is_custom
        assert not cascade().is_custom


class TestRecipeIngredient:
    """Tests for recipe lines."""

    def test_type_follows_ingredient(self):
        hop_line = RecipeIngredient(ingredient=cascade(), amount=1, unit=Unit.OZ)
        assert hop_line.type == IngredientType.HOP

    def test_effective_alpha_uses_override(self):
        hop_line = RecipeIngredient(
            ingredient=cascade(), amount=1, unit="oz", custom_alpha_acid=7.2
        )
        assert hop_line.effective_alpha_acid == 7.2

    def test_effective_alpha_falls_back_to_catalog(self):
        hop_line = RecipeIngredient(ingredient=cascade(), amount=1, unit="oz")
        assert hop_line.effective_alpha_acid == 5.5

    def test_zero_override_falls_back(self):
        hop_line = RecipeIngredient(
            ingredient=cascade(), amount=1, unit="oz", custom_alpha_acid=0
        )
        assert hop_line.effective_alpha_acid == 5.5

    def test_embedded_copy_is_equal(self):
        hop = cascade()
        hop_line = RecipeIngredient(ingredient=hop, amount=1, unit="oz")
        assert hop_line.ingredient == hop

    def test_negative_amount_rejected(self):
        with pytest.raises(PydanticValidationError):
            RecipeIngredient(ingredient=cascade(), amount=-1, unit="oz")

    def test_hop_use_values(self):
        hop_line = RecipeIngredient(
            ingredient=cascade(), amount=1, unit="oz", hop_use="dry-hop", dry_hop_days=5
        )
        assert hop_line.hop_use == HopUse.DRY_HOP


class TestRecipe:
    """Tests for the Recipe model."""

    def test_defaults(self):
        recipe = Recipe(id="r1")
        assert recipe.batch_size == 5.0
        assert recipe.boil_time == 60
        assert recipe.ingredients == []
        assert recipe.clone_ids == []
        assert recipe.is_favorite is False

    def test_batch_size_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Recipe(id="r1", batch_size=0)

    def test_boil_time_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Recipe(id="r1", boil_time=0)

    def test_ingredient_helpers(self):
        malt = Ingredient(id="m1", name="2-Row", type="malt", ppg=37)
        recipe = Recipe(
            id="r1",
            ingredients=[
                RecipeIngredient(ingredient=malt, amount=10, unit="lb"),
                RecipeIngredient(ingredient=cascade(), amount=1, unit="oz"),
            ],
        )
        assert len(recipe.malts) == 1
        assert len(recipe.hops) == 1
        assert recipe.yeasts == []

    def test_uses_actual_readings(self):
        assert Recipe(id="r1", actual_og=1.050, actual_fg=1.010).uses_actual_readings
        assert not Recipe(id="r1", actual_og=1.050).uses_actual_readings

    def test_is_clone(self):
        assert Recipe(id="r2", parent_recipe_id="r1").is_clone
        assert not Recipe(id="r1").is_clone

    def test_json_round_trip(self):
        recipe = Recipe(
            id="r1",
            name="Pale",
            ingredients=[RecipeIngredient(ingredient=cascade(), amount=1, unit="oz")],
        )
        assert Recipe.model_validate_json(recipe.model_dump_json()) == recipe


class TestBeerStyle:
    """Tests for BeerStyle and StyleMatch."""

    def test_ranges_must_be_ordered(self):
        with pytest.raises(PydanticValidationError):
            BeerStyle(
                name="Bad",
                category="Test",
                og_range=(1.060, 1.040),
                fg_range=(1.008, 1.012),
                abv_range=(4, 5),
                ibu_range=(20, 30),
                srm_range=(3, 6),
            )

    def test_confidence_bounds(self):
        with pytest.raises(PydanticValidationError):
            StyleMatch(style="Stout", confidence=101)
