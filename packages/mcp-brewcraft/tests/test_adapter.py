"""
Tests for the recipe document adapter.
"""

from datetime import datetime, timezone

from brewcraft_common.catalog import default_catalog
from brewcraft_common.models import (
    BrewingStep,
    HopUse,
    IngredientType,
    Recipe,
    RecipeIngredient,
    Unit,
    YieldEntry,
)

from mcp_brewcraft.adapter import RecipeDocumentAdapter


BREW_DAY = datetime(2024, 5, 4, 9, 30, tzinfo=timezone.utc)


def sample_recipe() -> Recipe:
    catalog = default_catalog()
    return Recipe(
        id="recipe-1",
        name="Citra Pale",
        style="American Pale Ale",
        batch_size=5.5,
        ingredients=[
            RecipeIngredient(ingredient=catalog.get_ingredient("m1"), amount=10, unit=Unit.LB),
            RecipeIngredient(
                ingredient=catalog.get_ingredient("h4"),
                amount=1,
                unit=Unit.OZ,
                boil_time=15,
                hop_use=HopUse.BOIL,
                custom_alpha_acid=13.1,
            ),
            RecipeIngredient(ingredient=catalog.get_ingredient("y1"), amount=1, unit="packet"),
        ],
        steps=[BrewingStep(id="s1", name="Mash in", duration=60, temperature=152)],
        final_yield=[YieldEntry(id="y", type="bottles-12oz", amount=48)],
        brew_date=BREW_DAY,
        actual_og=1.054,
        parent_recipe_id="recipe-0",
        clone_ids=["recipe-2"],
        is_favorite=True,
        created_at=BREW_DAY,
    )


class TestRecipeDocuments:
    """Tests for recipe conversion."""

    def test_camel_case_keys(self):
        doc = RecipeDocumentAdapter().to_document(sample_recipe())
        assert doc["batchSize"] == 5.5
        assert doc["boilTime"] == 60
        assert doc["actualOG"] == 1.054
        assert doc["parentRecipeId"] == "recipe-0"
        assert doc["cloneIds"] == ["recipe-2"]
        assert doc["isFavorite"] is True
        assert doc["finalYield"] == [{"id": "y", "type": "bottles-12oz", "amount": 48.0}]

    def test_nulls_omitted(self):
        doc = RecipeDocumentAdapter().to_document(sample_recipe())
        assert "actualFG" not in doc
        assert "bottlingDate" not in doc
        assert "timestamp" not in doc["steps"][0]

    def test_dates_iso(self):
        doc = RecipeDocumentAdapter().to_document(sample_recipe())
        assert datetime.fromisoformat(doc["brewDate"].replace("Z", "+00:00")) == BREW_DAY

    def test_ingredient_lines(self):
        doc = RecipeDocumentAdapter().to_document(sample_recipe())
        hop = doc["ingredients"][1]
        assert hop["boilTime"] == 15
        assert hop["hopUse"] == "boil"
        assert hop["customAlphaAcid"] == 13.1
        assert hop["ingredient"]["alphaAcid"] == 12
        yeast = doc["ingredients"][2]["ingredient"]
        assert yeast["tempRange"] == [59, 75]

    def test_round_trip(self):
        adapter = RecipeDocumentAdapter()
        recipe = sample_recipe()
        assert adapter.to_recipe(adapter.to_document(recipe)) == recipe

    def test_stored_document(self):
        raw = {
            "id": "1700000000000",
            "name": "Old Stout",
            "batchSize": 5,
            "boilTime": 60,
            "ingredients": [
                {
                    "ingredient": {
                        "id": "m20",
                        "name": "Roasted Barley",
                        "type": "malt",
                        "lovibond": 500,
                        "ppg": 25,
                    },
                    "amount": 1,
                    "unit": "lb",
                }
            ],
            "steps": [],
            "mashSteps": [],
            "actualOG": 1.048,
            "actualFG": 1.012,
            "actualABV": 4.7,
            "createdAt": "2023-11-14T22:13:20.000Z",
            "updatedAt": "2023-11-14T22:13:20.000Z",
        }
        recipe = RecipeDocumentAdapter().to_recipe(raw)
        assert recipe.name == "Old Stout"
        assert recipe.ingredients[0].type == IngredientType.MALT
        assert recipe.uses_actual_readings
        assert recipe.created_at.year == 2023


class TestIngredientDocuments:
    """Tests for ingredient conversion."""

    def test_hop(self):
        doc = RecipeDocumentAdapter().ingredient_to_document(
            default_catalog().get_ingredient("h1")
        )
        assert doc == {"id": "h1", "name": "Cascade", "type": "hop", "alphaAcid": 5.5}

    def test_round_trip(self):
        adapter = RecipeDocumentAdapter()
        yeast = default_catalog().get_ingredient("y1")
        assert adapter.to_ingredient(adapter.ingredient_to_document(yeast)) == yeast
