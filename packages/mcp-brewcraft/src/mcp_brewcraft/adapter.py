"""
Adapter for converting stored BrewCraft documents to brewcraft-common models.
"""

from typing import Any

from brewcraft_common.models import Ingredient, Recipe, RecipeIngredient


def _rename(data: dict[str, Any], mapping: dict[str, str]) -> dict[str, Any]:
    """Keep mapped keys with non-null values, renamed."""
    return {mapping[k]: v for k, v in data.items() if k in mapping and v is not None}


def _invert(mapping: dict[str, str]) -> dict[str, str]:
    return {v: k for k, v in mapping.items()}


class RecipeDocumentAdapter:
    """
    Converts between models and the camelCase document shape used by the
    JSON files and the remote document store.

    Null fields are omitted from documents and datetimes are written as
    ISO-8601 strings. Unknown document keys (such as a stored ``actualABV``)
    are ignored on read.
    """

    INGREDIENT_FIELDS = {
        "id": "id",
        "name": "name",
        "type": "type",
        "lovibond": "lovibond",
        "ppg": "ppg",
        "alpha_acid": "alphaAcid",
        "attenuation": "attenuation",
        "flocculation": "flocculation",
        "temp_range": "tempRange",
    }

    LINE_FIELDS = {
        "ingredient": "ingredient",
        "amount": "amount",
        "unit": "unit",
        "boil_time": "boilTime",
        "hop_use": "hopUse",
        "custom_alpha_acid": "customAlphaAcid",
        "dry_hop_days": "dryHopDays",
    }

    RECIPE_FIELDS = {
        "id": "id",
        "name": "name",
        "style": "style",
        "batch_size": "batchSize",
        "boil_time": "boilTime",
        "ingredients": "ingredients",
        "steps": "steps",
        "mash_steps": "mashSteps",
        "brew_date": "brewDate",
        "yeast_pitch_date": "yeastPitchDate",
        "bottling_date": "bottlingDate",
        "final_yield": "finalYield",
        "process_notes": "processNotes",
        "original_gravity": "originalGravity",
        "final_gravity": "finalGravity",
        "abv": "abv",
        "ibu": "ibu",
        "srm": "srm",
        "calories_per_12oz": "caloriesPer12oz",
        "carbs_per_12oz": "carbsPer12oz",
        "actual_og": "actualOG",
        "actual_fg": "actualFG",
        "parent_recipe_id": "parentRecipeId",
        "parent_recipe_name": "parentRecipeName",
        "clone_ids": "cloneIds",
        "is_favorite": "isFavorite",
        "created_at": "createdAt",
        "updated_at": "updatedAt",
    }

    # Ingredients

    def ingredient_to_document(self, ingredient: Ingredient) -> dict[str, Any]:
        """Convert an ingredient to its document form."""
        data = ingredient.model_dump(mode="json", exclude_none=True)
        return _rename(data, self.INGREDIENT_FIELDS)

    def to_ingredient(self, raw: dict[str, Any]) -> Ingredient:
        """
        Convert an ingredient document to an Ingredient.

        Args:
            raw: Stored ingredient document

        Returns:
            Ingredient
        """
        return Ingredient.model_validate(_rename(raw, _invert(self.INGREDIENT_FIELDS)))

    # Recipes

    def to_document(self, recipe: Recipe) -> dict[str, Any]:
        """
        Convert a recipe to its document form.

        Args:
            recipe: Recipe to store

        Returns:
            camelCase document with nulls omitted
        """
        doc = _rename(recipe.model_dump(mode="json", exclude_none=True), self.RECIPE_FIELDS)
        doc["ingredients"] = [self._line_to_document(line) for line in recipe.ingredients]
        return doc

    def to_recipe(self, raw: dict[str, Any]) -> Recipe:
        """
        Convert a stored recipe document to a Recipe.

        Args:
            raw: Stored recipe document

        Returns:
            Recipe
        """
        data = _rename(raw, _invert(self.RECIPE_FIELDS))
        data["ingredients"] = [
            self._line_from_document(line) for line in raw.get("ingredients", [])
        ]
        return Recipe.model_validate(data)

    def _line_to_document(self, line: RecipeIngredient) -> dict[str, Any]:
        doc = _rename(line.model_dump(mode="json", exclude_none=True), self.LINE_FIELDS)
        doc["ingredient"] = self.ingredient_to_document(line.ingredient)
        return doc

    def _line_from_document(self, raw: dict[str, Any]) -> RecipeIngredient:
        data = _rename(raw, _invert(self.LINE_FIELDS))
        data["ingredient"] = self.to_ingredient(raw.get("ingredient", {}))
        return RecipeIngredient.model_validate(data)
