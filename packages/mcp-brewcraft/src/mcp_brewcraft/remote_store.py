"""
Recipe and ingredient store backed by the remote document store.
"""

import logging

from brewcraft_common.catalog import default_catalog
from brewcraft_common.models import Ingredient, Recipe

from mcp_brewcraft.adapter import RecipeDocumentAdapter
from mcp_brewcraft.client import DocumentStoreClient


logger = logging.getLogger(__name__)

RECIPES = "recipes"
INGREDIENTS = "ingredients"
CUSTOM_INGREDIENTS = "custom-ingredients"


class RemoteStore:
    """
    Store that keeps every recipe and ingredient as a document.

    Writes are last-write-wins; concurrent editors overwrite each other.
    An empty ingredient collection reads as the default catalog and is
    seeded with it before the first library change.
    """

    def __init__(
        self,
        client: DocumentStoreClient,
        adapter: RecipeDocumentAdapter | None = None,
    ):
        self.client = client
        self.adapter = adapter or RecipeDocumentAdapter()

    # Recipes

    async def list_recipes(self) -> list[Recipe]:
        documents = await self.client.list_documents(RECIPES)
        return [self.adapter.to_recipe(doc) for doc in documents]

    async def get_recipe(self, recipe_id: str) -> Recipe | None:
        document = await self.client.get_document(RECIPES, recipe_id)
        return self.adapter.to_recipe(document) if document else None

    async def save_recipe(self, recipe: Recipe) -> None:
        await self.client.put_document(RECIPES, recipe.id, self.adapter.to_document(recipe))
        logger.info("Saved recipe %s (%s) to %s", recipe.id, recipe.name, self.client.base_url)

    async def delete_recipe(self, recipe_id: str) -> None:
        await self.client.delete_document(RECIPES, recipe_id)
        logger.info("Deleted recipe %s", recipe_id)

    # Ingredients

    async def list_ingredients(self) -> list[Ingredient]:
        documents = await self.client.list_documents(INGREDIENTS)
        if not documents:
            return list(default_catalog().ingredients)
        return [self.adapter.to_ingredient(doc) for doc in documents]

    async def _seed_library(self) -> None:
        """Copy the default ingredients into an empty library before changing it."""
        if await self.client.list_documents(INGREDIENTS):
            return
        defaults = default_catalog().ingredients
        for ingredient in defaults:
            await self.client.put_document(
                INGREDIENTS,
                ingredient.id,
                self.adapter.ingredient_to_document(ingredient),
            )
        logger.info("Seeded %d default ingredients into %s", len(defaults), self.client.base_url)

    async def save_ingredient(self, ingredient: Ingredient) -> None:
        await self._seed_library()
        await self.client.put_document(
            INGREDIENTS,
            ingredient.id,
            self.adapter.ingredient_to_document(ingredient),
        )
        logger.info("Saved ingredient %s (%s)", ingredient.id, ingredient.name)

    async def delete_ingredient(self, ingredient_id: str) -> None:
        await self._seed_library()
        await self.client.delete_document(INGREDIENTS, ingredient_id)
        logger.info("Deleted ingredient %s", ingredient_id)

    async def list_custom_ingredients(self) -> list[Ingredient]:
        documents = await self.client.list_documents(CUSTOM_INGREDIENTS)
        return [self.adapter.to_ingredient(doc) for doc in documents]

    async def save_custom_ingredient(self, ingredient: Ingredient) -> None:
        await self.client.put_document(
            CUSTOM_INGREDIENTS,
            ingredient.id,
            self.adapter.ingredient_to_document(ingredient),
        )
        logger.info("Saved custom ingredient %s (%s)", ingredient.id, ingredient.name)

    async def delete_custom_ingredient(self, ingredient_id: str) -> None:
        await self.client.delete_document(CUSTOM_INGREDIENTS, ingredient_id)
        logger.info("Deleted custom ingredient %s", ingredient_id)
