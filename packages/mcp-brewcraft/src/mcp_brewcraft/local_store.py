"""
Local JSON file storage for recipes and ingredients.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from brewcraft_common.catalog import default_catalog
from brewcraft_common.models import Ingredient, Recipe

from mcp_brewcraft.adapter import RecipeDocumentAdapter


logger = logging.getLogger(__name__)

RECIPES_FILE = "recipes.json"
INGREDIENTS_FILE = "ingredients.json"
CUSTOM_INGREDIENTS_FILE = "custom-ingredients.json"
MIGRATION_MARKER = ".ingredients-migrated"


class LocalStore:
    """
    Recipe and ingredient store backed by JSON files in one directory.

    The ingredient library is seeded from the default catalog the first
    time it is read; a marker file records that so a library the user has
    trimmed is not re-seeded. Files that cannot be parsed load as empty.
    File access runs in a worker thread so the event loop is not blocked.
    """

    def __init__(self, data_dir: Path | str, adapter: RecipeDocumentAdapter | None = None):
        """
        Initialize the local store.

        Args:
            data_dir: Directory holding the JSON files (created on first write)
            adapter: Document adapter, a default one when omitted
        """
        self.data_dir = Path(data_dir)
        self.adapter = adapter or RecipeDocumentAdapter()

    # File helpers

    def _read(self, filename: str) -> list[dict[str, Any]]:
        path = self.data_dir / filename
        if not path.exists():
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable %s: %s", path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring %s: expected a JSON list", path)
            return []
        return data

    def _write(self, filename: str, documents: list[dict[str, Any]]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.data_dir / filename
        path.write_text(json.dumps(documents, indent=2, ensure_ascii=False), encoding="utf-8")

    def _seed_ingredients(self) -> None:
        marker = self.data_dir / MIGRATION_MARKER
        if marker.exists():
            return

        defaults = [
            self.adapter.ingredient_to_document(i) for i in default_catalog().ingredients
        ]
        self._write(INGREDIENTS_FILE, defaults)
        marker.write_text("true", encoding="utf-8")
        logger.info("Seeded %d default ingredients into %s", len(defaults), self.data_dir)

    @staticmethod
    def _upsert(documents: list[dict[str, Any]], document: dict[str, Any]) -> list[dict[str, Any]]:
        for index, existing in enumerate(documents):
            if existing.get("id") == document["id"]:
                documents[index] = document
                return documents
        documents.append(document)
        return documents

    def _save(self, filename: str, document: dict[str, Any]) -> None:
        self._write(filename, self._upsert(self._read(filename), document))

    def _delete(self, filename: str, document_id: str) -> None:
        self._write(filename, [d for d in self._read(filename) if d.get("id") != document_id])

    # Recipes

    async def list_recipes(self) -> list[Recipe]:
        documents = await asyncio.to_thread(self._read, RECIPES_FILE)
        return [self.adapter.to_recipe(doc) for doc in documents]

    async def get_recipe(self, recipe_id: str) -> Recipe | None:
        return next((r for r in await self.list_recipes() if r.id == recipe_id), None)

    async def save_recipe(self, recipe: Recipe) -> None:
        await asyncio.to_thread(self._save, RECIPES_FILE, self.adapter.to_document(recipe))
        logger.info("Saved recipe %s (%s)", recipe.id, recipe.name)

    async def delete_recipe(self, recipe_id: str) -> None:
        await asyncio.to_thread(self._delete, RECIPES_FILE, recipe_id)
        logger.info("Deleted recipe %s", recipe_id)

    # Ingredients

    async def list_ingredients(self) -> list[Ingredient]:
        await asyncio.to_thread(self._seed_ingredients)
        documents = await asyncio.to_thread(self._read, INGREDIENTS_FILE)
        return [self.adapter.to_ingredient(doc) for doc in documents]

    async def save_ingredient(self, ingredient: Ingredient) -> None:
        await asyncio.to_thread(self._seed_ingredients)
        document = self.adapter.ingredient_to_document(ingredient)
        await asyncio.to_thread(self._save, INGREDIENTS_FILE, document)
        logger.info("Saved ingredient %s (%s)", ingredient.id, ingredient.name)

    async def delete_ingredient(self, ingredient_id: str) -> None:
        await asyncio.to_thread(self._seed_ingredients)
        await asyncio.to_thread(self._delete, INGREDIENTS_FILE, ingredient_id)
        logger.info("Deleted ingredient %s", ingredient_id)

    async def list_custom_ingredients(self) -> list[Ingredient]:
        documents = await asyncio.to_thread(self._read, CUSTOM_INGREDIENTS_FILE)
        return [self.adapter.to_ingredient(doc) for doc in documents]

    async def save_custom_ingredient(self, ingredient: Ingredient) -> None:
        document = self.adapter.ingredient_to_document(ingredient)
        await asyncio.to_thread(self._save, CUSTOM_INGREDIENTS_FILE, document)
        logger.info("Saved custom ingredient %s (%s)", ingredient.id, ingredient.name)

    async def delete_custom_ingredient(self, ingredient_id: str) -> None:
        await asyncio.to_thread(self._delete, CUSTOM_INGREDIENTS_FILE, ingredient_id)
        logger.info("Deleted custom ingredient %s", ingredient_id)
