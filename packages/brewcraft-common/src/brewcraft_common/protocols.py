"""
Storage protocols for BrewCraft persistence backends.

Both the local JSON store and the remote document store implement these,
so the service layer never knows where recipes live. Writes are
last-write-wins with no coordination between clients.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from brewcraft_common.models import Ingredient, Recipe


@runtime_checkable
class RecipeStore(Protocol):
    """
    Protocol for systems that persist recipes.

    Implemented by: LocalStore, RemoteStore
    """

    @abstractmethod
    async def list_recipes(self) -> list[Recipe]:
        """
        List all stored recipes.

        Returns:
            Recipes in storage order
        """
        ...

    @abstractmethod
    async def get_recipe(self, recipe_id: str) -> Recipe | None:
        """
        Get a recipe by id.

        Returns:
            Recipe or None if not found
        """
        ...

    @abstractmethod
    async def save_recipe(self, recipe: Recipe) -> None:
        """
        Insert a recipe, or replace the stored one with the same id.
        """
        ...

    @abstractmethod
    async def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe. Unknown ids are ignored."""
        ...


@runtime_checkable
class IngredientStore(Protocol):
    """
    Protocol for systems that persist the ingredient library.

    Implemented by: LocalStore, RemoteStore
    """

    @abstractmethod
    async def list_ingredients(self) -> list[Ingredient]:
        """
        List the ingredient library, defaults included.
        """
        ...

    @abstractmethod
    async def save_ingredient(self, ingredient: Ingredient) -> None:
        """
        Insert a library ingredient, or replace the one with the same id.
        """
        ...

    @abstractmethod
    async def delete_ingredient(self, ingredient_id: str) -> None:
        """Delete a library ingredient. Unknown ids are ignored."""
        ...

    @abstractmethod
    async def list_custom_ingredients(self) -> list[Ingredient]:
        """
        List ingredients the user created.
        """
        ...

    @abstractmethod
    async def save_custom_ingredient(self, ingredient: Ingredient) -> None:
        """
        Insert a custom ingredient, or replace the one with the same id.
        """
        ...

    @abstractmethod
    async def delete_custom_ingredient(self, ingredient_id: str) -> None:
        """Delete a custom ingredient. Unknown ids are ignored."""
        ...
