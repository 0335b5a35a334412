"""
BrewCraft service layer.

Ties the calculation engine, style matcher and recipe lifecycle helpers
to a recipe store and an ingredient store. The MCP tools are thin wrappers
around this class.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from pydantic import ValidationError as ModelValidationError

from brewcraft_common import process
from brewcraft_common import recipes as lifecycle
from brewcraft_common.calculations import (
    calculate_abv,
    calculate_calories,
    calculate_carbs,
    calculate_recipe_values,
    resolve_display_values,
    round_half_up,
    srm_to_color,
)
from brewcraft_common.catalog import BrewingCatalog, create_custom_ingredient, default_catalog
from brewcraft_common.exceptions import NotFoundError, ValidationError
from brewcraft_common.models import (
    BeerStyle,
    DerivedValues,
    DisplayValues,
    HopUse,
    Ingredient,
    IngredientType,
    Recipe,
    RecipeIngredient,
    StyleMatch,
    Unit,
    YieldType,
)
from brewcraft_common.priming import PrimingResult, calculate_priming_sugar
from brewcraft_common.protocols import IngredientStore, RecipeStore
from brewcraft_common.styles import match_styles

from mcp_brewcraft.client import DocumentStoreClient
from mcp_brewcraft.config import BrewCraftConfig
from mcp_brewcraft.local_store import LocalStore
from mcp_brewcraft.remote_store import RemoteStore


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BrewCraftService:
    """
    Recipe, ingredient and calculation operations over pluggable storage.

    Args:
        store: Where recipes are kept
        ingredient_store: Where the ingredient library and custom ingredients are kept
        catalog: Style table (and fallback ingredients); the default catalog when omitted
        clock: Returns the current time; stamps saves and generates ids
    """

    def __init__(
        self,
        store: RecipeStore,
        ingredient_store: IngredientStore,
        catalog: BrewingCatalog | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.store = store
        self.ingredient_store = ingredient_store
        self.base_catalog = catalog or default_catalog()
        self.clock = clock

    @classmethod
    def from_config(cls, config: BrewCraftConfig) -> "BrewCraftService":
        """Build a service on the storage backend the configuration selects."""
        if config.storage == "remote":
            store = RemoteStore(DocumentStoreClient(config))
        else:
            store = LocalStore(config.data_dir)
        return cls(store, store)

    # Recipes

    async def list_recipes(self, favorites_only: bool = False) -> list[Recipe]:
        recipes = await self.store.list_recipes()
        if favorites_only:
            return [r for r in recipes if r.is_favorite]
        return recipes

    async def get_recipe(self, recipe_id: str) -> Recipe:
        """
        Get a recipe by id.

        Raises:
            NotFoundError: If no recipe has this id
        """
        recipe = await self.store.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError(f"Recipe '{recipe_id}' not found")
        return recipe

    async def create_recipe(
        self,
        name: str,
        style: str | None = None,
        batch_size: float = lifecycle.DEFAULT_BATCH_SIZE,
        boil_time: int = lifecycle.DEFAULT_BOIL_TIME,
    ) -> Recipe:
        blank = lifecycle.new_recipe(self.clock(), name=name)
        recipe = Recipe.model_validate(
            {
                **blank.model_dump(),
                "style": style,
                "batch_size": batch_size,
                "boil_time": boil_time,
            }
        )
        return await self.save_recipe(recipe)

    async def save_recipe(self, recipe: Recipe) -> Recipe:
        """Attach fresh derived values and store the recipe."""
        saved = lifecycle.prepare_for_save(recipe, self.clock())
        await self.store.save_recipe(saved)
        return saved

    async def delete_recipe(self, recipe_id: str) -> None:
        await self.get_recipe(recipe_id)
        await self.store.delete_recipe(recipe_id)

    async def add_recipe_ingredient(
        self,
        recipe_id: str,
        ingredient: str,
        amount: float,
        unit: Unit | str,
        boil_time: int | None = None,
        hop_use: HopUse | str | None = None,
        custom_alpha_acid: float | None = None,
        dry_hop_days: int | None = None,
    ) -> Recipe:
        """
        Add an ingredient line to a recipe.

        Args:
            recipe_id: Recipe to change
            ingredient: Ingredient id, or a name resolved by fuzzy matching
            amount: Quantity in ``unit``
            unit: lb, oz, g, kg or packet
            boil_time: Minutes in the boil (hops)
            hop_use: boil, whirlpool or dry-hop; hops default to boil
            custom_alpha_acid: Batch-specific alpha acid (hops)
            dry_hop_days: Dry hop contact time (hops)

        Raises:
            NotFoundError: If the recipe does not exist
            MatchingError: If the ingredient cannot be resolved
        """
        recipe = await self.get_recipe(recipe_id)
        catalog = await self.catalog()
        resolved = catalog.get_ingredient(ingredient) or catalog.find_ingredient(ingredient)

        if resolved.type == IngredientType.HOP and hop_use is None:
            hop_use = HopUse.BOIL

        line = RecipeIngredient(
            ingredient=resolved,
            amount=amount,
            unit=unit,
            boil_time=boil_time,
            hop_use=hop_use,
            custom_alpha_acid=custom_alpha_acid,
            dry_hop_days=dry_hop_days,
        )
        updated = recipe.model_copy(update={"ingredients": [*recipe.ingredients, line]})
        return await self.save_recipe(updated)

    async def remove_recipe_ingredient(self, recipe_id: str, index: int) -> Recipe:
        """
        Remove the ingredient line at ``index``.

        Raises:
            ValidationError: If the index is out of range
        """
        recipe = await self.get_recipe(recipe_id)
        if not 0 <= index < len(recipe.ingredients):
            raise ValidationError(
                f"Recipe '{recipe_id}' has no ingredient line {index}"
            )
        ingredients = [line for i, line in enumerate(recipe.ingredients) if i != index]
        return await self.save_recipe(recipe.model_copy(update={"ingredients": ingredients}))

    async def record_readings(
        self,
        recipe_id: str,
        actual_og: float | None = None,
        actual_fg: float | None = None,
    ) -> Recipe:
        """Store measured gravities on a recipe; omitted readings are kept."""
        recipe = await self.get_recipe(recipe_id)
        updates: dict[str, Any] = {}
        if actual_og is not None:
            updates["actual_og"] = actual_og
        if actual_fg is not None:
            updates["actual_fg"] = actual_fg
        updated = Recipe.model_validate({**recipe.model_dump(), **updates})
        return await self.save_recipe(updated)

    async def duplicate_recipe(self, recipe_id: str) -> Recipe:
        recipe = await self.get_recipe(recipe_id)
        return await self.save_recipe(lifecycle.duplicate_recipe(recipe, self.clock()))

    async def clone_recipe(self, recipe_id: str) -> Recipe:
        """Clone a recipe and record the clone on its parent."""
        recipe = await self.get_recipe(recipe_id)
        clone, parent = lifecycle.clone_recipe(recipe, self.clock())
        await self.store.save_recipe(parent)
        return await self.save_recipe(clone)

    async def promote_to_master(self, recipe_id: str) -> Recipe:
        """
        Promote a clone to be the master recipe of its family.

        Raises:
            ValidationError: If the recipe is not a clone
        """
        recipe = await self.get_recipe(recipe_id)
        if recipe.parent_recipe_id is None:
            raise ValidationError(f"Recipe '{recipe_id}' is not a clone")

        parent = await self.get_recipe(recipe.parent_recipe_id)
        siblings = []
        for sibling_id in parent.clone_ids:
            if sibling_id == recipe.id:
                continue
            sibling = await self.store.get_recipe(sibling_id)
            if sibling is not None:
                siblings.append(sibling)

        promoted, *others = lifecycle.promote_to_master(recipe, parent, siblings, self.clock())
        for other in others:
            await self.store.save_recipe(other)
        await self.store.save_recipe(promoted)
        logger.info("Promoted %s over %s", promoted.id, parent.id)
        return promoted

    async def toggle_favorite(self, recipe_id: str) -> Recipe:
        recipe = await self.get_recipe(recipe_id)
        updated = lifecycle.toggle_favorite(recipe, self.clock())
        await self.store.save_recipe(updated)
        return updated

    # Calculations

    async def calculate(self, recipe_id: str) -> DerivedValues:
        return calculate_recipe_values(await self.get_recipe(recipe_id))

    async def display_values(self, recipe_id: str) -> DisplayValues:
        return resolve_display_values(await self.get_recipe(recipe_id))

    async def match_styles(self, recipe_id: str, limit: int = 5) -> list[StyleMatch]:
        recipe = await self.get_recipe(recipe_id)
        return match_styles(recipe, self.base_catalog, limit=limit)

    def list_styles(self, category: str | None = None) -> list[BeerStyle]:
        if category:
            return self.base_catalog.styles_in_category(category)
        return list(self.base_catalog.styles)

    def get_style(self, name: str) -> BeerStyle:
        style = self.base_catalog.find_style(name)
        if style is None:
            raise NotFoundError(f"Style '{name}' not found")
        return style

    def readings(self, og: float, fg: float) -> dict[str, float]:
        """ABV, calories and carbohydrates from measured gravities."""
        abv = calculate_abv(og, fg)
        return {
            "abv": round_half_up(abv, 1),
            "calories_per_12oz": round_half_up(calculate_calories(og, fg, abv)),
            "carbs_per_12oz": round_half_up(calculate_carbs(og, fg), 1),
        }

    def srm_color(self, srm: float) -> str:
        return srm_to_color(srm)

    def priming_sugar(
        self,
        batch_size: float,
        target_co2: float = 2.4,
        temperature: float = 68.0,
        sugar_type: str = "dextrose",
    ) -> PrimingResult:
        return calculate_priming_sugar(batch_size, target_co2, temperature, sugar_type)

    async def shopping_list(
        self,
        recipe_id: str,
    ) -> dict[IngredientType, list[lifecycle.ShoppingItem]]:
        return lifecycle.shopping_list(await self.get_recipe(recipe_id))

    # Brew day process

    async def _update_process(
        self,
        recipe_id: str,
        change: Callable[..., Recipe],
        *args: Any,
        **kwargs: Any,
    ) -> Recipe:
        """Apply a process helper to a stored recipe and save the result."""
        recipe = await self.get_recipe(recipe_id)
        try:
            updated = change(recipe, *args, now=self.clock(), **kwargs)
        except ModelValidationError as e:
            raise ValidationError(str(e)) from e
        return await self.save_recipe(updated)

    async def add_mash_step(
        self,
        recipe_id: str,
        name: str,
        temperature: float,
        duration: float,
    ) -> Recipe:
        return await self._update_process(
            recipe_id, process.add_mash_step, name, temperature, duration
        )

    async def add_mash_preset(self, recipe_id: str, preset_name: str) -> Recipe:
        """
        Append one of the standard mash rests to a recipe.

        Raises:
            ValidationError: If the preset name is unknown
        """
        return await self._update_process(recipe_id, process.add_mash_preset, preset_name)

    def mash_presets(self) -> list[process.MashPreset]:
        return list(process.MASH_PRESETS)

    async def update_mash_step(self, recipe_id: str, step_id: str, **changes: Any) -> Recipe:
        return await self._update_process(recipe_id, process.update_mash_step, step_id, **changes)

    async def remove_mash_step(self, recipe_id: str, step_id: str) -> Recipe:
        return await self._update_process(recipe_id, process.remove_mash_step, step_id)

    async def add_brewing_step(
        self,
        recipe_id: str,
        name: str,
        duration: float = 0,
        temperature: float | None = None,
        notes: str = "",
    ) -> Recipe:
        return await self._update_process(
            recipe_id,
            process.add_brewing_step,
            name,
            duration=duration,
            temperature=temperature,
            notes=notes,
        )

    async def complete_brewing_step(
        self,
        recipe_id: str,
        step_id: str,
        completed: bool = True,
    ) -> Recipe:
        return await self._update_process(
            recipe_id, process.complete_brewing_step, step_id, completed=completed
        )

    async def remove_brewing_step(self, recipe_id: str, step_id: str) -> Recipe:
        return await self._update_process(recipe_id, process.remove_brewing_step, step_id)

    async def set_process_dates(self, recipe_id: str, **dates: datetime | None) -> Recipe:
        """
        Set or clear brew_date, yeast_pitch_date and bottling_date.

        Raises:
            ValidationError: For any other date name
        """
        return await self._update_process(recipe_id, process.set_process_dates, **dates)

    async def set_process_notes(self, recipe_id: str, notes: str) -> Recipe:
        return await self._update_process(recipe_id, process.set_process_notes, notes)

    async def set_final_yield(
        self,
        recipe_id: str,
        yield_type: YieldType | str,
        amount: float,
    ) -> Recipe:
        return await self._update_process(recipe_id, process.set_yield, yield_type, amount)

    async def remove_final_yield(self, recipe_id: str, yield_type: YieldType | str) -> Recipe:
        return await self._update_process(recipe_id, process.remove_yield, yield_type)

    async def final_yield_summary(self, recipe_id: str) -> dict[str, Any]:
        """Packaged yield per type plus the total in gallons."""
        recipe = await self.get_recipe(recipe_id)
        return {
            "entries": {e.type.value: e.amount for e in recipe.final_yield},
            "total_gallons": round_half_up(lifecycle.total_yield_gallons(recipe.final_yield), 2),
            "batch_size": recipe.batch_size,
        }

    # Ingredients

    async def catalog(self) -> BrewingCatalog:
        """The style table plus the stored library and custom ingredients."""
        library = await self.ingredient_store.list_ingredients()
        custom = await self.ingredient_store.list_custom_ingredients()
        ingredients = tuple(library) if library else self.base_catalog.ingredients
        return BrewingCatalog(
            styles=self.base_catalog.styles,
            ingredients=ingredients,
        ).with_ingredients(custom)

    async def list_ingredients(
        self,
        ingredient_type: IngredientType | str | None = None,
    ) -> list[Ingredient]:
        catalog = await self.catalog()
        if ingredient_type is None:
            return list(catalog.ingredients)
        return catalog.ingredients_by_type(ingredient_type)

    async def search_ingredients(
        self,
        query: str,
        ingredient_type: IngredientType | str | None = None,
        limit: int = 10,
    ) -> list[tuple[Ingredient, float]]:
        catalog = await self.catalog()
        return catalog.search_ingredients(query, ingredient_type=ingredient_type, limit=limit)

    async def add_custom_ingredient(
        self,
        name: str,
        ingredient_type: IngredientType | str,
        **attributes: Any,
    ) -> Ingredient:
        """
        Create and store a user-defined ingredient.

        Raises:
            ValidationError: If the name is blank
        """
        if not name or not name.strip():
            raise ValidationError("Ingredient name must not be empty")
        ingredient = create_custom_ingredient(name, ingredient_type, self.clock(), **attributes)
        await self.ingredient_store.save_custom_ingredient(ingredient)
        return ingredient

    async def delete_custom_ingredient(self, ingredient_id: str) -> None:
        """
        Delete a user-defined ingredient.

        Raises:
            NotFoundError: If no custom ingredient has this id
        """
        custom = await self.ingredient_store.list_custom_ingredients()
        if not any(i.id == ingredient_id for i in custom):
            raise NotFoundError(f"Custom ingredient '{ingredient_id}' not found")
        await self.ingredient_store.delete_custom_ingredient(ingredient_id)

    async def update_custom_ingredient(self, ingredient_id: str, **attributes: Any) -> Ingredient:
        """
        Edit a user-defined ingredient, keeping its id.

        Recipes that already use it keep the copy they were built with.

        Raises:
            NotFoundError: If no custom ingredient has this id
            ValidationError: If the edited ingredient is invalid
        """
        custom = await self.ingredient_store.list_custom_ingredients()
        existing = next((i for i in custom if i.id == ingredient_id), None)
        if existing is None:
            raise NotFoundError(f"Custom ingredient '{ingredient_id}' not found")
        updated = self._edit_ingredient(existing, attributes)
        await self.ingredient_store.save_custom_ingredient(updated)
        return updated

    async def update_library_ingredient(self, ingredient_id: str, **attributes: Any) -> Ingredient:
        """
        Edit an ingredient of the base library, keeping its id.

        Raises:
            NotFoundError: If the library has no ingredient with this id
            ValidationError: If the edited ingredient is invalid
        """
        existing = await self._library_ingredient(ingredient_id)
        updated = self._edit_ingredient(existing, attributes)
        await self.ingredient_store.save_ingredient(updated)
        logger.info("Updated library ingredient %s", ingredient_id)
        return updated

    async def delete_library_ingredient(self, ingredient_id: str) -> None:
        await self._library_ingredient(ingredient_id)
        await self.ingredient_store.delete_ingredient(ingredient_id)
        logger.info("Deleted library ingredient %s", ingredient_id)

    async def _library_ingredient(self, ingredient_id: str) -> Ingredient:
        library = await self.ingredient_store.list_ingredients() or self.base_catalog.ingredients
        existing = next((i for i in library if i.id == ingredient_id), None)
        if existing is None:
            raise NotFoundError(f"Library ingredient '{ingredient_id}' not found")
        return existing

    @staticmethod
    def _edit_ingredient(existing: Ingredient, attributes: dict[str, Any]) -> Ingredient:
        if "id" in attributes or "type" in attributes:
            raise ValidationError("An ingredient's id and type cannot be changed")
        if "name" in attributes:
            name = attributes["name"]
            if not name or not name.strip():
                raise ValidationError("Ingredient name must not be empty")
            attributes = {**attributes, "name": name.strip()}
        try:
            return Ingredient.model_validate({**existing.model_dump(), **attributes})
        except ModelValidationError as e:
            raise ValidationError(str(e)) from e
