"""
MCP tool definitions for BrewCraft.
"""

from dataclasses import asdict
from datetime import datetime

from fastmcp import FastMCP

from brewcraft_common.exceptions import ValidationError
from brewcraft_common.models import CUSTOM_INGREDIENT_PREFIX, Ingredient, Recipe
from brewcraft_common.priming import CARBONATION_LEVELS

from mcp_brewcraft.config import get_config
from mcp_brewcraft.service import BrewCraftService


def _service() -> BrewCraftService:
    return BrewCraftService.from_config(get_config())


def register_tools(mcp: FastMCP) -> None:
    """Register all BrewCraft MCP tools."""

    # Recipes

    @mcp.tool()
    async def list_recipes(favorites_only: bool = False) -> list[dict]:
        """
        List saved recipes.

        Args:
            favorites_only: Only return recipes marked as favourite

        Returns:
            List of recipe summaries
        """
        recipes = await _service().list_recipes(favorites_only=favorites_only)
        return [_recipe_summary(r) for r in recipes]

    @mcp.tool()
    async def get_recipe(recipe_id: str) -> dict:
        """
        Get a recipe with its display values.

        Measured gravities take precedence over estimates in the
        ``display`` section.

        Args:
            recipe_id: Recipe ID

        Returns:
            Full recipe details
        """
        service = _service()
        recipe = await service.get_recipe(recipe_id)
        result = _recipe_to_dict(recipe)
        result["display"] = (await service.display_values(recipe_id)).model_dump(mode="json")
        return result

    @mcp.tool()
    async def create_recipe(
        name: str,
        style: str | None = None,
        batch_size: float = 5.0,
        boil_time: int = 60,
    ) -> dict:
        """
        Create an empty recipe.

        Args:
            name: Recipe name
            style: Target style label
            batch_size: Batch size in US gallons (default 5)
            boil_time: Boil length in minutes (default 60)

        Returns:
            The new recipe
        """
        recipe = await _service().create_recipe(name, style, batch_size, boil_time)
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def save_recipe(recipe: dict) -> dict:
        """
        Save a full recipe, replacing any recipe with the same ID.

        Derived values (OG, FG, ABV, IBU, SRM, nutrition) are recalculated.

        Args:
            recipe: Recipe object as returned by get_recipe

        Returns:
            The saved recipe
        """
        saved = await _service().save_recipe(Recipe.model_validate(recipe))
        return _recipe_to_dict(saved)

    @mcp.tool()
    async def delete_recipe(recipe_id: str) -> dict:
        """
        Delete a recipe.

        Args:
            recipe_id: Recipe ID

        Returns:
            Confirmation
        """
        await _service().delete_recipe(recipe_id)
        return {"success": True, "recipe_id": recipe_id}

    @mcp.tool()
    async def add_recipe_ingredient(
        recipe_id: str,
        ingredient: str,
        amount: float,
        unit: str,
        boil_time: int | None = None,
        hop_use: str | None = None,
        custom_alpha_acid: float | None = None,
        dry_hop_days: int | None = None,
    ) -> dict:
        """
        Add an ingredient to a recipe.

        Args:
            recipe_id: Recipe ID
            ingredient: Ingredient ID or name (fuzzy matched, e.g. "safale us-05")
            amount: Quantity
            unit: lb, oz, g, kg or packet
            boil_time: Boil minutes for hop additions
            hop_use: boil, whirlpool or dry-hop (hops default to boil)
            custom_alpha_acid: Alpha acid % of this particular hop lot
            dry_hop_days: Dry hop contact time in days

        Returns:
            The updated recipe
        """
        recipe = await _service().add_recipe_ingredient(
            recipe_id,
            ingredient,
            amount,
            unit,
            boil_time=boil_time,
            hop_use=hop_use,
            custom_alpha_acid=custom_alpha_acid,
            dry_hop_days=dry_hop_days,
        )
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def remove_recipe_ingredient(recipe_id: str, index: int) -> dict:
        """
        Remove an ingredient line from a recipe.

        Args:
            recipe_id: Recipe ID
            index: Zero-based position in the recipe's ingredient list

        Returns:
            The updated recipe
        """
        recipe = await _service().remove_recipe_ingredient(recipe_id, index)
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def record_readings(
        recipe_id: str,
        actual_og: float | None = None,
        actual_fg: float | None = None,
    ) -> dict:
        """
        Record measured gravity readings for a brewed recipe.

        Args:
            recipe_id: Recipe ID
            actual_og: Measured original gravity (e.g. 1.052)
            actual_fg: Measured final gravity (e.g. 1.011)

        Returns:
            Display values using the readings
        """
        service = _service()
        await service.record_readings(recipe_id, actual_og, actual_fg)
        return (await service.display_values(recipe_id)).model_dump(mode="json")

    @mcp.tool()
    async def duplicate_recipe(recipe_id: str) -> dict:
        """
        Copy a recipe as a new, unrelated recipe.

        Brew dates, readings and clone links are not copied.

        Args:
            recipe_id: Recipe ID

        Returns:
            The copy
        """
        return _recipe_to_dict(await _service().duplicate_recipe(recipe_id))

    @mcp.tool()
    async def clone_recipe(recipe_id: str) -> dict:
        """
        Clone a recipe as a tracked variation of it.

        Args:
            recipe_id: Recipe ID of the parent

        Returns:
            The clone
        """
        return _recipe_to_dict(await _service().clone_recipe(recipe_id))

    @mcp.tool()
    async def promote_to_master(recipe_id: str) -> dict:
        """
        Make a clone the master recipe of its family.

        Args:
            recipe_id: Recipe ID of the clone

        Returns:
            The promoted recipe
        """
        return _recipe_to_dict(await _service().promote_to_master(recipe_id))

    @mcp.tool()
    async def toggle_favorite(recipe_id: str) -> dict:
        """
        Mark or unmark a recipe as favourite.

        Args:
            recipe_id: Recipe ID

        Returns:
            Recipe summary with the new flag
        """
        return _recipe_summary(await _service().toggle_favorite(recipe_id))

    # Calculations & styles

    @mcp.tool()
    async def calculate_recipe(recipe_id: str) -> dict:
        """
        Estimate OG, FG, ABV, IBU, SRM, calories and carbs for a recipe.

        Args:
            recipe_id: Recipe ID

        Returns:
            Estimated values with the SRM colour swatch
        """
        service = _service()
        values = await service.calculate(recipe_id)
        result = values.model_dump(mode="json")
        result["color"] = service.srm_color(values.srm)
        return result

    @mcp.tool()
    async def match_recipe_styles(recipe_id: str, limit: int = 5) -> list[dict]:
        """
        Find the beer styles a recipe fits best.

        Args:
            recipe_id: Recipe ID
            limit: Number of styles to return (default 5)

        Returns:
            Styles with confidence 0-100 and the parameters that matched
        """
        matches = await _service().match_styles(recipe_id, limit=limit)
        return [m.model_dump(mode="json") for m in matches]

    @mcp.tool()
    async def list_styles(category: str | None = None) -> list[dict]:
        """
        List reference beer styles.

        Args:
            category: Optional category filter (IPA, Stout, Lager, ...)

        Returns:
            Styles with their parameter ranges
        """
        return [s.model_dump(mode="json") for s in _service().list_styles(category)]

    @mcp.tool()
    async def get_style(name: str) -> dict:
        """
        Get one beer style by name.

        Args:
            name: Style name (case-insensitive)

        Returns:
            Style with its parameter ranges
        """
        return _service().get_style(name).model_dump(mode="json")

    @mcp.tool()
    async def calculate_from_readings(og: float, fg: float) -> dict:
        """
        ABV, calories and carbohydrates from measured gravities.

        Args:
            og: Original gravity (e.g. 1.050)
            fg: Final gravity (e.g. 1.010)

        Returns:
            ABV %, calories and carbs (g) per 12 oz
        """
        return _service().readings(og, fg)

    @mcp.tool()
    async def srm_color(srm: float) -> dict:
        """
        Colour swatch for an SRM value.

        Args:
            srm: Colour in SRM

        Returns:
            Hex colour
        """
        return {"srm": srm, "color": _service().srm_color(srm)}

    @mcp.tool()
    async def calculate_priming_sugar(
        batch_size: float,
        target_co2: float = 2.4,
        temperature: float = 68.0,
        sugar_type: str = "dextrose",
    ) -> dict:
        """
        Priming sugar needed for bottle conditioning.

        Args:
            batch_size: Volume being bottled in US gallons
            target_co2: Desired carbonation in volumes of CO2 (default 2.4)
            temperature: Highest beer temperature since fermentation, in F
            sugar_type: dextrose, table, brown, turbinado, belgian, dme,
                honey, maple, molasses or agave

        Returns:
            Sugar amount in ounces and grams plus reference carbonation levels
        """
        result = _service().priming_sugar(batch_size, target_co2, temperature, sugar_type)
        return {
            "sugar": result.sugar.name,
            "ounces": round(result.ounces, 2),
            "grams": round(result.grams, 1),
            "co2_needed": round(result.co2_needed, 2),
            "residual_co2": round(result.residual_co2, 2),
            "carbonation_levels": CARBONATION_LEVELS,
        }

    @mcp.tool()
    async def shopping_list(recipe_id: str) -> dict:
        """
        Shopping list for a recipe, grouped by ingredient type.

        Args:
            recipe_id: Recipe ID

        Returns:
            Items per type in malt, hop, yeast, adjunct order
        """
        groups = await _service().shopping_list(recipe_id)
        return {
            ingredient_type.value: [asdict(item) | {"type": item.type.value} for item in items]
            for ingredient_type, items in groups.items()
        }

    # Brew day process

    @mcp.tool()
    async def list_mash_presets() -> list[dict]:
        """
        Standard mash rests that can be added to a recipe by name.

        Returns:
            Presets with temperature (F), duration (minutes) and purpose
        """
        return [asdict(p) for p in _service().mash_presets()]

    @mcp.tool()
    async def add_mash_step(
        recipe_id: str,
        name: str | None = None,
        temperature: float | None = None,
        duration: float | None = None,
        preset: str | None = None,
    ) -> dict:
        """
        Add a rest to a recipe's mash schedule.

        Either give a preset name (see list_mash_presets) or a name,
        temperature and duration.

        Args:
            recipe_id: Recipe ID
            name: Rest name
            temperature: Rest temperature in F
            duration: Rest length in minutes
            preset: Preset name, e.g. "Single Infusion"

        Returns:
            The updated recipe
        """
        service = _service()
        if preset:
            return _recipe_to_dict(await service.add_mash_preset(recipe_id, preset))
        if name is None or temperature is None or duration is None:
            raise ValidationError("Give a preset, or a name, temperature and duration")
        recipe = await service.add_mash_step(recipe_id, name, temperature, duration)
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def update_mash_step(
        recipe_id: str,
        step_id: str,
        name: str | None = None,
        temperature: float | None = None,
        duration: float | None = None,
    ) -> dict:
        """
        Change a mash rest. Omitted fields are kept.

        Args:
            recipe_id: Recipe ID
            step_id: Mash step ID
            name: New rest name
            temperature: New temperature in F
            duration: New length in minutes

        Returns:
            The updated recipe
        """
        changes = {"name": name, "temperature": temperature, "duration": duration}
        recipe = await _service().update_mash_step(
            recipe_id, step_id, **{k: v for k, v in changes.items() if v is not None}
        )
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def remove_mash_step(recipe_id: str, step_id: str) -> dict:
        """
        Remove a rest from a recipe's mash schedule.

        Args:
            recipe_id: Recipe ID
            step_id: Mash step ID

        Returns:
            The updated recipe
        """
        return _recipe_to_dict(await _service().remove_mash_step(recipe_id, step_id))

    @mcp.tool()
    async def add_brewing_step(
        recipe_id: str,
        name: str,
        duration: float = 0,
        temperature: float | None = None,
        notes: str = "",
    ) -> dict:
        """
        Add a step to a recipe's brew day checklist.

        Args:
            recipe_id: Recipe ID
            name: Step name, e.g. "Heat strike water"
            duration: Minutes
            temperature: Target temperature in F
            notes: Free-form notes

        Returns:
            The updated recipe
        """
        recipe = await _service().add_brewing_step(recipe_id, name, duration, temperature, notes)
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def complete_brewing_step(
        recipe_id: str,
        step_id: str,
        completed: bool = True,
    ) -> dict:
        """
        Tick off a brew day step, or untick it.

        Args:
            recipe_id: Recipe ID
            step_id: Brewing step ID
            completed: False to mark the step not done

        Returns:
            The updated recipe
        """
        recipe = await _service().complete_brewing_step(recipe_id, step_id, completed)
        return _recipe_to_dict(recipe)

    @mcp.tool()
    async def remove_brewing_step(recipe_id: str, step_id: str) -> dict:
        """
        Remove a step from a recipe's brew day checklist.

        Args:
            recipe_id: Recipe ID
            step_id: Brewing step ID

        Returns:
            The updated recipe
        """
        return _recipe_to_dict(await _service().remove_brewing_step(recipe_id, step_id))

    @mcp.tool()
    async def set_process_dates(
        recipe_id: str,
        brew_date: str | None = None,
        yeast_pitch_date: str | None = None,
        bottling_date: str | None = None,
    ) -> dict:
        """
        Set brew, yeast pitch and bottling dates.

        Dates are ISO 8601 strings. Omitted dates are kept; an empty string
        clears one.

        Args:
            recipe_id: Recipe ID
            brew_date: Brew day, e.g. "2024-05-04"
            yeast_pitch_date: When the yeast was pitched
            bottling_date: When the batch was packaged

        Returns:
            The updated recipe
        """
        given = {
            "brew_date": brew_date,
            "yeast_pitch_date": yeast_pitch_date,
            "bottling_date": bottling_date,
        }
        dates = {k: _parse_date(v) for k, v in given.items() if v is not None}
        return _recipe_to_dict(await _service().set_process_dates(recipe_id, **dates))

    @mcp.tool()
    async def set_process_notes(recipe_id: str, notes: str) -> dict:
        """
        Replace a recipe's brew day notes.

        Args:
            recipe_id: Recipe ID
            notes: Notes text; empty clears them

        Returns:
            The updated recipe
        """
        return _recipe_to_dict(await _service().set_process_notes(recipe_id, notes))

    @mcp.tool()
    async def set_final_yield(recipe_id: str, yield_type: str, amount: float) -> dict:
        """
        Record how much a batch packaged, one entry per package type.

        Args:
            recipe_id: Recipe ID
            yield_type: gallons, bottles-22oz, bottles-12oz or cornelius-keg
            amount: Count (or gallons)

        Returns:
            Yield per type and the total in gallons
        """
        service = _service()
        await service.set_final_yield(recipe_id, yield_type, amount)
        return await service.final_yield_summary(recipe_id)

    @mcp.tool()
    async def remove_final_yield(recipe_id: str, yield_type: str) -> dict:
        """
        Remove the yield entry for one package type.

        Args:
            recipe_id: Recipe ID
            yield_type: gallons, bottles-22oz, bottles-12oz or cornelius-keg

        Returns:
            Yield per type and the total in gallons
        """
        service = _service()
        await service.remove_final_yield(recipe_id, yield_type)
        return await service.final_yield_summary(recipe_id)

    # Ingredients

    @mcp.tool()
    async def list_ingredients(ingredient_type: str | None = None) -> list[dict]:
        """
        List the ingredient library, custom ingredients included.

        Args:
            ingredient_type: Optional filter (malt, hop, yeast, adjunct)

        Returns:
            List of ingredients
        """
        ingredients = await _service().list_ingredients(ingredient_type)
        return [_ingredient_to_dict(i) for i in ingredients]

    @mcp.tool()
    async def search_ingredients(
        query: str,
        ingredient_type: str | None = None,
        limit: int = 10,
    ) -> list[dict]:
        """
        Search ingredients by name (fuzzy).

        Args:
            query: Search text
            ingredient_type: Optional filter (malt, hop, yeast, adjunct)
            limit: Maximum results

        Returns:
            Matching ingredients with confidence
        """
        results = await _service().search_ingredients(query, ingredient_type, limit)
        return [
            {**_ingredient_to_dict(i), "match_confidence": confidence}
            for i, confidence in results
        ]

    @mcp.tool()
    async def add_custom_ingredient(
        name: str,
        ingredient_type: str,
        lovibond: float | None = None,
        ppg: float | None = None,
        alpha_acid: float | None = None,
        attenuation: int | None = None,
        flocculation: str | None = None,
        temp_min: float | None = None,
        temp_max: float | None = None,
    ) -> dict:
        """
        Add a custom ingredient to the library.

        Args:
            name: Ingredient name
            ingredient_type: malt, hop, yeast or adjunct
            lovibond: Colour (malts)
            ppg: Extract potential (malts)
            alpha_acid: Alpha acid % (hops)
            attenuation: Apparent attenuation % (yeast)
            flocculation: low, medium or high (yeast)
            temp_min: Lowest fermentation temperature in F (yeast)
            temp_max: Highest fermentation temperature in F (yeast)

        Returns:
            The new ingredient
        """
        attributes = _ingredient_attributes(
            lovibond, ppg, alpha_acid, attenuation, flocculation, temp_min, temp_max
        )
        ingredient = await _service().add_custom_ingredient(name, ingredient_type, **attributes)
        return _ingredient_to_dict(ingredient)

    @mcp.tool()
    async def delete_custom_ingredient(ingredient_id: str) -> dict:
        """
        Delete a custom ingredient.

        Recipes that already use it keep their own copy.

        Args:
            ingredient_id: Custom ingredient ID

        Returns:
            Confirmation
        """
        await _service().delete_custom_ingredient(ingredient_id)
        return {"success": True, "ingredient_id": ingredient_id}

    @mcp.tool()
    async def update_ingredient(
        ingredient_id: str,
        name: str | None = None,
        lovibond: float | None = None,
        ppg: float | None = None,
        alpha_acid: float | None = None,
        attenuation: int | None = None,
        flocculation: str | None = None,
        temp_min: float | None = None,
        temp_max: float | None = None,
    ) -> dict:
        """
        Edit a library or custom ingredient. Omitted fields are kept.

        The ingredient keeps its ID and type. Recipes that already use it
        keep the copy they were built with.

        Args:
            ingredient_id: Ingredient ID
            name: New name
            lovibond: Colour (malts)
            ppg: Extract potential (malts)
            alpha_acid: Alpha acid % (hops)
            attenuation: Apparent attenuation % (yeast)
            flocculation: low, medium or high (yeast)
            temp_min: Lowest fermentation temperature in F (yeast)
            temp_max: Highest fermentation temperature in F (yeast)

        Returns:
            The edited ingredient
        """
        attributes = _ingredient_attributes(
            lovibond, ppg, alpha_acid, attenuation, flocculation, temp_min, temp_max
        )
        if name is not None:
            attributes["name"] = name

        service = _service()
        if ingredient_id.startswith(CUSTOM_INGREDIENT_PREFIX):
            ingredient = await service.update_custom_ingredient(ingredient_id, **attributes)
        else:
            ingredient = await service.update_library_ingredient(ingredient_id, **attributes)
        return _ingredient_to_dict(ingredient)

    @mcp.tool()
    async def delete_library_ingredient(ingredient_id: str) -> dict:
        """
        Remove an ingredient from the base library.

        Recipes that already use it keep their own copy.

        Args:
            ingredient_id: Library ingredient ID

        Returns:
            Confirmation
        """
        await _service().delete_library_ingredient(ingredient_id)
        return {"success": True, "ingredient_id": ingredient_id}


def _recipe_summary(recipe: Recipe) -> dict:
    """Convert a Recipe to a short summary dict."""
    return {
        "id": recipe.id,
        "name": recipe.name,
        "style": recipe.style,
        "batch_size_gal": recipe.batch_size,
        "og": recipe.original_gravity,
        "fg": recipe.final_gravity,
        "abv": recipe.abv,
        "ibu": recipe.ibu,
        "srm": recipe.srm,
        "is_favorite": recipe.is_favorite,
        "parent_recipe_id": recipe.parent_recipe_id,
        "clone_ids": recipe.clone_ids,
    }


def _recipe_to_dict(recipe: Recipe) -> dict:
    """Convert a Recipe to a response dict."""
    return recipe.model_dump(mode="json")


def _ingredient_to_dict(ingredient: Ingredient) -> dict:
    """Convert an Ingredient to a response dict."""
    result = ingredient.model_dump(mode="json", exclude_none=True)
    result["is_custom"] = ingredient.is_custom
    return result


def _ingredient_attributes(
    lovibond, ppg, alpha_acid, attenuation, flocculation, temp_min, temp_max
) -> dict:
    """Type-specific ingredient fields that were given."""
    attributes = {
        "lovibond": lovibond,
        "ppg": ppg,
        "alpha_acid": alpha_acid,
        "attenuation": attenuation,
        "flocculation": flocculation,
    }
    if temp_min is not None and temp_max is not None:
        attributes["temp_range"] = (temp_min, temp_max)
    return {k: v for k, v in attributes.items() if v is not None}


def _parse_date(value: str) -> datetime | None:
    """ISO 8601 date or datetime; an empty string means no date."""
    if not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ValidationError(f"Invalid date '{value}', expected ISO 8601") from e
