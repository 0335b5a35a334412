"""
brewcraft-common: Homebrew recipe calculations and style matching.

Provides the recipe data model, gravity/bitterness/colour/nutrition
estimates, beer style matching, brew day process tracking and the
default ingredient catalog.
"""

from brewcraft_common.models import (
    IngredientType,
    Unit,
    HopUse,
    Flocculation,
    YieldType,
    Ingredient,
    RecipeIngredient,
    BrewingStep,
    MashStep,
    YieldEntry,
    Recipe,
    DerivedValues,
    DisplayValues,
    BeerStyle,
    StyleMatch,
)
from brewcraft_common.units import (
    MassUnit,
    VolumeUnit,
    TemperatureUnit,
    convert_mass,
    convert_volume,
    convert_temperature,
)
from brewcraft_common.calculations import (
    calculate_og,
    calculate_fg,
    calculate_abv,
    calculate_ibu,
    calculate_srm,
    calculate_calories,
    calculate_carbs,
    calculate_recipe_values,
    resolve_display_values,
    srm_to_color,
)
from brewcraft_common.catalog import (
    BrewingCatalog,
    default_catalog,
    create_custom_ingredient,
)
from brewcraft_common.styles import match_styles
from brewcraft_common.matching import (
    match_string,
    match_objects,
    normalise_ingredient_name,
)
from brewcraft_common.priming import calculate_priming_sugar
from brewcraft_common.process import MASH_PRESETS, MashPreset
from brewcraft_common.exceptions import (
    BrewCraftError,
    UnitConversionError,
    MatchingError,
    ValidationError,
    ConfigurationError,
    StorageError,
    NotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "IngredientType",
    "Unit",
    "HopUse",
    "Flocculation",
    "YieldType",
    "Ingredient",
    "RecipeIngredient",
    "BrewingStep",
    "MashStep",
    "YieldEntry",
    "Recipe",
    "DerivedValues",
    "DisplayValues",
    "BeerStyle",
    "StyleMatch",
    # Units
    "MassUnit",
    "VolumeUnit",
    "TemperatureUnit",
    "convert_mass",
    "convert_volume",
    "convert_temperature",
    # Calculations
    "calculate_og",
    "calculate_fg",
    "calculate_abv",
    "calculate_ibu",
    "calculate_srm",
    "calculate_calories",
    "calculate_carbs",
    "calculate_recipe_values",
    "resolve_display_values",
    "srm_to_color",
    # Catalog & styles
    "BrewingCatalog",
    "default_catalog",
    "create_custom_ingredient",
    "match_styles",
    # Matching
    "match_string",
    "match_objects",
    "normalise_ingredient_name",
    # Priming
    "calculate_priming_sugar",
    # Process
    "MASH_PRESETS",
    "MashPreset",
    # Exceptions
    "BrewCraftError",
    "UnitConversionError",
    "MatchingError",
    "ValidationError",
    "ConfigurationError",
    "StorageError",
    "NotFoundError",
]
