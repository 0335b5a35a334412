"""
Shared data models for BrewCraft recipes.

All models use Pydantic v2 for validation and serialisation.
Amounts keep the unit the brewer entered them in; batch sizes are
US gallons and temperatures are Fahrenheit.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


CUSTOM_INGREDIENT_PREFIX = "custom-"


class IngredientType(str, Enum):
    """Type of brewing ingredient."""

    MALT = "malt"
    HOP = "hop"
    YEAST = "yeast"
    ADJUNCT = "adjunct"


class Unit(str, Enum):
    """Quantity units accepted on a recipe line."""

    LB = "lb"
    OZ = "oz"
    G = "g"
    KG = "kg"
    PACKET = "packet"


class HopUse(str, Enum):
    """How a hop is used in the brewing process."""

    BOIL = "boil"
    WHIRLPOOL = "whirlpool"
    DRY_HOP = "dry-hop"


class Flocculation(str, Enum):
    """Yeast flocculation tier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class YieldType(str, Enum):
    """Packaging format for a recorded batch yield."""

    GALLONS = "gallons"
    BOTTLES_22OZ = "bottles-22oz"
    BOTTLES_12OZ = "bottles-12oz"
    CORNELIUS_KEG = "cornelius-keg"


def _check_ordered(value: tuple[float, float] | None) -> tuple[float, float] | None:
    if value is not None and value[0] > value[1]:
        raise ValueError(f"range minimum {value[0]} exceeds maximum {value[1]}")
    return value


class Ingredient(BaseModel):
    """
    A catalog ingredient.

    Instances are always re-validated when embedded in another model, so a
    recipe line holds its own copy and later catalog edits never reach
    recipes that were already saved.
    """

    model_config = ConfigDict(frozen=True, revalidate_instances="always")

    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = Field(..., description="Display name")
    type: IngredientType = Field(..., description="Type of ingredient")

    # Malt-specific attributes
    lovibond: float | None = Field(
        default=None,
        ge=0,
        description="Colour contribution in degrees Lovibond (malts only)",
    )
    ppg: float | None = Field(
        default=None,
        ge=0,
        description="Extract potential, points per pound per gallon (malts only)",
    )

    # Hop-specific attributes
    alpha_acid: float | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Alpha acid percentage (hops only)",
    )

    # Yeast-specific attributes
    attenuation: int | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Expected apparent attenuation percentage (yeast only)",
    )
    flocculation: Flocculation | None = Field(
        default=None,
        description="Flocculation tier (yeast only)",
    )
    temp_range: tuple[float, float] | None = Field(
        default=None,
        description="Fermentation temperature range in Fahrenheit (yeast only)",
    )

    @field_validator("temp_range")
    @classmethod
    def _temp_range_ordered(cls, value):
        return _check_ordered(value)

    @property
    def is_custom(self) -> bool:
        """Check whether this ingredient was created by the user."""
        return self.id.startswith(CUSTOM_INGREDIENT_PREFIX)


class RecipeIngredient(BaseModel):
    """An ingredient copy plus the usage data for one recipe line."""

    model_config = ConfigDict(frozen=True)

    ingredient: Ingredient = Field(..., description="Embedded ingredient copy")
    amount: float = Field(..., ge=0, description="Quantity in `unit`")
    unit: Unit = Field(..., description="Quantity unit")

    # Hop-specific usage
    boil_time: int | None = Field(
        default=None,
        ge=0,
        description="Boil time in minutes (boil additions only)",
    )
    hop_use: HopUse | None = Field(default=None, description="Hop usage phase")
    custom_alpha_acid: float | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Batch-specific alpha acid override",
    )
    dry_hop_days: int | None = Field(
        default=None,
        ge=0,
        description="Dry hop contact time in days (dry hops only)",
    )

    @property
    def type(self) -> IngredientType:
        return self.ingredient.type

    @property
    def effective_alpha_acid(self) -> float | None:
        """Batch override if set, otherwise the catalog alpha acid."""
        return self.custom_alpha_acid or self.ingredient.alpha_acid


class BrewingStep(BaseModel):
    """A tracked step of the brew day process."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    duration: float = Field(default=0, ge=0, description="Duration in minutes")
    temperature: float | None = Field(default=None, description="Fahrenheit")
    notes: str = ""
    completed: bool = False
    timestamp: datetime | None = None


class MashStep(BaseModel):
    """A single mash rest."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    temperature: float = Field(..., description="Fahrenheit")
    duration: float = Field(..., ge=0, description="Duration in minutes")


class YieldEntry(BaseModel):
    """A packaged yield record for a finished batch."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: YieldType
    amount: float = Field(..., ge=0)


class Recipe(BaseModel):
    """
    A BrewCraft recipe, the aggregate root.

    The derived fields are a cached snapshot written on save; the
    calculation engine never reads them back when computing new values.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Recipe identifier")
    name: str = Field(default="", description="Recipe name")
    style: str | None = Field(default=None, description="Target beer style label")

    # Batch parameters
    batch_size: float = Field(default=5.0, gt=0, description="Batch size in US gallons")
    boil_time: int = Field(default=60, gt=0, description="Boil time in minutes")

    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    steps: list[BrewingStep] = Field(default_factory=list)
    mash_steps: list[MashStep] = Field(default_factory=list)

    # Process dates and notes
    brew_date: datetime | None = None
    yeast_pitch_date: datetime | None = None
    bottling_date: datetime | None = None
    final_yield: list[YieldEntry] = Field(default_factory=list)
    process_notes: str | None = None

    # Calculated snapshot
    original_gravity: float | None = None
    final_gravity: float | None = None
    abv: float | None = None
    ibu: float | None = None
    srm: float | None = None
    calories_per_12oz: float | None = None
    carbs_per_12oz: float | None = None

    # Measured readings
    actual_og: float | None = Field(default=None, gt=0)
    actual_fg: float | None = Field(default=None, gt=0)

    # Clone tracking
    parent_recipe_id: str | None = None
    parent_recipe_name: str | None = None
    clone_ids: list[str] = Field(default_factory=list)
    is_favorite: bool = False

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def malts(self) -> list[RecipeIngredient]:
        """Get all malt lines."""
        return [i for i in self.ingredients if i.type == IngredientType.MALT]

    @property
    def hops(self) -> list[RecipeIngredient]:
        """Get all hop lines."""
        return [i for i in self.ingredients if i.type == IngredientType.HOP]

    @property
    def yeasts(self) -> list[RecipeIngredient]:
        """Get all yeast lines."""
        return [i for i in self.ingredients if i.type == IngredientType.YEAST]

    @property
    def uses_actual_readings(self) -> bool:
        """Check if both measured gravities are available."""
        return bool(self.actual_og and self.actual_fg)

    @property
    def is_clone(self) -> bool:
        return self.parent_recipe_id is not None


class DerivedValues(BaseModel):
    """Rounded values computed from a recipe's ingredient list."""

    model_config = ConfigDict(frozen=True)

    original_gravity: float
    final_gravity: float
    abv: float
    ibu: int
    srm: float
    calories_per_12oz: int
    carbs_per_12oz: float


class DisplayValues(BaseModel):
    """
    Values to show for a recipe.

    Measured readings supersede the estimate when both are present.
    """

    model_config = ConfigDict(frozen=True)

    original_gravity: float
    final_gravity: float
    abv: float
    ibu: float
    srm: float
    calories_per_12oz: float
    carbs_per_12oz: float
    uses_actual: bool = False


class BeerStyle(BaseModel):
    """A reference beer style with inclusive parameter ranges."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    og_range: tuple[float, float]
    fg_range: tuple[float, float]
    abv_range: tuple[float, float]
    ibu_range: tuple[float, float]
    srm_range: tuple[float, float]
    description: str = ""

    @field_validator("og_range", "fg_range", "abv_range", "ibu_range", "srm_range")
    @classmethod
    def _range_ordered(cls, value):
        return _check_ordered(value)


class StyleMatch(BaseModel):
    """A scored style candidate for a recipe."""

    model_config = ConfigDict(frozen=True)

    style: str = Field(..., description="Style name")
    confidence: int = Field(..., ge=0, le=100, description="Match confidence 0-100")
    matches: list[str] = Field(
        default_factory=list,
        description="Parameters that scored above half their weight",
    )
