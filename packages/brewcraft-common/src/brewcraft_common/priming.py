"""
Priming sugar calculator for bottle conditioning.

Residual CO2 left in the beer depends on its temperature; the rest of the
target carbonation comes from priming sugar. Amounts are computed for
dextrose and scaled by a per-sugar factor.
"""

from dataclasses import dataclass

from brewcraft_common.exceptions import ValidationError
from brewcraft_common.units import f_to_c


DEXTROSE_OZ_PER_VOLUME_GALLON = 0.5
GRAMS_PER_OUNCE = 28.35
DEFAULT_TARGET_CO2 = 2.4
DEFAULT_BEER_TEMP_F = 68.0


@dataclass(frozen=True)
class SugarType:
    """A priming sugar and its weight relative to dextrose."""

    key: str
    name: str
    factor: float


SUGAR_TYPES: dict[str, SugarType] = {
    s.key: s
    for s in (
        SugarType("dextrose", "Corn Sugar (Dextrose)", 1.0),
        SugarType("table", "Table Sugar (Sucrose)", 0.91),
        SugarType("brown", "Brown Sugar", 0.91),
        SugarType("turbinado", "Turbinado/Raw Sugar", 0.91),
        SugarType("belgian", "Belgian Candi Sugar", 0.91),
        SugarType("dme", "Dry Malt Extract", 1.33),
        SugarType("honey", "Honey", 1.25),
        SugarType("maple", "Maple Syrup", 1.25),
        SugarType("molasses", "Molasses", 1.11),
        SugarType("agave", "Agave Nectar", 1.18),
    )
}

# Typical carbonation, in volumes of CO2, by style family
CARBONATION_LEVELS: dict[str, tuple[float, float]] = {
    "British Ales": (1.5, 2.0),
    "American Ales": (2.2, 2.6),
    "European Lagers": (2.4, 2.6),
    "Belgian Ales": (2.0, 4.5),
    "Wheat Beers": (3.0, 4.5),
    "Lambics": (2.4, 4.5),
}


@dataclass(frozen=True)
class PrimingResult:
    sugar: SugarType
    ounces: float
    grams: float
    co2_needed: float
    residual_co2: float


def residual_co2(temp_f: float) -> float:
    """Volumes of CO2 still dissolved in beer at the given temperature (F)."""
    temp_c = f_to_c(temp_f)
    return 3.0378 - 0.050062 * temp_c + 0.00026555 * temp_c * temp_c


def calculate_priming_sugar(
    batch_size: float,
    target_co2: float = DEFAULT_TARGET_CO2,
    temperature: float = DEFAULT_BEER_TEMP_F,
    sugar_type: str = "dextrose",
) -> PrimingResult:
    """
    Priming sugar needed to reach a carbonation level.

    Args:
        batch_size: Volume being bottled in US gallons
        target_co2: Desired carbonation in volumes of CO2
        temperature: Highest temperature the beer reached after fermentation (F)
        sugar_type: Key into SUGAR_TYPES

    Returns:
        PrimingResult; zero sugar when the beer already holds enough CO2
        or the batch is empty

    Raises:
        ValidationError: If the sugar type is unknown
    """
    sugar = SUGAR_TYPES.get(sugar_type.strip().lower())
    if sugar is None:
        raise ValidationError(
            f"Unknown sugar type '{sugar_type}'. Valid: {', '.join(SUGAR_TYPES)}"
        )

    residual = residual_co2(temperature)
    co2_needed = target_co2 - residual

    if co2_needed <= 0 or batch_size <= 0:
        return PrimingResult(sugar, 0.0, 0.0, co2_needed, residual)

    ounces = co2_needed * batch_size * DEXTROSE_OZ_PER_VOLUME_GALLON * sugar.factor
    return PrimingResult(
        sugar=sugar,
        ounces=ounces,
        grams=ounces * GRAMS_PER_OUNCE,
        co2_needed=co2_needed,
        residual_co2=residual,
    )
