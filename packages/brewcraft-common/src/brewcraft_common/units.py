"""
Unit conversion utilities for brewing measurements.

Recipe formulas work in imperial base units:
- Mass: pounds (malts) and ounces (hops)
- Volume: US gallons
- Temperature: Fahrenheit

The recipe-line helpers (`to_pounds`, `to_ounces`) never raise; callers only
pass mass-bearing lines. The generic `convert_*` functions validate their
unit arguments and raise UnitConversionError.
"""

from enum import Enum

from brewcraft_common.exceptions import UnitConversionError


class MassUnit(str, Enum):
    """Mass/weight units."""

    LB = "lb"
    OZ = "oz"
    G = "g"
    KG = "kg"


class VolumeUnit(str, Enum):
    """Volume units."""

    GAL = "gal"
    QT = "qt"
    FL_OZ = "fl_oz"
    L = "l"
    ML = "ml"


class TemperatureUnit(str, Enum):
    """Temperature units."""

    F = "f"
    C = "c"


GRAMS_PER_POUND = 453.592
POUNDS_PER_KG = 2.20462
OUNCES_PER_POUND = 16.0
GRAMS_PER_OUNCE = 28.3495

# Multiply by these to get pounds
MASS_TO_POUNDS: dict[str, float] = {
    MassUnit.LB.value: 1.0,
    MassUnit.OZ.value: 1.0 / OUNCES_PER_POUND,
    MassUnit.G.value: 1.0 / GRAMS_PER_POUND,
    MassUnit.KG.value: POUNDS_PER_KG,
}

VOLUME_TO_GALLONS: dict[VolumeUnit, float] = {
    VolumeUnit.GAL: 1.0,
    VolumeUnit.QT: 0.25,
    VolumeUnit.FL_OZ: 1.0 / 128.0,
    VolumeUnit.L: 1.0 / 3.785411784,
    VolumeUnit.ML: 0.001 / 3.785411784,
}


def _unit_key(unit: Enum | str) -> str:
    return unit.value if isinstance(unit, Enum) else str(unit)


def to_pounds(amount: float, unit: Enum | str) -> float:
    """
    Convert a recipe-line quantity to pounds.

    Units without a mass conversion (``packet``) are returned unchanged.

    Args:
        amount: Quantity as entered
        unit: lb, oz, g or kg

    Returns:
        Quantity in pounds
    """
    factor = MASS_TO_POUNDS.get(_unit_key(unit))
    if factor is None:
        return amount
    return amount * factor


def from_pounds(pounds: float, unit: Enum | str) -> float:
    """Convert pounds back to ``unit``; the inverse of `to_pounds`."""
    factor = MASS_TO_POUNDS.get(_unit_key(unit))
    if factor is None:
        return pounds
    return pounds / factor


def to_ounces(amount: float, unit: Enum | str) -> float:
    """
    Convert a hop quantity to ounces.

    Only grams and pounds are converted. Kilograms are not an expected hop
    unit and pass through as if already in ounces.

    Args:
        amount: Quantity as entered
        unit: Recipe line unit

    Returns:
        Quantity in ounces
    """
    key = _unit_key(unit)
    if key == MassUnit.G.value:
        return amount / GRAMS_PER_OUNCE
    if key == MassUnit.LB.value:
        return amount * OUNCES_PER_POUND
    return amount


def convert_mass(
    value: float,
    from_unit: MassUnit | str,
    to_unit: MassUnit | str,
) -> float:
    """
    Convert between mass units.

    Args:
        value: The value to convert
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted value

    Raises:
        UnitConversionError: If units are invalid
    """
    if isinstance(from_unit, str):
        try:
            from_unit = MassUnit(from_unit.lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown mass unit: {from_unit}") from e

    if isinstance(to_unit, str):
        try:
            to_unit = MassUnit(to_unit.lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown mass unit: {to_unit}") from e

    # Convert via pounds as intermediate
    return from_pounds(to_pounds(value, from_unit), to_unit)


def convert_volume(
    value: float,
    from_unit: VolumeUnit | str,
    to_unit: VolumeUnit | str,
) -> float:
    """
    Convert between volume units.

    Args:
        value: The value to convert
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted value

    Raises:
        UnitConversionError: If units are invalid
    """
    if isinstance(from_unit, str):
        try:
            from_unit = VolumeUnit(from_unit.lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown volume unit: {from_unit}") from e

    if isinstance(to_unit, str):
        try:
            to_unit = VolumeUnit(to_unit.lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown volume unit: {to_unit}") from e

    # Convert via gallons as intermediate
    gallons = value * VOLUME_TO_GALLONS[from_unit]
    return gallons / VOLUME_TO_GALLONS[to_unit]


def convert_temperature(
    value: float,
    from_unit: TemperatureUnit | str,
    to_unit: TemperatureUnit | str,
) -> float:
    """
    Convert between Fahrenheit and Celsius.

    Raises:
        UnitConversionError: If units are invalid
    """
    if isinstance(from_unit, str):
        try:
            from_unit = TemperatureUnit(from_unit.lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown temperature unit: {from_unit}") from e

    if isinstance(to_unit, str):
        try:
            to_unit = TemperatureUnit(to_unit.lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown temperature unit: {to_unit}") from e

    if from_unit == to_unit:
        return value
    if from_unit == TemperatureUnit.F:
        return (value - 32) * 5 / 9
    return value * 9 / 5 + 32


# Convenience functions for common conversions
def f_to_c(f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return convert_temperature(f, TemperatureUnit.F, TemperatureUnit.C)


def fl_oz_to_gal(fl_oz: float) -> float:
    """Convert US fluid ounces to US gallons."""
    return convert_volume(fl_oz, VolumeUnit.FL_OZ, VolumeUnit.GAL)
