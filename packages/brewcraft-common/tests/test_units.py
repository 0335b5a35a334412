"""
Tests for brewcraft-common unit conversion.
"""

import pytest
from brewcraft_common.units import (
    convert_mass,
    convert_volume,
    convert_temperature,
    to_pounds,
    from_pounds,
    to_ounces,
    f_to_c,
    fl_oz_to_gal,
    MassUnit,
    VolumeUnit,
    TemperatureUnit,
)
from brewcraft_common.models import Unit
from brewcraft_common.exceptions import UnitConversionError


class TestToPounds:
    """Tests for recipe-line conversion to pounds."""

    def test_pounds_unchanged(self):
        assert to_pounds(10.0, Unit.LB) == 10.0

    def test_ounces(self):
        assert to_pounds(8.0, Unit.OZ) == 0.5

    def test_grams(self):
        assert abs(to_pounds(453.592, Unit.G) - 1.0) < 1e-9

    def test_kilograms(self):
        assert abs(to_pounds(1.0, Unit.KG) - 2.20462) < 1e-9

    def test_packet_passes_through(self):
        assert to_pounds(1.0, Unit.PACKET) == 1.0

    def test_string_unit(self):
        assert to_pounds(16.0, "oz") == 1.0

    @pytest.mark.parametrize("unit", ["lb", "oz", "g", "kg"])
    def test_round_trip(self, unit):
        assert abs(from_pounds(to_pounds(3.7, unit), unit) - 3.7) < 1e-6


class TestToOunces:
    """Tests for hop quantity conversion to ounces."""

    def test_grams(self):
        assert abs(to_ounces(28.3495, Unit.G) - 1.0) < 1e-9

    def test_pounds(self):
        assert to_ounces(1.0, Unit.LB) == 16.0

    def test_ounces_unchanged(self):
        assert to_ounces(2.5, Unit.OZ) == 2.5

    def test_kilograms_not_converted(self):
        assert to_ounces(1.0, Unit.KG) == 1.0


class TestMassConversion:
    """Tests for mass unit conversion."""

    def test_kg_to_g(self):
        assert abs(convert_mass(1.0, MassUnit.KG, MassUnit.G) - 1000.0) < 0.1

    def test_lb_to_oz(self):
        assert convert_mass(1.0, MassUnit.LB, MassUnit.OZ) == 16.0

    def test_string_units(self):
        assert convert_mass(2.0, "LB", "oz") == 32.0

    def test_invalid_unit(self):
        with pytest.raises(UnitConversionError):
            convert_mass(1.0, "stone", MassUnit.G)

    def test_invalid_target_unit(self):
        with pytest.raises(UnitConversionError):
            convert_mass(1.0, MassUnit.G, "packet")


class TestVolumeConversion:
    """Tests for volume unit conversion."""

    def test_gal_to_qt(self):
        assert convert_volume(1.0, VolumeUnit.GAL, VolumeUnit.QT) == 4.0

    def test_gal_to_l(self):
        result = convert_volume(1.0, VolumeUnit.GAL, VolumeUnit.L)
        assert abs(result - 3.78541) < 0.001

    def test_fl_oz_to_gal(self):
        assert fl_oz_to_gal(128) == 1.0

    def test_invalid_unit(self):
        with pytest.raises(UnitConversionError):
            convert_volume(1.0, "barrel", VolumeUnit.L)


class TestTemperatureConversion:
    """Tests for temperature conversion."""

    def test_f_to_c(self):
        assert f_to_c(212) == 100.0

    def test_c_to_f(self):
        assert convert_temperature(0, TemperatureUnit.C, TemperatureUnit.F) == 32.0

    def test_same_unit(self):
        assert convert_temperature(68, "f", "F") == 68

    def test_invalid_unit(self):
        with pytest.raises(UnitConversionError):
            convert_temperature(20, "k", TemperatureUnit.C)
