"""
Unit-typed quantities in worldsmith.star.units.

Usage:
    pytest tests/test_units.py
"""

import dataclasses

import astropy.units as u
import pytest

from worldsmith.star.units import (
    SolarMass,
    SolarRadius,
    SolarLuminosity,
    SolarDensity,
    Kelvin,
    Gigayears,
    calculate_stellar_temperature,
    calculate_maximum_age_gigayears,
)

ALL_UNITS = [SolarMass, SolarRadius, SolarLuminosity, SolarDensity, Kelvin, Gigayears]


# ---------------------------------------------------------------------------
# Symbols and names
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("cls, symbol, name", [
    (SolarMass,       "M☉",  "solar mass"),
    (SolarRadius,     "R☉",  "solar radius"),
    (SolarLuminosity, "L☉",  "solar luminosity"),
    (SolarDensity,    "D☉",  "solar density"),
    (Kelvin,          "K",   "kelvin"),
    (Gigayears,       "Gyr", "gigayear"),
])
def test_symbol_and_name(cls, symbol, name):
    assert cls.SYMBOL == symbol
    assert cls.NAME == name
    assert cls(1.0).SYMBOL == symbol


# ---------------------------------------------------------------------------
# Raw conversion and formatting
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("cls", ALL_UNITS)
def test_raw_round_trip_is_exact(cls):
    for value in (0.1234567890123, 1.0, 94.0, 1e-30, -3.5):
        q = cls(value)
        assert q.to_value() == value
        assert float(q) == value


def test_formatting():
    q = SolarRadius(1.4845235)
    assert str(q) == "1.4845235"
    assert f"{q:.2f}" == "1.48"
    assert q.describe() == "1.4845235 R☉"
    assert q.describe(1) == "1.5 R☉"
    assert Kelvin(5776.4).describe(0) == "5776 K"


# ---------------------------------------------------------------------------
# Type safety
# ---------------------------------------------------------------------------
def test_different_units_never_equal():
    assert SolarMass(1.0) != SolarRadius(1.0)
    assert SolarMass(1.0) == SolarMass(1.0)


def test_no_cross_unit_arithmetic():
    with pytest.raises(TypeError):
        SolarMass(1.0) + Kelvin(1.0)
    with pytest.raises(TypeError):
        Kelvin(5000.0) - SolarMass(1.0)
    with pytest.raises(TypeError):
        SolarMass(1.0) * 2


def test_kelvin_difference():
    assert Kelvin(5776.0) - Kelvin(576.0) == Kelvin(5200.0)


def test_luminosity_ordering():
    assert SolarLuminosity(1.0) < SolarLuminosity(1000.0)
    assert SolarLuminosity(1000.0) >= SolarLuminosity(1000.0)
    with pytest.raises(TypeError):
        SolarLuminosity(1.0) < SolarMass(2.0)


def test_quantities_are_immutable():
    q = SolarMass(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        q.value = 2.0


# ---------------------------------------------------------------------------
# astropy conversion
# ---------------------------------------------------------------------------
def test_to_quantity():
    assert SolarMass(2.0).to_quantity().to_value(u.kg) == pytest.approx(2 * 1.9884e30, rel=1e-3)
    assert SolarRadius(1.0).to_quantity().to_value(u.km) == pytest.approx(695700.0, rel=1e-3)
    assert Kelvin(5776.0).to_quantity() == 5776.0 * u.K
    assert Gigayears(10.0).to_quantity().to_value(u.yr) == pytest.approx(1e10)
    # Mean solar density ~1.41 g/cm^3
    assert SolarDensity(1.0).to_quantity().to_value(u.g / u.cm ** 3) == pytest.approx(1.41, rel=1e-2)


def test_from_quantity():
    assert SolarMass.from_quantity(1.9884e30 * u.kg).to_value() == pytest.approx(1.0, rel=1e-3)
    assert Kelvin.from_quantity(300.0 * u.K) == Kelvin(300.0)
    density = SolarDensity(0.61).to_quantity()
    assert SolarDensity.from_quantity(density).to_value() == pytest.approx(0.61)


# ---------------------------------------------------------------------------
# Typed derivations
# ---------------------------------------------------------------------------
def test_typed_derivations_return_unit_types():
    mass = SolarMass(1.0)
    radius = SolarRadius.calculate(mass)
    luminosity = SolarLuminosity.calculate(mass)
    assert radius == SolarRadius(1.0)
    assert luminosity == SolarLuminosity(1.0)
    assert SolarDensity.calculate(mass, radius) == SolarDensity(1.0)
    assert calculate_stellar_temperature(radius, luminosity) == Kelvin(5776.0)
    assert calculate_maximum_age_gigayears(mass, luminosity) == Gigayears(10.0)
    assert isinstance(radius.value, float)
