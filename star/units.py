"""
Unit-typed physical quantities.

Each quantity wraps a single float in its own frozen dataclass, so quantities
of different kinds never compare equal and cannot be combined arithmetically
by accident. Shared behaviour (symbol, name, raw conversion, formatting,
astropy conversion) is attached by the `unit` decorator rather than through
a common base class.

Units:
- SolarMass:       M☉ = 1.98847e30 kg
- SolarRadius:     R☉
- SolarLuminosity: L☉
- SolarDensity:    D☉, mean solar density M☉ / (4/3 π R☉^3)
- Kelvin:          K
- Gigayears:       Gyr = 1e9 yr
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol

import numpy as np
import astropy.units as u
import astropy.constants as const

from .relations import (
    radius_from_mass,
    luminosity_from_mass,
    density_from_mass_radius,
    temperature_from_radius_luminosity,
    max_age_from_mass_luminosity,
)

SOLAR_MEAN_DENSITY = (const.M_sun / (4.0 / 3.0 * np.pi * const.R_sun ** 3)).to(u.g / u.cm ** 3)


class Unit(Protocol):
    """Capability shared by every quantity type."""

    SYMBOL: ClassVar[str]
    NAME: ClassVar[str]
    REFERENCE: ClassVar[u.Quantity]

    def to_value(self) -> float: ...

    def describe(self, precision: Optional[int] = None) -> str: ...

    def to_quantity(self) -> u.Quantity: ...


def _to_value(self):
    return self.value


def _float(self):
    return float(self.value)


def _str(self):
    return str(self.value)


def _format(self, format_spec):
    return format(self.value, format_spec)


def _describe(self, precision=None):
    if precision is None:
        return f"{self.value} {self.SYMBOL}"
    return f"{self.value:.{precision}f} {self.SYMBOL}"


def _to_quantity(self):
    return self.value * self.REFERENCE


def _from_quantity(cls, quantity):
    return cls(float(quantity.to_value(cls.REFERENCE.unit)) / cls.REFERENCE.value)


def unit(symbol, name, reference):
    """
    Class decorator attaching the `Unit` capability to a quantity dataclass.

    Parameters
    ----------
    symbol : str
        Display symbol, e.g. "M☉".
    name : str
        Human-readable unit name, e.g. "solar mass".
    reference : astropy.units.Quantity
        Physical size of one unit, used by to_quantity/from_quantity.
    """
    def decorate(cls):
        cls.SYMBOL = symbol
        cls.NAME = name
        cls.REFERENCE = reference
        cls.to_value = _to_value
        cls.__float__ = _float
        cls.__str__ = _str
        cls.__format__ = _format
        cls.describe = _describe
        cls.to_quantity = _to_quantity
        cls.from_quantity = classmethod(_from_quantity)
        return cls
    return decorate


@unit("M☉", "solar mass", 1.0 * u.M_sun)
@dataclass(frozen=True)
class SolarMass:
    value: float


@unit("R☉", "solar radius", 1.0 * u.R_sun)
@dataclass(frozen=True)
class SolarRadius:
    value: float

    @classmethod
    def calculate(cls, mass: SolarMass) -> SolarRadius:
        """
        Radius from mass via the piecewise mass-radius power law.

        The radius of larger main-sequence stars also depends on age and
        composition; this ignores both.
        """
        return cls(float(radius_from_mass(mass.value)))


@unit("L☉", "solar luminosity", 1.0 * u.L_sun)
@dataclass(frozen=True, order=True)
class SolarLuminosity:
    value: float

    @classmethod
    def calculate(cls, mass: SolarMass) -> SolarLuminosity:
        return cls(float(luminosity_from_mass(mass.value)))


@unit("D☉", "solar density", SOLAR_MEAN_DENSITY)
@dataclass(frozen=True)
class SolarDensity:
    value: float

    @classmethod
    def calculate(cls, mass: SolarMass, radius: SolarRadius) -> SolarDensity:
        return cls(float(density_from_mass_radius(mass.value, radius.value)))


@unit("K", "kelvin", 1.0 * u.K)
@dataclass(frozen=True)
class Kelvin:
    value: float

    def __sub__(self, other):
        if not isinstance(other, Kelvin):
            return NotImplemented
        return Kelvin(self.value - other.value)


@unit("Gyr", "gigayear", 1.0 * u.Gyr)
@dataclass(frozen=True)
class Gigayears:
    value: float


def calculate_stellar_temperature(radius: SolarRadius, luminosity: SolarLuminosity) -> Kelvin:
    return Kelvin(float(temperature_from_radius_luminosity(radius.value, luminosity.value)))


def calculate_maximum_age_gigayears(mass: SolarMass, luminosity: SolarLuminosity) -> Gigayears:
    return Gigayears(float(max_age_from_mass_luminosity(mass.value, luminosity.value)))
