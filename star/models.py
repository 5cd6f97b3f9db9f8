from __future__ import annotations

from dataclasses import dataclass

from .units import (
    SolarMass,
    SolarRadius,
    SolarLuminosity,
    SolarDensity,
    Kelvin,
    Gigayears,
    calculate_stellar_temperature,
    calculate_maximum_age_gigayears,
)
from .spectral import StellarClass, ColorRgb

# Range of the mass input [Msun] the front end offers (logarithmic slider).
MAIN_SEQUENCE_MASS_RANGE = (0.075, 94.0)
# Range of the age input [Gyr].
MAIN_SEQUENCE_AGE_RANGE = (10.0, 1000.0)

DEFAULT_MASS = 1.0
DEFAULT_AGE_GIGAYEARS = 100.0


@dataclass(frozen=True)
class MainSequenceStar:
    """
    Snapshot of a semi-realistic main-sequence star.

    Units:
    - mass: Msun
    - age, max_age: Gyr
    - radius: Rsun
    - luminosity: Lsun
    - density: solar density
    - temperature: K

    `age` is recorded but does not yet influence any derived quantity.
    """

    stellar_class: StellarClass
    mass: SolarMass
    age: Gigayears
    max_age: Gigayears
    radius: SolarRadius
    luminosity: SolarLuminosity
    density: SolarDensity
    temperature: Kelvin
    color: ColorRgb

    @classmethod
    def calculate_parameters(cls, mass, age_gigayears=DEFAULT_AGE_GIGAYEARS) -> MainSequenceStar:
        """
        Derive all parameters of a main-sequence star from its mass.

        Parameters
        ----------
        mass : SolarMass or float
            Stellar mass [Msun]. Non-positive masses are not rejected; they
            give inf/NaN in the dependent quantities.
        age_gigayears : Gigayears or float
            Current age [Gyr]. Unused by the relations.
        """
        if not isinstance(mass, SolarMass):
            mass = SolarMass(float(mass))
        if not isinstance(age_gigayears, Gigayears):
            age_gigayears = Gigayears(float(age_gigayears))

        radius = SolarRadius.calculate(mass)
        luminosity = SolarLuminosity.calculate(mass)
        density = SolarDensity.calculate(mass, radius)
        temperature = calculate_stellar_temperature(radius, luminosity)
        max_age = calculate_maximum_age_gigayears(mass, luminosity)

        stellar_class = StellarClass.calculate(temperature)
        color = stellar_class.color()

        return cls(
            stellar_class=stellar_class,
            mass=mass,
            age=age_gigayears,
            max_age=max_age,
            radius=radius,
            luminosity=luminosity,
            density=density,
            temperature=temperature,
            color=color,
        )


def calculate(mass, age=DEFAULT_AGE_GIGAYEARS) -> MainSequenceStar:
    """Shorthand for MainSequenceStar.calculate_parameters."""
    return MainSequenceStar.calculate_parameters(mass, age)


def in_main_sequence_mass_range(mass) -> bool:
    low, high = MAIN_SEQUENCE_MASS_RANGE
    return low <= float(mass) <= high
