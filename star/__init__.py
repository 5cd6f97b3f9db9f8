"""
Main-sequence star model for worldsmith.

This package derives the parameters of a main-sequence star from its mass:
- empirical mass-radius and mass-luminosity relations
- density, effective temperature and maximum age derived from those
- spectral classification with a continuous subdivision
"""

from .units import (
    Unit,
    SolarMass,
    SolarRadius,
    SolarLuminosity,
    SolarDensity,
    Kelvin,
    Gigayears,
    calculate_stellar_temperature,
    calculate_maximum_age_gigayears,
)
from .spectral import SpectralClass, StellarClass, ColorRgb, classify_temperature
from .models import MainSequenceStar, calculate, in_main_sequence_mass_range
from .stellar_params import summary_rows, summary_dict, size_comparison, main_sequence_grid

__all__ = [
    "Unit",
    "SolarMass",
    "SolarRadius",
    "SolarLuminosity",
    "SolarDensity",
    "Kelvin",
    "Gigayears",
    "calculate_stellar_temperature",
    "calculate_maximum_age_gigayears",
    "SpectralClass",
    "StellarClass",
    "ColorRgb",
    "classify_temperature",
    "MainSequenceStar",
    "calculate",
    "in_main_sequence_mass_range",
    "summary_rows",
    "summary_dict",
    "size_comparison",
    "main_sequence_grid",
]
