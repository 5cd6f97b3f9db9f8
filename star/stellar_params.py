#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

from .relations import (
    radius_from_mass,
    luminosity_from_mass,
    density_from_mass_radius,
    temperature_from_radius_luminosity,
    max_age_from_mass_luminosity,
)
from .spectral import StellarClass
from .units import Unit, SolarRadius, SolarLuminosity

DEFAULT_PRECISION = 5
TEMPERATURE_PRECISION = 0
# Luminosities at or above this are shown without decimals.
LUMINOSITY_ROUNDING_THRESHOLD = SolarLuminosity(1000.0)

# Reference radii for the size comparison chart [Rsun].
COMPARISON_RADII = (
    ("Sun", 1.0),
    ("Orbit 2", 4.0),
    ("Orbit 6", 10.0),
)


def format_luminosity(luminosity):
    if luminosity < LUMINOSITY_ROUNDING_THRESHOLD:
        return f"{luminosity:.{DEFAULT_PRECISION}f}"
    return f"{luminosity:.0f}"


def _quantity_row(label, quantity: Unit, text=None, precision=DEFAULT_PRECISION):
    if text is None:
        text = f"{quantity:.{precision}f}"
    return (label, text, quantity.SYMBOL, quantity.NAME)


def summary_rows(star):
    """
    Display rows for one star as (label, text, symbol, name) tuples.

    `symbol` and `name` are empty for the rows without a unit.
    """
    return [
        ("Stellar class", str(star.stellar_class), "", ""),
        _quantity_row("Maximum age", star.max_age),
        _quantity_row("Radius", star.radius),
        _quantity_row("Luminosity", star.luminosity, text=format_luminosity(star.luminosity)),
        _quantity_row("Density", star.density),
        _quantity_row("Temperature", star.temperature, precision=TEMPERATURE_PRECISION),
        ("Color", str(star.color), "", ""),
    ]


def summary_dict(star):
    return {
        "mass": star.mass.to_value(),
        "age": star.age.to_value(),
        "max_age": star.max_age.to_value(),
        "radius": star.radius.to_value(),
        "luminosity": star.luminosity.to_value(),
        "density": star.density.to_value(),
        "temperature": star.temperature.to_value(),
        "spectral_class": str(star.stellar_class.spectral_class),
        "subdivision": star.stellar_class.subdivision,
        "stellar_class": str(star.stellar_class),
        "color": star.color.hex,
    }


def size_comparison(radius):
    """
    Data behind the size comparison chart.

    Returns a list of (name, radius, relative) with the star itself first;
    `relative` is each radius divided by the star's radius, i.e. the circle
    size when the star is drawn at unit size.
    """
    if not isinstance(radius, SolarRadius):
        radius = SolarRadius(float(radius))
    entries = [("This", radius)] + [(name, SolarRadius(r)) for name, r in COMPARISON_RADII]
    out = []
    with np.errstate(divide='ignore', invalid='ignore'):
        for name, r in entries:
            relative = float(np.float64(r.value) / np.float64(radius.value))
            out.append((name, r, relative))
    return out


def main_sequence_grid(masses):
    """
    Evaluate the main-sequence relations on an array of masses.

    Parameters
    ----------
    masses : array_like
        One-dimensional masses [Msun].

    Returns
    -------
    dict
        numpy arrays keyed by "mass", "radius", "luminosity", "density",
        "temperature", "max_age", plus "stellar_class" as a list of labels
        such as "G2.3".
    """
    mass = np.asarray(masses, dtype=float)
    if mass.ndim != 1:
        raise ValueError(f"masses must be one-dimensional, got shape {mass.shape}")

    radius = radius_from_mass(mass)
    luminosity = luminosity_from_mass(mass)
    density = density_from_mass_radius(mass, radius)
    temperature = temperature_from_radius_luminosity(radius, luminosity)
    max_age = max_age_from_mass_luminosity(mass, luminosity)

    return {
        "mass": mass,
        "radius": radius,
        "luminosity": luminosity,
        "density": density,
        "temperature": temperature,
        "max_age": max_age,
        "stellar_class": [str(StellarClass.calculate(t)) for t in temperature],
    }
