"""
Empirical main-sequence relations.

All relations take raw magnitudes in solar units (floats or numpy arrays) and
return numpy scalars or arrays. They are evaluated with IEEE semantics:
non-physical inputs (zero or negative mass, zero radius, ...) yield inf/NaN
instead of raising.

Usage:
    from worldsmith.star.relations import radius_from_mass, luminosity_from_mass

    radius = radius_from_mass([0.5, 1.0, 2.0])
    luminosity = luminosity_from_mass(1.0)
"""

import numpy as np

# ---------------------------------------------------------------------------
# Mass-radius relation: R = M^0.8 below 1 Msun, M^0.57 above
# ---------------------------------------------------------------------------
RADIUS_MASS_BREAK    = 1.0
RADIUS_EXPONENT_LOW  = 0.8
RADIUS_EXPONENT_HIGH = 0.57

# ---------------------------------------------------------------------------
# Mass-luminosity relation: L = a * M^b on [0, 0.43), [0.43, 2), [2, inf)
# ---------------------------------------------------------------------------
LUMINOSITY_MASS_BREAKS  = (0.43, 2.0)
LUMINOSITY_COEFFICIENTS = (0.23, 1.0, 1.4)
LUMINOSITY_EXPONENTS    = (2.3, 4.0, 3.5)

# ---------------------------------------------------------------------------
# Stefan-Boltzmann anchor and lifetime scale
# ---------------------------------------------------------------------------
SOLAR_TEMPERATURE        = 5776.0   # K, Teff of a 1 Msun / 1 Rsun / 1 Lsun star
TEMPERATURE_EXPONENT     = 0.25
DENSITY_RADIUS_EXPONENT  = 3
SOLAR_LIFETIME_GIGAYEARS = 10.0

_IEEE = dict(divide='ignore', invalid='ignore', over='ignore')


def radius_from_mass(mass):
    """Radius [Rsun] from mass [Msun]."""
    mass = np.asarray(mass, dtype=float)
    with np.errstate(**_IEEE):
        radius = np.where(mass < RADIUS_MASS_BREAK,
                          mass ** RADIUS_EXPONENT_LOW,
                          mass ** RADIUS_EXPONENT_HIGH)
    return radius[()]


def luminosity_from_mass(mass):
    """
    Luminosity [Lsun] from mass [Msun].

    The three power laws meet closely but not exactly at the breaks, so the
    relation has small jumps at 0.43 and 2 Msun.
    """
    mass = np.asarray(mass, dtype=float)
    low, high = LUMINOSITY_MASS_BREAKS
    (a_low, a_mid, a_high) = LUMINOSITY_COEFFICIENTS
    (b_low, b_mid, b_high) = LUMINOSITY_EXPONENTS
    with np.errstate(**_IEEE):
        luminosity = np.where(
            mass < low,
            a_low * mass ** b_low,
            np.where(mass < high, a_mid * mass ** b_mid, a_high * mass ** b_high),
        )
    return luminosity[()]


def density_from_mass_radius(mass, radius):
    """Mean density [solar density] from mass [Msun] and radius [Rsun]."""
    mass = np.asarray(mass, dtype=float)
    radius = np.asarray(radius, dtype=float)
    with np.errstate(**_IEEE):
        density = mass / radius ** DENSITY_RADIUS_EXPONENT
    return density[()]


def temperature_from_radius_luminosity(radius, luminosity):
    """
    Effective temperature [K] from radius [Rsun] and luminosity [Lsun].

    L = R^2 T^4 in solar units, scaled to kelvin with SOLAR_TEMPERATURE.
    """
    radius = np.asarray(radius, dtype=float)
    luminosity = np.asarray(luminosity, dtype=float)
    with np.errstate(**_IEEE):
        temperature = (luminosity / radius ** 2) ** TEMPERATURE_EXPONENT * SOLAR_TEMPERATURE
    return temperature[()]


def max_age_from_mass_luminosity(mass, luminosity):
    """Main-sequence lifetime [Gyr]: fuel (mass) over burn rate (luminosity)."""
    mass = np.asarray(mass, dtype=float)
    luminosity = np.asarray(luminosity, dtype=float)
    with np.errstate(**_IEEE):
        max_age = (mass / luminosity) * SOLAR_LIFETIME_GIGAYEARS
    return max_age[()]
