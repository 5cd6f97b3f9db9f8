"""
Spectral classification of main-sequence stars by effective temperature.

Class boundaries follow the Wikipedia "Stellar classification" article.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np

from .units import Kelvin


class SpectralClass(Enum):
    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"

    def __str__(self):
        return self.value

    @classmethod
    def from_letter(cls, letter: str) -> SpectralClass:
        """Parse a class letter, case-insensitive."""
        try:
            return cls(letter.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown spectral class '{letter}', expected one of "
                             f"{', '.join(str(c) for c in SPECTRAL_SEQUENCE)}") from None

    @property
    def sequence_index(self) -> int:
        """Position in the hottest-to-coolest sequence (O = 0, M = 6)."""
        return SPECTRAL_SEQUENCE.index(self)

    @property
    def upper_bound(self) -> float:
        """Inclusive upper temperature bound [K] of the class."""
        return _UPPER_BOUNDS[self]


SPECTRAL_SEQUENCE = (
    SpectralClass.O,
    SpectralClass.B,
    SpectralClass.A,
    SpectralClass.F,
    SpectralClass.G,
    SpectralClass.K,
    SpectralClass.M,
)

# Inclusive upper bounds [K], coolest to hottest. Applied to whole kelvin.
SPECTRAL_CLASS_BOUNDS = (
    (3700.0,    SpectralClass.M),
    (5200.0,    SpectralClass.K),
    (6000.0,    SpectralClass.G),
    (7500.0,    SpectralClass.F),
    (10000.0,   SpectralClass.A),
    (30000.0,   SpectralClass.B),
    (np.inf,    SpectralClass.O),
)
_UPPER_BOUNDS = {spectral_class: bound for bound, spectral_class in SPECTRAL_CLASS_BOUNDS}

# Below this M dwarfs are not well defined; still classified M.
COOLEST_M_DWARF_TEMPERATURE = 2400.0

# (lower bound [K], band width [K]) used to map a temperature onto 0..10
# within its class. The M band starts at 2000 K, not at 0 K.
SUBDIVISION_BANDS = {
    SpectralClass.M: (2000.0,  1700.0),
    SpectralClass.K: (3700.0,  1500.0),
    SpectralClass.G: (5200.0,  800.0),
    SpectralClass.F: (6000.0,  1500.0),
    SpectralClass.A: (7500.0,  2500.0),
    SpectralClass.B: (10000.0, 20000.0),
    SpectralClass.O: (30000.0, 62000.0),
}
SUBDIVISION_SCALE = 10.0


class ColorRgb(NamedTuple):
    """Representative 8-bit RGB colour of a spectral class."""

    r: int
    g: int
    b: int

    def __str__(self):
        return f"{self.r}, {self.g}, {self.b}"

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Not what the eye would see; a fixed swatch per class.
SPECTRAL_CLASS_COLORS = {
    SpectralClass.M: ColorRgb(255, 204, 111),
    SpectralClass.K: ColorRgb(255, 210, 161),
    SpectralClass.G: ColorRgb(255, 244, 234),
    SpectralClass.F: ColorRgb(248, 247, 255),
    SpectralClass.A: ColorRgb(202, 215, 255),
    SpectralClass.B: ColorRgb(170, 191, 255),
    SpectralClass.O: ColorRgb(155, 176, 255),
}


def classify_temperature(temperature) -> SpectralClass:
    """
    Spectral class of a temperature (Kelvin or float, in K).

    Fractional kelvin is dropped before comparing against the bounds, so
    5200.9 K is still K. NaN and negative temperatures resolve to M,
    +inf to O.
    """
    kelvin = float(temperature)
    if np.isnan(kelvin):
        return SpectralClass.M
    whole_kelvin = np.trunc(kelvin)
    for bound, spectral_class in SPECTRAL_CLASS_BOUNDS:
        if whole_kelvin <= bound:
            return spectral_class
    return SpectralClass.O


@dataclass(frozen=True)
class StellarClass:
    """
    Spectral class plus a continuous subdivision.

    The subdivision is 10 at the cool edge of the class band and approaches 0
    at its hot edge. It is not clamped, so it can leave the 0..10 range for
    temperatures outside the band (e.g. M stars below 2000 K).
    """

    spectral_class: SpectralClass
    subdivision: float

    @classmethod
    def calculate(cls, temperature: Kelvin) -> StellarClass:
        spectral_class = classify_temperature(temperature)
        kelvin = float(temperature)
        lower, width = SUBDIVISION_BANDS[spectral_class]
        subdivision = SUBDIVISION_SCALE * (1.0 - (kelvin - lower) / width)
        return cls(spectral_class, subdivision)

    def color(self) -> ColorRgb:
        return SPECTRAL_CLASS_COLORS[self.spectral_class]

    def __str__(self):
        return f"{self.spectral_class}{self.subdivision:.1f}"
