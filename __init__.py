"""
worldsmith: parameters of main-sequence stars from their mass.

Usage:
    import worldsmith

    star = worldsmith.calculate(1.0)
    print(star.stellar_class, star.temperature.describe(0))
"""

__version__ = "0.1.0"

from .star import MainSequenceStar, calculate

__all__ = ["MainSequenceStar", "calculate", "__version__"]
