"""
star_table.py

Print the parameters of a main-sequence star, or a table of stars over a
logarithmic mass grid.

Usage (command line):
    # One star
    python -m worldsmith.utils.star_table 1.0
    python -m worldsmith.utils.star_table 2.5 --age 4.6 --compare

    # Grid of 12 masses between 0.1 and 10 Msun
    python -m worldsmith.utils.star_table --grid 0.1 10 12
"""

import argparse
import sys

import numpy as np

from ..star.models import (
    MAIN_SEQUENCE_MASS_RANGE,
    DEFAULT_AGE_GIGAYEARS,
    calculate,
    in_main_sequence_mass_range,
)
from ..star.stellar_params import summary_rows, size_comparison, main_sequence_grid
from ..star.units import SolarMass, SolarRadius, SolarLuminosity, SolarDensity, Kelvin, Gigayears


def _positive_float(text):
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: '{text}'") from None
    if not np.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive finite number, got {text}")
    return value


def _warn_if_outside_range(mass):
    if not in_main_sequence_mass_range(mass):
        low, high = MAIN_SEQUENCE_MASS_RANGE
        print(f"WARNING: {mass} {SolarMass.SYMBOL} is outside the main-sequence range "
              f"{low}-{high} {SolarMass.SYMBOL}; values are extrapolated.")


def print_star(mass, age=DEFAULT_AGE_GIGAYEARS, compare=False):
    """Print the summary rows of one star and return the star."""
    _warn_if_outside_range(mass)
    star = calculate(mass, age)

    print(f"Main-sequence star: {star.mass.describe()}  (age {star.age.describe()})")
    print("-" * 47)
    for label, text, symbol, _ in summary_rows(star):
        print(f"{label:<15} {text:>20} {symbol}")

    if compare:
        print("\nSize comparison")
        print("-" * 47)
        for name, radius, relative in size_comparison(star.radius):
            print(f"{name:<15} {radius:>12.1f} {SolarRadius.SYMBOL}  x{relative:.3f}")
    return star


def print_grid(mass_min, mass_max, n):
    """Print a table over n log-spaced masses and return the grid dict."""
    if mass_min > mass_max:
        mass_min, mass_max = mass_max, mass_min
    for mass in (mass_min, mass_max):
        _warn_if_outside_range(mass)
    grid = main_sequence_grid(np.logspace(np.log10(mass_min), np.log10(mass_max), n))

    hdr = (f"{SolarMass.SYMBOL:>10} {SolarRadius.SYMBOL:>10} {SolarLuminosity.SYMBOL:>14} "
           f"{SolarDensity.SYMBOL:>10} {Kelvin.SYMBOL:>8} {Gigayears.SYMBOL:>12} {'class':>7}")
    print(hdr)
    print("-" * len(hdr))
    for i in range(len(grid["mass"])):
        print(f"{grid['mass'][i]:>10.4f} {grid['radius'][i]:>10.4f} {grid['luminosity'][i]:>14.5g} "
              f"{grid['density'][i]:>10.4f} {grid['temperature'][i]:>8.0f} {grid['max_age'][i]:>12.5g} "
              f"{grid['stellar_class'][i]:>7}")
    return grid


def build_parser():
    parser = argparse.ArgumentParser(
        description='Main-sequence star parameters from stellar mass')
    parser.add_argument('mass', nargs='?', type=_positive_float,
                        help=f'Stellar mass [{SolarMass.SYMBOL}]')
    parser.add_argument('--age', type=_positive_float, default=DEFAULT_AGE_GIGAYEARS,
                        help='Age [Gyr], currently unused by the relations')
    parser.add_argument('--compare', action='store_true',
                        help='Also print the size comparison with reference radii')
    parser.add_argument('--grid', nargs=3, metavar=('MIN', 'MAX', 'N'),
                        help='Print a table for N log-spaced masses between MIN and MAX')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.grid:
        try:
            mass_min = _positive_float(args.grid[0])
            mass_max = _positive_float(args.grid[1])
            n = int(args.grid[2])
        except (argparse.ArgumentTypeError, ValueError) as e:
            parser.error(f'--grid: {e}')
        if n < 1:
            parser.error('--grid: N must be at least 1')
        print_grid(mass_min, mass_max, n)
    elif args.mass is not None:
        print_star(args.mass, age=args.age, compare=args.compare)
    else:
        parser.print_help()
    return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
