import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[3]))
import worldsmith

from worldsmith.star import summary_rows
from worldsmith.utils.star_table import print_grid


def run_sun():
    """The Sun as a reference star: every solar-unit quantity is 1."""
    star = worldsmith.calculate(1.0, 4.6)
    for label, text, symbol, _ in summary_rows(star):
        print(f'{label:<15} {text:>20} {symbol}')
    print()
    print('Radius  :', star.radius.to_quantity().to('km'))
    print('Density :', star.density.to_quantity())
    print('Max age :', star.max_age.to_quantity().to('yr'))


def run_neighbours():
    """Red dwarfs up to early B stars."""
    print_grid(0.1, 10.0, 9)


run_sun()
print()
run_neighbours()
