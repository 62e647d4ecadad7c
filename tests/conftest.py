import itertools

import matplotlib
import pytest

from utils import NO_PATH

matplotlib.use("Agg")


def brute_force(matrix, current=0, visited=1):
    """Cheapest open path from `current` through every city outside `visited`."""
    n = len(matrix)
    rest = [c for c in range(n) if not visited & (1 << c)]
    best = NO_PATH
    for order in itertools.permutations(rest):
        cost = 0
        prev = current
        for city in order:
            if matrix[prev][city] == NO_PATH:
                break
            cost += matrix[prev][city]
            prev = city
        else:
            best = min(best, cost)
    return best


@pytest.fixture
def three_cities():
    # A=0, B=1, C=2
    return [
        [0, 787, 2451],
        [787, 0, 2015],
        [2451, 2015, 0],
    ]


@pytest.fixture
def write_input(tmp_path):
    def _write(text, name="cities.in"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write
