"""Shared test fixtures for queen-placement tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- four_queens_solutions: Both solutions of the 4-queens problem
- mixed_population: Small 4x4 population with one clear best individual
"""

import numpy as np
import pytest

from queen_placement import Chromosome, Population


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def four_queens_solutions() -> list[Chromosome]:
    """The two valid 4-queens placements."""
    return [Chromosome([1, 3, 0, 2]), Chromosome([2, 0, 3, 1])]


@pytest.fixture
def mixed_population() -> Population:
    """Population of six 4x4 boards with distinct quality levels.

    Fitness values (beats count in brackets):
    - row 0: [0, 1, 2, 3] -> 0.2   (4)
    - row 1: [1, 3, 0, 2] -> 1.0   (0)
    - row 2: [0, 2, 3, 1] -> 1/3   (2)
    - row 3: [3, 2, 1, 0] -> 0.2   (4)
    - row 4: [2, 0, 3, 1] -> 1.0   (0)
    - row 5: [1, 0, 3, 2] -> 0.2   (4)
    """
    genes = np.array(
        [
            [0, 1, 2, 3],
            [1, 3, 0, 2],
            [0, 2, 3, 1],
            [3, 2, 1, 0],
            [2, 0, 3, 1],
            [1, 0, 3, 2],
        ]
    )
    return Population(genes=genes)
