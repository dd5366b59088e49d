"""Protocol definition for generation selection strategies.

A selection strategy turns one generation into the next: it decides which
individuals survive unchanged, which ones become parents, and how many
offspring are bred from them. Strategies are interchangeable as long as they
follow :class:`GenerationSelector`, which lets the engine accept either a
registered strategy name or any user-supplied callable.

Example usage:
    ```python
    def my_engine(selector: GenerationSelector, population, fitness, rng):
        genes = selector(population, fitness, Probability(0.1), rng)
        return Population(genes=genes)
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np

from queen_placement.population import Population
from queen_placement.probability import Probability


@runtime_checkable
class GenerationSelector(Protocol):
    """Protocol for generation selection strategies.

    Parameters:
        population: The current generation, size P >= 2.
        fitness: Fitness of every individual, shape (P,), higher is better.
        mutation_probability: Passed to crossover for every offspring.
        rng: NumPy random number generator. Strategies derive all randomness
            from it so runs are reproducible.
        n_workers: Worker count for offspring creation (1 = in-process).

    Returns:
        Gene matrix of the next generation, shape (P, board_size). The
        strategy must return exactly P rows.

    Example:
        ```python
        def keep_everyone(population, fitness, mutation_probability, rng, n_workers=1):
            return population.genes.copy()
        ```
    """

    def __call__(
        self,
        population: Population,
        fitness: np.ndarray,
        mutation_probability: Probability,
        rng: np.random.Generator,
        n_workers: int = 1,
    ) -> np.ndarray:
        """Build the next generation's gene matrix."""
        ...
