"""Result type of a queen placement search.

The result is immutable (frozen dataclass); the fitness array is copied on
construction.
"""

from dataclasses import dataclass

import numpy as np

from queen_placement.chromosome import Chromosome
from queen_placement.population import Population


@dataclass(frozen=True)
class SearchResult:
    """Outcome of :func:`queen_placement.engine.evolve`.

    Attributes:
        population: The last generation.
        fitness: Fitness of each individual in the last generation, shape (n,).
        best_idx: Index of the fittest individual (first one on ties).
        generations: Number of generations, counting the initial one as 1.
        solved: True when at least one individual has fitness 1.0.

    Example:
        >>> pop = Population(genes=np.array([[1, 3, 0, 2], [0, 1, 2, 3]]))
        >>> result = SearchResult(
        ...     population=pop,
        ...     fitness=np.array([1.0, 0.2]),
        ...     best_idx=0,
        ...     generations=7,
        ...     solved=True,
        ... )
        >>> result.solutions
        [Chromosome([1, 3, 0, 2])]
    """

    population: Population
    fitness: np.ndarray
    best_idx: int
    generations: int
    solved: bool

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If fitness is not a numpy array or best_idx is not an integer.
            ValueError: If array shapes are inconsistent or best_idx is out of bounds.
        """
        n = len(self.population)

        if not isinstance(self.fitness, np.ndarray):
            raise TypeError(f"fitness must be a numpy array, got {type(self.fitness).__name__}")
        if self.fitness.ndim != 1:
            raise ValueError(f"fitness must be 1D, got shape {self.fitness.shape}")
        if self.fitness.shape[0] != n:
            raise ValueError(f"fitness has {self.fitness.shape[0]} elements, expected {n} to match population size")

        if not isinstance(self.best_idx, (int, np.integer)):
            raise TypeError(f"best_idx must be an integer, got {type(self.best_idx).__name__}")
        if self.best_idx < 0 or self.best_idx >= n:
            raise ValueError(f"best_idx {self.best_idx} is out of bounds for population with {n} individuals")

        object.__setattr__(self, "fitness", self.fitness.copy())

    @property
    def best(self) -> tuple[Chromosome, float]:
        """Return the fittest chromosome and its fitness."""
        return self.population[self.best_idx], float(self.fitness[self.best_idx])

    @property
    def solutions(self) -> list[Chromosome]:
        """Return the distinct solved chromosomes in population order."""
        seen: dict[Chromosome, None] = {}
        for idx in np.flatnonzero(self.fitness == 1.0):
            seen.setdefault(self.population[idx], None)
        return list(seen)
