"""Population data structure for the queen placement search.

This module provides:

- Population: A struct-of-arrays representation of one generation
- create_generation: Seed a population with random permutations

The population is immutable (frozen dataclass) to enforce functional style:
each generation transition builds a new Population and the previous one is
simply dropped.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from queen_placement.chromosome import Chromosome


@dataclass(frozen=True)
class Population:
    """Immutable struct-of-arrays representation of a generation.

    Individuals are stored as rows of one gene matrix so that sorting and
    copying whole generations are vectorized operations. All arrays are
    copied on construction and marked read-only.

    Attributes:
        genes: Gene matrix, shape (generation_size, board_size). Row ``k`` is
            the chromosome of individual ``k``.
        fitness: Fitness of each individual, shape (generation_size,), or None
            if the population has not been evaluated.

    Example:
        >>> genes = np.array([[0, 1, 2], [2, 0, 1]])
        >>> pop = Population(genes=genes)
        >>> len(pop)
        2
        >>> pop.board_size
        3
        >>> pop[1]
        Chromosome([2, 0, 1])
    """

    genes: np.ndarray
    fitness: np.ndarray | None = None

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If genes or fitness are not numpy arrays, or genes are
                not integers.
            ValueError: If array shapes are inconsistent or invalid.
        """
        if not isinstance(self.genes, np.ndarray):
            raise TypeError(f"genes must be a numpy array, got {type(self.genes).__name__}")
        if self.genes.ndim != 2:
            raise ValueError(f"genes must be 2D, got shape {self.genes.shape}")
        if not np.issubdtype(self.genes.dtype, np.integer):
            raise TypeError(f"genes must have integer dtype, got {self.genes.dtype}")

        genes = self.genes.astype(np.int64, copy=True)
        genes.setflags(write=False)
        object.__setattr__(self, "genes", genes)

        if self.fitness is not None:
            if not isinstance(self.fitness, np.ndarray):
                raise TypeError(f"fitness must be a numpy array, got {type(self.fitness).__name__}")
            if self.fitness.ndim != 1:
                raise ValueError(f"fitness must be 1D, got shape {self.fitness.shape}")
            if self.fitness.shape[0] != genes.shape[0]:
                raise ValueError(
                    f"fitness has {self.fitness.shape[0]} elements, expected {genes.shape[0]} to match genes"
                )
            fitness = self.fitness.astype(np.float64, copy=True)
            fitness.setflags(write=False)
            object.__setattr__(self, "fitness", fitness)

    @classmethod
    def from_chromosomes(cls, chromosomes: Iterable[Chromosome], fitness: np.ndarray | None = None) -> Population:
        """Build a population from chromosomes of equal length.

        Raises:
            ValueError: If the iterable is empty or the chromosomes differ in length.
        """
        rows = [c.genes for c in chromosomes]
        if not rows:
            raise ValueError("cannot build a population from zero chromosomes")
        lengths = {row.shape[0] for row in rows}
        if len(lengths) != 1:
            raise ValueError(f"chromosomes must share one board size, got sizes {sorted(lengths)}")
        return cls(genes=np.stack(rows), fitness=fitness)

    def __len__(self) -> int:
        return self.genes.shape[0]

    def __getitem__(self, idx: int) -> Chromosome:
        """Return individual ``idx`` as a Chromosome (supports negative indexing).

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")
        n = len(self)
        if idx < -n or idx >= n:
            raise IndexError(f"index {idx} is out of bounds for population with {n} individuals")
        return Chromosome(self.genes[idx])

    def __iter__(self) -> Iterator[Chromosome]:
        for i in range(len(self)):
            yield Chromosome(self.genes[i])

    @property
    def board_size(self) -> int:
        return self.genes.shape[1]

    @property
    def is_evaluated(self) -> bool:
        return self.fitness is not None

    def with_fitness(self, fitness: np.ndarray) -> Population:
        """Return a copy of this population with fitness attached."""
        return Population(genes=self.genes, fitness=fitness)


def create_generation(
    board_size: int,
    generation_size: int,
    rng: np.random.Generator | None = None,
) -> Population:
    """Create a population of uniformly random permutations.

    Args:
        board_size: Board dimension N. Must be at least 1.
        generation_size: Number of individuals. Must be at least 2, the
            minimum any selection strategy can breed from.
        rng: Random number generator. If None, uses fresh system entropy.

    Returns:
        An unevaluated Population of shape (generation_size, board_size).

    Raises:
        ValueError: If board_size < 1 or generation_size < 2.

    Example:
        >>> pop = create_generation(8, 20, np.random.default_rng(42))
        >>> len(pop), pop.board_size
        (20, 8)
    """
    if board_size < 1:
        raise ValueError(f"board_size must be at least 1, got {board_size}")
    if generation_size < 2:
        raise ValueError(f"generation_size must be at least 2, got {generation_size}")
    if rng is None:
        rng = np.random.default_rng()

    genes = rng.permuted(np.tile(np.arange(board_size), (generation_size, 1)), axis=1)
    return Population(genes=genes)
