"""Population-level operators.

This module provides the fork-join layer of the search:

- evaluate: Fitness of every board in a population, optionally across joblib workers
- create_offspring: Run one crossover per parent pair, each with its own
  random generator, and collect the children into a fresh gene matrix

Tasks never share mutable state. Parents are only read, every offspring
task gets an independent generator spawned from the caller's, and results
are gathered by joblib (or a list comprehension) rather than appended to a
shared container. The same seed therefore gives the same children for any
number of workers.
"""

from collections.abc import Sequence

import numpy as np

from queen_placement.board import fitness as board_fitness
from queen_placement.chromosome import Chromosome
from queen_placement.crossover import crossover
from queen_placement.population import Population
from queen_placement.probability import Probability


def evaluate(population: Population, n_workers: int = 1) -> np.ndarray:
    """Compute the fitness of every individual.

    Each board is scored on its own (the pairwise scan inside one board is
    vectorized), so boards are the unit of work handed to joblib.

    Args:
        population: Population to evaluate.
        n_workers: 1 evaluates in-process; any other value uses joblib with
            that many workers (-1 for all cores).

    Returns:
        Float array of shape (len(population),) with values in (0, 1], in
        population order.

    Example:
        >>> pop = Population(genes=np.array([[1, 3, 0, 2], [0, 1, 2, 3]]))
        >>> evaluate(pop).tolist()
        [1.0, 0.2]
    """
    if n_workers == 0:
        raise ValueError("n_workers must be non-zero")
    if n_workers == 1:
        scores = [board_fitness(row) for row in population.genes]
    else:
        from joblib import Parallel, delayed

        scores = Parallel(n_jobs=n_workers)(delayed(board_fitness)(row) for row in population.genes)
    return np.asarray(scores, dtype=np.float64)


def _breed_one(
    parent1: Chromosome,
    parent2: Chromosome,
    mutation_probability: Probability,
    rng: np.random.Generator,
) -> np.ndarray:
    return crossover(parent1, parent2, mutation_probability, rng).genes


def create_offspring(
    parent_pairs: Sequence[tuple[Chromosome, Chromosome]],
    mutation_probability: Probability | float,
    rng: np.random.Generator,
    n_workers: int = 1,
) -> np.ndarray:
    """Create one child per parent pair.

    Args:
        parent_pairs: Pairs of parents. The same pair may appear many times;
            parents are never modified.
        mutation_probability: Probability that a child is replaced by a fresh
            random permutation instead of being recombined.
        rng: Generator from which one independent child generator per
            offspring is spawned.
        n_workers: 1 breeds in-process; any other value uses joblib.

    Returns:
        Integer array of shape (len(parent_pairs), board_size). Empty pairs
        give an array with zero rows.

    Example:
        >>> p1, p2 = Chromosome([0, 1, 2, 3]), Chromosome([0, 2, 1, 3])
        >>> children = create_offspring([(p1, p2)] * 5, 0.0, np.random.default_rng(1))
        >>> children.shape
        (5, 4)
    """
    if n_workers == 0:
        raise ValueError("n_workers must be non-zero")
    mutation_probability = Probability.coerce(mutation_probability)
    if not parent_pairs:
        return np.empty((0, 0), dtype=np.int64)

    task_rngs = rng.spawn(len(parent_pairs))
    if n_workers == 1:
        children = [
            _breed_one(p1, p2, mutation_probability, task_rng)
            for (p1, p2), task_rng in zip(parent_pairs, task_rngs)
        ]
    else:
        from joblib import Parallel, delayed

        children = Parallel(n_jobs=n_workers)(
            delayed(_breed_one)(p1, p2, mutation_probability, task_rng)
            for (p1, p2), task_rng in zip(parent_pairs, task_rngs)
        )
    return np.stack(children)
