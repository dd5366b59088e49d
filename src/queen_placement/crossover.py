"""Permutation-preserving crossover with full-replacement mutation.

The crossover keeps every gene on which both parents agree and fills the
remaining rows with a random arrangement of the columns nobody has claimed
yet. Because both parents are permutations, the agreeing values are distinct
and the leftover columns are exactly the complement, so the child is a
permutation as well.

Mutation is global rather than local: with the given probability the child
is not recombined at all but replaced by a fresh random permutation.
"""

import numpy as np

from queen_placement.chromosome import Chromosome
from queen_placement.probability import Probability


def crossover(
    parent1: Chromosome,
    parent2: Chromosome,
    mutation_probability: Probability | float,
    rng: np.random.Generator,
) -> Chromosome:
    """Produce one child from two parent permutations.

    Args:
        parent1: First parent. Must be a permutation of ``0..N-1``.
        parent2: Second parent, same length as parent1.
        mutation_probability: Probability of returning a brand-new random
            permutation instead of recombining the parents.
        rng: Random number generator for reproducibility.

    Returns:
        A new Chromosome that is a permutation of ``0..N-1``.

    Raises:
        ValueError: If the parents differ in length or are not permutations.

    Example:
        >>> rng = np.random.default_rng(0)
        >>> child = crossover(Chromosome([0, 1, 2, 3]), Chromosome([0, 2, 1, 3]), 0.0, rng)
        >>> child.tolist()[0], child.tolist()[3]
        (0, 3)
        >>> child.is_permutation
        True
    """
    if len(parent1) != len(parent2):
        raise ValueError(f"parents must have equal length, got {len(parent1)} and {len(parent2)}")
    if not parent1.is_permutation or not parent2.is_permutation:
        raise ValueError("parents must be permutations of 0..N-1")
    mutation_probability = Probability.coerce(mutation_probability)
    n = len(parent1)

    if rng.random() < mutation_probability.value:
        return Chromosome.random(n, rng)

    genes1 = parent1.genes
    genes2 = parent2.genes
    agree = genes1 == genes2

    free_columns = np.setdiff1d(np.arange(n), genes1[agree])

    child = np.empty(n, dtype=np.int64)
    child[agree] = genes1[agree]
    child[~agree] = rng.permutation(free_columns)
    return Chromosome(child)
