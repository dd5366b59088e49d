"""Kill the half selection: cull the weaker half, breed replacements from the top two."""

import numpy as np

from queen_placement.operators import create_offspring
from queen_placement.population import Population
from queen_placement.probability import Probability
from queen_placement.selection.base import assemble, rank_by_fitness


def kill_the_half():
    """Create a Kill the half generation selector.

    The population is sorted by fitness. The better half survives unchanged
    (never fewer than the two parents), the rest is discarded and replaced
    by children of the two fittest individuals. Compared to Adam and Eve this
    keeps an above-median second tier alive between generations.

    For P individuals, ``keep = max(P // 2, 2)`` survive and ``P - keep``
    offspring are created.

    Returns:
        A GenerationSelector callable.

    Example:
        >>> selector = kill_the_half()
        >>> genes = selector(pop, fitness, Probability(0.1), rng)
    """

    def selector(
        population: Population,
        fitness: np.ndarray,
        mutation_probability: Probability,
        rng: np.random.Generator,
        n_workers: int = 1,
    ) -> np.ndarray:
        """Keep the better half and refill with offspring of the best two.

        Returns:
            Gene matrix ordered as: surviving second tier (best first),
            offspring, parent1, parent2.

        Raises:
            ValueError: If the population has fewer than two individuals.
        """
        order = rank_by_fitness(population, fitness)
        parent1 = population[order[0]]
        parent2 = population[order[1]]

        n_keep = max(len(population) // 2, 2)
        second_tier = population.genes[order[2:n_keep]]

        n_offspring = len(population) - n_keep
        offspring = create_offspring([(parent1, parent2)] * n_offspring, mutation_probability, rng, n_workers)

        return assemble(second_tier, offspring, np.stack([parent1.genes, parent2.genes]))

    return selector
