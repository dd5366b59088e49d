"""Adam and Eve selection: the whole generation descends from the two best."""

import numpy as np

from queen_placement.operators import create_offspring
from queen_placement.population import Population
from queen_placement.probability import Probability
from queen_placement.selection.base import assemble, rank_by_fitness


def adam_and_eve():
    """Create an Adam and Eve generation selector.

    The two fittest individuals become parents and survive unchanged. Every
    other slot is filled with a child of exactly these two parents, so the
    strategy is purely elitist and converges quickly at the cost of
    diversity (mutation is its only source of new material).

    Returns:
        A GenerationSelector callable.

    Example:
        >>> selector = adam_and_eve()
        >>> genes = selector(pop, fitness, Probability(0.1), rng)
        >>> genes.shape == pop.genes.shape
        True
    """

    def selector(
        population: Population,
        fitness: np.ndarray,
        mutation_probability: Probability,
        rng: np.random.Generator,
        n_workers: int = 1,
    ) -> np.ndarray:
        """Select the two best and breed the rest of the generation from them.

        Returns:
            Gene matrix with the P - 2 offspring first, then parent1 and
            parent2.

        Raises:
            ValueError: If the population has fewer than two individuals.
        """
        order = rank_by_fitness(population, fitness)
        parent1 = population[order[0]]
        parent2 = population[order[1]]

        n_offspring = len(population) - 2
        offspring = create_offspring([(parent1, parent2)] * n_offspring, mutation_probability, rng, n_workers)

        return assemble(offspring, np.stack([parent1.genes, parent2.genes]))

    return selector
