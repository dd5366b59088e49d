"""Tournament selection for the queen placement search."""

import numpy as np

from queen_placement.operators import create_offspring
from queen_placement.population import Population
from queen_placement.probability import Probability
from queen_placement.selection.base import assemble, rank_by_fitness


def tournament(tournament_size: int = 3, elite_count: int = 1):
    """Create a tournament generation selector.

    Each offspring gets its own two parents. A parent is the fittest of
    ``tournament_size`` individuals drawn uniformly without replacement
    (capped at the population size). The best ``elite_count`` individuals
    are carried over unchanged so a found solution is never lost.

    Args:
        tournament_size: Number of individuals competing in each tournament (default: 3).
        elite_count: Number of best individuals copied into the next
            generation (default: 1). Zero disables elitism.

    Returns:
        A GenerationSelector callable.

    Raises:
        ValueError: If tournament_size < 2 or elite_count < 0.

    Example:
        >>> selector = tournament(tournament_size=4)
        >>> genes = selector(pop, fitness, Probability(0.1), rng)
    """
    if tournament_size < 2:
        raise ValueError(f"tournament_size must be at least 2, got {tournament_size}")
    if elite_count < 0:
        raise ValueError(f"elite_count must be non-negative, got {elite_count}")

    def selector(
        population: Population,
        fitness: np.ndarray,
        mutation_probability: Probability,
        rng: np.random.Generator,
        n_workers: int = 1,
    ) -> np.ndarray:
        """Breed the next generation from tournament winners.

        Returns:
            Gene matrix with the elite first (best first), then offspring.

        Raises:
            ValueError: If the population has fewer than two individuals or
                fewer individuals than elite_count.
        """
        order = rank_by_fitness(population, fitness)
        pop_size = len(population)
        if elite_count > pop_size:
            raise ValueError(f"elite_count ({elite_count}) cannot exceed population size ({pop_size})")

        k = min(tournament_size, pop_size)
        n_offspring = pop_size - elite_count

        # Two tournaments per offspring
        winners = np.empty(2 * n_offspring, dtype=np.intp)
        for i in range(2 * n_offspring):
            candidates = rng.choice(pop_size, size=k, replace=False)
            winners[i] = candidates[np.argmax(fitness[candidates])]

        parent_pairs = [
            (population[winners[2 * i]], population[winners[2 * i + 1]]) for i in range(n_offspring)
        ]
        offspring = create_offspring(parent_pairs, mutation_probability, rng, n_workers)

        return assemble(population.genes[order[:elite_count]], offspring)

    return selector
