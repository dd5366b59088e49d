"""Generation transition and search loop.

This module provides the two entry points of the engine:

- new_generation: Turn one population into the next with a selection strategy
- evolve: Repeat new_generation until a solution appears or a bound is hit

``new_generation`` keeps no state between calls; everything it needs is in
the population and the arguments. The returned population carries its
fitness, so feeding it back into ``new_generation`` does not evaluate it
twice.

Example:
    >>> from queen_placement import SearchConfig, evolve
    >>> result = evolve(SearchConfig(board_size=6, generation_size=50, seed=3))
    >>> result.solved
    True
    >>> best, fitness = result.best
    >>> fitness
    1.0
"""

import logging
from collections.abc import Callable

import numpy as np

# Import the selection package to trigger strategy registration
import queen_placement.selection  # noqa: F401
from queen_placement.config import SearchConfig
from queen_placement.operators import evaluate
from queen_placement.population import Population, create_generation
from queen_placement.probability import Probability
from queen_placement.protocols import GenerationSelector
from queen_placement.registry import StrategyRegistry
from queen_placement.results import SearchResult
from queen_placement.selection.base import SelectionStrategy

logger = logging.getLogger(__name__)


def resolve_strategy(strategy: str | SelectionStrategy | GenerationSelector, **options) -> GenerationSelector:
    """Return a selector for a strategy member, registered name or callable.

    Raises:
        KeyError: If a name is not registered.
        TypeError: If strategy is neither a name nor callable.
    """
    if isinstance(strategy, str):
        return StrategyRegistry.get(strategy, **options)
    if not callable(strategy):
        raise TypeError(f"strategy must be a strategy name or a callable, got {type(strategy).__name__}")
    return strategy


def new_generation(
    population: Population,
    strategy: str | SelectionStrategy | GenerationSelector,
    mutation_probability: Probability | float,
    rng: np.random.Generator | None = None,
    n_workers: int = 1,
    **strategy_options,
) -> Population:
    """Produce the next generation.

    Args:
        population: Current generation, at least two individuals. Its fitness
            is reused when present and computed otherwise.
        strategy: Selection strategy. Can be:
            - SelectionStrategy member or registered name (e.g. "tournament")
            - GenerationSelector: Direct callable following the protocol
        mutation_probability: Probability in [0, 1], as Probability or float.
        rng: Random number generator. If None, uses fresh system entropy.
        n_workers: joblib workers for evaluation and breeding (1 = in-process).
        **strategy_options: Passed to the registry factory when strategy is a
            name (e.g. tournament_size=5).

    Returns:
        A new evaluated Population with the same size and board size.

    Raises:
        ValueError: If the population has fewer than two individuals or the
            probability is outside [0, 1].
        KeyError: If a strategy name is not registered.
        TypeError: If strategy is neither a name nor callable.
        RuntimeError: If a custom strategy returns the wrong number of rows.
    """
    if len(population) < 2:
        raise ValueError(f"population must have at least 2 individuals, got {len(population)}")
    mutation_probability = Probability.coerce(mutation_probability)
    selector = resolve_strategy(strategy, **strategy_options)
    if rng is None:
        rng = np.random.default_rng()

    fitness = population.fitness if population.fitness is not None else evaluate(population, n_workers)

    genes = selector(population, fitness, mutation_probability, rng, n_workers)
    if genes.shape != population.genes.shape:
        raise RuntimeError(
            f"selection strategy returned genes of shape {genes.shape}, expected {population.genes.shape}"
        )

    next_population = Population(genes=genes)
    return next_population.with_fitness(evaluate(next_population, n_workers))


def evolve(
    config: SearchConfig,
    rng: np.random.Generator | None = None,
    callback: Callable[[Population, int], bool] | None = None,
) -> SearchResult:
    """Run the search until a solution is found.

    The initial population counts as generation 1. The loop stops when any
    individual reaches fitness 1.0, when ``config.max_generations``
    generations exist, or when ``callback`` returns True.

    Args:
        config: Validated search settings.
        rng: Random number generator. If None, one is seeded from config.seed.
        callback: Optional callable invoked with each evaluated generation and
            its number. Returning True stops the search.

    Returns:
        SearchResult for the last generation.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    population = create_generation(config.board_size, config.generation_size, rng)
    population = population.with_fitness(evaluate(population, config.n_workers))
    generation = 1

    while True:
        assert population.fitness is not None
        best_idx = int(np.argmax(population.fitness))
        best_fitness = float(population.fitness[best_idx])
        logger.debug(
            "Generation %d: best fitness %.4f, best %s", generation, best_fitness, population[best_idx].tolist()
        )

        solved = best_fitness == 1.0
        stop = callback is not None and callback(population, generation)
        if solved:
            logger.info("Solution found in generation %d", generation)
            break
        if stop:
            logger.info("Search stopped by callback in generation %d", generation)
            break
        if config.max_generations is not None and generation >= config.max_generations:
            logger.info("No solution within %d generations (best fitness %.4f)", generation, best_fitness)
            break

        population = new_generation(
            population,
            config.selection_strategy,
            config.mutation_probability,
            rng=rng,
            n_workers=config.n_workers,
        )
        generation += 1

    return SearchResult(
        population=population,
        fitness=population.fitness,
        best_idx=best_idx,
        generations=generation,
        solved=solved,
    )
