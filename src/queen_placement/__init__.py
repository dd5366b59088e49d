"""queen-placement: N-queens placement with a genetic algorithm.

A numpy implementation of an evolutionary search for N non-attacking queens.
Candidates are permutations (one queen per row and column), so only diagonal
attacks have to be counted, and every operator keeps that invariant.

Example (one generation at a time):
    >>> import numpy as np
    >>> from queen_placement import create_generation, new_generation, is_solution
    >>> rng = np.random.default_rng(42)
    >>> pop = create_generation(board_size=8, generation_size=50, rng=rng)
    >>> pop = new_generation(pop, "kill-the-half", mutation_probability=0.1, rng=rng)
    >>> len(pop)
    50

Example (full search):
    >>> from queen_placement import SearchConfig, evolve
    >>> result = evolve(SearchConfig(board_size=8, generation_size=100, seed=1))
    >>> result.solved
    True
"""

from queen_placement.board import Board, beats_count, fitness, is_solution
from queen_placement.chromosome import Chromosome
from queen_placement.config import SearchConfig
from queen_placement.crossover import crossover
from queen_placement.engine import evolve, new_generation, resolve_strategy
from queen_placement.operators import create_offspring, evaluate
from queen_placement.population import Population, create_generation
from queen_placement.probability import Probability
from queen_placement.protocols import GenerationSelector
from queen_placement.registry import StrategyRegistry, list_strategies
from queen_placement.results import SearchResult
from queen_placement.selection import SelectionStrategy, adam_and_eve, kill_the_half, tournament

__all__ = [
    # Engine
    "new_generation",
    "evolve",
    "resolve_strategy",
    # Selection strategies
    "SelectionStrategy",
    "adam_and_eve",
    "kill_the_half",
    "tournament",
    # Genetic operators
    "crossover",
    "create_offspring",
    "evaluate",
    # Fitness
    "Board",
    "beats_count",
    "fitness",
    "is_solution",
    # Registry system
    "StrategyRegistry",
    "GenerationSelector",
    "list_strategies",
    # Data structures
    "Chromosome",
    "Population",
    "create_generation",
    "Probability",
    "SearchConfig",
    # Result types
    "SearchResult",
]
