"""Search configuration.

All values are plain and validated on construction; an invalid setting is
rejected here instead of surfacing later inside the engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from queen_placement.probability import Probability
from queen_placement.selection.base import SelectionStrategy

DEFAULT_BOARD_SIZE = 8
DEFAULT_GENERATION_SIZE = 100
DEFAULT_MUTATION_PROBABILITY = 0.1


@dataclass(frozen=True)
class SearchConfig:
    """Settings for one queen placement search.

    Attributes:
        board_size: Board dimension N, at least 1.
        generation_size: Individuals per generation, at least 2.
        mutation_probability: Chance that an offspring is replaced by a
            random permutation. Floats are converted to Probability.
        selection_strategy: Strategy used for every generation transition.
            Strings are resolved with SelectionStrategy.parse.
        max_generations: Optional bound on the number of generations. None
            runs until a solution is found.
        n_workers: joblib workers for evaluation and breeding (1 = in-process,
            -1 = all cores).
        seed: Seed for the random number generator, or None for fresh entropy.

    Example:
        >>> config = SearchConfig(board_size=4, generation_size=10, mutation_probability=0.1)
        >>> config.selection_strategy
        <SelectionStrategy.ADAM_AND_EVE: 'adam-and-eve'>
    """

    board_size: int = DEFAULT_BOARD_SIZE
    generation_size: int = DEFAULT_GENERATION_SIZE
    mutation_probability: Probability = Probability(DEFAULT_MUTATION_PROBABILITY)
    selection_strategy: SelectionStrategy = SelectionStrategy.ADAM_AND_EVE
    max_generations: int | None = None
    n_workers: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate and normalize settings.

        Raises:
            ValueError: If any setting is out of range or names no strategy.
        """
        if self.board_size < 1:
            raise ValueError(f"board_size must be at least 1, got {self.board_size}")
        if self.generation_size < 2:
            raise ValueError(f"generation_size must be at least 2, got {self.generation_size}")
        if self.max_generations is not None and self.max_generations < 1:
            raise ValueError(f"max_generations must be at least 1, got {self.max_generations}")
        if self.n_workers == 0:
            raise ValueError("n_workers must be non-zero")

        object.__setattr__(self, "mutation_probability", Probability.coerce(self.mutation_probability))
        object.__setattr__(self, "selection_strategy", SelectionStrategy.parse(self.selection_strategy))
