"""Command-line entry point for the queen placement search.

Usage:
    queen-placement --board-size 8 --generation-size 100 -p 0.1 -s adam-and-eve
    python -m queen_placement -b 12 -s tournament --seed 7 -v
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from queen_placement.board import Board
from queen_placement.config import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_GENERATION_SIZE,
    DEFAULT_MUTATION_PROBABILITY,
    SearchConfig,
)
from queen_placement.engine import evolve
from queen_placement.probability import Probability
from queen_placement.selection.base import SelectionStrategy

logger = logging.getLogger(__name__)


def _probability(text: str) -> Probability:
    try:
        return Probability.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _strategy(text: str) -> SelectionStrategy:
    try:
        return SelectionStrategy.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="queen-placement",
        description="Place N non-attacking queens on an NxN board with a genetic algorithm.",
    )
    parser.add_argument(
        "-b",
        "--board-size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Size of the chess board (default: {DEFAULT_BOARD_SIZE}).",
    )
    parser.add_argument(
        "-g",
        "--generation-size",
        type=int,
        default=DEFAULT_GENERATION_SIZE,
        help=f"Size of the population in one generation, at least 2 (default: {DEFAULT_GENERATION_SIZE}).",
    )
    parser.add_argument(
        "-p",
        "--mutation-probability",
        type=_probability,
        default=Probability(DEFAULT_MUTATION_PROBABILITY),
        help=f"Probability of mutation, in [0, 1] (default: {DEFAULT_MUTATION_PROBABILITY}).",
    )
    parser.add_argument(
        "-s",
        "--selection-strategy",
        type=_strategy,
        default=SelectionStrategy.ADAM_AND_EVE,
        metavar="{" + ",".join(s.value for s in SelectionStrategy) + "}",
        help="Strategy for selecting the individuals of the next generation (default: adam-and-eve).",
    )
    parser.add_argument(
        "--max-generations",
        type=int,
        default=None,
        help="Give up after this many generations (default: run until solved).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs.")
    parser.add_argument(
        "-j",
        "--workers",
        type=int,
        default=1,
        help="Parallel workers for evaluation and breeding; -1 uses all cores (default: 1).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log the best fitness of every generation.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: parse arguments, run the search, print the solutions.

    Returns:
        0 when a solution was found, 1 when the generation bound was reached.
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = SearchConfig(
            board_size=args.board_size,
            generation_size=args.generation_size,
            mutation_probability=args.mutation_probability,
            selection_strategy=args.selection_strategy,
            max_generations=args.max_generations,
            n_workers=args.workers,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logger.info(
        "Parameters: board_size=%d, generation_size=%d, mutation_probability=%s, strategy=%s",
        config.board_size,
        config.generation_size,
        config.mutation_probability,
        config.selection_strategy.label,
    )

    result = evolve(config)

    if not result.solved:
        best, best_fitness = result.best
        print(f"No solution after {result.generations} generations, best fitness {best_fitness:.4f}:")
        print(Board(best))
        return 1

    for solution in result.solutions:
        print(f"{Board(solution)}\n({result.generations})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
