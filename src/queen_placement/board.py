"""Conflict counting and fitness for queen placements.

This module provides the fitness evaluator for the genetic search:

- Board: A read-only view of a chromosome that counts attacked queens
- beats_count / fitness / is_solution: Convenience functions over gene sequences

Fitness is ``1 / (beats_count + 1)``, so it lies in ``(0, 1]`` and reaches 1.0
exactly when no queen is attacked. The pairwise scan is O(N^2) and is
vectorized with numpy broadcasting.
"""

from collections.abc import Sequence

import numpy as np

from queen_placement.chromosome import Chromosome


class Board:
    """Read-only view over a chromosome as a chess board.

    The board does not copy or own the chromosome; it only reads its genes.

    Args:
        chromosome: The placement to evaluate. Plain integer sequences are
            wrapped in a Chromosome.

    Example:
        >>> board = Board(Chromosome([1, 3, 0, 2]))
        >>> board.beats_count()
        0
        >>> board.fitness()
        1.0
        >>> print(board)
        . Q . .
        . . . Q
        Q . . .
        . . Q .
    """

    __slots__ = ("chromosome",)

    def __init__(self, chromosome: Chromosome | Sequence[int] | np.ndarray) -> None:
        if not isinstance(chromosome, Chromosome):
            chromosome = Chromosome(chromosome)
        self.chromosome = chromosome

    def attacks(self) -> np.ndarray:
        """Return the pairwise attack matrix.

        ``attacks[i, j]`` is True when the queens in rows ``i`` and ``j``
        (``i != j``) share a column or a diagonal. Columns can only clash for
        chromosomes that are not permutations.

        Returns:
            Boolean array of shape (board_size, board_size), symmetric, with a
            False diagonal.
        """
        genes = self.chromosome.genes
        rows = np.arange(genes.shape[0])
        row_distance = np.abs(rows[:, None] - rows[None, :])
        column_distance = np.abs(genes[:, None] - genes[None, :])
        attacks = (column_distance == 0) | (row_distance == column_distance)
        np.fill_diagonal(attacks, False)
        return attacks

    def beats_count(self) -> int:
        """Count queens attacked by at least one other queen.

        This counts attacked queens, not attacking pairs: three queens on one
        diagonal give 3, not 3 pairs.
        """
        return int(self.attacks().any(axis=1).sum())

    def has_beats(self) -> bool:
        """Return True if any queen is attacked."""
        return bool(self.attacks().any())

    def fitness(self) -> float:
        """Return ``1 / (beats_count + 1)``; 1.0 means a valid placement."""
        return 1.0 / (self.beats_count() + 1)

    def is_solution(self) -> bool:
        return self.fitness() == 1.0

    def __str__(self) -> str:
        n = self.chromosome.board_size
        lines = []
        for column in self.chromosome.genes:
            cells = ["."] * n
            if column < n:
                cells[column] = "Q"
            lines.append(" ".join(cells))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({self.chromosome!r})"


def beats_count(chromosome: Chromosome | Sequence[int] | np.ndarray) -> int:
    """Count attacked queens of a chromosome or plain gene sequence.

    Example:
        >>> beats_count([0, 2, 2])
        3
    """
    return Board(chromosome).beats_count()


def fitness(chromosome: Chromosome | Sequence[int] | np.ndarray) -> float:
    """Return the fitness of a chromosome or plain gene sequence, in (0, 1]."""
    return Board(chromosome).fitness()


def is_solution(chromosome: Chromosome | Sequence[int] | np.ndarray) -> bool:
    """Return True if no queen is attacked."""
    return Board(chromosome).is_solution()
