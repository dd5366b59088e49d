"""Chromosome representation of a queen placement.

A chromosome is a 1-D integer array where ``genes[row] = column``: exactly one
queen per row. Chromosomes created by :meth:`Chromosome.random` and by
crossover are permutations of ``0..N-1``, so two queens can never share a row
or a column and only diagonal attacks remain possible.

Chromosomes are immutable. The gene array is copied on construction and
marked read-only, so handing ``chromosome.genes`` to a renderer cannot change
the individual.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


class Chromosome:
    """Immutable sequence of column indices, one per board row.

    Any 1-D sequence of non-negative integers is accepted; use
    :attr:`is_permutation` to check the permutation invariant.

    Attributes:
        genes: Read-only integer array of shape (board_size,).

    Example:
        >>> chromosome = Chromosome([1, 3, 0, 2])
        >>> chromosome.board_size
        4
        >>> chromosome.is_permutation
        True
        >>> chromosome.tolist()
        [1, 3, 0, 2]
    """

    __slots__ = ("_genes",)

    def __init__(self, genes: Sequence[int] | np.ndarray) -> None:
        """Validate and copy the gene sequence.

        Raises:
            TypeError: If the genes are not integers.
            ValueError: If the genes are not 1-D or contain negative values.
        """
        array = np.array(genes)
        if array.size == 0:
            array = array.astype(np.int64)
        if array.ndim != 1:
            raise ValueError(f"genes must be 1D, got shape {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise TypeError(f"genes must have integer dtype, got {array.dtype}")
        if array.size and array.min() < 0:
            raise ValueError("genes must be non-negative column indices")
        array = array.astype(np.int64, copy=False)
        array.setflags(write=False)
        self._genes = array

    @classmethod
    def random(cls, board_size: int, rng: np.random.Generator) -> Chromosome:
        """Create a chromosome from a uniform random permutation of ``0..board_size-1``."""
        if board_size < 0:
            raise ValueError(f"board_size must be non-negative, got {board_size}")
        return cls(rng.permutation(board_size))

    @property
    def genes(self) -> np.ndarray:
        return self._genes

    @property
    def board_size(self) -> int:
        return self._genes.shape[0]

    @property
    def is_permutation(self) -> bool:
        """True when the genes are exactly the values ``0..board_size-1``."""
        n = self.board_size
        if n and self._genes.max() >= n:
            return False
        return bool(np.unique(self._genes).shape[0] == n)

    def tolist(self) -> list[int]:
        """Return the genes as a new list of Python ints."""
        return self._genes.tolist()

    def __len__(self) -> int:
        return self.board_size

    def __iter__(self):
        return iter(self.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return bool(np.array_equal(self._genes, other._genes))

    def __hash__(self) -> int:
        return hash(self._genes.tobytes())

    def __repr__(self) -> str:
        return f"Chromosome({self.tolist()})"
