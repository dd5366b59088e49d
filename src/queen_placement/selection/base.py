"""Shared pieces of the selection strategies."""

from __future__ import annotations

from enum import Enum

import numpy as np

from queen_placement.population import Population


class SelectionStrategy(str, Enum):
    """Closed set of generation selection strategies.

    The value is the registry name. ``parse`` also accepts member names and
    the human-readable labels, case-insensitively.
    """

    ADAM_AND_EVE = "adam-and-eve"
    KILL_THE_HALF = "kill-the-half"
    TOURNAMENT = "tournament"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str | SelectionStrategy) -> SelectionStrategy:
        """Resolve a strategy from its value, member name or label.

        Raises:
            ValueError: If text names no strategy.

        Example:
            >>> SelectionStrategy.parse("Kill the half")
            <SelectionStrategy.KILL_THE_HALF: 'kill-the-half'>
        """
        if isinstance(text, cls):
            return text
        wanted = str(text).strip().lower()
        for member in cls:
            if wanted in (member.value, member.name.lower(), member.label.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"unknown selection strategy {text!r}, expected one of: {choices}")


_LABELS = {
    SelectionStrategy.ADAM_AND_EVE: "Adam and Eve",
    SelectionStrategy.KILL_THE_HALF: "Kill the half",
    SelectionStrategy.TOURNAMENT: "Tournament",
}


def rank_by_fitness(population: Population, fitness: np.ndarray) -> np.ndarray:
    """Return individual indices ordered best first.

    Ties keep population order (stable sort), so among equally fit
    individuals the earlier one ranks higher.

    Raises:
        ValueError: If the population has fewer than two individuals or the
            fitness array does not match it.
    """
    if len(population) < 2:
        raise ValueError(f"selection requires at least 2 individuals, got {len(population)}")
    if fitness.shape != (len(population),):
        raise ValueError(f"fitness has shape {fitness.shape}, expected ({len(population)},)")
    return np.argsort(-fitness, kind="stable")


def assemble(*parts: np.ndarray) -> np.ndarray:
    """Concatenate gene blocks into one generation, skipping empty blocks."""
    return np.concatenate([part for part in parts if part.shape[0] > 0]).astype(np.int64, copy=False)
