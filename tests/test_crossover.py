"""Tests for the permutation crossover operator."""

import numpy as np
import pytest

from queen_placement import Chromosome, Probability, crossover


class TestCrossoverRecombination:
    """Tests for the recombination branch (mutation probability 0)."""

    @pytest.mark.parametrize("board_size", [1, 2, 4, 8, 25])
    def test_child_is_permutation(self, board_size: int, rng: np.random.Generator) -> None:
        """Crossing two permutations always yields a permutation."""
        for _ in range(50):
            parent1 = Chromosome.random(board_size, rng)
            parent2 = Chromosome.random(board_size, rng)

            child = crossover(parent1, parent2, 0.0, rng)

            assert child.board_size == board_size
            assert child.is_permutation

    def test_agreement_positions_are_kept(self, rng: np.random.Generator) -> None:
        """Genes both parents agree on are inherited unchanged."""
        parent1 = Chromosome([0, 1, 2, 3, 4, 5])
        parent2 = Chromosome([0, 2, 1, 3, 5, 4])

        for _ in range(30):
            child = crossover(parent1, parent2, 0.0, rng).tolist()
            assert child[0] == 0
            assert child[3] == 3
            assert sorted(child[i] for i in (1, 2, 4, 5)) == [1, 2, 4, 5]

    def test_identical_parents_give_identical_child(self, rng: np.random.Generator) -> None:
        """With nothing to disagree on, the child is a copy of the parents."""
        parent = Chromosome([4, 1, 3, 0, 2])

        assert crossover(parent, parent, 0.0, rng) == parent

    def test_disagreement_positions_are_shuffled(self, rng: np.random.Generator) -> None:
        """Disagreement positions take more than one arrangement over many children."""
        parent1 = Chromosome(np.arange(8))
        parent2 = Chromosome(np.arange(8)[::-1])

        children = {crossover(parent1, parent2, 0.0, rng) for _ in range(30)}

        assert len(children) > 1

    def test_parents_are_not_modified(self, rng: np.random.Generator) -> None:
        """Crossover only reads its parents."""
        parent1 = Chromosome([0, 1, 2, 3])
        parent2 = Chromosome([3, 2, 1, 0])

        crossover(parent1, parent2, 0.0, rng)

        assert parent1.tolist() == [0, 1, 2, 3]
        assert parent2.tolist() == [3, 2, 1, 0]

    def test_reproducible_with_seed(self) -> None:
        """The same seed gives the same child."""
        parent1 = Chromosome([0, 1, 2, 3, 4, 5, 6])
        parent2 = Chromosome([6, 5, 4, 3, 2, 1, 0])

        a = crossover(parent1, parent2, 0.3, np.random.default_rng(11))
        b = crossover(parent1, parent2, 0.3, np.random.default_rng(11))

        assert a == b


class TestCrossoverMutation:
    """Tests for the full-replacement mutation branch."""

    def test_certain_mutation_returns_permutation(self, rng: np.random.Generator) -> None:
        """With probability 1 the child is a fresh random permutation."""
        parent = Chromosome(np.arange(8))

        for _ in range(20):
            child = crossover(parent, parent, 1.0, rng)
            assert child.is_permutation

    def test_certain_mutation_discards_inheritance(self, rng: np.random.Generator) -> None:
        """Identical parents no longer force an identical child."""
        parent = Chromosome(np.arange(8))

        children = [crossover(parent, parent, 1.0, rng) for _ in range(20)]

        assert any(child != parent for child in children)

    def test_accepts_probability_objects(self, rng: np.random.Generator) -> None:
        """Probability instances and floats are interchangeable."""
        parent = Chromosome([1, 3, 0, 2])

        assert crossover(parent, parent, Probability(0.0), rng) == parent


class TestCrossoverErrors:
    """Tests for caller contract violations."""

    def test_rejects_mismatched_lengths(self, rng: np.random.Generator) -> None:
        """Parents of different board sizes fail fast."""
        with pytest.raises(ValueError, match="parents must have equal length"):
            crossover(Chromosome([0, 1, 2]), Chromosome([0, 1]), 0.0, rng)

    @pytest.mark.parametrize(
        ("genes1", "genes2"),
        [
            ([0, 0, 2], [0, 0, 2]),
            ([0, 0, 1], [1, 0, 0]),
            ([5, 0], [0, 5]),
            ([0, 1, 2], [0, 2, 2]),
        ],
    )
    def test_rejects_non_permutation_parents(
        self, genes1: list[int], genes2: list[int], rng: np.random.Generator
    ) -> None:
        """Parents with repeated or out-of-range columns cannot be recombined."""
        with pytest.raises(ValueError, match="parents must be permutations"):
            crossover(Chromosome(genes1), Chromosome(genes2), 0.0, rng)

    def test_rejects_non_permutation_before_mutation(self, rng: np.random.Generator) -> None:
        """Invalid parents are rejected even when the child would be replaced."""
        with pytest.raises(ValueError, match="parents must be permutations"):
            crossover(Chromosome([1, 1]), Chromosome([0, 1]), 1.0, rng)

    @pytest.mark.parametrize("probability", [-0.1, 1.1])
    def test_rejects_invalid_probability(self, probability: float, rng: np.random.Generator) -> None:
        """The mutation probability is validated."""
        parent = Chromosome([0, 1])
        with pytest.raises(ValueError, match=r"probability must be in \[0, 1\]"):
            crossover(parent, parent, probability, rng)
