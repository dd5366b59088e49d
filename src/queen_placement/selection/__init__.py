"""Selection strategies for the queen placement search."""

from queen_placement.registry import StrategyRegistry
from queen_placement.selection.adam_and_eve import adam_and_eve
from queen_placement.selection.base import SelectionStrategy
from queen_placement.selection.kill_the_half import kill_the_half
from queen_placement.selection.tournament import tournament

# Register built-in selection strategies
StrategyRegistry.register(SelectionStrategy.ADAM_AND_EVE, adam_and_eve)
StrategyRegistry.register(SelectionStrategy.KILL_THE_HALF, kill_the_half)
StrategyRegistry.register(SelectionStrategy.TOURNAMENT, tournament)

__all__ = ["SelectionStrategy", "adam_and_eve", "kill_the_half", "tournament"]
