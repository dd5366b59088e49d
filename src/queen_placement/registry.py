"""Registry of generation selection strategies.

Strategies are registered as factories and retrieved by name, so the CLI and
configuration can select one from a plain string while callers that need a
tuned variant pass factory arguments at retrieval time.

Basic usage:
    ```python
    from queen_placement.registry import StrategyRegistry, list_strategies

    selector = StrategyRegistry.get("tournament", tournament_size=5)
    genes = selector(population, fitness, Probability(0.1), rng)

    list_strategies()  # ["adam-and-eve", "kill-the-half", "tournament"]
    ```

Registering a custom strategy:
    ```python
    def cloning_factory():
        def selector(population, fitness, mutation_probability, rng, n_workers=1):
            return population.genes.copy()
        return selector

    StrategyRegistry.register("cloning", cloning_factory)
    ```
"""

from collections.abc import Callable
from enum import Enum

from queen_placement.protocols import GenerationSelector


class StrategyRegistry:
    """Registry for generation selection strategies.

    Class Attributes:
        _registry: Dictionary mapping strategy names to factory functions
            returning GenerationSelector callables.
    """

    _registry: dict[str, Callable[..., GenerationSelector]] = {}

    @staticmethod
    def _key(name: str) -> str:
        # SelectionStrategy members are str enums; use their value, not their repr
        return name.value if isinstance(name, Enum) else name

    @classmethod
    def register(cls, name: str, factory: Callable[..., GenerationSelector]) -> None:
        """Register a strategy factory.

        Args:
            name: Unique name for the strategy. Will overwrite if already exists.
            factory: Callable that returns a GenerationSelector. Should accept
                keyword arguments for configuration.
        """
        cls._registry[cls._key(name)] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> GenerationSelector:
        """Get a configured selector by name.

        Args:
            name: Name of the registered strategy, or a SelectionStrategy member.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            A configured GenerationSelector callable.

        Raises:
            KeyError: If the strategy name is not registered. Error message
                includes list of available strategies.
        """
        key = cls._key(name)
        if key not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Selection strategy '{key}' not found. Available strategies: {available}")
        factory = cls._registry[key]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry.keys())


def list_strategies() -> list[str]:
    """List all registered selection strategies.

    Convenience function that returns StrategyRegistry.list().
    """
    return StrategyRegistry.list()
