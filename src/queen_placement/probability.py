"""Validated probability values."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass


@dataclass(frozen=True)
class Probability:
    """A scalar probability in the closed interval [0, 1].

    Construction fails for values outside the interval, so an invalid
    mutation probability is rejected where it is configured rather than
    where it is used.

    Attributes:
        value: The probability as a float.

    Example:
        >>> Probability(0.1).value
        0.1
        >>> Probability(1.5)
        Traceback (most recent call last):
        ...
        ValueError: probability must be in [0, 1], got 1.5
    """

    value: float

    def __post_init__(self) -> None:
        """Validate the range and normalize the value to float.

        Raises:
            TypeError: If value is not a real number.
            ValueError: If value is NaN or outside [0, 1].
        """
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise TypeError(f"probability must be a real number, got {type(self.value).__name__}")
        value = float(self.value)
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {self.value}")
        object.__setattr__(self, "value", value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, text: str) -> Probability:
        """Build a probability from its textual form (e.g. a CLI argument).

        Raises:
            ValueError: If text is not a number or is outside [0, 1].
        """
        try:
            value = float(text)
        except ValueError as exc:
            raise ValueError(f"probability must be a number, got {text!r}") from exc
        return cls(value)

    @classmethod
    def coerce(cls, value: Probability | float) -> Probability:
        """Return value unchanged if it is a Probability, otherwise validate it."""
        if isinstance(value, Probability):
            return value
        return cls(value)
