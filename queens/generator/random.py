"""Integer draws and shuffling on top of a float source."""

from typing import Callable, List, Optional, Sequence, TypeVar

from .lcg import create

T = TypeVar("T")


class Draws:
    """
    Random helpers driven by a single float source.

    Every draw consumes exactly one value from `source`, so two Draws built
    on generators with the same seed make identical choices.

    Args:
        source: Zero-argument callable returning floats in [0, 1).
            Defaults to a generator seeded with 0.
    """

    def __init__(self, source: Optional[Callable[[], float]] = None) -> None:
        self.source = source or create(0).rand

    def rand(self, n: int) -> int:
        """Return an integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return int(n * self.source())

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of `items` (Fisher-Yates, last index first)."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.rand(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled
