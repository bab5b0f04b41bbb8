import random
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        ...


def default_random_source(seed: int | None = None) -> RandomSource:
    """Unseeded in production; pass a seed for reproducible graphs."""
    return random.Random(seed)
