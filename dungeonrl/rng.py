"""A shared, self-seeding random number generator."""

from __future__ import annotations

import random

_generator = random.Random()


def get(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _generator.randint(low, high)


def seed(value: int) -> None:
    """Reseed the shared generator, making later draws reproducible."""
    _generator.seed(value)