"""
Seeded linear congruential generator.

Boards are reproduced from (size, seed) pairs, so the draw sequence for a
given seed is fixed forever.
"""

from ..verifiers.errors import InvalidSeed


MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MODULUS = 1 << 64

# Draws are 24-bit fixed point fractions.
FRACTION_BITS = 24


class Lcg:
    """64-bit LCG: state' = (state * MULTIPLIER + INCREMENT) mod 2**64."""

    def __init__(self, seed: int) -> None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidSeed(f"Seed must be an integer, got {seed!r}")
        if seed < 0:
            raise InvalidSeed(f"Seed must not be negative, got {seed}")
        if seed >= MODULUS:
            raise InvalidSeed(f"Seed must be smaller than 2**64, got {seed}")
        self.seed = seed
        self._state = seed

    @property
    def state(self) -> int:
        return self._state

    def next_state(self) -> int:
        """Advance the generator and return the raw 64-bit state."""
        self._state = (self._state * MULTIPLIER + INCREMENT) % MODULUS
        return self._state

    def rand(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        scaled = (self.next_state() << FRACTION_BITS) // MODULUS
        return scaled / (1 << FRACTION_BITS)

    def __repr__(self) -> str:
        return f"Lcg(seed={self.seed}, state={self._state})"


def create(seed: int) -> Lcg:
    """Create a generator for `seed`, an integer in [0, 2**64)."""
    return Lcg(seed)
