"""
msws: Middle Square Weyl Sequence pseudorandom number generator.

A Rand is created from an odd 64-bit seed and emits one 32-bit value per
call to rand(). seed() maps any integer index to a reproducible odd seed,
so streams can be numbered instead of hand-picked.

Example:
    import msws

    # This will always return the same seed.
    msws.seed(0)  # => 0x8b5ad4ceb9c1fe73

    r = msws.Rand(0xb5ad4eceda1ce2a9)
    r.rand()  # => 0xb5ad4ece

    # One independent stream per worker
    for rng in msws.seeds(start=0, count=4).rngs():
        ...

Pseudorandom number generators should not be used for crypto.
"""

__version__ = "0.1.0"

from msws.rand import InvalidSeedError, Rand
from msws.seeds import (
    BUCKET_SIZE,
    SEEDS,
    SeedPlan,
    different_digits,
    seed,
    seeds,
    table_index,
)

__all__ = [
    "BUCKET_SIZE",
    "InvalidSeedError",
    "Rand",
    "SEEDS",
    "SeedPlan",
    "different_digits",
    "seed",
    "seeds",
    "table_index",
]
