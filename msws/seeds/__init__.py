"""
Seeds module: Deterministic seed derivation.

Provides:

- SEEDS: The fixed table of 30 odd anchor seeds
- seed(): Derive an odd seed from an integer index
- different_digits(): The distinct-nibble sampler behind seed()
- SeedPlan: A range of derived seeds
- seeds(): Factory for creating seed plans
"""

from msws.seeds.derive import different_digits, seed, table_index
from msws.seeds.plan import SeedPlan, seeds
from msws.seeds.table import BUCKET_SIZE, SEEDS

__all__ = [
    "BUCKET_SIZE",
    "SEEDS",
    "SeedPlan",
    "different_digits",
    "seed",
    "seeds",
    "table_index",
]
