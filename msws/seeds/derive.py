"""
Seed derivation: map an integer index to a reproducible odd seed.

Indices are grouped into buckets of 100 million. Consecutive buckets
cycle through the 30 anchors in SEEDS; within a bucket the index picks
a starting point on the anchor's Weyl sequence. Two rounds of the
digit-uniqueness sampler then turn that starting point into a seed.
"""

from __future__ import annotations

import logging

from msws.rand import MASK64, Rand
from msws.seeds.table import BUCKET_SIZE, SEEDS, TABLE_SIZE

logger = logging.getLogger(__name__)


def table_index(n: int) -> int:
    """Return the position in SEEDS that seed(n) is anchored on."""
    return ((n & MASK64) // BUCKET_SIZE) % TABLE_SIZE


def different_digits(rng: Rand) -> int:
    """
    Build a 32-bit value from eight distinct hex digits.

    Scans the nibbles of successive rng.rand() outputs, least significant
    first, and keeps each nibble value the first time it appears. Repeated
    nibbles are skipped. Kept nibbles fill the result from the low end in
    the order they were found.

    Args:
        rng: Generator to draw from. Advanced in place.

    Returns:
        A 32-bit integer whose eight nibbles are pairwise distinct.
    """
    m = 0  # bits filled
    a = 0
    used = 0  # bitmask over nibble values 0..15

    while m < 32:
        j = rng.rand()
        for i in range(0, 32, 4):
            k = (j >> i) & 0xF
            if not used & (1 << k):
                used |= 1 << k
                a |= k << m
                m += 4
                if m == 32:
                    break

    return a


def seed(n: int) -> int:
    """
    Return a seed for a given integer.

    The same index always yields the same seed, and the result is always
    odd, so it can be passed straight to Rand().

    Args:
        n: Any integer index. Reduced modulo 2**64.

    Returns:
        An odd 64-bit seed.

    Example:
        seed(0)  # => 0x8b5ad4ceb9c1fe73
    """
    n &= MASK64
    bucket, offset = divmod(n, BUCKET_SIZE)
    bucket, entry = divmod(bucket, TABLE_SIZE)
    s = SEEDS[entry]

    w = (offset * s + bucket * s * BUCKET_SIZE) & MASK64
    rng = Rand._from_state(s, output=w, weyl=w)

    high = different_digits(rng)
    low = different_digits(rng)
    result = (high << 32) | low | 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Derived seed {result:#018x} from index {n} (table entry {entry})")
    return result
