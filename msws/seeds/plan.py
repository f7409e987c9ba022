"""
SeedPlan: A reproducible run of derived seeds.

A SeedPlan covers a contiguous range of indices and yields seed(i)
for each, so independent streams (workers, replicates, shards) can be
handed out by position.
"""

from __future__ import annotations

from typing import Any, Iterator

from msws.rand import Rand
from msws.seeds.derive import seed


class SeedPlan:
    """
    Plan for handing out derived seeds over a range of indices.

    Seeds are computed on access, not stored.

    Example:
        plan = SeedPlan(start=0, count=3)
        for s in plan:
            # s: seed(0), seed(1), seed(2)
            ...
        for rng in plan.rngs():
            rng.rand()
    """

    def __init__(self, start: int = 0, count: int = 1) -> None:
        """
        Initialize the seed plan.

        Args:
            start: The first index of the range.
            count: Number of seeds in the plan.

        Raises:
            ValueError: If start or count is negative.
        """
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._start = start
        self._count = count

    @property
    def start(self) -> int:
        """The first index of this plan."""
        return self._start

    @property
    def count(self) -> int:
        """The number of seeds in this plan."""
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Yield the derived seed for each index in the plan."""
        for i in range(self._count):
            yield seed(self._start + i)

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> int:
        """Get the derived seed at a position in the plan."""
        if index < 0 or index >= self._count:
            raise IndexError(f"Seed index {index} out of range [0, {self._count})")
        return seed(self._start + index)

    def rngs(self) -> Iterator[Rand]:
        """Yield a fresh generator for each seed in the plan."""
        for s in self:
            yield Rand(s)

    def __repr__(self) -> str:
        return f"SeedPlan(start={self._start}, count={self._count})"

    def to_manifest_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict representation."""
        return {
            "type": "SeedPlan",
            "start": self._start,
            "count": self._count,
        }

    @classmethod
    def from_manifest_dict(cls, manifest: dict[str, Any]) -> SeedPlan:
        """
        Reconstruct a SeedPlan from a manifest dict.

        Args:
            manifest: Dict with "start" and "count" fields.
        """
        return cls(start=manifest["start"], count=manifest["count"])


def seeds(start: int = 0, count: int = 1) -> SeedPlan:
    """
    Create a SeedPlan over indices start .. start + count - 1.

    Example:
        plan = seeds(start=100, count=4)
        workers = [Rand(s) for s in plan]
    """
    return SeedPlan(start=start, count=count)
