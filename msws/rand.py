"""
Rand: Middle Square Weyl Sequence pseudorandom number generator.

A Rand holds three 64-bit words:
- seed: the odd Weyl increment, fixed for the generator's lifetime
- output: the middle-square accumulator
- weyl: the Weyl sequence accumulator

Each call to rand() squares the output, advances the Weyl sequence,
adds it in, swaps the 32-bit halves and returns the low 32 bits.

Not suitable for cryptography.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    import numpy as np

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


class InvalidSeedError(ValueError):
    """Raised when a generator is constructed from an even seed."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        super().__init__(f"seed must be odd, got {seed:#x}")


class Rand:
    """
    Middle Square Weyl Sequence generator.

    Keep calling rand() on the same instance to walk the output sequence.
    Instances are not thread-safe; use one generator per thread.

    Example:
        r = Rand(0xb5ad4eceda1ce2a9)
        r.rand()  # => 0xb5ad4ece
    """

    __slots__ = ("_s", "_x", "_w")

    def __init__(self, seed: int) -> None:
        """
        Create a generator from an odd seed.

        Args:
            seed: The Weyl increment. Reduced modulo 2**64.

        Raises:
            InvalidSeedError: If the seed is even.
        """
        s = seed & MASK64
        if s & 1 == 0:
            raise InvalidSeedError(s)
        self._s = s
        self._x = 0
        self._w = 0

    @classmethod
    def _from_state(cls, seed: int, output: int, weyl: int) -> Rand:
        # No parity check: callers pass seeds from the vetted table.
        r = cls.__new__(cls)
        r._s = seed & MASK64
        r._x = output & MASK64
        r._w = weyl & MASK64
        return r

    @classmethod
    def from_index(cls, n: int) -> Rand:
        """Create a generator seeded with seed(n)."""
        from msws.seeds.derive import seed

        return cls(seed(n))

    @property
    def seed(self) -> int:
        """The odd Weyl increment."""
        return self._s

    @property
    def output(self) -> int:
        """The current middle-square accumulator."""
        return self._x

    @property
    def weyl(self) -> int:
        """The current Weyl sequence value."""
        return self._w

    def rand(self) -> int:
        """Advance one step and return a 32-bit pseudorandom integer."""
        x = (self._x * self._x) & MASK64
        self._w = (self._w + self._s) & MASK64
        x = (x + self._w) & MASK64
        # Keep the middle 32 bits in the low half
        x = ((x >> 32) | (x << 32)) & MASK64
        self._x = x
        return x & MASK32

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.rand()

    def random(self) -> float:
        """Return a float in [0, 1) built from one 32-bit draw."""
        return self.rand() / 2**32

    def randint(self, a: int, b: int) -> int:
        """
        Return a uniform integer in [a, b], both ends inclusive.

        Draws are rejected above the largest multiple of the span so the
        result carries no modulo bias.

        Raises:
            ValueError: If a > b or the range holds more than 2**32 values.
        """
        if a > b:
            raise ValueError(f"empty range: a={a} > b={b}")
        span = b - a + 1
        if span > 1 << 32:
            raise ValueError(f"range of {span} values exceeds 32 bits")
        limit = ((1 << 32) // span) * span
        while True:
            r = self.rand()
            if r < limit:
                return a + r % span

    def numpy(self, size: int) -> np.ndarray:
        """
        Return the next *size* outputs as a numpy uint32 array.

        Requires numpy to be installed (optional dependency).

        Raises:
            ImportError: If numpy is not installed.
        """
        try:
            import numpy as np
        except ImportError as e:
            raise ImportError(
                "numpy is required for Rand.numpy(). "
                "Install it with: pip install msws[numpy]"
            ) from e

        return np.fromiter(
            (self.rand() for _ in range(size)), dtype=np.uint32, count=size
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the generator state to a dictionary.

        Returns:
            A dictionary with seed, output and weyl.
        """
        return {"seed": self._s, "output": self._x, "weyl": self._w}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rand:
        """
        Restore a generator from a to_dict() snapshot.

        Raises:
            InvalidSeedError: If the stored seed is even.
        """
        r = cls(data["seed"])
        r._x = data.get("output", 0) & MASK64
        r._w = data.get("weyl", 0) & MASK64
        return r

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rand):
            return NotImplemented
        return (self._s, self._x, self._w) == (other._s, other._x, other._w)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Rand(seed={self._s:#018x}, output={self._x:#018x}, weyl={self._w:#018x})"
