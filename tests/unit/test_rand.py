"""Tests for the Rand generator."""

from __future__ import annotations

import pytest

from msws.rand import MASK64, InvalidSeedError, Rand

SEED = 0xB5AD4ECEDA1CE2A9


class TestConstruction:
    """Tests for seed validation."""

    @pytest.mark.parametrize("seed", [1, 3, SEED, 2**63 + 1, MASK64])
    def test_odd_seeds_accepted(self, seed):
        """Odd seeds should construct a generator."""
        r = Rand(seed)
        assert r.seed == seed

    @pytest.mark.parametrize("seed", [0, 2, SEED - 1, 2**63, MASK64 - 1])
    def test_even_seeds_rejected(self, seed):
        """Even seeds should raise InvalidSeedError."""
        with pytest.raises(InvalidSeedError):
            Rand(seed)

    def test_error_carries_seed(self):
        with pytest.raises(InvalidSeedError) as exc_info:
            Rand(0x10)
        assert exc_info.value.seed == 0x10
        assert "odd" in str(exc_info.value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Rand(4)

    def test_initial_state(self):
        """A new generator starts with zero output and Weyl value."""
        r = Rand(SEED)
        assert r.output == 0
        assert r.weyl == 0

    def test_seed_reduced_to_64_bits(self):
        """Seeds wider than 64 bits are reduced modulo 2**64."""
        assert Rand(2**64 + 1).seed == 1
        assert Rand(-1).seed == MASK64

    def test_wide_even_seed_rejected(self):
        with pytest.raises(InvalidSeedError):
            Rand(2**64 + 2)


class TestRand:
    """Tests for the step function."""

    def test_first_output_is_seed_high_half(self):
        """From a zero state the first output is the seed's upper 32 bits."""
        assert Rand(SEED).rand() == SEED >> 32

    def test_seed_one_first_step(self):
        """Seed 1: x=1 after the first add, then halves swap."""
        r = Rand(1)
        assert r.rand() == 0
        assert r.output == 1 << 32
        assert r.weyl == 1

    def test_weyl_advances_by_seed(self):
        r = Rand(SEED)
        for step in range(1, 6):
            r.rand()
            assert r.weyl == (step * SEED) & MASK64

    def test_outputs_are_32_bit(self):
        r = Rand(MASK64)
        for _ in range(1000):
            assert 0 <= r.rand() < 2**32

    def test_state_stays_64_bit(self):
        """Squaring and adding wrap instead of growing."""
        r = Rand(MASK64)
        for _ in range(100):
            r.rand()
            assert 0 <= r.output <= MASK64
            assert 0 <= r.weyl <= MASK64

    def test_deterministic(self):
        """Two generators with the same seed walk the same sequence."""
        r1 = Rand(SEED)
        r2 = Rand(SEED)
        assert [r1.rand() for _ in range(500)] == [r2.rand() for _ in range(500)]

    def test_different_seeds_differ(self):
        r1 = Rand(SEED)
        r2 = Rand(SEED + 2)
        assert [r1.rand() for _ in range(10)] != [r2.rand() for _ in range(10)]

    def test_instances_independent(self):
        """Advancing one generator does not affect another."""
        r1 = Rand(SEED)
        r2 = Rand(SEED)
        for _ in range(7):
            r1.rand()
        assert r2.rand() == SEED >> 32

    def test_iteration(self):
        """A generator is an infinite iterator over rand()."""
        expected = Rand(SEED)
        it = iter(Rand(SEED))
        assert [next(it) for _ in range(5)] == [expected.rand() for _ in range(5)]


class TestHelpers:
    """Tests for random(), randint() and numpy()."""

    def test_random_unit_interval(self):
        r = Rand(SEED)
        for _ in range(1000):
            v = r.random()
            assert 0.0 <= v < 1.0

    def test_random_scales_rand(self):
        r1 = Rand(SEED)
        r2 = Rand(SEED)
        assert r1.random() == r2.rand() / 2**32

    def test_randint_bounds(self):
        r = Rand(SEED)
        values = [r.randint(1, 6) for _ in range(2000)]
        assert min(values) == 1
        assert max(values) == 6

    def test_randint_single_value(self):
        r = Rand(SEED)
        assert r.randint(5, 5) == 5

    def test_randint_full_32_bit_span(self):
        """A 2**32 span uses each draw as-is."""
        r1 = Rand(SEED)
        r2 = Rand(SEED)
        assert r1.randint(0, 2**32 - 1) == r2.rand()

    def test_randint_negative_range(self):
        r = Rand(SEED)
        for _ in range(100):
            assert -10 <= r.randint(-10, -1) <= -1

    def test_randint_empty_range(self):
        with pytest.raises(ValueError, match="empty range"):
            Rand(SEED).randint(3, 2)

    def test_randint_span_too_wide(self):
        with pytest.raises(ValueError, match="32 bits"):
            Rand(SEED).randint(0, 2**32)

    def test_numpy_matches_rand(self):
        np = pytest.importorskip("numpy")

        arr = Rand(SEED).numpy(10)
        expected = Rand(SEED)

        assert arr.dtype == np.uint32
        assert arr.shape == (10,)
        assert arr.tolist() == [expected.rand() for _ in range(10)]

    def test_numpy_advances_generator(self):
        pytest.importorskip("numpy")

        r = Rand(SEED)
        r.numpy(3)
        expected = Rand(SEED)
        for _ in range(3):
            expected.rand()
        assert r == expected


class TestSerialization:
    """Tests for to_dict() / from_dict()."""

    def test_to_dict(self):
        r = Rand(SEED)
        assert r.to_dict() == {"seed": SEED, "output": 0, "weyl": 0}

    def test_resume_from_snapshot(self):
        """A restored generator continues the original sequence."""
        r = Rand(SEED)
        for _ in range(5):
            r.rand()

        restored = Rand.from_dict(r.to_dict())
        assert restored == r
        assert [restored.rand() for _ in range(5)] == [r.rand() for _ in range(5)]

    def test_from_dict_defaults(self):
        r = Rand.from_dict({"seed": SEED})
        assert r == Rand(SEED)

    def test_from_dict_rejects_even_seed(self):
        with pytest.raises(InvalidSeedError):
            Rand.from_dict({"seed": 2, "output": 0, "weyl": 0})

    def test_equality(self):
        r1 = Rand(SEED)
        r2 = Rand(SEED)
        assert r1 == r2
        r1.rand()
        assert r1 != r2
        assert r1 != "not a generator"

    def test_repr(self):
        assert repr(Rand(1)) == (
            "Rand(seed=0x0000000000000001, output=0x0000000000000000, "
            "weyl=0x0000000000000000)"
        )


class TestFromState:
    """Tests for the unvalidated internal constructor."""

    def test_sets_state_without_parity_check(self):
        r = Rand._from_state(2, output=5, weyl=7)
        assert (r.seed, r.output, r.weyl) == (2, 5, 7)

    def test_masks_state(self):
        r = Rand._from_state(2**64 + 3, output=-1, weyl=2**65)
        assert (r.seed, r.output, r.weyl) == (3, MASK64, 0)

    def test_from_index(self):
        from msws.seeds import seed

        assert Rand.from_index(4) == Rand(seed(4))
