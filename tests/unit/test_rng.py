"""
Tests for pyfsm.core.rng: seeded generators and random binary words.
"""

import numpy as np
import pytest

from pyfsm.core.rng import make_rng, random_binary_string, random_binary_strings, spawn_rngs


class TestMakeRng:
    """make_rng returns PCG64-backed Generators."""

    def test_make_rng_with_int_seed(self):
        rng = make_rng(42)
        assert isinstance(rng, np.random.Generator)
        assert isinstance(rng.bit_generator, np.random.PCG64)

    def test_make_rng_without_seed(self):
        assert isinstance(make_rng(), np.random.Generator)

    def test_same_seed_same_sequence(self):
        vals1 = make_rng(42).random(10)
        vals2 = make_rng(np.random.SeedSequence(42)).random(10)
        np.testing.assert_array_equal(vals1, vals2)

    def test_bad_seed_type_raises(self):
        with pytest.raises(TypeError, match="seed"):
            make_rng("42")

    def test_bool_seed_rejected(self):
        """bool is not accepted as an int seed."""
        with pytest.raises(TypeError, match="seed"):
            make_rng(True)


class TestSpawnRngs:
    """spawn_rngs produces independent, reproducible children."""

    def test_spawn_count_and_type(self):
        children = spawn_rngs(make_rng(42), 3)
        assert len(children) == 3
        assert all(isinstance(c, np.random.Generator) for c in children)

    def test_spawn_children_differ(self):
        vals = [c.random() for c in spawn_rngs(make_rng(42), 3)]
        assert len(set(vals)) == 3

    def test_spawn_deterministic(self):
        vals1 = [c.random() for c in spawn_rngs(np.random.SeedSequence(7), 2)]
        vals2 = [c.random() for c in spawn_rngs(np.random.SeedSequence(7), 2)]
        assert vals1 == vals2

    def test_spawn_bad_parent_raises(self):
        with pytest.raises(TypeError, match="parent"):
            spawn_rngs(42, 2)

    def test_respawn_from_same_parent_gives_new_children(self):
        """A second spawn from one parent does not repeat the first batch."""
        parent = make_rng(42)
        first = [c.random() for c in spawn_rngs(parent, 2)]
        second = [c.random() for c in spawn_rngs(parent, 2)]
        assert first != second


class TestRandomBinaryStrings:
    """Random words over {"0", "1"}."""

    def test_single_string_length_and_alphabet(self, deterministic_rng):
        word = random_binary_string(deterministic_rng, 64)
        assert len(word) == 64
        assert set(word) <= {"0", "1"}

    def test_zero_length(self, deterministic_rng):
        assert random_binary_string(deterministic_rng, 0) == ""

    def test_lengths_within_bounds(self, deterministic_rng):
        words = random_binary_strings(deterministic_rng, 200, min_length=3, max_length=9)
        assert len(words) == 200
        assert all(3 <= len(w) <= 9 for w in words)
        assert {len(w) for w in words} == set(range(3, 10))

    def test_reproducible(self):
        assert random_binary_strings(make_rng(5), 20) == random_binary_strings(make_rng(5), 20)

    def test_invalid_bounds(self, deterministic_rng):
        with pytest.raises(ValueError, match="min_length"):
            random_binary_strings(deterministic_rng, 3, min_length=5, max_length=2)
        with pytest.raises(ValueError, match="n"):
            random_binary_strings(deterministic_rng, -1)
        with pytest.raises(ValueError, match="length"):
            random_binary_string(deterministic_rng, -1)
