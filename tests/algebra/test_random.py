"""
Tests for Gaussian random initialisation.
"""

import numpy as np
import pytest

from pydense.core.exceptions import ValidationError
from pydense.algebra import initialize_random_matrix, random_gaussian
from pydense.matrix import Matrix


class TestRandomGaussian:

    def test_shape(self):
        assert random_gaussian(3, 4, seed=0).shape == (3, 4)

    def test_seed_reproducible(self):
        a = random_gaussian(5, 5, seed=123)
        b = random_gaussian(5, 5, seed=123)
        np.testing.assert_array_equal(a.data, b.data)

    def test_different_seeds_differ(self):
        a = random_gaussian(5, 5, seed=1)
        b = random_gaussian(5, 5, seed=2)
        assert not np.array_equal(a.data, b.data)

    def test_unseeded_calls_differ(self):
        a = random_gaussian(10, 10)
        b = random_gaussian(10, 10)
        assert not np.array_equal(a.data, b.data)

    def test_accepts_generator(self, rng):
        M = random_gaussian(2, 2, seed=rng)
        assert np.all(np.isfinite(M.data))

    def test_moments(self):
        M = random_gaussian(200, 100, seed=7)
        assert abs(np.mean(M.data)) < 0.05
        assert np.std(M.data) == pytest.approx(1.0, abs=0.05)

    def test_empty(self):
        assert random_gaussian(0, 3, seed=0).size == 0


class TestInitializeRandomMatrix:

    def test_fills_in_place(self):
        M = Matrix(4, 3)
        assert initialize_random_matrix(M, seed=0) is M
        assert np.count_nonzero(M.data) == 12

    def test_matches_generator_stream(self):
        M = initialize_random_matrix(Matrix(3, 2), seed=99)
        expected = np.random.default_rng(99).standard_normal(6)
        np.testing.assert_array_equal(M.data, expected)

    def test_rejects_non_matrix(self):
        with pytest.raises(ValidationError):
            initialize_random_matrix(np.zeros((2, 2)), seed=0)
