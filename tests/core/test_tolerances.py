"""
Tests for tolerance tiers.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pydense.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EPSILON_64,
    select_tolerance,
)


class TestTiers:

    def test_epsilon_matches_numpy(self):
        assert EPSILON_64 == np.finfo(np.float64).eps

    def test_ill_conditioned_is_looser(self):
        assert CPU_FP64_ILL_CONDITIONED.rtol > CPU_FP64.rtol
        assert CPU_FP64_ILL_CONDITIONED.atol > CPU_FP64.atol

    def test_tier_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            CPU_FP64.rtol = 1.0


class TestSelectTolerance:

    @pytest.mark.parametrize("name", ["cpu", "cpu_lapack"])
    def test_cpu_backends(self, name):
        assert select_tolerance(name) is CPU_FP64

    def test_ill_conditioned(self):
        assert select_tolerance("cpu_lapack", is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="No tolerance tier"):
            select_tolerance("gpu_fp32")
