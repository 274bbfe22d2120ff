"""
Tests for the modified Gram-Schmidt kernel and vector projection.
"""

import numpy as np
import pytest

from pydense.core.exceptions import DimensionError, NumericalError, RankDeficiencyError, ValidationError
from pydense.matrix import Matrix, Vector
from pydense.orthogonalization import NUM_PASSES, RANK_DEFICIENCY_RTOL, project_vector
from pydense.orthogonalization._mgs import modified_gram_schmidt


# ═══════════════════════════════════════════════════════════════════════
# project_vector
# ═══════════════════════════════════════════════════════════════════════


class TestProjectVector:

    def test_onto_axis(self):
        p = project_vector(Vector.from_array([3.0, 4.0]), Vector.from_array([2.0, 0.0]))
        np.testing.assert_allclose(p.to_array(), [3.0, 0.0])

    def test_direction_scale_irrelevant(self, rng):
        v = Vector.from_array(rng.standard_normal(5))
        u = rng.standard_normal(5)
        p1 = project_vector(v, Vector.from_array(u))
        p2 = project_vector(v, Vector.from_array(10.0 * u))
        np.testing.assert_allclose(p1.to_array(), p2.to_array(), rtol=1e-12)

    def test_residual_orthogonal_to_direction(self, rng):
        v = rng.standard_normal(6)
        u = rng.standard_normal(6)
        p = project_vector(Vector.from_array(v), Vector.from_array(u)).to_array()
        assert abs(np.dot(v - p, u)) < 1e-12

    def test_inputs_unchanged(self):
        v = Vector.from_array([1.0, 2.0])
        u = Vector.from_array([1.0, 1.0])
        project_vector(v, u)
        np.testing.assert_array_equal(v.to_array(), [1.0, 2.0])
        np.testing.assert_array_equal(u.to_array(), [1.0, 1.0])

    def test_into_out(self):
        out = Vector.from_array([7.0, 7.0])
        result = project_vector(Vector.from_array([1.0, 1.0]), Vector.from_array([0.0, 5.0]), out=out)
        assert result is out
        np.testing.assert_allclose(out.to_array(), [0.0, 1.0])

    def test_out_aliasing_rejected(self):
        v = Vector.from_array([1.0, 1.0])
        with pytest.raises(ValidationError):
            project_vector(v, Vector.from_array([1.0, 0.0]), out=v)

    def test_zero_direction(self):
        with pytest.raises(NumericalError, match="zero vector"):
            project_vector(Vector.from_array([1.0, 2.0]), Vector(2))

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            project_vector(Vector(3), Vector.from_array([1.0, 0.0]))


# ═══════════════════════════════════════════════════════════════════════
# modified_gram_schmidt
# ═══════════════════════════════════════════════════════════════════════


class TestModifiedGramSchmidt:

    def test_two_passes(self):
        assert NUM_PASSES == 2

    def test_overwrites_in_place(self, tall_matrix):
        A, _ = tall_matrix
        Q = A.copy()
        modified_gram_schmidt(Q, RANK_DEFICIENCY_RTOL)
        q = Q.to_array()
        np.testing.assert_allclose(q.T @ q, np.eye(8), atol=1e-12)

    def test_residuals_per_pass(self, tall_matrix):
        A, _ = tall_matrix
        residuals = modified_gram_schmidt(A.copy(), RANK_DEFICIENCY_RTOL)
        assert len(residuals) == NUM_PASSES
        assert 0.0 < residuals[0] <= 1.0
        # The second pass sees columns that are already orthonormal
        assert residuals[1] == pytest.approx(1.0, abs=1e-12)

    def test_no_columns(self):
        assert modified_gram_schmidt(Matrix(4, 0), RANK_DEFICIENCY_RTOL) == [1.0, 1.0]

    def test_failure_diagnostics(self, dependent_columns):
        with pytest.raises(RankDeficiencyError) as exc_info:
            modified_gram_schmidt(dependent_columns.copy(), RANK_DEFICIENCY_RTOL)
        err = exc_info.value
        assert err.column == 2
        assert err.pass_index == 0
        assert err.rank == 2
        assert err.expected_rank == 3
        assert err.matrix_name == 'A'
        assert err.residual_norm <= RANK_DEFICIENCY_RTOL * err.reference_norm
