"""
Tests for matrix-matrix and matrix-vector products.

Validates:
    - All transpose combinations against NumPy
    - The product overwrites out rather than accumulating into it
    - Inner-dimension and out-shape mismatches raise DimensionError
"""

import numpy as np
import pytest

from pydense.core.exceptions import DimensionError, ValidationError
from pydense.algebra import matmul, matvec
from pydense.matrix import Matrix, Vector


# ═══════════════════════════════════════════════════════════════════════
# matmul
# ═══════════════════════════════════════════════════════════════════════


class TestMatmul:

    def test_plain_product(self, rng):
        a = rng.standard_normal((4, 3))
        b = rng.standard_normal((3, 5))
        C = matmul(Matrix.from_array(a), Matrix.from_array(b))
        assert C.shape == (4, 5)
        np.testing.assert_allclose(C.to_array(), a @ b, rtol=1e-12, atol=1e-14)

    def test_transpose_a(self, rng):
        a = rng.standard_normal((6, 3))
        b = rng.standard_normal((6, 2))
        C = matmul(Matrix.from_array(a), Matrix.from_array(b), transpose_a=True)
        np.testing.assert_allclose(C.to_array(), a.T @ b, rtol=1e-12, atol=1e-14)

    def test_transpose_b(self, rng):
        a = rng.standard_normal((3, 4))
        b = rng.standard_normal((5, 4))
        C = matmul(Matrix.from_array(a), Matrix.from_array(b), transpose_b=True)
        np.testing.assert_allclose(C.to_array(), a @ b.T, rtol=1e-12, atol=1e-14)

    def test_gram_matrix_of_same_operand(self, rng):
        a = rng.standard_normal((10, 3))
        A = Matrix.from_array(a)
        G = matmul(A, A, transpose_a=True)
        np.testing.assert_allclose(G.to_array(), a.T @ a, rtol=1e-12)

    def test_out_is_overwritten(self, rng):
        a = rng.standard_normal((2, 2))
        out = Matrix.from_array(np.full((2, 2), 100.0))
        result = matmul(Matrix.from_array(a), Matrix.from_array(np.eye(2)), out=out)
        assert result is out
        np.testing.assert_allclose(out.to_array(), a, atol=1e-15)

    def test_inner_mismatch(self):
        with pytest.raises(DimensionError, match="inner dimensions"):
            matmul(Matrix(2, 3), Matrix(2, 3))

    def test_out_wrong_shape(self):
        with pytest.raises(DimensionError):
            matmul(Matrix(2, 3), Matrix(3, 2), out=Matrix(3, 3))

    def test_out_aliasing_rejected(self):
        A = Matrix(2, 2)
        with pytest.raises(ValidationError):
            matmul(A, Matrix(2, 2), out=A)

    def test_empty_inner_dimension(self):
        C = matmul(Matrix(3, 0), Matrix(0, 2))
        np.testing.assert_array_equal(C.to_array(), np.zeros((3, 2)))

    def test_rejects_ndarray(self):
        with pytest.raises(ValidationError, match="expected Matrix"):
            matmul(np.eye(2), Matrix(2, 2))


# ═══════════════════════════════════════════════════════════════════════
# matvec
# ═══════════════════════════════════════════════════════════════════════


class TestMatvec:

    def test_plain(self, rng):
        a = rng.standard_normal((4, 3))
        x = rng.standard_normal(3)
        y = matvec(Matrix.from_array(a), Vector.from_array(x))
        np.testing.assert_allclose(y.to_array(), a @ x, rtol=1e-12)

    def test_transpose(self, rng):
        a = rng.standard_normal((4, 3))
        x = rng.standard_normal(4)
        y = matvec(Matrix.from_array(a), Vector.from_array(x), transpose=True)
        assert y.length == 3
        np.testing.assert_allclose(y.to_array(), a.T @ x, rtol=1e-12)

    def test_into_out(self, rng):
        out = Vector.from_array([9.0, 9.0])
        matvec(Matrix.from_array(np.eye(2)), Vector.from_array([1.0, 2.0]), out=out)
        np.testing.assert_allclose(out.to_array(), [1.0, 2.0])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="length 4"):
            matvec(Matrix(4, 3), Vector(4))
