"""
Matrix-matrix and matrix-vector products.

Shape-adapting wrappers over the backend's gemm/gemv. The product is
written into ``out`` (or a fresh result): it is never accumulated into
existing contents.
"""

from __future__ import annotations

from pydense.core.exceptions import DimensionError
from pydense.matrix.storage import Matrix, Vector
from pydense.matrix._common import (
    prepare_matrix_out,
    prepare_vector_out,
    require_matrix,
    require_vector,
)
from pydense.algebra.backends import BackendChoice, get_backend


def matmul(
    A: Matrix,
    B: Matrix,
    *,
    transpose_a: bool = False,
    transpose_b: bool = False,
    out: Matrix | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    C = op(A) @ op(B), where op is identity or transpose.

    Covers C = A B, C = Aᵀ B and C = A Bᵀ (and Aᵀ Bᵀ).

    Args:
        A: Left operand
        B: Right operand
        transpose_a: Use Aᵀ
        transpose_b: Use Bᵀ
        out: Optional destination, exactly rows(op(A)) x cols(op(B))
        backend: Numeric backend choice

    Returns:
        The product matrix

    Raises:
        DimensionError: If the inner dimensions disagree or out is mis-sized
    """
    require_matrix(A, 'A')
    require_matrix(B, 'B')
    m, k_a = (A.cols, A.rows) if transpose_a else (A.rows, A.cols)
    k_b, n = (B.cols, B.rows) if transpose_b else (B.rows, B.cols)
    if k_a != k_b:
        ta = 'ᵀ' if transpose_a else ''
        tb = 'ᵀ' if transpose_b else ''
        raise DimensionError(
            f"matmul: inner dimensions disagree for A{ta} @ B{tb}: "
            f"({m} x {k_a}) @ ({k_b} x {n})"
        )

    out = prepare_matrix_out(out, (m, n), A, B)
    be = get_backend(backend)
    C = be.gemm(
        A._fortran_view(), B._fortran_view(),
        trans_a=transpose_a, trans_b=transpose_b,
    )
    out._fortran_view()[...] = C
    return out


def matvec(
    M: Matrix,
    x: Vector,
    *,
    transpose: bool = False,
    out: Vector | None = None,
    backend: BackendChoice = 'auto',
) -> Vector:
    """
    y = M @ x, or y = Mᵀ @ x with transpose=True.

    Raises:
        DimensionError: If len(x) does not match the relevant dimension of M
    """
    require_matrix(M, 'M')
    require_vector(x, 'x')
    in_len, out_len = (M.rows, M.cols) if transpose else (M.cols, M.rows)
    if x.length != in_len:
        t = 'ᵀ' if transpose else ''
        raise DimensionError(
            f"matvec: M{t} is {out_len} x {in_len} but x has length {x.length}"
        )

    out = prepare_vector_out(out, out_len, x)
    be = get_backend(backend)
    out.data[:] = be.gemv(M._fortran_view(), x.data, trans=transpose)
    return out
