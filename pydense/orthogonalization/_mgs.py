"""
Iterated modified Gram-Schmidt.

Columns are orthogonalized strictly left to right and the whole sweep is
repeated NUM_PASSES times. Within a sweep, column j is projected against
the already-updated columns 0..j-1 one at a time (modified, not
classical, Gram-Schmidt), so the loop order is part of the numerics.
"""

from __future__ import annotations

import numpy as np

from pydense.core.exceptions import NumericalError, RankDeficiencyError
from pydense.matrix.storage import Matrix, Vector, get_col, set_col
from pydense.matrix._common import prepare_vector_out, require_vector
from pydense.matrix.elementwise import dot, norm2, scale, subtract_inplace
from pydense.orthogonalization._common import NUM_PASSES


def project_vector(v: Vector, u: Vector, out: Vector | None = None) -> Vector:
    """
    Projection of v onto the line spanned by u: (v·u / u·u) u.

    Args:
        v: Vector to project
        u: Direction, must be non-zero
        out: Optional destination, same length as u

    Raises:
        NumericalError: If u is the zero vector
    """
    require_vector(v, 'v')
    require_vector(u, 'u')
    uu = dot(u, u)
    if uu == 0.0:
        raise NumericalError("project_vector: cannot project onto a zero vector")

    coeff = dot(v, u) / uu
    out = prepare_vector_out(out, u.length, v, u)
    out.data[:] = u.data
    return scale(out, coeff)


def modified_gram_schmidt(Q: Matrix, rtol: float) -> list[float]:
    """
    Orthonormalize the columns of Q in place.

    Args:
        Q: m x n matrix, overwritten with the orthonormal basis
        rtol: Rank-deficiency threshold relative to each column's norm
            at the start of the pass

    Returns:
        Smallest relative residual ||v|| / ref seen in each pass

    Raises:
        RankDeficiencyError: If a column is (numerically) dependent on
            the columns before it
    """
    m, n = Q.shape
    v = Vector(m)
    u = Vector(m)
    proj = Vector(m)
    min_relative: list[float] = []

    for p in range(NUM_PASSES):
        pass_min = np.inf
        for j in range(n):
            get_col(Q, j, out=v)
            ref = norm2(v)

            for i in range(j):
                get_col(Q, i, out=u)
                project_vector(v, u, out=proj)
                subtract_inplace(v, proj)

            residual = norm2(v)
            if not np.isfinite(residual) or residual == 0.0 or residual <= rtol * ref:
                raise RankDeficiencyError(
                    f"Column {j} is linearly dependent on the preceding columns "
                    f"(pass {p}: residual {residual:.3e}, column norm {ref:.3e})",
                    column=j,
                    pass_index=p,
                    residual_norm=residual,
                    reference_norm=ref,
                    matrix_name='A',
                    rank=j,
                    expected_rank=n,
                )

            pass_min = min(pass_min, residual / ref)
            set_col(Q, j, scale(v, 1.0 / residual))

        min_relative.append(float(pass_min) if n > 0 else 1.0)

    return min_relative
