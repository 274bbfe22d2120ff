"""
Shared helpers for Matrix/Vector operations.

Every operation that produces a matrix or vector accepts an optional
``out``. When supplied it must already have exactly the result shape
and is overwritten; otherwise a fresh zero-initialised object is
allocated. Either way the destination never aliases an input.
"""

from __future__ import annotations

from typing import Any

from pydense.core.exceptions import ValidationError
from pydense.core.validation import check_out_shape
from pydense.matrix.storage import Matrix, Vector


def require_matrix(obj: Any, name: str) -> Matrix:
    if not isinstance(obj, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(obj).__name__}")
    return obj


def require_vector(obj: Any, name: str) -> Vector:
    if not isinstance(obj, Vector):
        raise ValidationError(f"{name}: expected Vector, got {type(obj).__name__}")
    return obj


def require_dense(obj: Any, name: str) -> Matrix | Vector:
    if not isinstance(obj, (Matrix, Vector)):
        raise ValidationError(
            f"{name}: expected Matrix or Vector, got {type(obj).__name__}"
        )
    return obj


def prepare_matrix_out(
    out: Matrix | None,
    shape: tuple[int, int],
    *inputs: Matrix,
) -> Matrix:
    """
    Return a destination Matrix of the given shape.

    Raises:
        DimensionError: If out has the wrong shape
        ValidationError: If out is one of the inputs
    """
    if out is None:
        return Matrix(*shape)
    require_matrix(out, 'out')
    check_out_shape(out, shape)
    if any(out is m for m in inputs):
        raise ValidationError("out: must not be one of the input matrices")
    return out


def prepare_vector_out(out: Vector | None, length: int, *inputs: Vector) -> Vector:
    """Return a destination Vector of the given length (see prepare_matrix_out)."""
    if out is None:
        return Vector(length)
    require_vector(out, 'out')
    check_out_shape(out, (length,))
    if any(out is v for v in inputs):
        raise ValidationError("out: must not be one of the input vectors")
    return out
