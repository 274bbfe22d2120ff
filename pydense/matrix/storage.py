"""
Column-major dense storage for matrices and vectors.

A Matrix owns one flat float64 buffer of length rows * cols. Element
(i, j) lives at flat offset ``j * rows + i``. A Vector owns a flat
buffer of its length. Buffers are never shared: every accessor that
hands out a row, column or array returns a copy.

Public accessors are shape-checked. The raw offset arithmetic used
internally carries an ``assert`` so out-of-range access is caught when
running under ``__debug__`` (the default) and costs nothing under
``python -O``.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import AllocationError
from pydense.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_dimension,
    check_index,
    check_length,
    check_out_shape,
)


def _allocate(n: int, rows: int, cols: int | None) -> NDArray[np.float64]:
    """Zero-initialised buffer of n doubles."""
    try:
        return np.zeros(n, dtype=np.float64)
    except (MemoryError, ValueError, OverflowError) as e:
        what = f"{rows} x {cols} matrix" if cols is not None else f"vector of length {rows}"
        raise AllocationError(
            f"Cannot allocate storage for {what} ({n} doubles): {e}",
            rows=rows,
            cols=cols,
        ) from e


class Matrix:
    """
    Dense m x n matrix of doubles in column-major order.

    Construction:
        Matrix(rows, cols)                  zero-initialised
        Matrix.from_array(array)            copy of a 2-D array-like
        Matrix.from_buffer(rows, cols, buf) copy of a column-major flat buffer
    """

    __slots__ = ('_rows', '_cols', '_data')

    def __init__(self, rows: int, cols: int):
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._data = _allocate(self._rows * self._cols, self._rows, self._cols)

    @classmethod
    def from_array(cls, array: ArrayLike, name: str = 'array') -> Matrix:
        """
        Build a Matrix holding a copy of a 2-D array-like.

        Args:
            array: 2-D array-like, indexed [row, col]
            name: Parameter name for error messages
        """
        arr = check_array(array, name)
        check_2d(arr, name)
        M = cls(*arr.shape)
        M._fortran_view()[...] = arr
        return M

    @classmethod
    def from_buffer(cls, rows: int, cols: int, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from a flat column-major buffer (copied).

        Args:
            rows: Number of rows
            cols: Number of columns
            data: Flat sequence of rows * cols values, column-major
        """
        M = cls(rows, cols)
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
        check_length(arr.shape[0], M.size, 'data')
        M._data[:] = arr
        return M

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Number of stored elements, rows * cols."""
        return self._data.shape[0]

    @property
    def data(self) -> NDArray[np.float64]:
        """
        The owned column-major flat buffer.

        Writes through this array modify the matrix. It is exposed for
        interoperability with code that consumes raw column-major data;
        do not keep it past the matrix's lifetime expecting a snapshot.
        """
        return self._data

    def _offset(self, i: int, j: int) -> int:
        assert 0 <= i < self._rows and 0 <= j < self._cols, (
            f"element ({i}, {j}) outside {self._rows} x {self._cols} matrix"
        )
        return j * self._rows + i

    def _fortran_view(self) -> NDArray[np.float64]:
        """2-D (rows, cols) Fortran-ordered view of the buffer, internal use only."""
        return self._data.reshape((self._rows, self._cols), order='F')

    def get(self, i: int, j: int) -> float:
        """Element (i, j), 0-based."""
        i = check_index(i, self._rows, 'row')
        j = check_index(j, self._cols, 'col')
        return float(self._data[self._offset(i, j)])

    def set(self, i: int, j: int, value: float) -> None:
        """Set element (i, j), 0-based."""
        i = check_index(i, self._rows, 'row')
        j = check_index(j, self._cols, 'col')
        self._data[self._offset(i, j)] = value

    def to_array(self) -> NDArray[np.float64]:
        """Fresh (rows, cols) ndarray copy."""
        return self._fortran_view().copy(order='F')

    def copy(self) -> Matrix:
        M = Matrix(self._rows, self._cols)
        M._data[:] = self._data
        return M

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"


class Vector:
    """
    Dense vector of doubles.

    Construction:
        Vector(length)              zero-initialised
        Vector.from_array(array)    copy of a 1-D array-like
    """

    __slots__ = ('_data',)

    def __init__(self, length: int):
        length = check_dimension(length, 'length')
        self._data = _allocate(length, length, None)

    @classmethod
    def from_array(cls, array: ArrayLike, name: str = 'array') -> Vector:
        """Build a Vector holding a copy of a 1-D array-like."""
        arr = check_array(array, name)
        check_1d(arr, name)
        v = cls(arr.shape[0])
        v._data[:] = arr
        return v

    @property
    def length(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> tuple[int]:
        return (self._data.shape[0],)

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> NDArray[np.float64]:
        """The owned flat buffer (writes go through to the vector)."""
        return self._data

    def get(self, i: int) -> float:
        i = check_index(i, self.length, 'index')
        return float(self._data[i])

    def set(self, i: int, value: float) -> None:
        i = check_index(i, self.length, 'index')
        self._data[i] = value

    def set_data(self, data: ArrayLike) -> None:
        """Overwrite every entry from a sequence of the same length."""
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
        check_length(arr.shape[0], self.length, 'data')
        self._data[:] = arr

    def to_array(self) -> NDArray[np.float64]:
        return self._data.copy()

    def copy(self) -> Vector:
        v = Vector(self.length)
        v._data[:] = self._data
        return v

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    def __repr__(self) -> str:
        return f"Vector(length={self.length})"


def _vector_out(out: Vector | None, length: int) -> Vector:
    if out is None:
        return Vector(length)
    check_out_shape(out, (length,))
    return out


def get_row(M: Matrix, i: int, out: Vector | None = None) -> Vector:
    """
    Copy row i of M into a Vector of length cols(M).

    Args:
        M: Source matrix
        i: 0-based row index
        out: Optional destination, must have length cols(M)
    """
    i = check_index(i, M.rows, 'row')
    out = _vector_out(out, M.cols)
    out.data[:] = M._fortran_view()[i, :]
    return out


def get_col(M: Matrix, j: int, out: Vector | None = None) -> Vector:
    """
    Copy column j of M into a Vector of length rows(M).

    Args:
        M: Source matrix
        j: 0-based column index
        out: Optional destination, must have length rows(M)
    """
    j = check_index(j, M.cols, 'col')
    out = _vector_out(out, M.rows)
    # Columns are contiguous in column-major storage
    start = j * M.rows
    out.data[:] = M.data[start:start + M.rows]
    return out


def set_row(M: Matrix, i: int, v: Vector) -> None:
    """Overwrite row i of M with v (length must equal cols(M))."""
    i = check_index(i, M.rows, 'row')
    check_length(v.length, M.cols, 'row vector')
    M._fortran_view()[i, :] = v.data


def set_col(M: Matrix, j: int, v: Vector) -> None:
    """Overwrite column j of M with v (length must equal rows(M))."""
    j = check_index(j, M.cols, 'col')
    check_length(v.length, M.rows, 'column vector')
    start = j * M.rows
    M.data[start:start + M.rows] = v.data
