"""
Matrix and vector storage with structural and elementwise operations.

Public API:
    Matrix, Vector          - column-major dense storage
    get_row/get_col         - copy a row/column into a Vector
    set_row/set_col         - overwrite a row/column from a Vector
    transpose, copy_*       - structural copies and sub-blocks
    concat_*                - horizontal / vertical concatenation
    scale, norm2, dot, ...  - elementwise updates and reductions
    load/save_matrix_binary - binary file format
"""

from pydense.matrix.storage import (
    Matrix,
    Vector,
    get_row,
    get_col,
    set_row,
    set_col,
)
from pydense.matrix.structural import (
    transpose,
    copy_first_rows,
    copy_first_columns,
    copy_leading_block,
    copy_last_columns,
    copy_last_rows,
    copy_lower_right,
    copy_columns,
    copy_rows,
    concat_horizontal,
    concat_vertical,
    copy_upper_triangle,
    keep_only_upper_triangular,
    diagonal_matrix,
    identity_matrix,
    invert_diagonal,
)
from pydense.matrix.elementwise import (
    scale,
    copy_into,
    subtract_inplace,
    hard_threshold,
    dot,
    norm2,
    frobenius_norm,
    max_abs_element,
    column_norm_squared,
    column_norms_squared,
    max_column_norm,
)
from pydense.matrix.io import load_matrix_binary, save_matrix_binary

__all__ = [
    # Storage
    "Matrix",
    "Vector",
    "get_row",
    "get_col",
    "set_row",
    "set_col",
    # Structural
    "transpose",
    "copy_first_rows",
    "copy_first_columns",
    "copy_leading_block",
    "copy_last_columns",
    "copy_last_rows",
    "copy_lower_right",
    "copy_columns",
    "copy_rows",
    "concat_horizontal",
    "concat_vertical",
    "copy_upper_triangle",
    "keep_only_upper_triangular",
    "diagonal_matrix",
    "identity_matrix",
    "invert_diagonal",
    # Elementwise and reductions
    "scale",
    "copy_into",
    "subtract_inplace",
    "hard_threshold",
    "dot",
    "norm2",
    "frobenius_norm",
    "max_abs_element",
    "column_norm_squared",
    "column_norms_squared",
    "max_column_norm",
    # File I/O
    "load_matrix_binary",
    "save_matrix_binary",
]
