"""
Gaussian random matrix initialisation.

Fills matrices with independent standard normal entries drawn by the
backend from a NumPy Generator. Without a seed the generator is seeded
from fresh OS entropy, so successive calls differ.
"""

from __future__ import annotations

import numpy as np

from pydense.matrix.storage import Matrix
from pydense.matrix._common import require_matrix
from pydense.algebra.backends import BackendChoice, get_backend


def _as_generator(seed: int | np.random.Generator | None) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def initialize_random_matrix(
    M: Matrix,
    *,
    seed: int | np.random.Generator | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Overwrite every entry of M with a standard normal variate; returns M.

    Args:
        M: Matrix to fill
        seed: Integer seed, an existing Generator, or None for OS entropy
        backend: Numeric backend choice
    """
    require_matrix(M, 'M')
    rng = _as_generator(seed)
    # Drawn in storage order: entry k of the stream lands at flat offset k
    M.data[:] = get_backend(backend).gaussian((M.size,), rng)
    return M


def random_gaussian(
    rows: int,
    cols: int,
    *,
    seed: int | np.random.Generator | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """New rows x cols matrix of standard normal variates."""
    return initialize_random_matrix(Matrix(rows, cols), seed=seed, backend=backend)
