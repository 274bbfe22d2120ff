"""
Backend-delegated linear algebra.

Public API:
    matmul(A, B)                    - C = op(A) op(B)
    matvec(M, x)                    - y = op(M) x
    compact_qr(M) / qr_q(M)         - compact QR factorization
    svd(M)                          - economy SVD
    symmetric_eigendecomposition(S) - eigenpairs of a symmetric matrix
    random_gaussian(m, n)           - standard normal matrix
    percent_error(A, B)             - 100 ||A - B||_F / ||A||_F
    form_svd_product(U, S, V)       - U S Vᵀ
"""

from pydense.algebra.backends import CPUBackend, get_backend
from pydense.algebra.products import matmul, matvec
from pydense.algebra.factorizations import (
    QRFactors,
    SVDFactors,
    EigenFactors,
    compact_qr,
    qr_q,
    svd,
    symmetric_eigendecomposition,
)
from pydense.algebra.random import initialize_random_matrix, random_gaussian
from pydense.algebra.composite import percent_error, form_svd_product

__all__ = [
    # Backends
    "CPUBackend",
    "get_backend",
    # Products
    "matmul",
    "matvec",
    # Factorizations
    "QRFactors",
    "SVDFactors",
    "EigenFactors",
    "compact_qr",
    "qr_q",
    "svd",
    "symmetric_eigendecomposition",
    # Random initialisation
    "initialize_random_matrix",
    "random_gaussian",
    # Composite utilities
    "percent_error",
    "form_svd_product",
]
