"""
Generic result container for PyDense computations.

The Result class provides a standardized envelope for operations that
report more than their primary output. This enables shared tooling for
timing, diagnostics and reproducibility while allowing each module to
define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (passes, residuals, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata for the libraries that produced a result."""
    import numpy
    import scipy
    from pydense import __version__

    return {
        'pydense_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for dense linear algebra computations.

    Type Parameters:
        P: The module-specific parameter payload type

    Attributes:
        params: Module-specific payload (basis, factors, etc.)
        info: Structured metadata (method, passes, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions; generated automatically if omitted

    Examples:
        >>> Result(
        ...     params=BasisParams(Q=Q, ...),
        ...     info={'method': 'mgs', 'passes': 2},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_lapack'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
