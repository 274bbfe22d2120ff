"""
Numeric backends for the algebra layer.

Backend selection:
    'auto' / 'cpu' / 'cpu_lapack' -> CPUBackend
    any NumericBackend instance   -> used as given
"""

from typing import Literal, Union

from pydense.core.exceptions import ValidationError
from pydense.core.protocols import NumericBackend
from pydense.algebra.backends.cpu import CPUBackend

BackendChoice = Union[Literal['auto', 'cpu', 'cpu_lapack'], NumericBackend]

_CPU_BACKEND = CPUBackend()


def get_backend(backend: BackendChoice = 'auto') -> NumericBackend:
    """Resolve a backend choice to a NumericBackend instance."""
    if isinstance(backend, str):
        if backend in ('auto', 'cpu', 'cpu_lapack'):
            return _CPU_BACKEND
        raise ValidationError(f"Unknown backend: {backend!r}")

    if isinstance(backend, NumericBackend):
        return backend

    raise ValidationError(
        f"backend: expected a backend name or NumericBackend, got {type(backend).__name__}"
    )


__all__ = [
    "BackendChoice",
    "CPUBackend",
    "get_backend",
]
