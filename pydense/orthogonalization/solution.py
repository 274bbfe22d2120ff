"""
Orthonormal basis solution type.

Wraps the Result envelope produced by orthonormalize().
"""

from dataclasses import dataclass
from typing import Any

from pydense.core.result import Result
from pydense.matrix.storage import Matrix
from pydense.orthogonalization._common import BasisParams


@dataclass
class BasisSolution:
    """
    User-facing orthonormal basis results.

    Provides the basis Q together with diagnostics describing how
    orthogonal it came out and how close the input was to rank
    deficiency.
    """
    _result: Result[BasisParams]

    @property
    def Q(self) -> Matrix:
        return self._result.params.Q

    @property
    def orthogonality_error(self) -> float:
        """max |QᵀQ - I| over all entries."""
        return self._result.params.orthogonality_error

    @property
    def min_relative_residual(self) -> float:
        """
        Smallest ||v|| / ||a_j|| seen in the first pass.

        Close to 1 for nearly orthogonal input, small when some column
        is nearly a combination of the columns before it.
        """
        return self._result.params.min_relative_residual

    @property
    def passes(self) -> int:
        return self._result.params.passes

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        m, n = self.Q.shape
        lines = [
            "Orthonormal Basis",
            "=" * 40,
            f"Shape: {m} x {n}",
            f"Passes: {self.passes}",
            f"Orthogonality error: {self.orthogonality_error:.3e}",
            f"Min relative residual: {self.min_relative_residual:.3e}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self.Q.shape
        return (
            f"BasisSolution(rows={m}, cols={n}, "
            f"orthogonality_error={self.orthogonality_error:.2e})"
        )
