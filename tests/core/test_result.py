"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
    - Provenance metadata contains expected version keys
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

import pydense
from pydense.core.result import Result, _default_provenance


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    fields = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_lapack",
    )
    fields.update(kwargs)
    return Result(**fields)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "mgs"},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "mgs"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_lapack"

    def test_timing_with_breakdown(self):
        result = _result(
            timing={"total_seconds": 1.0, "orthogonalize": 0.9, "check": 0.1},
        )
        assert result.timing["orthogonalize"] == 0.9


# ═══════════════════════════════════════════════════════════════════════
# Default factories
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        result = _result()
        assert result.provenance["pydense_version"] == pydense.__version__
        assert "numpy_version" in result.provenance
        assert "scipy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("orthogonality error 1e-6 exceeds 1e-10",))
        assert result.has_warning("orthogonality") is True
        assert result.has_warning("divergence") is False


# ═══════════════════════════════════════════════════════════════════════
# _default_provenance()
# ═══════════════════════════════════════════════════════════════════════


class TestDefaultProvenance:

    def test_values_are_strings(self):
        prov = _default_provenance()
        assert set(prov) == {
            "pydense_version", "numpy_version", "scipy_version", "python_version",
        }
        assert all(isinstance(v, str) for v in prov.values())

    def test_independent_copies(self):
        """Each call returns a new dict."""
        prov1 = _default_provenance()
        prov2 = _default_provenance()
        assert prov1 is not prov2
        assert prov1 == prov2
