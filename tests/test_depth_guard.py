"""Tests for core/depth_guard.py.

Tests DepthGuard context manager, explicit check(), and depth_clamp()
with Hypothesis for property-based testing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from a2lwriter.constants import MAX_DEPTH
from a2lwriter.core import DepthGuard, RenderDepthError, depth_clamp
from a2lwriter.diagnostics import DiagnosticCode, RenderError


@pytest.fixture
def recursion_limit() -> Iterator[None]:
    """Restore the interpreter recursion limit after the test."""
    original = sys.getrecursionlimit()
    yield
    sys.setrecursionlimit(original)


# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        """DepthGuard uses MAX_DEPTH by default."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0

    def test_custom_max_depth(self) -> None:
        """DepthGuard accepts custom max_depth."""
        assert DepthGuard(max_depth=5).max_depth == 5

    def test_post_init_clamps_max_depth(self) -> None:
        """__post_init__ clamps max_depth against recursion limit."""
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit + 1000)

        assert guard.max_depth == (limit - 50) // 2


# ============================================================================
# Context Manager
# ============================================================================


class TestDepthGuardContextManager:
    """Test DepthGuard as context manager."""

    def test_nested(self) -> None:
        """Nested context managers increment and restore depth."""
        guard = DepthGuard(max_depth=10)

        with guard:
            assert guard.current_depth == 1
            with guard:
                assert guard.current_depth == 2

        assert guard.current_depth == 0

    def test_raises_on_exceeded(self) -> None:
        """Entering beyond max_depth raises RenderDepthError."""
        guard = DepthGuard(max_depth=2)

        with guard, guard:
            with pytest.raises(RenderDepthError, match=r"\(2\)") as exc_info:
                with guard:
                    pass
            # __enter__ raised before incrementing
            assert guard.current_depth == 2

        assert guard.current_depth == 0
        assert isinstance(exc_info.value, RenderError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MAX_DEPTH_EXCEEDED

    def test_depth_restored_on_error(self) -> None:
        """Depth is restored even if an exception occurs in context."""
        guard = DepthGuard(max_depth=10)
        msg = "boom"

        with pytest.raises(KeyError), guard:
            raise KeyError(msg)

        assert guard.current_depth == 0

    def test_returns_self(self) -> None:
        """__enter__ returns self for 'as' binding."""
        guard = DepthGuard()

        with guard as g:
            assert g is guard


class TestDepthGuardCheck:
    """Test explicit check() and is_exceeded()."""

    def test_check_below_limit(self) -> None:
        """check() passes below the limit."""
        guard = DepthGuard(max_depth=1)
        guard.check()
        assert not guard.is_exceeded()

    def test_check_at_limit(self) -> None:
        """check() raises once the limit is reached."""
        guard = DepthGuard(max_depth=1)
        with guard:
            assert guard.is_exceeded()
            with pytest.raises(RenderDepthError):
                guard.check()

    @given(max_depth=st.integers(min_value=1, max_value=40))
    def test_exactly_max_depth_levels(self, max_depth: int) -> None:
        """PROPERTY: exactly max_depth nested entries succeed."""
        guard = DepthGuard(max_depth=max_depth)
        entered = 0
        with pytest.raises(RenderDepthError):
            for _ in range(max_depth + 1):
                guard.__enter__()
                entered += 1
        event(f"max_depth={max_depth}")
        assert entered == max_depth


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Test depth_clamp against the recursion limit."""

    @pytest.mark.usefixtures("recursion_limit")
    def test_within_limit(self) -> None:
        """Requests below the safe depth are returned unchanged."""
        sys.setrecursionlimit(1000)
        assert depth_clamp(100) == 100

    @pytest.mark.usefixtures("recursion_limit")
    def test_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Requests above the safe depth are clamped with a warning."""
        sys.setrecursionlimit(1000)
        with caplog.at_level(logging.WARNING, logger="a2lwriter.core.depth_guard"):
            assert depth_clamp(5000) == 475
        assert any("Clamping to 475" in r.getMessage() for r in caplog.records)

    @pytest.mark.usefixtures("recursion_limit")
    def test_reserve_frames(self) -> None:
        """reserve_frames lowers the safe depth."""
        sys.setrecursionlimit(1000)
        assert depth_clamp(5000, reserve_frames=200) == 400
