"""Core utilities shared by the writer package.

By isolating these utilities here, we maintain a clean dependency graph:

    diagnostics <- core <- writer

Exports:
    DepthGuard: Context manager for recursion depth limiting
    RenderDepthError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, RenderDepthError, depth_clamp

__all__ = ["DepthGuard", "RenderDepthError", "depth_clamp"]
