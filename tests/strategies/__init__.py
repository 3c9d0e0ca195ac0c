"""Hypothesis strategies for a2lwriter property-based testing.

Usage:
    from tests.strategies import node_specs, line_numbers
    from tests.strategies.nodes import static_texts, A2L_TAGS
"""

from .nodes import (
    A2L_TAGS,
    INCLUDE_FILES,
    entry_specs,
    line_numbers,
    node_specs,
    static_texts,
)

__all__ = [
    "A2L_TAGS",
    "INCLUDE_FILES",
    "entry_specs",
    "line_numbers",
    "node_specs",
    "static_texts",
]
