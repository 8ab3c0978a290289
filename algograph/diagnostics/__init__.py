"""Diagnostics and debugging utilities for algograph."""

from .core import (
    assert_heap_ordered,
    assert_topological_order,
    format_forest,
    is_topological_order,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_topological_order",
    "assert_topological_order",
    "assert_heap_ordered",
    "format_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
