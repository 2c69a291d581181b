"""Diagnostics and debugging utilities for graphkit."""

from .core import (
    assert_no_dangling_edges,
    assert_symmetric,
    assert_valid_weight,
    find_dangling_edges,
    is_symmetric,
    is_valid_weight,
)
from .debug_mode import (
    debug_context,
    debug_requested,
    is_debug_enabled,
    reload_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "is_valid_weight",
    "assert_valid_weight",
    "find_dangling_edges",
    "assert_no_dangling_edges",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "debug_requested",
    "reload_debug_from_env",
]
