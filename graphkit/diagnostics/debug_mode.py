"""Debug mode switch for graphkit.

While debug mode is on, graph mutations re-check the adjacency invariants
and searches reject NaN step costs and heuristic values. The initial value
comes from the ``GRAPHKIT_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

DEBUG_ENV_VAR = "GRAPHKIT_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def debug_requested(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return whether the environment asks for debug mode.

    Args:
        environ: Mapping to read ``GRAPHKIT_DEBUG`` from. Defaults to
            ``os.environ``.

    Example:
        >>> debug_requested({"GRAPHKIT_DEBUG": "Yes"})
        True
    """
    if environ is None:
        environ = os.environ
    return environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


_enabled = debug_requested()


def is_debug_enabled() -> bool:
    """Return True while invariant checks are active."""
    return _enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn debug mode on or off for the whole process."""
    global _enabled
    _enabled = bool(enabled)


def reload_debug_from_env() -> bool:
    """Re-read ``GRAPHKIT_DEBUG`` and apply it.

    Useful after the environment changed at runtime, since the variable is
    otherwise only read at import.

    Returns:
        The new debug state.
    """
    set_debug_enabled(debug_requested())
    return _enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """Scope debug mode to a ``with`` block.

    The previous state is restored on exit, also when the block raises.

    Example:
        >>> G = WeightedListGraph()
        >>> with debug_context():
        ...     G.add_edge("a", "b", float("nan"))
        Traceback (most recent call last):
        ...
        ValueError: ...
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
