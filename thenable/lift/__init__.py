"""
Lift helpers with semantic namespaces.

    from thenable import lift as L

    L.up.*    - values, Results and LazyCoroResults into futures
    L.down.*  - futures into values, Results and LazyCoroResults

Examples:
    fut = L.up.ready(3)
    fut = L.up.from_result(Ok(3))
    fut = L.up.from_lazy(fetch_user(42))

    value = L.down.unsafe(fut)
    result = L.down.to_result(fut)
    result = await L.down.to_lazy(fut)
"""

from __future__ import annotations

from . import down, up
from .down import or_else, to_lazy, to_result, unsafe
from .up import failed, from_lazy, from_result, ready

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "ready",
    "failed",
    "from_result",
    "from_lazy",
    # Down
    "to_result",
    "unsafe",
    "or_else",
    "to_lazy",
)
