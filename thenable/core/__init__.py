"""
Future/promise primitives.

Exclusive and shared futures, promises, and the shared state behind them.
"""

from .future import Future, FutureStatus, SharedFuture
from .promise import Promise
from .state import SharedState

__all__ = (
    "Future",
    "FutureStatus",
    "Promise",
    "SharedFuture",
    "SharedState",
)
