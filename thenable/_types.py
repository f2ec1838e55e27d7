"""
Core type definitions for thenable.

Aliases shared by the unwrap engine, dispatch and chain construction.
"""

from __future__ import annotations

import concurrent.futures
import typing
from collections.abc import Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from .core.future import Future, SharedFuture
    from .core.promise import Promise

# ============================================================================
# Type aliases
# ============================================================================

# Outcome = what a future settles to: a value or the failure that replaced it
type Outcome[T] = Result[T, BaseException]

# Antecedent = any handle `then` accepts as the thing to wait on
type Antecedent[T] = (
    Future[T] | SharedFuture[T] | Promise[T] | concurrent.futures.Future[T]
)

# Callback = continuation; zero-arg when the antecedent carries no value
type Callback[T, R] = Callable[[T], R] | Callable[[], R]

# Thunk = zero-arg unit of work handed to the execution substrate
type Thunk[R] = Callable[[], R]

__all__ = (
    "Antecedent",
    "Callback",
    "Outcome",
    "Thunk",
)
