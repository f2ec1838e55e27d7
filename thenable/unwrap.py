"""
Unwrap engine
=============

Flattens nested futures: a future resolving to a future resolving to ...
resolving to ``V`` reads as ``V``. One layer is peeled per iteration until
the value is no longer future-shaped. Levels may freely mix exclusive,
shared and raw ``concurrent.futures`` handles and promises.

``when_settled`` walks the same levels without blocking, so pooled
continuations only take a worker once there is nothing left to wait for.
"""

from __future__ import annotations

import concurrent.futures
import typing
from collections.abc import Callable

from kungfu import Error, Ok

from ._types import Outcome
from .core.future import Future, SharedFuture
from .core.promise import Promise
from .core.state import future_outcome, unvoid


def is_future_like(obj: object) -> bool:
    """Whether ``unwrap`` would peel a layer off ``obj``."""
    return isinstance(obj, (Future, SharedFuture, Promise, concurrent.futures.Future))


def unwrap_outcome(handle: object) -> Outcome[typing.Any]:
    """
    Read ``handle`` down to its innermost outcome, keeping the void marker.

    A failed level stops the walk and its stored failure, of any
    ``BaseException`` kind, is returned as ``Error``. Contract violations
    (an invalid handle, a promise whose future was already taken) raise.
    """
    value = handle
    while True:
        match value:
            case Promise():
                value = value.get_future()
                continue
            case Future() | SharedFuture():
                outcome = value._outcome()
            case concurrent.futures.Future():
                outcome = future_outcome(_wait(value))
            case _:
                return Ok(value)
        match outcome:
            case Ok(inner):
                value = inner
            case Error(_):
                return outcome


def unwrap_raw(handle: object) -> typing.Any:
    match unwrap_outcome(handle):
        case Ok(value):
            return value
        case Error(exc):
            raise exc


def unwrap(handle: object) -> typing.Any:
    """
    Read ``handle`` down to its innermost non-future value.

    Identity for anything that is not future-shaped. Exclusive levels are
    consumed, shared levels are only read, promises give up their paired
    future. A failed level re-raises its failure as is and nothing below
    it is read.

    Example:
        inner = Promise[int]()
        outer = Promise[Future[int]]()
        outer.set_value(inner.get_future())
        inner.set_value(7)
        unwrap(outer.get_future())  # 7
    """
    return unvoid(unwrap_raw(handle))


def unwrap_result(handle: object) -> Outcome[typing.Any]:
    """``unwrap`` as a kungfu Result: Ok(value) or Error(failure)."""
    return unwrap_outcome(handle).map(unvoid)


def when_settled(handle: object, fn: Callable[[], object]) -> None:
    """
    Call ``fn`` once ``handle`` and every level nested in it have settled.

    Never blocks and consumes nothing: levels are observed through
    done-callbacks, so ``fn`` runs on whichever thread settles the last
    one, or right away when nothing is pending. The walk stops early at a
    failed level, an invalid handle or pending deferred work (which only
    runs when read); reading the handle afterwards surfaces the failure or
    runs the work.
    """
    match handle:
        case Promise() | Future() | SharedFuture():
            state = handle._state
        case concurrent.futures.Future():
            handle.add_done_callback(lambda future: _next_level(future_outcome(future), fn))
            return
        case _:
            fn()
            return
    if state is None or not state.on_settled(lambda outcome: _next_level(outcome, fn)):
        fn()


def _next_level(outcome: Outcome[typing.Any], fn: Callable[[], object]) -> None:
    match outcome:
        case Ok(value):
            when_settled(value, fn)
        case Error(_):
            fn()


def _wait[T](future: concurrent.futures.Future[T]) -> concurrent.futures.Future[T]:
    concurrent.futures.wait((future,))
    return future


__all__ = (
    "is_future_like",
    "unwrap",
    "unwrap_outcome",
    "unwrap_raw",
    "unwrap_result",
    "when_settled",
)
