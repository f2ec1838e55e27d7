"""
Lowering futures into values.

Read any future-shaped handle all the way down, as a value, a kungfu
``Result`` or a kungfu ``LazyCoroResult``.
"""

from __future__ import annotations

import asyncio
import typing

from kungfu import Error, LazyCoroResult, Ok
from kungfu.library.caching import acache

from .._helpers import adopt
from .._types import Antecedent, Outcome
from ..unwrap import unwrap, unwrap_result


def to_result[T](handle: Antecedent[T]) -> Outcome[T]:
    """
    Block and return ``Ok(value)`` or ``Error(failure)``.

    Every stored failure comes back as ``Error``, ``SystemExit`` and other
    ``BaseException`` kinds included. Contract violations still raise.

    **When to use:** Standard way to read a future without try/except.

    Example:
        from thenable import lift as L

        match L.down.to_result(fut):
            case Ok(v): ...
            case Error(exc): ...
    """
    return unwrap_result(handle)


def unsafe[T](handle: Antecedent[T]) -> T:
    """Block and return the value, raising the failure if there is one."""
    return unwrap(handle)


def or_else[T](handle: Antecedent[T], default: T) -> T:
    """Block and return the value, or ``default`` if the future failed."""
    match unwrap_result(handle):
        case Ok(value):
            return value
        case Error(_):
            return default
        case _ as unreachable:
            typing.assert_never(unreachable)


def to_lazy[T](handle: Antecedent[T]) -> LazyCoroResult[T, BaseException]:
    """
    Await a future from async code.

    Ownership is taken immediately (an exclusive future is moved). The
    blocking read runs in ``asyncio.to_thread`` so the event loop stays free,
    and the outcome is cached, so awaiting the result twice reads once.

    Example:
        result = await L.down.to_lazy(then(p, compute))
    """
    source = adopt(handle)

    async def run() -> Outcome[T]:
        return await asyncio.to_thread(unwrap_result, source)

    return LazyCoroResult(acache(run))


__all__ = (
    "or_else",
    "to_lazy",
    "to_result",
    "unsafe",
)
