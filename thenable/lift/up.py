"""
Lifting values into futures.

Ready and failed futures, and bridges from kungfu ``Result`` /
``LazyCoroResult`` into the future world.
"""

from __future__ import annotations

import asyncio
import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import ResultError
from ..continuation import then
from ..core.future import Future
from ..core.promise import Promise
from ..core.state import VOID
from ..launch.policy import Launch


def ready[T](value: T = VOID) -> Future[T]:  # type: ignore[assignment]
    """
    Already-resolved future. With no argument it is a void future;
    ``ready(None)`` carries a real ``None``.

    **When to use:** Starting a pipeline from a known value.

    Example:
        from thenable import lift as L

        L.up.ready(3).get()  # 3
        chain(L.up.ready(), lambda: "started").get()  # "started"
    """
    promise: Promise[T] = Promise()
    promise.set_value(value)
    return promise.get_future()


def failed(exc: BaseException) -> Future[typing.Never]:
    """Already-failed future. Dual of ready()."""
    promise: Promise[typing.Never] = Promise()
    promise.set_exception(exc)
    return promise.get_future()


def from_result[T, E](result: Result[T, E]) -> Future[T]:
    """
    Future settled from a kungfu Result.

    ``Ok(v)`` reads as ``v``. ``Error(exc)`` re-raises ``exc`` when it is an
    exception, otherwise raises ``ResultError`` carrying the payload.
    """
    promise: Promise[T] = Promise()
    promise.set_result(result)
    return promise.get_future()


def from_lazy[T, E](
    lazy: LazyCoroResult[T, E],
    launch: Launch | None = None,
) -> Future[T]:
    """
    Run a kungfu LazyCoroResult under a launch policy.

    The computation gets its own event loop (``asyncio.run``) on whichever
    thread the policy picks; the returned future reads like ``from_result``
    on its outcome.

    NOTE: With ``Launch.DEFERRED`` the loop runs on the reading thread, so
    do not read the future from inside a running event loop.
    """

    def run() -> T:
        match asyncio.run(_await(lazy)):
            case Ok(value):
                return value
            case Error(BaseException() as exc):
                raise exc
            case Error(error):
                raise ResultError(error)
            case _ as unreachable:
                typing.assert_never(unreachable)

    return then(ready(), run, launch)


async def _await[T, E](lazy: LazyCoroResult[T, E]) -> Result[T, E]:
    return await lazy


__all__ = (
    "failed",
    "from_lazy",
    "from_result",
    "ready",
)
