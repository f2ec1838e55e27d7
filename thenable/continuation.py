"""
Chain construction
==================

``then(antecedent, callback, launch)`` - attach a continuation and get a
future for its fully flattened outcome. Never blocks; only reading the
returned future does.

Pooled continuations hold no worker while anything is pending: the
callback is submitted once the antecedent has settled, and a future it
returns is flattened from done-callbacks rather than by a blocked worker.
"""

from __future__ import annotations

import functools
import logging
import typing

from kungfu import Error, Ok

from ._helpers import adopt, capture
from ._types import Antecedent, Callback
from .core.future import Future
from .core.promise import Promise
from .detached import then_detached
from .dispatch import dispatch_raw, invoke
from .launch.executor import get_executor
from .launch.policy import Launch
from .unwrap import unwrap_raw, when_settled

logger = logging.getLogger(__name__)


def then[T](
    antecedent: Antecedent[T],
    callback: Callback[T, typing.Any],
    launch: Launch | None = None,
) -> Future[typing.Any]:
    """
    Schedule ``callback`` to run once ``antecedent`` resolves.

    Antecedent ownership:
    - Future: moved in; the caller's handle is invalid afterwards
    - SharedFuture: copied; the caller keeps an independent readable copy
    - Promise: its paired future is taken; the promise stays usable
    - concurrent.futures.Future: read-many, used as is

    ``launch`` defaults to the configured ``default_launch``
    (``Launch.DEFAULT`` unless reconfigured). Failures of the antecedent
    or callback become the failure of the returned future.

    Example:
        p = Promise[int]()
        f = then(p, lambda x: x + 1)
        p.set_value(41)
        f.get()  # 42
    """
    executor = get_executor()
    policy = executor.choose(executor.config.default_launch if launch is None else launch)
    if policy == Launch.DETACHED:
        return then_detached(antecedent, callback)
    source = adopt(antecedent)
    if policy == Launch.DEFERRED:
        return Future(executor.schedule(policy, dispatch_raw, source, callback))
    return _then_pooled(source, callback)


def _then_pooled(source: object, callback: Callback[typing.Any, typing.Any]) -> Future[typing.Any]:
    promise: Promise[typing.Any] = Promise()
    future = promise.get_future()
    when_settled(source, functools.partial(_submit, promise, source, callback))
    return future


def _submit(promise: Promise[typing.Any], source: object, callback: Callback[typing.Any, typing.Any]) -> None:
    # Runs on whichever thread settled the antecedent; the pool is looked up
    # now so that work pending across configure() lands on the current one.
    try:
        get_executor().submit(_run, promise, source, callback)
    except RuntimeError as exc:
        logger.warning("could not submit continuation %r: %s", callback, exc)
        promise.set_exception(exc)


def _run(promise: Promise[typing.Any], source: object, callback: Callback[typing.Any, typing.Any]) -> None:
    match capture(invoke, source, callback):
        case Ok(result):
            when_settled(result, functools.partial(_settle, promise, result))
        case Error(exc) as failure:
            logger.debug("continuation %r failed: %r", callback, exc)
            promise.set_result(failure)


def _settle(promise: Promise[typing.Any], result: object) -> None:
    promise.set_result(capture(unwrap_raw, result))


__all__ = ("then",)
