"""
Detached continuations
======================

``Launch.DETACHED``: the continuation runs on its own unjoined thread that
writes into a fresh promise. The caller gets the paired future at once and
never waits on the antecedent, neither for its value nor for its teardown.
"""

from __future__ import annotations

import logging
import typing

from kungfu import Error

from ._helpers import adopt, capture
from ._types import Antecedent, Callback
from .core.future import Future
from .core.promise import Promise
from .dispatch import dispatch_raw
from .launch.executor import get_executor

logger = logging.getLogger(__name__)


def then_detached[T](antecedent: Antecedent[T], callback: Callback[T, typing.Any]) -> Future[typing.Any]:
    """
    Chain ``callback`` onto ``antecedent`` on a dedicated thread.

    The promise is referenced by both this frame and the worker thread, so
    it lives until the worker has written the outcome. Every failure, from
    the antecedent or from the callback, is captured into the promise
    instead of escaping the thread.
    """
    source = adopt(antecedent)
    promise: Promise[typing.Any] = Promise()
    future = promise.get_future()
    get_executor().spawn_detached(_run_detached, promise, source, callback)
    return future


def _run_detached(promise: Promise[typing.Any], source: object, callback: Callback[typing.Any, typing.Any]) -> None:
    outcome = capture(dispatch_raw, source, callback)
    match outcome:
        case Error(exc):
            logger.debug("detached continuation %r failed: %r", callback, exc)
    promise.set_result(outcome)


__all__ = ("then_detached",)
