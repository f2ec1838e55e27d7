"""
Shared state
============

Single-assignment outcome slot behind every future/promise pair.

Storage, thread-safe single write and blocking wait come from
``concurrent.futures.Future``. This layer adds deferred execution (a thunk
run inline by the first reader), a kungfu ``Result`` view of the outcome
and the ``VOID`` marker stored by a promise settled without a value.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import PromiseAlreadySatisfiedError, ResultError
from .._types import Outcome, Thunk

logger = logging.getLogger(__name__)


class _Void:
    __slots__ = ()

    def __repr__(self) -> str:
        return "VOID"


VOID: typing.Final = _Void()
"""Stored by a void promise. Readers see ``None``; continuations get no argument."""


def unvoid[T](value: T | _Void) -> T | None:
    return None if value is VOID else value  # type: ignore[return-value]


def future_outcome[T](future: concurrent.futures.Future[T]) -> Outcome[T]:
    """Outcome of a settled ``concurrent.futures.Future`` as ``Ok``/``Error``."""
    if future.cancelled():
        return Error(concurrent.futures.CancelledError())
    exc = future.exception()
    if exc is not None:
        return Error(exc)
    return Ok(future.result())


class SharedState[T]:
    """
    Outcome slot shared by a promise and the future handles reading it.

    Either wraps a fresh ``concurrent.futures.Future`` written through
    ``set_value``/``set_exception``, or adopts one produced by an executor,
    which then captures the outcome of the submitted work on its own.
    A deferred state holds a thunk instead; the first thread to wait on or
    read the state runs it and stores its outcome.
    """

    __slots__ = ("_future", "_deferred", "_lock")

    def __init__(
        self,
        future: concurrent.futures.Future[T] | None = None,
        *,
        deferred: Thunk[T] | None = None,
    ) -> None:
        self._future: concurrent.futures.Future[T] = (
            future if future is not None else concurrent.futures.Future()
        )
        self._deferred = deferred
        self._lock = threading.Lock()

    # Writes

    def set_value(self, value: T) -> None:
        try:
            self._future.set_result(value)
        except concurrent.futures.InvalidStateError:
            raise PromiseAlreadySatisfiedError() from None

    def set_exception(self, exc: BaseException) -> None:
        try:
            self._future.set_exception(exc)
        except concurrent.futures.InvalidStateError:
            raise PromiseAlreadySatisfiedError() from None

    def set_result(self, result: Outcome[T] | Result[T, object]) -> None:
        """Write a kungfu Result: Ok becomes the value, Error the failure."""
        match result:
            case Ok(value):
                self.set_value(value)
            case Error(BaseException() as exc):
                self.set_exception(exc)
            case Error(error):
                self.set_exception(ResultError(error))

    # Reads

    def is_deferred(self) -> bool:
        return self._deferred is not None

    def is_ready(self) -> bool:
        return self._future.done()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until settled or timeout; runs pending deferred work first."""
        self._run_deferred()
        done, _ = concurrent.futures.wait((self._future,), timeout=timeout)
        return bool(done)

    def get(self) -> T:
        """Block for the value; a stored failure is re-raised as is."""
        self._run_deferred()
        return self._future.result()

    def outcome(self) -> Outcome[T]:
        """Block for the outcome without raising."""
        self._run_deferred()
        return future_outcome(self._future)

    def on_settled(self, fn: Callable[[Outcome[T]], object]) -> bool:
        """
        Call ``fn`` with the outcome once settled, without blocking.

        ``fn`` runs on the thread that writes the outcome, or right away if
        it is already written. Returns False, registering nothing, while
        deferred work is pending: that only settles when someone reads it.
        """
        if self.is_deferred():
            return False
        self._future.add_done_callback(lambda future: fn(future_outcome(future)))
        return True

    def _run_deferred(self) -> None:
        with self._lock:
            thunk, self._deferred = self._deferred, None
        if thunk is None:
            return
        logger.debug("running deferred work %r on %s", thunk, threading.current_thread().name)
        _settle(self._future, thunk)

    def __repr__(self) -> str:
        if self._deferred is not None:
            status = "deferred"
        elif self._future.done():
            status = "ready"
        else:
            status = "pending"
        return f"SharedState({status})"


def _settle[T](future: concurrent.futures.Future[T], thunk: Callable[[], T]) -> None:
    try:
        value = thunk()
    except BaseException as exc:
        future.set_exception(exc)
    else:
        future.set_result(value)


__all__ = ("VOID", "SharedState", "future_outcome", "unvoid")
