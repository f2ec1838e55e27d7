"""
Future handles
==============

Two ownership flavours over one ``SharedState``:

- ``Future`` - exclusive, move-only. Reading consumes it; afterwards the
  handle is invalid and any further read raises ``NoStateError``.
- ``SharedFuture`` - copyable, read-many. Every copy observes the same
  outcome, any number of times.
"""

from __future__ import annotations

import enum
import typing

from .._errors import NoStateError
from .._types import Outcome
from .state import SharedState, unvoid


class FutureStatus(enum.Enum):
    """Result of a timed wait."""

    READY = "ready"
    TIMEOUT = "timeout"
    DEFERRED = "deferred"


class _Handle[T]:
    """Read API common to exclusive and shared futures."""

    __slots__ = ("_state",)

    def __init__(self, state: SharedState[T] | None = None, /) -> None:
        self._state = state

    def valid(self) -> bool:
        """Whether this handle still refers to a shared state."""
        return self._state is not None

    def _require(self, operation: str) -> SharedState[T]:
        if self._state is None:
            raise NoStateError(operation)
        return self._state

    def is_ready(self) -> bool:
        """Non-blocking poll. Deferred work is not started."""
        return self._require("poll").is_ready()

    def wait(self) -> None:
        """Block until settled. Runs deferred work on the calling thread."""
        self._require("wait").wait()

    def wait_for(self, timeout: float) -> FutureStatus:
        """
        Block for at most ``timeout`` seconds.

        Deferred work is never started by a timed wait; ``DEFERRED`` is
        returned instead so the caller can decide to ``get()`` it.
        """
        state = self._require("wait_for")
        if state.is_deferred():
            return FutureStatus.DEFERRED
        if state.wait(timeout):
            return FutureStatus.READY
        return FutureStatus.TIMEOUT

    def __repr__(self) -> str:
        if self._state is None:
            return f"{type(self).__name__}(invalid)"
        return f"{type(self).__name__}({self._state!r})"


class Future[T](_Handle[T]):
    """
    Exclusive future: one reader, one read.

    Not copyable. Ownership moves with ``move()``, ``share()`` or by
    handing the future to ``then``; the original handle is invalid after.
    """

    __slots__ = ()

    def _take(self, operation: str) -> SharedState[T]:
        state = self._require(operation)
        self._state = None
        return state

    def get(self) -> T:
        """Block for the value and consume the handle. Failures re-raise unchanged."""
        return unvoid(self._take("get").get())

    def to_result(self) -> Outcome[T]:
        """Block for the outcome as ``Ok``/``Error`` and consume the handle."""
        return self._outcome().map(unvoid)

    def _outcome(self) -> Outcome[T]:
        return self._take("get").outcome()

    def move(self) -> Future[T]:
        """Transfer the state to a new handle, invalidating this one."""
        return Future(self._take("move"))

    def share(self) -> SharedFuture[T]:
        """Convert into a read-many handle, invalidating this one."""
        return SharedFuture(self._take("share"))

    def __copy__(self) -> typing.NoReturn:
        raise TypeError(f"{type(self).__name__} is move-only; use share() for a copyable handle")

    def __deepcopy__(self, memo: dict[int, object]) -> typing.NoReturn:
        raise TypeError(f"{type(self).__name__} is move-only; use share() for a copyable handle")


class SharedFuture[T](_Handle[T]):
    """Shared future: copyable, read any number of times once settled."""

    __slots__ = ()

    def get(self) -> T:
        return unvoid(self._require("get").get())

    def to_result(self) -> Outcome[T]:
        return self._outcome().map(unvoid)

    def _outcome(self) -> Outcome[T]:
        return self._require("get").outcome()

    def copy(self) -> SharedFuture[T]:
        return SharedFuture(self._state)

    def __copy__(self) -> SharedFuture[T]:
        return self.copy()


__all__ = ("Future", "FutureStatus", "SharedFuture")
