"""Promise - the write side of a future."""

from __future__ import annotations

import threading

from kungfu import Result

from .._errors import FutureAlreadyRetrievedError
from .._types import Outcome
from .future import Future
from .state import VOID, SharedState


class Promise[T]:
    """
    Producer paired 1:1 with one ``Future``.

    The outcome is written exactly once; a second write raises
    ``PromiseAlreadySatisfiedError``. ``set_value()`` with no argument
    settles a void promise; ``set_value(None)`` stores a real ``None``.
    """

    __slots__ = ("_state", "_retrieved", "_lock")

    def __init__(self) -> None:
        self._state: SharedState[T] = SharedState()
        self._retrieved = False
        self._lock = threading.Lock()

    def get_future(self) -> Future[T]:
        """Hand out the paired future. Allowed once; the promise stays writable."""
        with self._lock:
            if self._retrieved:
                raise FutureAlreadyRetrievedError()
            self._retrieved = True
        return Future(self._state)

    def set_value(self, value: T = VOID) -> None:  # type: ignore[assignment]
        self._state.set_value(value)

    def set_exception(self, exc: BaseException) -> None:
        self._state.set_exception(exc)

    def set_result(self, result: Outcome[T] | Result[T, object]) -> None:
        """Settle from a kungfu Result (``Ok`` -> value, ``Error`` -> failure)."""
        self._state.set_result(result)

    def is_satisfied(self) -> bool:
        return self._state.is_ready()

    def __repr__(self) -> str:
        return f"Promise({self._state!r})"


__all__ = ("Promise",)
