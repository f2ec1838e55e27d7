"""Internal helpers for thenable.

Ownership transfer of antecedents and outcome capture at thread boundaries.
Not part of the public API."""

from __future__ import annotations

import concurrent.futures
from collections.abc import Callable

from kungfu import Error, Ok

from ._types import Antecedent, Outcome
from .core.future import Future, SharedFuture
from .core.promise import Promise


def adopt[T](antecedent: Antecedent[T]) -> Future[T] | SharedFuture[T] | concurrent.futures.Future[T]:
    """
    Take the handle scheduled work will read from.

    - Future: moved; the caller's handle is invalid afterwards
    - SharedFuture: copied; the caller's copy stays readable
    - Promise: its paired future is fetched; the promise stays writable
    - concurrent.futures.Future: read-many already, used as is
    """
    match antecedent:
        case Future():
            return antecedent.move()
        case SharedFuture():
            return antecedent.copy()
        case Promise():
            return antecedent.get_future()
        case concurrent.futures.Future():
            return antecedent
        case _:
            raise TypeError(
                "expected a Future, SharedFuture, Promise or concurrent.futures.Future, "
                f"got {type(antecedent).__name__}"
            )


def capture[R](fn: Callable[..., R], *args: object) -> Outcome[R]:
    """Run fn, turning any raised failure into Error(exc)."""
    try:
        return Ok(fn(*args))
    except BaseException as exc:
        return Error(exc)


__all__ = ("adopt", "capture")
