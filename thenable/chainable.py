"""
Chainable futures
=================

``ChainableFuture`` is a ``Future`` whose ``.then`` builds the next stage,
so pipelines read left to right:

    chain(p, parse).then(validate).then(store).get()
"""

from __future__ import annotations

import typing

from ._types import Antecedent, Callback
from .continuation import then
from .core.future import Future
from .launch.policy import Launch


class ChainableFuture[T](Future[T]):
    """
    Exclusive future with a fluent ``then``.

    Reads exactly like ``Future``. ``then`` consumes this handle and returns
    the next stage wrapped again. A default-constructed instance is invalid
    until another one is assigned over it.
    """

    __slots__ = ()

    def __init__(self, future: Future[T] | None = None) -> None:
        super().__init__(future._take("move") if future is not None else None)

    def then[R](
        self,
        callback: Callback[T, R],
        launch: Launch | None = None,
    ) -> ChainableFuture[typing.Any]:
        return chain(self, callback, launch)


def chain[T](
    antecedent: Antecedent[T],
    callback: Callback[T, typing.Any],
    launch: Launch | None = None,
) -> ChainableFuture[typing.Any]:
    """Same as ``then`` but returns a ``ChainableFuture``."""
    return ChainableFuture(then(antecedent, callback, launch))


__all__ = ("ChainableFuture", "chain")
