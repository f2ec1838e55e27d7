"""
Dispatch
========

Runs one continuation: waits for the antecedent, calls the callback with
the unwrapped value, flattens whatever the callback returned.
"""

from __future__ import annotations

import inspect
import typing

from ._types import Callback
from .core.state import VOID, unvoid
from .unwrap import unwrap_raw


def dispatch[T](antecedent: object, callback: Callback[T, typing.Any]) -> typing.Any:
    """
    Resolve ``antecedent`` and feed it to ``callback``.

    A void antecedent (a promise settled with no value, or a callback that
    returned ``None``) is only observed for success or failure, and the
    callback is called with no arguments. A value-bearing antecedent is
    passed as the single argument, even when that value is ``None``.
    A callback returning a future (of futures ...) has that result
    unwrapped too, so the outcome is never future-shaped.

    Nothing is caught here. Failures from the antecedent or the callback
    propagate to whoever scheduled the dispatch.
    """
    return unvoid(dispatch_raw(antecedent, callback))


def dispatch_raw[T](antecedent: object, callback: Callback[T, typing.Any]) -> typing.Any:
    """``dispatch`` keeping the void marker, for writing into another future."""
    return unwrap_raw(invoke(antecedent, callback))


def invoke[T](antecedent: object, callback: Callback[T, typing.Any]) -> typing.Any:
    """Call ``callback`` on the resolved antecedent; its return is not flattened."""
    value = unwrap_raw(antecedent)
    if value is VOID:
        result = _invoke_void(callback)
    else:
        result = callback(value)  # type: ignore[call-arg]
    return VOID if result is None else result


def _invoke_void(callback: Callback[typing.Any, typing.Any]) -> typing.Any:
    # A one-argument callback after a None-returning stage, such as
    # ``dict.get`` on a missing key, still gets that None.
    if _takes_argument(callback):
        return callback(None)  # type: ignore[call-arg]
    return callback()  # type: ignore[call-arg]


def _takes_argument(callback: Callback[typing.Any, typing.Any]) -> bool:
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


__all__ = ("dispatch", "dispatch_raw", "invoke")
