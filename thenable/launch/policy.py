"""Launch policies."""

from __future__ import annotations

import enum


class Launch(enum.Flag):
    """
    How a continuation is scheduled.

    ``ASYNC`` runs it on the thread pool, ``DEFERRED`` runs it inline on the
    first thread that reads the resulting future, ``DEFAULT`` lets the
    executor pick either one. ``DETACHED`` runs it on a dedicated unjoined
    thread and cannot be combined with the other flags.
    """

    ASYNC = 1
    DEFERRED = 2
    DEFAULT = ASYNC | DEFERRED
    DETACHED = 4


def validate_launch(launch: Launch) -> Launch:
    if not isinstance(launch, Launch):
        raise TypeError(f"launch must be a Launch flag, got {type(launch).__name__}")
    if not launch:
        raise ValueError("launch policy must name at least one flag")
    if Launch.DETACHED in launch and launch != Launch.DETACHED:
        raise ValueError("Launch.DETACHED cannot be combined with other launch flags")
    return launch


__all__ = ("Launch", "validate_launch")
