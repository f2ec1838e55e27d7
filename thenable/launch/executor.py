"""
Execution substrate
===================

Where continuations actually run: a lazily created thread pool for
``ASYNC``, an inline thunk for ``DEFERRED``, and one unjoined thread per
call for ``DETACHED``. Outcomes of pooled and deferred work are captured
into the returned ``SharedState`` by the substrate itself.
"""

from __future__ import annotations

import functools
import itertools
import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from ..core.state import SharedState
from .config import ThenConfig
from .policy import Launch, validate_launch

logger = logging.getLogger(__name__)


class Executor:
    """
    Schedules units of work under a launch policy.

    Example:
        executor = Executor(ThenConfig(max_workers=2))
        state = executor.schedule(Launch.ASYNC, pow, 2, 10)
        state.get()  # 1024
    """

    __slots__ = ("_config", "_pool", "_lock", "_detached_ids")

    def __init__(self, config: ThenConfig | None = None) -> None:
        self._config = config if config is not None else ThenConfig()
        self._pool: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()
        self._detached_ids = itertools.count(1)

    @property
    def config(self) -> ThenConfig:
        return self._config

    def _get_pool(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._pool is None:
                self._pool = ThreadPoolExecutor(
                    max_workers=self._config.max_workers,
                    thread_name_prefix=self._config.thread_name_prefix,
                )
                logger.debug(
                    "started thread pool %r (max_workers=%s)",
                    self._config.thread_name_prefix,
                    self._config.max_workers,
                )
            return self._pool

    def choose(self, launch: Launch) -> Launch:
        """
        Resolve a launch request to one concrete policy.

        ``DEFAULT`` becomes ``ASYNC``; any other valid policy is kept.
        """
        launch = validate_launch(launch)
        if launch == Launch.DEFAULT:
            return Launch.ASYNC
        return launch

    def submit[R](self, fn: Callable[..., R], *args: object) -> SharedState[R]:
        return SharedState(self._get_pool().submit(fn, *args))

    def defer[R](self, fn: Callable[..., R], *args: object) -> SharedState[R]:
        return SharedState(deferred=functools.partial(fn, *args))

    def schedule[R](self, launch: Launch, fn: Callable[..., R], *args: object) -> SharedState[R]:
        policy = self.choose(launch)
        logger.debug("scheduling %r with %s", fn, policy)
        if policy == Launch.DEFERRED:
            return self.defer(fn, *args)
        if policy == Launch.ASYNC:
            return self.submit(fn, *args)
        raise ValueError(f"schedule() cannot run {policy!r}; use spawn_detached()")

    def spawn_detached(self, fn: Callable[..., object], *args: object) -> None:
        """Start ``fn(*args)`` on a new thread and let go of it."""
        name = f"{self._config.thread_name_prefix}-detached-{next(self._detached_ids)}"
        thread = threading.Thread(
            target=fn,
            args=args,
            name=name,
            daemon=self._config.detached_daemon,
        )
        thread.start()
        logger.debug("spawned detached thread %s", name)

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            pool, self._pool = self._pool, None
        if pool is not None:
            pool.shutdown(wait=wait)


# ============================================================================
# Process-wide executor
# ============================================================================

_executor = Executor()
_executor_lock = threading.Lock()


def get_executor() -> Executor:
    return _executor


def get_config() -> ThenConfig:
    return _executor.config


def configure(config: ThenConfig) -> Executor:
    """
    Install a new process-wide executor built from ``config``.

    The previous pool is shut down without waiting; work already submitted
    to it still runs to completion.
    """
    global _executor
    with _executor_lock:
        previous, _executor = _executor, Executor(config)
    previous.shutdown(wait=False)
    logger.info("thenable configured: %r", config)
    return _executor


__all__ = (
    "Executor",
    "configure",
    "get_config",
    "get_executor",
)
