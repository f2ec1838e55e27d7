"""
thenable - continuations for thread-based futures.

Attach a callback to a future and get a new future for the callback's
outcome. Nested futures are flattened at every step, in both directions:
a future of a future of ``V`` reads as ``V``, and a callback returning a
future is waited on before its stage resolves.

Architecture:
- core: exclusive Future, SharedFuture, Promise over concurrent.futures
- launch: ASYNC / DEFERRED / DEFAULT / DETACHED policies and the executor
- unwrap + dispatch: the flattening engine and single-continuation runner
- then / chain / ChainableFuture: the public chaining API
- lift: bridges to kungfu Result and LazyCoroResult

Example:
    from thenable import Promise, chain

    p = Promise[int]()
    f = chain(p, lambda x: x + 1).then(lambda y: y * 10)
    p.set_value(3)
    f.get()  # 40
"""

# Errors
from ._errors import (
    FutureAlreadyRetrievedError,
    FutureError,
    NoStateError,
    PromiseAlreadySatisfiedError,
    ResultError,
)

# Core types
from ._types import Antecedent, Callback, Outcome
from .core import Future, FutureStatus, Promise, SharedFuture

# Launch policies and configuration
from .launch import (
    Executor,
    Launch,
    ThenConfig,
    configure,
    get_config,
    get_executor,
)

# Unwrap engine and dispatch
from .unwrap import is_future_like, unwrap, unwrap_result
from .dispatch import dispatch

# Chaining
from .detached import then_detached
from .continuation import then
from .chainable import ChainableFuture, chain

# Lift helpers (kungfu bridges)
from . import lift

__version__ = "0.1.0"

__all__ = (
    # Types
    "Antecedent",
    "Callback",
    "Outcome",
    # Core
    "Future",
    "FutureStatus",
    "Promise",
    "SharedFuture",
    # Launch
    "Executor",
    "Launch",
    "ThenConfig",
    "configure",
    "get_config",
    "get_executor",
    # Engine
    "dispatch",
    "is_future_like",
    "unwrap",
    "unwrap_result",
    # Chaining
    "ChainableFuture",
    "chain",
    "then",
    "then_detached",
    # Lift
    "lift",
    # Errors
    "FutureAlreadyRetrievedError",
    "FutureError",
    "NoStateError",
    "PromiseAlreadySatisfiedError",
    "ResultError",
)
