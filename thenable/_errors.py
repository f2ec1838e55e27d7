from __future__ import annotations

class FutureError(Exception):
    """Misuse of a future or promise handle."""

class NoStateError(FutureError):
    """Handle has no shared state: consumed, moved-from or never assigned."""

    def __init__(self, operation: str = "read") -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: future has no associated state")

class PromiseAlreadySatisfiedError(FutureError):
    """Promise was written more than once."""

    def __init__(self) -> None:
        super().__init__("Promise already satisfied")

class FutureAlreadyRetrievedError(FutureError):
    """get_future() called twice on the same promise."""

    def __init__(self) -> None:
        super().__init__("Future already retrieved from this promise")

class ResultError(Exception):
    """kungfu Error payload that is not itself an exception."""

    error: object

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Result carried error: {error!r}")

__all__ = (
    "FutureAlreadyRetrievedError",
    "FutureError",
    "NoStateError",
    "PromiseAlreadySatisfiedError",
    "ResultError",
)
