"""Executor configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .policy import Launch, validate_launch


@dataclass(frozen=True, slots=True)
class ThenConfig:
    """
    Process-wide settings for the execution substrate.

    Installed with ``thenable.configure()``; the pool is created lazily from
    these values on first pooled launch.
    """

    max_workers: int | None = None
    thread_name_prefix: str = "thenable"
    default_launch: Launch = Launch.DEFAULT
    detached_daemon: bool = True

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("ThenConfig.max_workers must be >= 1")
        if not self.thread_name_prefix:
            raise ValueError("ThenConfig.thread_name_prefix must not be empty")
        validate_launch(self.default_launch)


__all__ = ("ThenConfig",)
