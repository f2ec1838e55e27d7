from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


def slow_fetch_user(user_id: int, delay_seconds: float = 0.05) -> User:
    time.sleep(delay_seconds)
    if user_id < 0:
        raise Failure(f"no user {user_id}")
    return User(id=user_id, name=f"user:{user_id}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def setup_logging() -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.DEBUG, format="%(threadName)s %(name)s: %(message)s")
