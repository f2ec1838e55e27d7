from __future__ import annotations

import time

from _infra import User, banner, setup_logging, slow_fetch_user

from thenable import Future, Launch, ThenConfig, configure, then
from thenable import lift as L


def fetch_user(user_id: int) -> Future[User]:
    return then(L.up.ready(user_id), lambda uid: slow_fetch_user(uid, delay_seconds=0.3), Launch.ASYNC)


def main() -> None:
    setup_logging()
    configure(ThenConfig(max_workers=2, thread_name_prefix="demo"))

    banner("02_detached: the caller never waits on the antecedent")

    started = time.monotonic()
    pending = then(fetch_user(7), lambda user: user.id * 6, Launch.DETACHED)
    print(f"then() returned after {time.monotonic() - started:.4f}s")
    print(f"result: {pending.get()}")


if __name__ == "__main__":
    main()
