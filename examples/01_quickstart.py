from __future__ import annotations

from _infra import Failure, banner, slow_fetch_user

from thenable import Launch, Promise, chain
from thenable import lift as L


def main() -> None:
    banner("01_quickstart: promise -> chain -> flatten")

    user_id = Promise[int]()
    greeting = (
        chain(user_id, slow_fetch_user)
        # returning a future is fine: the next stage sees the user, not the future
        .then(lambda user: L.up.ready(user.name))
        .then(lambda name: f"hello, {name}")
    )
    user_id.set_value(42)
    print(greeting.get())

    banner("01_quickstart: failures travel down the chain")

    missing = chain(L.up.ready(-1), slow_fetch_user, Launch.DEFERRED).then(lambda user: user.name)
    try:
        missing.get()
    except Failure as err:
        print(f"error: {err}")


if __name__ == "__main__":
    main()
