"""Chain construction tests."""

import concurrent.futures
import threading

import pytest

from thenable import (
    FutureStatus,
    Launch,
    NoStateError,
    Promise,
    ThenConfig,
    configure,
    get_executor,
    then,
)
from thenable.lift import failed, ready

ALL_LAUNCHES = [Launch.ASYNC, Launch.DEFERRED, Launch.DEFAULT, Launch.DETACHED]


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_two_stage_chain(launch):
    a = Promise()
    f1 = then(a, lambda x: x + 1, launch)
    f2 = then(f1, lambda y: y * 10, launch)
    a.set_value(3)

    assert f2.get() == 40


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_failure_passthrough_skips_callback(launch):
    err = ValueError("E")
    calls = []

    future = then(failed(err), calls.append, launch)

    with pytest.raises(ValueError) as info:
        future.get()
    assert info.value is err
    assert calls == []


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_callback_failure_becomes_future_failure(launch):
    err = RuntimeError("callback")

    def explode(_):
        raise err

    with pytest.raises(RuntimeError) as info:
        then(ready(1), explode, launch).get()
    assert info.value is err


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_nested_future_returned_by_callback(launch):
    def nested(_):
        return ready(ready(7))

    assert then(ready("go"), nested, launch).get() == 7


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_void_propagation(launch):
    seen = []

    stage = then(ready(5), seen.append, launch)
    after = then(stage, lambda: "after void", launch)

    assert after.get() == "after void"
    assert seen == [5]


def test_void_future_resolves_only_after_callback_runs():
    gate = threading.Event()
    seen = []

    def slow(x):
        gate.wait(5)
        seen.append(x)

    future = then(ready(1), slow, Launch.ASYNC)
    assert future.wait_for(0.05) is FutureStatus.TIMEOUT
    gate.set()
    assert future.get() is None
    assert seen == [1]


def test_then_does_not_block_on_pending_antecedent():
    promise = Promise()
    future = then(promise, lambda x: x * 2, Launch.ASYNC)

    assert future.wait_for(0.05) is FutureStatus.TIMEOUT
    promise.set_value(21)
    assert future.get() == 42


def test_exclusive_antecedent_is_moved():
    antecedent = ready(1)
    future = then(antecedent, lambda x: x)

    assert not antecedent.valid()
    assert future.get() == 1
    with pytest.raises(NoStateError):
        then(antecedent, lambda x: x)


def test_shared_antecedent_stays_readable():
    shared = ready(2).share()
    future = then(shared, lambda x: x + 1)

    assert future.get() == 3
    assert shared.valid()
    assert shared.get() == 2


def test_promise_antecedent_stays_writable():
    promise = Promise()
    future = then(promise, lambda x: x.upper())

    promise.set_value("done")
    assert future.get() == "DONE"


def test_concurrent_future_antecedent():
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        source = pool.submit(lambda: 10)
        assert then(source, lambda x: x - 1).get() == 9


def test_deferred_runs_on_reading_thread():
    ran_on = []

    future = then(ready(1), lambda x: ran_on.append(threading.get_ident()), Launch.DEFERRED)

    assert future.wait_for(0.01) is FutureStatus.DEFERRED
    assert ran_on == []
    future.get()
    assert ran_on == [threading.get_ident()]


def test_async_runs_on_pool_thread():
    names = []

    then(ready(1), lambda _: names.append(threading.current_thread().name), Launch.ASYNC).get()
    assert names[0].startswith("thenable-test")


def test_configured_default_launch_is_used():
    configure(ThenConfig(default_launch=Launch.DEFERRED))
    calls = []

    future = then(ready(1), calls.append)

    assert future.wait_for(0.01) is FutureStatus.DEFERRED
    future.get()
    assert calls == [1]


def test_default_launch_is_pooled_on_any_thread():
    executor = get_executor()

    assert executor.choose(Launch.DEFAULT) is Launch.ASYNC
    assert executor.submit(executor.choose, Launch.DEFAULT).get() is Launch.ASYNC
    assert executor.choose(Launch.DEFERRED) is Launch.DEFERRED


@pytest.mark.parametrize("launch", [Launch.ASYNC, Launch.DEFAULT])
def test_waiting_continuations_leave_workers_free(launch):
    configure(ThenConfig(max_workers=2, thread_name_prefix="thenable-test"))
    gate = Promise()
    shared = gate.get_future().share()

    waiting = [then(shared, lambda x: x * 10, launch) for _ in range(2)]
    opener = then(ready(1), gate.set_value, launch)

    assert opener.wait_for(5) is FutureStatus.READY
    for future in waiting:
        assert future.wait_for(5) is FutureStatus.READY
        assert future.get() == 10


def test_stage_returning_pending_future_releases_its_worker():
    configure(ThenConfig(max_workers=1, thread_name_prefix="thenable-test"))
    inner = Promise()

    outer = then(ready(1), lambda _: inner.get_future(), Launch.ASYNC)
    then(ready(2), inner.set_value, Launch.ASYNC)

    assert outer.wait_for(5) is FutureStatus.READY
    assert outer.get() == 2


def test_pooled_stage_returning_pooled_future_on_one_worker():
    configure(ThenConfig(max_workers=1, thread_name_prefix="thenable-test"))

    def outer(x):
        return then(ready(x), lambda y: y * 2, Launch.ASYNC)

    future = then(ready(5), outer, Launch.ASYNC)
    assert future.wait_for(5) is FutureStatus.READY
    assert future.get() == 10


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_none_value_is_passed_to_callback(launch):
    assert then(ready(None), lambda x: x is None, launch).get() is True


@pytest.mark.parametrize("launch", ALL_LAUNCHES)
def test_stage_returning_none_feeds_one_argument_callback(launch):
    lookup = {"present": "value"}

    stage = then(ready("missing"), lookup.get, launch)
    assert then(stage, lambda v: v or "default", launch).get() == "default"


def test_continuation_built_inside_pooled_work():
    def outer(x):
        return then(ready(x), lambda y: y + 1)

    assert then(ready(1), outer, Launch.ASYNC).get() == 2


def test_rejects_non_future_antecedent():
    with pytest.raises(TypeError):
        then(5, lambda x: x)


def test_rejects_detached_combined_with_other_flags():
    with pytest.raises(ValueError):
        then(ready(1), lambda x: x, Launch.DETACHED | Launch.ASYNC)
