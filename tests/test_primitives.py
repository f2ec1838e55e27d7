"""Future, SharedFuture and Promise tests."""

import copy
import threading

import pytest
from kungfu import Error, Ok

from thenable import (
    FutureAlreadyRetrievedError,
    FutureStatus,
    NoStateError,
    Promise,
    PromiseAlreadySatisfiedError,
    ResultError,
)


def test_promise_value_reaches_future():
    promise = Promise()
    future = promise.get_future()
    promise.set_value(5)

    assert future.is_ready()
    assert future.get() == 5


def test_exclusive_future_reads_once():
    promise = Promise()
    future = promise.get_future()
    promise.set_value("once")

    assert future.get() == "once"
    assert not future.valid()
    with pytest.raises(NoStateError):
        future.get()
    with pytest.raises(NoStateError):
        future.wait()


def test_shared_future_reads_many_times():
    promise = Promise()
    shared = promise.get_future().share()
    other = copy.copy(shared)
    promise.set_value([1, 2])

    assert shared.get() == [1, 2]
    assert shared.get() == [1, 2]
    assert other.get() is shared.get()
    assert shared.valid() and other.valid()


def test_share_invalidates_exclusive_handle():
    promise = Promise()
    future = promise.get_future()
    shared = future.share()

    assert not future.valid()
    promise.set_value(1)
    assert shared.get() == 1


def test_failure_is_reraised_unchanged_on_every_read():
    err = ValueError("bad input")
    promise = Promise()
    shared = promise.get_future().share()
    promise.set_exception(err)

    for _ in range(2):
        with pytest.raises(ValueError) as info:
            shared.get()
        assert info.value is err


def test_promise_writes_once():
    promise = Promise()
    promise.set_value(1)

    with pytest.raises(PromiseAlreadySatisfiedError):
        promise.set_value(2)
    with pytest.raises(PromiseAlreadySatisfiedError):
        promise.set_exception(RuntimeError("late"))
    assert promise.get_future().get() == 1


def test_promise_hands_out_one_future():
    promise = Promise()
    promise.get_future()

    with pytest.raises(FutureAlreadyRetrievedError):
        promise.get_future()


def test_void_promise():
    promise = Promise()
    future = promise.get_future()
    promise.set_value()

    assert future.get() is None


def test_none_value_and_void_both_read_as_none():
    void = Promise()
    void.set_value()
    none = Promise()
    none.set_value(None)

    assert void.get_future().share().get() is None
    match none.get_future().to_result():
        case Ok(value):
            assert value is None
        case Error(exc):
            pytest.fail(f"unexpected failure {exc!r}")


def test_wait_for_reports_timeout_then_ready():
    promise = Promise()
    future = promise.get_future()

    assert future.wait_for(0.01) is FutureStatus.TIMEOUT
    promise.set_value(1)
    assert future.wait_for(0.01) is FutureStatus.READY


def test_get_blocks_until_other_thread_writes():
    promise = Promise()
    future = promise.get_future()
    threading.Timer(0.02, promise.set_value, args=(99,)).start()

    assert future.get() == 99


def test_to_result_views_outcome():
    ok = Promise()
    ok.set_value(3)
    match ok.get_future().to_result():
        case Ok(value):
            assert value == 3
        case Error(exc):
            pytest.fail(f"unexpected failure {exc!r}")

    err = KeyError("k")
    failed = Promise()
    failed.set_exception(err)
    match failed.get_future().to_result():
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Error(exc):
            assert exc is err


def test_set_result_with_plain_error_payload():
    promise = Promise()
    promise.set_result(Error("not found"))

    with pytest.raises(ResultError) as info:
        promise.get_future().get()
    assert info.value.error == "not found"


def test_set_result_ok():
    promise = Promise()
    promise.set_result(Ok("fine"))

    assert promise.is_satisfied()
    assert promise.get_future().get() == "fine"


def test_exclusive_future_is_move_only():
    future = Promise().get_future()

    with pytest.raises(TypeError):
        copy.copy(future)
    with pytest.raises(TypeError):
        copy.deepcopy(future)

    moved = future.move()
    assert moved.valid()
    assert not future.valid()
