"""Shared fixtures."""

import pytest

from thenable import ThenConfig, configure, get_executor


@pytest.fixture(autouse=True)
def executor():
    """Fresh process-wide executor per test, drained afterwards."""
    installed = configure(ThenConfig(max_workers=4, thread_name_prefix="thenable-test"))
    yield installed
    # A test may have installed its own executor on top.
    get_executor().shutdown(wait=True)
    installed.shutdown(wait=True)
