import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from eya.terminate import set_terminate_handler, terminate


class Terminated(Exception):
    pass


def _raise():
    raise Terminated()


@pytest.fixture
def restore_handler():
    previous = set_terminate_handler(None)
    set_terminate_handler(previous)
    yield
    set_terminate_handler(previous)


def _probe_default():
    return set_terminate_handler(None)


def test_default_handler_is_abort():
    previous = set_terminate_handler(None)
    try:
        assert previous is os.abort
    finally:
        set_terminate_handler(previous)
    with ThreadPoolExecutor(max_workers=1) as pool:
        in_fresh_thread = pool.submit(_probe_default).result()
    assert in_fresh_thread is os.abort


def test_set_returns_previous(restore_handler):
    set_terminate_handler(_raise)
    other = lambda: None  # noqa: E731
    assert set_terminate_handler(other) is _raise
    assert set_terminate_handler(_raise) is other


def test_terminate_calls_handler(restore_handler):
    set_terminate_handler(_raise)
    with pytest.raises(Terminated):
        terminate()


def test_terminate_without_handler_raises(restore_handler):
    set_terminate_handler(None)
    with pytest.raises(RuntimeError):
        terminate()


def test_returning_handler_raises(restore_handler):
    calls = []
    set_terminate_handler(lambda: calls.append(1))
    with pytest.raises(RuntimeError):
        terminate()
    assert calls == [1]