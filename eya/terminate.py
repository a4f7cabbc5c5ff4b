"""Per-thread program termination handler."""

from __future__ import annotations

import os
import threading
from typing import Callable, NoReturn, Optional

__all__ = ["terminate", "set_terminate_handler"]

TerminateHandler = Callable[[], object]

_local = threading.local()


def _handler() -> Optional[TerminateHandler]:
    if not hasattr(_local, "handler"):
        _local.handler = os.abort
    return _local.handler


def terminate() -> NoReturn:
    """Call the current thread's terminate handler.

    The handler is expected not to return. If no handler is set, or the
    handler returns, RuntimeError is raised.
    """
    handler = _handler()
    if handler is None:
        raise RuntimeError("no terminate handler is set")
    handler()
    raise RuntimeError("terminate handler returned")


def set_terminate_handler(fn: Optional[TerminateHandler]) -> Optional[TerminateHandler]:
    """Install ``fn`` as this thread's terminate handler; return the previous one."""
    previous = _handler()
    _local.handler = fn
    return previous