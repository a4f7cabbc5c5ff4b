"""Per-thread stack of exception catch frames with a fixed depth."""

from __future__ import annotations

import inspect
import threading
import time
from dataclasses import dataclass
from typing import List, Optional

__all__ = [
    "DEFAULT_DEPTH",
    "ExceptionTrace",
    "ExceptionCatch",
    "CatchStack",
    "catch_stack",
]

DEFAULT_DEPTH = 32


@dataclass(frozen=True)
class ExceptionTrace:
    """Where and when an exception was raised."""

    timestamp: str
    filename: str
    function: str

    @classmethod
    def now(cls) -> "ExceptionTrace":
        """Build a trace for the caller: current time, caller's file and function."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            if caller is None:
                return cls(time.ctime(), "<unknown>", "<unknown>")
            code = caller.f_code
            return cls(time.ctime(), code.co_filename, code.co_name)
        finally:
            del frame, caller


@dataclass
class ExceptionCatch:
    """A catch point: the exception caught there and where it came from."""

    exception: Optional[BaseException] = None
    trace: Optional[ExceptionTrace] = None


class CatchStack:
    """A fixed-capacity stack of catch frames with a movable cursor.

    The cursor runs from the first slot (``is_begin``) to one past the
    last slot (``is_end``). Slots start out empty (``None``).
    """

    def __init__(self, capacity: int = DEFAULT_DEPTH) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError(f"capacity must be an int, not {type(capacity).__name__}")
        if capacity <= 0:
            raise ValueError("zero stack depth makes exception handling impossible")
        self._slots: List[Optional[ExceptionCatch]] = [None] * capacity
        self._pos = 0

    @property
    def capacity(self) -> int:
        """Number of slots."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._pos

    def current(self) -> Optional[ExceptionCatch]:
        """Return the entry under the cursor, or ``None`` past the last slot."""
        if self.is_end():
            return None
        return self._slots[self._pos]

    def is_begin(self) -> bool:
        """True when the cursor is at the first slot."""
        return self._pos == 0

    def is_end(self) -> bool:
        """True when the cursor is one past the last slot."""
        return self._pos == len(self._slots)

    def next(self) -> Optional[ExceptionCatch]:
        """Advance the cursor and return the entry there; ``None`` if already at the end."""
        if self.is_end():
            return None
        self._pos += 1
        return self.current()

    def prev(self) -> Optional[ExceptionCatch]:
        """Move the cursor back and return the entry there; ``None`` if already at the start."""
        if self.is_begin():
            return None
        self._pos -= 1
        return self.current()

    def push(self, entry: ExceptionCatch) -> Optional[ExceptionCatch]:
        """Store ``entry`` under the cursor and advance; ``None`` when the stack is full."""
        if self.is_end():
            return None
        self._slots[self._pos] = entry
        self.next()
        return entry


_local = threading.local()


def catch_stack() -> CatchStack:
    """Return the calling thread's catch stack, creating it on first use."""
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = CatchStack()
        _local.stack = stack
    return stack