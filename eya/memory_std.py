"""Byte-level memory operations on buffer objects.

Every function works on objects that support the buffer protocol
(``bytes``, ``bytearray``, ``memoryview``, ``array.array`` and so on),
viewed as flat sequences of unsigned bytes. Destination buffers must be
writable. A ``None`` buffer, a negative count, or a count larger than a
buffer raises instead of touching memory.

Positions are returned as byte offsets from the start of the buffer
concerned. Where no position exists, for example when two regions are
equal, ``None`` is returned.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "copy",
    "copy_rev",
    "rcopy",
    "move",
    "fill",
    "compare",
    "rcompare",
]


def _byte_view(buf: Any, name: str, n: int, *, writable: bool = False) -> memoryview:
    """Return a flat unsigned-byte view of ``buf`` after checking it can hold ``n`` bytes."""
    if buf is None:
        raise TypeError(f"{name} must not be None")
    try:
        view = memoryview(buf)
    except TypeError as exc:
        raise TypeError(
            f"{name} must support the buffer protocol, not {type(buf).__name__}"
        ) from exc
    if writable and view.readonly:
        raise TypeError(f"{name} is read-only")
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if n > view.nbytes:
        raise ValueError(f"{name} holds {view.nbytes} bytes, {n} requested")
    return view


def _check_count(n: int) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"byte count must be an int, not {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    return n


def copy(dst: Any, src: Any, n: int) -> Any:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_count(n)
    d = _byte_view(dst, "dst", n, writable=True)
    s = _byte_view(src, "src", n)
    d[:n] = s[:n]
    return dst


def copy_rev(dst: Any, src: Any, n: int) -> int:
    """Copy ``n`` bytes of ``src`` into ``dst`` in reversed order.

    The first byte of ``src`` becomes byte ``n - 1`` of ``dst``. Returns
    ``n``, the offset just past the written region of ``dst``.
    """
    _check_count(n)
    d = _byte_view(dst, "dst", n, writable=True)
    s = _byte_view(src, "src", n)
    d[:n] = bytes(s[:n])[::-1]
    return n


def rcopy(dst: Any, src: Any, n: int) -> Any:
    """Copy ``n`` bytes from ``src`` to ``dst`` starting at the end; return ``dst``.

    A backward copy is safe when ``dst`` shares memory with ``src`` and
    starts after it.
    """
    _check_count(n)
    d = _byte_view(dst, "dst", n, writable=True)
    s = _byte_view(src, "src", n)
    d[:n] = bytes(s[:n])
    return dst


def move(dst: Any, src: Any, n: int) -> Any:
    """Copy ``n`` bytes from ``src`` to ``dst`` even when they share memory; return ``dst``."""
    _check_count(n)
    d = _byte_view(dst, "dst", n, writable=True)
    s = _byte_view(src, "src", n)
    if n:
        d[:n] = bytes(s[:n])
    return dst


def fill(dst: Any, val: int, n: int) -> int:
    """Set the first ``n`` bytes of ``dst`` to ``val``.

    Returns ``n``, the offset just past the filled region.
    """
    _check_count(n)
    if not isinstance(val, int) or isinstance(val, bool):
        raise TypeError(f"fill value must be an int, not {type(val).__name__}")
    if not 0 <= val <= 0xFF:
        raise ValueError(f"fill value must be an unsigned byte, got {val}")
    d = _byte_view(dst, "dst", n, writable=True)
    if n:
        d[:n] = bytes((val,)) * n
    return n


def compare(lhs: Any, rhs: Any, n: int) -> Optional[int]:
    """Return the offset of the first differing byte among the first ``n``, or ``None``."""
    _check_count(n)
    left = _byte_view(lhs, "lhs", n)
    right = _byte_view(rhs, "rhs", n)
    return next(
        (i for i, (a, b) in enumerate(zip(left[:n], right[:n])) if a != b),
        None,
    )


def rcompare(lhs: Any, rhs: Any, n: int) -> Optional[int]:
    """Compare the first ``n`` bytes scanning from the end.

    Returns the offset of the differing byte nearest the end, or ``None``
    when the regions are equal.
    """
    _check_count(n)
    left = bytes(_byte_view(lhs, "lhs", n)[:n])
    right = bytes(_byte_view(rhs, "rhs", n)[:n])
    return next(
        (i for i in range(n - 1, -1, -1) if left[i] != right[i]),
        None,
    )