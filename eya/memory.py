"""Size-checked memory operations between whole buffers.

Each function takes buffer objects (``bytes``, ``bytearray``,
``memoryview``, ``array.array`` and the like) and works on their full
byte length. Operations that involve two buffers touch only as many
bytes as the smaller one holds, so no buffer is ever overrun.

Positions are byte offsets from the start of the buffer concerned.
``None`` is returned where no position exists.
"""

from __future__ import annotations

from typing import Any, Optional

from . import memory_std

__all__ = [
    "copy",
    "copy_rev",
    "rcopy",
    "move",
    "fill",
    "fill_pattern",
    "compare",
    "rcompare",
    "find",
    "rfind",
]


def _view(buf: Any, name: str) -> memoryview:
    """Return a flat unsigned-byte view of ``buf``."""
    if buf is None:
        raise TypeError(f"{name} must not be None")
    try:
        view = memoryview(buf)
    except TypeError as exc:
        raise TypeError(
            f"{name} must support the buffer protocol, not {type(buf).__name__}"
        ) from exc
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _common_size(dst: Any, src: Any, dst_name: str = "dst", src_name: str = "src") -> int:
    return min(_view(dst, dst_name).nbytes, _view(src, src_name).nbytes)


def copy(dst: Any, src: Any) -> Any:
    """Copy as many leading bytes as both buffers hold from ``src`` into ``dst``; return ``dst``."""
    memory_std.copy(dst, src, _common_size(dst, src))
    return dst


def copy_rev(dst: Any, src: Any) -> Any:
    """Copy the common number of bytes from ``src`` into ``dst`` in reversed order; return ``dst``."""
    memory_std.copy_rev(dst, src, _common_size(dst, src))
    return dst


def rcopy(dst: Any, src: Any) -> Any:
    """Copy the common number of bytes from ``src`` to ``dst`` starting at the end; return ``dst``."""
    memory_std.rcopy(dst, src, _common_size(dst, src))
    return dst


def move(dst: Any, src: Any) -> Any:
    """Copy the common number of bytes even when the buffers share memory; return ``dst``."""
    memory_std.move(dst, src, _common_size(dst, src))
    return dst


def fill(dst: Any, val: int) -> int:
    """Set every byte of ``dst`` to ``val``; return the offset just past the filled region."""
    return memory_std.fill(dst, val, _view(dst, "dst").nbytes)


def fill_pattern(dst: Any, pattern: Any) -> Optional[Any]:
    """Fill ``dst`` with repeated copies of ``pattern``, the last one cut short if needed.

    Returns ``dst``, or ``None`` when either buffer is empty.
    """
    d = _view(dst, "dst")
    p = bytes(_view(pattern, "pattern"))
    if not d.nbytes or not p:
        return None
    if d.readonly:
        raise TypeError("dst is read-only")
    repeats, remainder = divmod(d.nbytes, len(p))
    d[:] = p * repeats + p[:remainder]
    return dst


def compare(lhs: Any, rhs: Any) -> Optional[int]:
    """Return the offset of the first differing byte over the common length, or ``None``."""
    return memory_std.compare(lhs, rhs, _common_size(lhs, rhs, "lhs", "rhs"))


def rcompare(lhs: Any, rhs: Any) -> Optional[int]:
    """Compare the trailing bytes the buffers have in common, scanning from the end.

    Returns the offset within ``lhs`` of the differing byte nearest the
    end, or ``None`` when the compared suffixes are equal or empty.
    """
    left = _view(lhs, "lhs")
    right = _view(rhs, "rhs")
    n = min(left.nbytes, right.nbytes)
    if not n:
        return None
    left_start = left.nbytes - n
    found = memory_std.rcompare(left[left_start:], right[right.nbytes - n:], n)
    return None if found is None else left_start + found


def _haystack_and_needle(haystack: Any, needle: Any) -> Optional[tuple[bytes, bytes]]:
    hay = bytes(_view(haystack, "haystack"))
    pat = bytes(_view(needle, "needle"))
    if not hay or not pat or len(pat) > len(hay):
        return None
    return hay, pat


def find(haystack: Any, needle: Any) -> Optional[int]:
    """Return the offset of the first occurrence of ``needle`` in ``haystack``, or ``None``."""
    pair = _haystack_and_needle(haystack, needle)
    if pair is None:
        return None
    index = pair[0].find(pair[1])
    return None if index < 0 else index


def rfind(haystack: Any, needle: Any) -> Optional[int]:
    """Return the offset of the last occurrence of ``needle`` in ``haystack``, or ``None``."""
    pair = _haystack_and_needle(haystack, needle)
    if pair is None:
        return None
    index = pair[0].rfind(pair[1])
    return None if index < 0 else index