"""Address arithmetic, alignment and range-overlap helpers.

Addresses are plain non-negative integers. ``None`` stands for a null
address: the null-checked arithmetic helpers pass it through unchanged.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "is_aligned",
    "align_up",
    "align_down",
    "ranges_no_overlap",
    "ranges_overlap",
    "add_by_offset",
    "sub_by_offset",
]


def _check_alignment(align: int) -> int:
    if not isinstance(align, int) or isinstance(align, bool):
        raise TypeError(f"alignment must be an int, not {type(align).__name__}")
    if align <= 0 or align & (align - 1):
        raise ValueError(f"alignment must be a positive power of two, got {align}")
    return align


def _check_address(addr: int) -> int:
    if not isinstance(addr, int) or isinstance(addr, bool):
        raise TypeError(f"address must be an int, not {type(addr).__name__}")
    if addr < 0:
        raise ValueError(f"address must be non-negative, got {addr}")
    return addr


def is_aligned(addr: int, align: int) -> bool:
    """Return True if ``addr`` is a multiple of ``align`` (a power of two)."""
    _check_address(addr)
    _check_alignment(align)
    return addr & (align - 1) == 0


def align_up(addr: int, align: int) -> int:
    """Round ``addr`` up to the nearest multiple of ``align``."""
    _check_address(addr)
    _check_alignment(align)
    return (addr + align - 1) & ~(align - 1)


def align_down(addr: int, align: int) -> int:
    """Round ``addr`` down to the nearest multiple of ``align``."""
    _check_address(addr)
    _check_alignment(align)
    return addr & ~(align - 1)


def ranges_no_overlap(r1_begin: int, r2_begin: int, r2_end: int) -> bool:
    """Return True if ``r1_begin`` does not fall strictly inside ``(r2_begin, r2_end)``.

    This is the test used to decide whether a forward copy from the second
    range into a destination starting at ``r1_begin`` is safe.
    """
    return r1_begin <= r2_begin or r2_end <= r1_begin


def ranges_overlap(r1_begin: int, r2_begin: int, r2_end: int) -> bool:
    """Return True if ``r1_begin`` falls strictly inside ``(r2_begin, r2_end)``."""
    return not ranges_no_overlap(r1_begin, r2_begin, r2_end)


def add_by_offset(addr: Optional[int], offset: int) -> Optional[int]:
    """Return ``addr + offset``, or ``None`` when ``addr`` is ``None``."""
    if addr is None:
        return None
    _check_address(addr)
    result = addr + offset
    if result < 0:
        raise ValueError(f"address {addr} plus offset {offset} is negative")
    return result


def sub_by_offset(addr: Optional[int], offset: int) -> Optional[int]:
    """Return ``addr - offset``, or ``None`` when ``addr`` is ``None``.

    Raises ValueError if the result would fall below zero.
    """
    if addr is None:
        return None
    _check_address(addr)
    result = addr - offset
    if result < 0:
        raise ValueError(f"offset {offset} exceeds address {addr}")
    return result