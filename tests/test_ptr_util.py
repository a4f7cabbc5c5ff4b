import pytest

from eya.ptr_util import (
    add_by_offset,
    align_down,
    align_up,
    is_aligned,
    ranges_no_overlap,
    ranges_overlap,
    sub_by_offset,
)

ALIGNS = [1, 2, 4, 8, 16, 64, 4096]
ADDRS = [0, 1, 3, 7, 8, 15, 16, 17, 100, 4095, 4096, 123457]


@pytest.mark.parametrize("align", ALIGNS)
@pytest.mark.parametrize("addr", ADDRS)
def test_align_up_invariants(addr, align):
    up = align_up(addr, align)
    assert up >= addr
    assert up - addr < align
    assert is_aligned(up, align)


@pytest.mark.parametrize("align", ALIGNS)
@pytest.mark.parametrize("addr", ADDRS)
def test_align_down_invariants(addr, align):
    down = align_down(addr, align)
    assert down <= addr
    assert addr - down < align
    assert is_aligned(down, align)


@pytest.mark.parametrize("align", ALIGNS)
@pytest.mark.parametrize("addr", ADDRS)
def test_aligned_address_is_fixed_point(addr, align):
    aligned = align_down(addr, align)
    assert align_up(aligned, align) == aligned
    assert align_down(aligned, align) == aligned


def test_align_pinned_values():
    assert align_up(13, 8) == 16
    assert align_down(13, 8) == 8


def test_is_aligned_matches_modulo():
    for addr in ADDRS:
        for align in ALIGNS:
            assert is_aligned(addr, align) == (addr % align == 0)


def test_zero_is_aligned_everywhere():
    assert all(is_aligned(0, a) for a in ALIGNS)
    assert align_up(0, 16) == 0


@pytest.mark.parametrize("bad", [0, -4, 3, 6, 12])
def test_bad_alignment_rejected(bad):
    with pytest.raises(ValueError):
        align_up(10, bad)
    with pytest.raises(ValueError):
        align_down(10, bad)
    with pytest.raises(ValueError):
        is_aligned(10, bad)


def test_negative_address_rejected():
    with pytest.raises(ValueError):
        align_up(-1, 8)


def test_non_int_alignment_rejected():
    with pytest.raises(TypeError):
        align_up(10, 2.0)


def test_ranges_no_overlap_cases():
    # destination before source: forward copy is safe
    assert ranges_no_overlap(0, 2, 6) is True
    # destination equal to source start
    assert ranges_no_overlap(2, 2, 6) is True
    # destination at or past source end
    assert ranges_no_overlap(6, 2, 6) is True
    assert ranges_no_overlap(10, 2, 6) is True
    # destination strictly inside source range
    assert ranges_no_overlap(4, 2, 6) is False


@pytest.mark.parametrize("r1", range(0, 10))
def test_overlap_is_negation(r1):
    assert ranges_overlap(r1, 2, 6) is (not ranges_no_overlap(r1, 2, 6))
    assert ranges_overlap(r1, 2, 6) is (2 < r1 < 6)


def test_add_sub_round_trip():
    for addr in ADDRS:
        for offset in (0, 1, 8, 1000):
            moved = add_by_offset(addr, offset)
            assert moved - addr == offset
            assert sub_by_offset(moved, offset) == addr


def test_null_passes_through():
    assert add_by_offset(None, 16) is None
    assert sub_by_offset(None, 16) is None


def test_sub_underflow_raises():
    with pytest.raises(ValueError):
        sub_by_offset(4, 5)


def test_add_negative_result_raises():
    with pytest.raises(ValueError):
        add_by_offset(4, -5)


def test_sub_to_zero_allowed():
    assert sub_by_offset(7, 7) == 0