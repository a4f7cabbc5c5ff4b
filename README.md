# eya

Small, dependency-free helpers for working with byte buffers, plus a few
runtime utilities.

All buffer functions accept anything that supports the buffer protocol
(`bytes`, `bytearray`, `memoryview`, `array.array`, ...). They treat each
buffer as a flat sequence of unsigned bytes. Destinations must be writable.

## Modules

- `eya.memory` offers whole-buffer operations: `copy`, `copy_rev`, `rcopy`,
  `move`, `fill`, `fill_pattern`, `compare`, `rcompare`, `find` and `rfind`.
  An operation on two buffers touches only as many bytes as the smaller one
  holds.
  - `fill_pattern` returns `None` when either buffer is empty.
  - `rcompare` compares the trailing bytes that the two buffers have in
    common.
- `eya.memory_std` offers the same kinds of operation with an explicit byte
  count `n`: `copy`, `copy_rev`, `rcopy`, `move`, `fill`, `compare` and
  `rcompare`. The call raises `TypeError` or `ValueError` when:
  - a buffer is `None`,
  - `n` is negative,
  - `n` is larger than a buffer.
- `eya.ptr_util` does arithmetic on integer addresses:
  - `is_aligned`, `align_up` and `align_down` take an alignment that must be a
    power of two.
  - `add_by_offset` and `sub_by_offset` pass `None` through unchanged.
  - `ranges_overlap` and `ranges_no_overlap` check two ranges for overlap.
- `eya.exception_stack` holds a fixed-capacity stack of `ExceptionCatch`
  entries for each thread.
  - `catch_stack()` returns the stack of the calling thread.
  - A `CatchStack` has `push`, `next`, `prev`, `current`, `is_begin` and
    `is_end`.
  - `ExceptionTrace.now()` records the current time and the caller's file and
    function.
- `eya.terminate` provides `terminate()`, which calls the handler set for the
  current thread. The default handler is `os.abort`.
  - `set_terminate_handler(fn)` installs a new handler and returns the
    previous one.
  - `terminate()` raises `RuntimeError` if no handler is set or if the handler
    returns.
- `eya.version` provides `version()` (`"1.0.0"`), `version_major()`,
  `version_minor()` and `version_patch()`.

## Return values

Functions that report a position return a byte offset into the buffer
concerned. For the comparison and search functions that is the left-hand
buffer or the haystack. They return `None` when there is no difference or
no match.

In both modules, `fill` returns the offset just past the filled region. In
`eya.memory_std`, `copy_rev` returns that offset as well. The other copy and
move functions return the destination buffer.

## Installation

```
pip install .
```

## Example

```python
from eya import memory

buf = bytearray(8)
memory.fill_pattern(buf, b"ab")
assert buf == bytearray(b"abababab")

assert memory.find(b"\x01\x02\x03\x04\x05", b"\x03\x04") == 2
assert memory.rfind(b"\x01\x02\x03\x04\x05\x06", b"\x05\x06") == 4
assert memory.compare(b"\x01\x02\x03", b"\x01\x02\x00") == 2
```

## What it does not do

The package has no command-line tool. It does not provide tables of integer
type sizes or limits.

## Running the tests

```
pip install .[test]
pytest
```