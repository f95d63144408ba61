# ftlib

A small library of helpers that behave like the classic C library routines,
edge cases included. Positions come back as indices, "not found" comes back as
`None`, and failures raise exceptions. The library covers ASCII character
tests, integer parsing and formatting, byte-buffer operations, string
routines, writing to file descriptors, a singly linked list, a buffered line
reader and a compact `printf`. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftlib.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each takes a one-character string or an integer code. The case
converters return the same kind of value they were given, and change only
ASCII letters.

### `ftlib.conv`

- `atoi(text)` skips leading whitespace and reads one optional sign, then the
  digits that follow. Text with no digits gives `0`. The result wraps to a
  32-bit signed integer.
- `itoa(n)` renders a 32-bit signed integer in decimal. It raises
  `OverflowError` for a value outside that range.

### `ftlib.memory`

`memset`, `bzero`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp` and
`calloc` work on mutable byte sequences such as `bytearray`. `memccpy` and
`memchr` return an index or `None`. `calloc(count, size)` returns a zeroed
`bytearray`, and a request for zero bytes still gives one byte. A count that
is negative or longer than a buffer raises `ValueError`.

### `ftlib.strings`

- `strchr` and `strrchr` return the index of the first or last occurrence of a
  character. Searching for `"\0"` finds index `len(s)`.
- `strncmp(s1, s2, n)` returns the difference between the character codes at
  the first mismatch, or `0`.
- `strlcpy(src, size)` and `strlcat(dest, src, size)` return a pair. The pair
  holds the text that fits in a buffer of `size` and the length the
  classic routine reports.
- `strnstr(haystack, needle, n)`, `substr(s, start, length)`,
  `strjoin(s1, s2)`, `strtrim(s, charset)`, `split(s, sep)` (which keeps only
  the non-empty pieces) and `strmapi(s, func)`.

### `ftlib.output`

`put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write to a raw
file descriptor. `put_str_fd` and `put_endl_fd` write nothing when given
`None`.

### `ftlib.linked`

`LinkedList(items=None)` is a singly linked list. It has `add_front`,
`add_back`, `last`, `clear(delete=None)`, `iterate(func)` and
`map(func, delete=None)`, and it supports `len()` and iteration. If `func`
raises during `map`, the contents produced so far go to `delete` and the
exception propagates.

### `ftlib.line_reader`

- `LineReader(fd, buffer_size=32)` reads a file descriptor `buffer_size`
  bytes at a time. `read_line()` returns lines without their newline. The text
  after the last newline comes back as a final line, which may be empty. After
  that, `read_line()` returns `None`. Iterating over a reader yields the same
  lines.
- `get_next_line(fd)` keeps a reader for each descriptor between calls. It
  returns `(line, True)` when a newline ended the line, and
  `(rest, False)` once the input is exhausted.

### `ftlib.printf`

- `format_string(fmt, *args)` returns the formatted text.
- `printf_fd(fd, fmt, *args)` writes the formatted text to `fd` and returns
  its length.

The conversions are `c s p d i u x X %`. The flags are a plain width, `0`
followed by a zero-padding width, `-` followed by a left-justification width,
`.` followed by a precision, and `*`, which takes the width from the next
argument. Integers are treated as 32-bit C `int` or `unsigned int`. A `%s`
argument of `None` prints `(null)`. Any other conversion letter produces
nothing.

## Example

```python
from ftlib.strings import split, strtrim
from ftlib.printf import format_string

words = split("  hello   world ", " ")   # ["hello", "world"]
name = strtrim("--ftlib--", "-")         # "ftlib"
text = format_string("%-8s|%05d", name, 42)   # "ftlib   |00042"
```

## Limits

`printf` has no floating-point conversions and no length modifiers such as
`l` or `h`. The line reader and the output functions work only on raw file
descriptors, not on Python file objects.