# ftlib

A small collection of everyday helpers in plain Python, with no dependencies
outside the standard library.

## Modules

- `ftlib.chars`: ASCII character tests `isalpha`, `isdigit`, `isalnum`,
  `isascii` and `isprint`. Each takes an int code or a one-character string
  and returns a bool. `tolower` and `toupper` give back the same type they were
  given. `atoi` parses a leading decimal integer: whitespace is skipped, one
  sign is allowed, and the result wraps to signed 32 bits. `itoa` returns the
  decimal text of an int.
- `ftlib.memory`: helpers for `bytes` and `bytearray`:
  - `bzero` and `memset` fill a buffer in place.
  - `calloc` returns a zero-filled `bytearray` and raises `MemoryError` on
    size overflow.
  - `memchr` returns an index or `None`.
  - `memcmp` returns the difference of the first unequal bytes.
  - `memcpy` copies into a buffer.
  - `memmove(buf, dest, src, n)` copies between offsets inside one buffer,
    and overlapping regions are handled.

  A byte count larger than a buffer raises `ValueError`.
- `ftlib.strings`: these return indices or `None` rather than pointers:
  - `strchr`, `strrchr` and `strnstr` search. Searching for `"\0"` gives
    `len(s)`.
  - `strlen` and `strdup`.
  - `strlcpy(src, size)` and `strlcat(dest, src, size)` return a
    `(text, length)` pair.
  - `strncmp`, `substr`, `strjoin` and `strtrim`.
  - `strjoin` treats `None` on one side as empty and raises `TypeError` if
    both sides are `None`.
  - `strmapi` and `striteri` call a function with `(index, char)`. For
    `striteri` the function may return a replacement character or `None`.
- `ftlib.split`: `split(s, sep)` breaks a string on a single separator
  character and drops empty pieces.
- `ftlib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write
  to a text or binary file object, or to an integer file descriptor. Text is
  encoded as UTF-8 where bytes are needed.
- `ftlib.linkedlist`: `LinkedList` is a singly linked list of `Node` objects.
  - It supports `add_front`, `add_back`, `last`, `len()` and iteration.
  - `iterate(f)` calls `f` on each content in order.
  - `clear(delete)` empties the list and calls `delete` on each content.
  - `map(f, delete)` builds a new list. If `f` raises, `delete` is called on
    every content already produced.
- `ftlib.printf`: `format(template, *args)` returns a string. `printf(template,
  *args, stream=None)` writes to standard output or to the given stream and
  returns the number of bytes written.
- `ftlib.nextline`: `LineReader(fd, buffer_size=42)` reads lines as `bytes`
  from a file descriptor or a binary stream, `buffer_size` bytes at a time.
  - `read_line()` returns `None` at end of data.
  - Iterating the reader yields lines until then.
  - Lines keep their trailing newline. The last line has none if the file
    does not end with one.

## printf conversions

`format` and `printf` support `%c %s %p %d %i %u %x %X` and `%%`. There are no
flags, widths or precisions.

- `%d` and `%i` wrap to signed 32 bits.
- `%u`, `%x` and `%X` wrap to unsigned 32 bits.
- `%s` of `None` prints `(null)`.
- `%p` of `None` prints `(nil)`.
- A `%` followed by any other character is dropped and the character is
  printed as ordinary text.
- Too few arguments raise `TypeError`. Surplus arguments are ignored.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from ftlib.chars import atoi, itoa
from ftlib.split import split
from ftlib.printf import format

atoi("  -42abc")                 # -42
itoa(-2147483648)                # "-2147483648"
split("a,,b,c", ",")             # ["a", "b", "c"]
format("%d%% of %s", 50, "it")   # "50% of it"
format("%x %X", 255, 255)        # "ff FF"
```

To read a file line by line:

```python
import os
from ftlib.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 42):
        print(line.decode("utf-8"), end="")
finally:
    os.close(fd)
```