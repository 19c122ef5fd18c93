# ftlib

A small collection of utilities that follow the semantics of the classic C
string and memory routines, plus a singly linked list, a buffered line reader
for raw file descriptors and a minimal `printf`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftlib.chars`: `isalpha`, `isalnum`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper`. Each takes a character code (`int`) or a
  one-character `str`; the case conversions return the same kind they were
  given.
- `ftlib.numbers`: `atoi(text)` skips leading whitespace, accepts one
  optional sign, stops at the first non-digit, clamps at the 64-bit limits and
  then narrows to a 32-bit int; text without digits gives `0`.
  `itoa(number)` gives the decimal text of a 32-bit signed integer and raises
  `OverflowError` for anything outside that range.
- `ftlib.memory`: operations on `bytes`/`bytearray`: `memset`, `bzero`,
  `calloc` (a zero count or size gives one zero byte; an oversized total
  raises `OverflowError`), `memchr` (returns an offset or `None`), `memcmp`,
  `memcpy`, and `memmove(buffer, dest, src, n)`, which copies between
  possibly overlapping offsets of one buffer. Spans that run past a buffer
  raise `ValueError`.
- `ftlib.search`: `strchr`, `strrchr` (indices or `None`; searching for
  `"\0"` gives the length of the string), `strncmp`, and `strnstr`, which
  finds a needle lying wholly within the first `length` characters.
- `ftlib.strings`: `substr`, `strjoin`, `strtrim`, `split` (on a single
  separator character, dropping empty words), `strmapi`, `striteri` (edits a
  mutable sequence of characters in place), and the byte-buffer copies
  `strlcpy` and `strlcat`, which return the length they tried to create.
- `ftlib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  straight to a file descriptor with `os.write`.
- `ftlib.printf`: `render(fmt, *args)` builds the text for the conversions
  `%c %s %p %d %i %u %x %X %%`; `printf(fmt, *args)` writes it to standard
  output and returns the count. An unknown conversion prints nothing and
  lowers the count by one; a missing argument raises `TypeError`.
  `itoa_base(number, base)` writes a non-negative number with any digit
  alphabet of at least two characters.
- `ftlib.linkedlist`: `Node` and `LinkedList` (optionally built from an
  iterable of contents) with `add_front`, `add_back`, `last`, `clear`,
  `apply`, `map`, `len()` and iteration over contents, plus `delone`.
- `ftlib.linereader`: `LineReader(fd, buffer_size=32)` reads a file
  descriptor one byte (`getc`) or one line (`readline`, iteration) at a time,
  returning `bytes`. `get_next_line(fd)` keeps one reader per descriptor
  between calls and returns `None` at end of file.

## Example

```python
from ftlib.strings import split, strtrim
from ftlib.numbers import atoi
from ftlib.printf import render

split("  hello  world ", " ")      # ['hello', 'world']
strtrim("xxhixx", "x")             # 'hi'
atoi("   -42abc")                  # -42
render("%d%% of %s", 50, "total")  # '50% of total'
```

## Scope

`ftlib` is a library only: it installs no command-line tool, and `printf`
supports no flags, field widths or precisions.