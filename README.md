# solongmap

Small building blocks for a tile-map puzzle game: character and number
conversion, byte-buffer routines, a singly linked list, printf-style
formatting and a buffered line reader.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

### `solongmap.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower` work on ASCII only. Each accepts an integer code or a
one-character string; the case converters return the same kind they were
given.

```python
from solongmap.chars import to_upper, is_digit

to_upper("a")   # "A"
to_upper(97)    # 65
is_digit("7")   # True
```

### `solongmap.numbers`

- `atoi(text)` skips leading whitespace, reads one optional sign and then
  digits up to the first non-digit; text with no digits gives `0`.
- `itoa(n)` returns the decimal text of an `int`.

### `solongmap.memory`

Byte-buffer helpers over `bytearray`/`bytes`: `mem_set`, `bzero`, `calloc`,
`mem_chr` (index or `None`), `mem_cmp`, `mem_copy`, and `mem_move` (moves
bytes inside one buffer between two offsets, overlap is safe). Asking for
more bytes than a buffer holds raises `ValueError`.

`str_lcpy(src, size)` and `str_lcat(dst, src, size)` model copying into a
destination of `size` units including a terminator. They return a tuple of
the resulting text and the length that was attempted.

### `solongmap.linkedlist`

`LinkedList` is a singly linked list of `Node` objects (`content`, `next`):

```python
from solongmap.linkedlist import LinkedList

items = LinkedList(["a", "b"])
items.push_front("z")
items.push_back("c")
list(items)                      # ["z", "a", "b", "c"]
len(items)                       # 4
items.last().content             # "c"
upper = items.map(str.upper)     # new list
items.clear()
```

`map(func, delete)` hands the values already produced to `delete` and
re-raises if `func` fails part way. `for_each(func)` calls `func` on every
value.

### `solongmap.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
standard output by default. `put_str` and `put_endl` write nothing for
`None`.

### `solongmap.printf`

`format_printf(fmt, *args)` supports `%c %s %d %i %u %x %X %p %%`.
`%d`/`%i` wrap to a signed 32-bit value, `%u`/`%x`/`%X` to unsigned 32-bit,
and `%p` prints `0x…` or `(nil)` for zero. `%s` with `None` prints
`(null)`. Any other letter after `%` is written as is. Too few arguments or
a trailing lone `%` raise `ValueError`.

`printf(fmt, *args)` writes the result to standard output and returns its
length. `format_conversion`, `to_hex` and `format_pointer` expose the
individual pieces.

```python
from solongmap.printf import format_printf

format_printf("%d %u %x %p", -1, -1, 255, 0)   # "-1 4294967295 ff (nil)"
```

### `solongmap.linereader`

`LineReader(stream, buffer_size=1000)` reads a text or binary stream
`buffer_size` units at a time and returns one line per `read_line()` call,
newline kept, or `None` at the end. It is also iterable. A last line
without a newline is returned as it is.

`read_lines(path)` returns every line of a file, newlines kept and
untranslated.

## What this package does not do

It does not load or validate `.ber` map files, check command-line
arguments, or open a game window, and it installs no command. It provides
only the helper modules listed above.