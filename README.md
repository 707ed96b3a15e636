# ftkit

A small library of classic C-library style helpers for Python. It has no
dependencies outside the standard library.

## Modules

- `ftkit.chars`: ASCII character classification and case conversion:
  `is_digit`, `is_space`, `is_lower`, `is_upper`, `is_alpha`, `is_alnum`,
  `is_ascii`, `is_print`, `to_upper` and `to_lower`. Each takes a
  one-character string or an integer code.
- `ftkit.numbers`: `atoi` and `itoa`. `atoi` skips leading whitespace and
  one optional sign, then reads digits. When the value leaves the 64-bit
  signed range it gives -1 for positive input and 0 for negative input.
  Otherwise the result is truncated to a 32-bit signed integer.
- `ftkit.strings`: `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`,
  `strlcat`, `substr`, `strjoin`, `strtrim`, `split` and `strmapi`.
  - The search functions return an index, or `None` when nothing is found.
  - `strlcpy` returns a `(text, length)` pair, and so does `strlcat`.
- `ftkit.memory`: byte-buffer operations on `bytearray`s, changed in place.
  The operations are `mem_set`, `bzero`, `mem_cpy`, `mem_ccpy`, `mem_move`,
  `mem_chr`, `mem_cmp` and `calloc`.
  - `mem_move` moves a region inside one buffer, from one offset to another.
  - Asking for more bytes than a buffer holds raises `ValueError`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` and
  `put_nbr_unsigned`. Each writes to a text stream, or to standard output when
  the stream is `None`.
- `ftkit.linereader`: `LineReader` reads a text or binary stream line by line,
  in chunks of `buffer_size` (default 100). `read_lines` returns all remaining
  lines as a list. Lines come back without their newline.
- `ftkit.printf_spec`: the parsing of conversion specifications. It provides
  `FormatSpec`, `parse_spec`, `fetch_argument`, `is_flag`, `is_type`,
  `digit_count`, `count_conversions` and the `FormatError` exception.
- `ftkit.printf`: `format_string` returns the formatted text and `printf`
  writes it to standard output and returns the character count. Both support:
  - the conversions `%c %s %p %d %i %u %x %X %% %n`;
  - the flags `- 0 + space # '`;
  - a width and a precision, either of which may be `*`;
  - the length modifiers `l ll h hh`.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import format_string, printf

atoi("  -42abc")            # -42
itoa(-1234)                 # "-1234"
split("**a*bc**d*", "*")    # ["a", "bc", "d"]
strtrim("xxhixx", "x")      # "hi"

format_string("%5d|%-4s|%#x", 42, "ab", 255)   # "   42|ab  |0xff"
printf("%'d\n", 1234567)                        # prints 1,234,567
```

Reading lines from a file:

```python
from ftkit.linereader import LineReader, read_lines

with open("notes.txt") as fh:
    for line in LineReader(fh, 100):
        print(line)

with open("notes.txt") as fh:
    lines = read_lines(fh)
```

The `%n` conversion stores the number of characters counted so far into a
`CountRef`:

```python
from ftkit.printf import CountRef, format_string

ref = CountRef()
format_string("abc%n", ref)
ref.value   # 3
```

`FormatError` (from `ftkit.printf_spec`) is raised in these cases:

- the format needs more arguments than were given;
- a `%lc` character code is above 255;
- a `%ls` string is given without a precision.

## Limits

- There are no floating-point conversions such as `%f`, `%e` or `%g`. A
  conversion character that is not supported is written out as it stands.
- The package is a library only. It installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```