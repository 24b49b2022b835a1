# fdfkit

Tools for checking and loading `.fdf` height maps. An `.fdf` file is a grid
of space-separated integer heights, one row per line. A height may be
followed by a colour written `,0xRRGGBB`, with at most six hex digits.

```
0 0 0 0
0 10,0xFF0000 10 0
0 0 0 0
```

## Installing

```
pip install .
```

To run the tests, install the test extra with `pip install ".[test]"` and
then run `pytest`.

## Checking and reading a map

```python
from fdfkit.mapfile import MapError, check_file, read_map

try:
    columns = check_file("maps/42.fdf")
    height_map = read_map("maps/42.fdf")
except MapError as exc:
    print(exc)
```

`check_file(path)` does two things. It validates every field of the first
row: an optional sign, then digits, then an optional `,0x` colour of up to
six hex digits. It then makes sure every later row has the same number of
columns as the first. It returns that column count. It raises `MapError`
when the file cannot be opened, when the file is empty, when a value or
colour is malformed, and when the rows differ in width.

`read_map(path)` returns a `HeightMap` with `width`, `height` and `points`.
`points` is a list of `Point(x, y, z, color)` stored row by row. The width
comes from the first row. Shorter rows are padded with points of height 0,
and extra fields are ignored. A value written without a colour gets
`0xFFFFFF` (`DEFAULT_COLOR`). `read_map` raises `MapError` if the file
cannot be opened.

`check_line(line)` validates a single row. `count_columns(line, sep=" ")`
counts the non-empty fields of a row, up to its first newline.

## Reading lines

`fdfkit.lines.LineReader(stream, buffer_size=10024)` reads a text stream in
chunks and hands it back one line at a time. Call `read_line()`, which
returns `None` at the end of the stream, or iterate over the reader. Each
line keeps its trailing newline. A last line that has no newline is
returned as it is.

## Helpers

The package also has small C-style utility modules:

- `fdfkit.chars`: ASCII classification and case mapping (`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`). Each accepts a character or an integer code.
- `fdfkit.convert`: `atoi`, a 32-bit parse that returns -1 or 0 on overflow; `atol`, a 64-bit parse that wraps; and `itoa`.
- `fdfkit.memory`: byte-buffer operations (`memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`).
- `fdfkit.textops`: string operations (`split`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strdup`, `strndup`, `striteri`, `strjoin`, `strlcpy`, `strlcat`, `strlen`, `strmapi`, `strnstr`, `strtrim`, `substr`). Searches return an index or `None`.
- `fdfkit.linked`: a singly linked `LinkedList` of `Node`s. It has `push_front`, `push_back`, `last`, `clear`, `iterate` and `map`, supports `len()`, and can be iterated.
- `fdfkit.putout`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write to a stream, plus `fprintf1` and `fprintf2`, which substitute `%s` arguments.
- `fdfkit.printf`: a minimal `printf` supporting `%c %s %p %d %i %u %x %X %%`. It writes to stdout or to `stream=` and returns the number of characters written. `format_text` returns the formatted string instead of writing it.

```python
from fdfkit.printf import format_text

format_text("%s has %d points at %p", "map", 42, 255)
# 'map has 42 points at 0xff'
```

## What it does not do

fdfkit only checks and loads maps. It does not project points, for example
into an isometric view. It does not draw lines, open a window or render an
image. It has no command-line program. To display a `HeightMap`, pass its
points to the graphics library of your choice.