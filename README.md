# ftformat

ftformat is a small printf-style formatter. It supports the conversions `%c`,
`%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`, the flags `-`, `0`, `#`, ` `
and `+`, a field width and a precision. It also has a set of small string
helpers that follow the semantics of the classic string library.

There are no runtime dependencies.

## Installation

```
pip install ftformat
```

## Formatting

`sprintf` returns the formatted text:

```python
from ftformat.printf import sprintf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
sprintf("%.3s", "hello")                  # 'hel'
sprintf("%p", 0)                          # '(nil)'
sprintf("%s", None)                       # '(null)'
sprintf("%u", -1)                         # '4294967295'
```

`printf` writes the formatted text to standard output, or to the `file` you pass
as a keyword argument. It returns the character count that the directives
report:

```python
import sys
from ftformat.printf import printf

count = printf("%+d\n", 7)                # prints '+7' and returns 3
printf("%08.3u\n", 5, file=sys.stderr)
```

How arguments are handled:

- `%d`, `%i`, `%u`, `%x` and `%X` reduce integers to 32 bits. `%p` reduces
  them to 64 bits.
- `%c` takes a one-character string or a character code.
- `%s` takes a string. `None` is printed as `(null)`.
- `%p` prints `None` or `0` as `(nil)`.
- If there are fewer arguments than directives, a `TypeError` is raised.
- A directive without a valid conversion character produces no output. The
  character after it is consumed.

### Lower-level pieces

- `ftformat.spec.parse_spec(fmt, start)` parses the directive that starts just
  after a `%` and returns a `ConversionSpec`. A `ConversionSpec` holds these
  fields: `minus`, `zero`, `alternate`, `space`, `plus`, `width`, `precision`
  (`None` when absent), `conversion` and `end`.
- `ftformat.spec` also provides `is_flag`, `is_conversion`,
  `is_numeric_conversion`, `parse_unsigned` and `number_length`.
- `ftformat.convert.render(spec, arg)` formats one argument. It returns a
  `(text, count)` pair.
- `ftformat.convert` has one function for each conversion: `format_char`,
  `format_string`, `format_pointer`, `format_signed`, `format_unsigned` and
  `format_hex`. Pass `upper=True` to `format_hex` for upper-case output.

## String helpers

```python
from ftformat.textutils import atoi, itoa, split, strtrim, strncmp

atoi("  -42abc")            # -42
itoa(-2147483648)           # '-2147483648'
split("  a b  c ", " ")     # ['a', 'b', 'c']
strtrim("xxhixx", "x")      # 'hi'
strncmp("abc", "abd", 2)    # 0
```

`ftformat.textutils` also has these helpers:

- `substr(s, start, length)` returns part of a string.
- `strnstr(haystack, needle, length)` looks for `needle` within the first
  `length` characters. It returns the rest of `haystack` from the match, or
  `None`.
- `strchr(s, c)` and `strrchr(s, c)` return the tail of `s` from the first or
  last occurrence of `c`, or `None`.
- `toupper(c)` and `tolower(c)` change the case of ASCII letters. They accept a
  character or a character code.

## What it does not do

ftformat is a library only and has no command-line tool. It does not handle
length modifiers such as `l` or `h`, floating-point conversions, or `*` widths.

## Running the tests

```
pip install "ftformat[test]"
pytest
```