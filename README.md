# ftprintf

A printf-style formatter for a fixed set of conversions and their flags.
The package also has some string, character and byte helpers.

## Supported conversions

| Conversion | Meaning                                              |
|------------|------------------------------------------------------|
| `%c`       | a single character (an integer code or a 1-char str) |
| `%s`       | a string (`None` prints as `(null)`)                 |
| `%p`       | an address, printed as `0x` plus lower-case hex      |
| `%d`, `%i` | a signed 32-bit integer                              |
| `%u`       | an unsigned 32-bit integer                           |
| `%x`, `%X` | an unsigned 32-bit integer in hexadecimal            |
| `%%`       | a literal percent sign                               |

The formatter recognises these parts of a directive:

- the `-` flag, which left-aligns the field
- the `0` flag, which pads the field with zeros
- a field width
- a precision after `.`

Width and precision may each be `*`, in which case the value is the next
argument. A negative width from `*` left-aligns the field. A negative
precision is ignored. With a precision of 0, a zero value prints no
digits; the field is still padded to its width.

Length modifiers (`h`, `hh`, `l`, `ll`, `L`, `j`, `z`, `t`) are accepted
and skipped. The flags `#`, ` ` and `+` are parsed and stored on the
`FormatSpec`, but they do not change the output.

For `%p`, the argument can be:

- `None`, which is the null address
- an integer, which is used as the address
- any other object, which is shown by its `id()`

## Usage

```python
from ftprintf.printf import sprintf, printf

sprintf("%-8s|%05d|%x", "id", 42, 255)   # "id      |00042|ff"
count = printf("%*.3s!\n", 6, "abcdef")   # writes "   abc!\n" and returns 8
```

`sprintf` returns the formatted text. `printf` writes the text to
standard output and returns the number of characters written.

Surplus arguments are ignored. Errors are raised as follows:

- `TypeError` for too few arguments, or an argument of the wrong type
- `ValueError` for a `%` that has no conversion character after it

You can also parse and render a single directive:

```python
from ftprintf.spec import parse_spec, ArgumentQueue
from ftprintf.conversions import convert

args = ArgumentQueue([7, 3])
spec, end = parse_spec("%*d", 0, args)   # end == 3
convert(spec, args)                      # "      3"
```

`convert` calls `FormatSpec.normalize` and then renders the directive.
Each conversion also has its own function in `ftprintf.conversions`:

- `format_char`
- `format_str`
- `format_pointer`
- `format_int`
- `format_uint`
- `format_hex`
- `format_percent`

## Helpers

`ftprintf.strutil` has these string helpers: `atoi`, `itoa`, `split`,
`strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`, `strnlen`
and `strjoin`. The search functions return an index into the string, or
`None` when nothing is found.

`ftprintf.chars` has these functions:

- the character tests `isalnum`, `isalpha`, `isascii`, `isdigit` and `isprint`
- the case mappings `tolower` and `toupper`
- `strmapi`
- the byte helpers `memchr` and `memcmp`

The character functions take a one-character string or an integer code.

`ftprintf.numfmt` renders numbers and padding with `decimal`,
`unsigned_decimal`, `hex_lower`, `hex_upper`, `address`, `spaces`,
`zeros` and `truncate`.

## Command line

```
ftprintf
```

Prints a fixed sample line that uses `*` widths and precisions, zero
padding and a padded character. The command takes no format string or
arguments of its own.

## What it does not do

- There is no floating-point output. The conversions `%f`, `%e`, `%g`,
  `%a` and their upper-case forms are recognised but produce nothing and
  consume no argument. The same is true of `%n`, `%o`, `%C`, `%S` and `%m`.
- Length modifiers do not change the argument size. Integers are always
  treated as 32-bit values, and addresses as 64-bit values.
- `printf` writes only to standard output. Use `sprintf` to send text
  anywhere else.

## Running the tests

```
pip install -e .[test]
pytest
```