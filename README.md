# jsonstream

A small, dependency-free toolkit for writing JSON into a buffer, exactly:

- `jsonstream.stream.Stream` buffers output, pretty-prints with a chosen
  indentation step and passes its bytes on to any writer with a `write`
  method.
- `jsonstream.numbers` formats integers of a given bit width (8, 16, 32 or
  64), and 32-bit and 64-bit floats in the shortest form that reads back the
  same. Magnitudes below 1e-6 or from 1e21 up use exponent notation. The
  "lossy" variants round to at most six fractional digits.
- `jsonstream.escape` quotes strings, either plainly or with HTML-sensitive
  characters (`<`, `>`, `&`, U+2028, U+2029) escaped as well.
- `jsonstream.containers` has `OptionalEncoder`, `DereferenceEncoder` and
  `SliceEncoder`, which write `None` as `null` and sequences as arrays
  around an element encoder you supply.
- `jsonstream.bindings`, `jsonstream.fields` and `jsonstream.lookup` decide
  which struct field owns a JSON name when several claim it, and find the
  field for an object key while decoding, with optional case-insensitive
  matching.

## Installation

```
pip install .
```

## Writing with a stream

```python
from jsonstream.stream import Stream

stream = Stream(None, 2)
stream.write_array_start()
stream.write_int(1)
stream.write_more()
stream.write_int(2)
stream.write_array_end()
print(stream.buffer().decode())
# [
#   1,
#   2
# ]
```

To stream into a file or socket, pass the writer and call `flush()`:

```python
import io
from jsonstream.stream import Stream

out = io.BytesIO()
stream = Stream(out, 0)
stream.write_object_start()
stream.write_object_field("name")
stream.write_string("<b>")
stream.write_object_end()
stream.flush()
assert out.getvalue() == b'{"name":"<b>"}'
```

`write_string_with_html_escaped` writes the same string as `"\u003cb\u003e"`.

## Formatting numbers and strings

```python
from jsonstream.numbers import format_float64, format_float64_lossy, format_int
from jsonstream.escape import escape_string_html

format_int(-42, 32)             # '-42'
format_float64(1e21)            # '1e+21'
format_float64(1e-7)            # '1e-7'
format_float64_lossy(0.1234567) # '0.123457'
escape_string_html("a<b")       # '"a\\u003cb"'
```

Infinite and NaN floats raise `jsonstream.numbers.UnsupportedValueError`;
integers that do not fit the requested width raise `OverflowError`.

## Encoding sequences and optional values

An encoder is any object with `encode(value, stream)` and `is_empty(value)`:

```python
from jsonstream.containers import OptionalEncoder, SliceEncoder
from jsonstream.stream import Stream


class IntEncoder:
    def encode(self, value, stream):
        stream.write_int(value)

    def is_empty(self, value):
        return value == 0


ints = SliceEncoder(OptionalEncoder(IntEncoder()), "[]*int")
stream = Stream(None, 0)
ints.encode([1, None, 3], stream)
assert stream.buffer() == b"[1,null,3]"
```

## Resolving field names

```python
from jsonstream.bindings import Binding, ordered_bindings
from jsonstream.fields import decoder_field_table
from jsonstream.lookup import FieldLookup, UnknownFieldError

shallow = Binding("Name", to_names=["name"], from_names=["name"], levels=[0], decoder="shallow")
deep = Binding("Name", to_names=["name"], from_names=["name"], levels=[1, 0], decoder="deep")

ordered_bindings([shallow, deep])        # [(shallow, "name")]

table = decoder_field_table([shallow, deep], case_sensitive=False)
lookup = FieldLookup(table, case_sensitive=False, disallow_unknown_fields=True)
lookup.find("NAME")                      # 'shallow'
lookup.find("other")                     # raises UnknownFieldError
```

## What it does not do

The package writes JSON; it does not read or parse it. There are no
ready-made encoders for strings, numbers, booleans or structs, and nothing
turns arbitrary Python objects into JSON on its own: you pass values to the
`Stream` methods, or write small encoder objects like the one above.

## Running the tests

```
pip install .[test]
pytest
```