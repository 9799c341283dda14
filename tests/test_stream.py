import io

import pytest

from jsonstream.numbers import UnsupportedValueError
from jsonstream.stream import Stream


def test_write_raw_should_grow_buffer_byte_by_byte():
    stream = Stream()
    stream.write_raw("1")
    assert stream.buffer() == b"1"
    assert stream.buffered() == 1
    stream.write_raw("2")
    assert stream.buffer() == b"12"
    assert stream.buffered() == 2
    stream.write_raw("345")
    assert stream.buffer() == b"12345"


def test_write_bytes_should_grow_buffer():
    stream = Stream()
    assert stream.write(b"12") == 2
    assert stream.buffer() == b"12"
    assert stream.buffered() == 2
    stream.write(b"34567")
    assert stream.buffer() == b"1234567"
    assert stream.buffered() == 7


def test_write_indention_should_grow_buffer():
    stream = Stream(indention_step=2)
    stream.write_array_start()
    stream.write_int(1)
    stream.write_more()
    stream.write_int(2)
    stream.write_more()
    stream.write_int(3)
    stream.write_array_end()
    assert stream.buffer() == b"[\n  1,\n  2,\n  3\n]"


def test_write_raw_should_hold_text():
    stream = Stream()
    stream.write_raw("123")
    assert stream.buffer() == b"123"


def test_write_string_should_grow_buffer():
    stream = Stream()
    stream.write_string("123")
    assert stream.buffer() == b'"123"'


def test_flush_buffer_should_stop_grow_buffer():
    out = io.BytesIO()
    stream = Stream(out)
    stream.write_array_start()
    largest = 0
    for _ in range(10000):
        stream.write_int(0)
        stream.write_more()
        largest = max(largest, stream.buffered())
        stream.flush()
        assert stream.buffered() == 0
    stream.write_int(0)
    stream.write_array_end()
    stream.flush()
    assert largest <= 3
    assert out.getvalue() == b"[" + b"0," * 10000 + b"0]"


def test_write_passes_whole_buffer_to_output():
    out = io.BytesIO()
    stream = Stream(out)
    stream.write_raw("ab")
    assert stream.write(b"cd") == 4
    assert out.getvalue() == b"abcd"
    assert stream.buffered() == 0


def test_flush_without_output_keeps_buffer():
    stream = Stream()
    stream.write_nil()
    stream.flush()
    assert stream.buffer() == b"null"


def test_reset_and_set_buffer():
    stream = Stream()
    stream.write_true()
    out = io.BytesIO()
    stream.reset(out)
    assert stream.buffered() == 0
    stream.set_buffer(b"false")
    stream.flush()
    assert out.getvalue() == b"false"


def test_literals():
    stream = Stream()
    stream.write_bool(True)
    stream.write_bool(False)
    stream.write_nil()
    stream.write_empty_object()
    stream.write_empty_array()
    assert stream.buffer() == b"truefalsenull{}[]"


def test_compact_object():
    stream = Stream()
    stream.write_object_start()
    stream.write_object_field("a")
    stream.write_int(1)
    stream.write_more()
    stream.write_object_field("b")
    stream.write_string("x")
    stream.write_object_end()
    assert stream.buffer() == b'{"a":1,"b":"x"}'


def test_indented_object():
    stream = Stream(indention_step=2)
    stream.write_object_start()
    stream.write_object_field("a")
    stream.write_int(1)
    stream.write_object_end()
    assert stream.buffer() == b'{\n  "a": 1\n}'


def test_integer_widths():
    stream = Stream()
    stream.write_int8(-128)
    stream.write_raw(" ")
    stream.write_uint8(255)
    stream.write_raw(" ")
    stream.write_uint(123)
    assert stream.buffer() == b"-128 255 123"


def test_integer_overflow_raises():
    stream = Stream()
    with pytest.raises(OverflowError):
        stream.write_uint8(256)
    with pytest.raises(OverflowError):
        stream.write_int16(-32769)


def test_float_nan_raises():
    stream = Stream()
    with pytest.raises(UnsupportedValueError):
        stream.write_float64(float("nan"))
    with pytest.raises(UnsupportedValueError):
        stream.write_float32(float("inf"))
    assert stream.buffered() == 0


def test_float_values():
    stream = Stream()
    stream.write_float64(1.5)
    stream.write_raw(",")
    stream.write_float64_lossy(0.1234567)
    assert stream.buffer() == b"1.5,0.123457"


def test_html_escaped_string():
    stream = Stream()
    stream.write_string_with_html_escaped("<a&b>")
    assert stream.buffer() == b'"\\u003ca\\u0026b\\u003e"'