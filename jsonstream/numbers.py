"""Formatting of integers and floating-point numbers as JSON numbers."""

import math
import operator
import struct
from decimal import Decimal

_INT_BITS = (8, 16, 32, 64)
_LOSSY_SCALE = 1_000_000


class UnsupportedValueError(ValueError):
    """Raised for values that JSON cannot represent, such as NaN or infinity."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"unsupported value: {_describe(value)}")


def _describe(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:f}"


def _check_bits(bits: int) -> None:
    if bits not in _INT_BITS:
        raise ValueError(f"unsupported integer width: {bits}")


def format_int(val: int, bits: int = 64) -> str:
    """Format a signed integer of the given width (8, 16, 32 or 64 bits)."""
    _check_bits(bits)
    val = operator.index(val)
    limit = 1 << (bits - 1)
    if not -limit <= val < limit:
        raise OverflowError(f"{val} does not fit in int{bits}")
    return str(val)


def format_uint(val: int, bits: int = 64) -> str:
    """Format an unsigned integer of the given width (8, 16, 32 or 64 bits)."""
    _check_bits(bits)
    val = operator.index(val)
    if not 0 <= val < (1 << bits):
        raise OverflowError(f"{val} does not fit in uint{bits}")
    return str(val)


def _to_float32(val: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", val))[0]
    except OverflowError:
        return math.copysign(math.inf, val)


_F32_SMALL = _to_float32(1e-6)
_F32_LARGE = _to_float32(1e21)
_F32_LOSSY_LIMIT = _to_float32(0x4FFFFFF)


def _shortest64(val: float) -> Decimal:
    return Decimal(repr(val))


def _shortest32(val: float) -> Decimal:
    for digits in range(1, 10):
        text = f"{val:.{digits - 1}e}"
        if _to_float32(float(text)) == val:
            return Decimal(text)
    return Decimal(repr(val))


def _fixed(number: Decimal) -> str:
    return format(number.normalize(), "f")


def _exponent(number: Decimal) -> str:
    sign, digit_tuple, exp = number.normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    power = exp + len(digits) - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    suffix = f"e-{-power}" if power < 0 else f"e+{power:02d}"
    return ("-" if sign else "") + mantissa + suffix


def format_float64(val: float) -> str:
    """Format a 64-bit float with the fewest digits that read back exactly.

    Plain notation is used for magnitudes in [1e-6, 1e21) and exponent
    notation outside it.
    """
    val = float(val)
    if not math.isfinite(val):
        raise UnsupportedValueError(val)
    number = _shortest64(val)
    magnitude = abs(val)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        return _exponent(number)
    return _fixed(number)


def format_float32(val: float) -> str:
    """Format ``val`` as a 32-bit float with the fewest digits that read back."""
    val = _to_float32(float(val))
    if not math.isfinite(val):
        raise UnsupportedValueError(val)
    number = _shortest32(val)
    magnitude = abs(val)
    if magnitude != 0 and (magnitude < _F32_SMALL or magnitude >= _F32_LARGE):
        return _exponent(number)
    return _fixed(number)


def _lossy(val: float, limit: float, exact) -> str:
    prefix = ""
    if val < 0:
        prefix = "-"
        val = -val
    if val > limit:
        return prefix + exact(val)
    scaled = int(val * _LOSSY_SCALE + 0.5)
    whole, frac = divmod(scaled, _LOSSY_SCALE)
    if frac == 0:
        return f"{prefix}{whole}"
    return f"{prefix}{whole}.{frac:06d}".rstrip("0")


def format_float64_lossy(val: float) -> str:
    """Format a 64-bit float rounded to at most six fractional digits."""
    val = float(val)
    if not math.isfinite(val):
        raise UnsupportedValueError(val)
    return _lossy(val, float(0x4FFFFFF), format_float64)


def format_float32_lossy(val: float) -> str:
    """Format a 32-bit float rounded to at most six fractional digits."""
    val = _to_float32(float(val))
    if not math.isfinite(val):
        raise UnsupportedValueError(val)
    return _lossy(val, _F32_LOSSY_LIMIT, format_float32)