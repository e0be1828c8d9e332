"""
Bit pattern reinterpretation between IEEE-754 single precision floats and
32 bit integers.

Candidate functions that work on the float layout use these helpers instead
of sharing storage between two types.
"""

import numpy as np

MASK32 = 0xFFFFFFFF
EXPONENT_MASK = 0x7F800000
MANTISSA_MASK = 0x007FFFFF


def float_to_bits(x) -> int:
    """Unsigned 32 bit pattern of ``x`` rounded to float32."""
    return np.asarray(x, dtype=np.float32).view(np.uint32).item()


def float_to_signed_bits(x) -> int:
    """Signed 32 bit pattern of ``x`` rounded to float32."""
    return np.asarray(x, dtype=np.float32).view(np.int32).item()


def bits_to_float(bits: int) -> np.float32:
    """Float32 whose bit pattern is the low 32 bits of ``bits``."""
    return np.asarray(bits & MASK32, dtype=np.uint32).view(np.float32)[()]


def to_uint32(value: int) -> int:
    """Wrap ``value`` to unsigned 32 bit arithmetic."""
    return value & MASK32
