"""
Logarithm benchmarks - base 10 logarithm approximations for float32.

Most candidates approximate log2(x) and scale by log10(2).
See:
http://openaudio.blogspot.com/2017/02/faster-log10-and-pow.html
https://tech.ebayinc.com/engineering/fast-approximate-logarithms-part-iii-the-formulas/

All candidates assume positive, non-zero input.
"""

import numpy as np

from ...harness.runner import BenchmarkSuite, Candidate, passthrough
from ...harness.types import NumericTypes, clamp_range_positive
from ...instrumentation.bits import EXPONENT_MASK, MANTISSA_MASK, bits_to_float, float_to_bits

F32 = np.float32

ONE_OVER_LOG2_10 = F32(0.3010299956639812)

ARM_COEFFS = (
    F32(1.23149591368684),
    F32(-4.11852516267426),
    F32(6.02197014179219),
    F32(-3.13396450166353),
)


def log10f_reference(x):
    """Base 10 logarithm in storage precision."""
    return np.log10(np.longdouble(x))


def log10f_std(x):
    """numpy float32 log10."""
    return np.log10(x)


def log10f_log2(x):
    """numpy float32 log2 scaled by log10(2)."""
    return np.log2(x) * ONE_OVER_LOG2_10


def log10f_arm(x):
    """Cubic in the frexp mantissa plus the exponent (ARM CMSIS forum)."""
    mantissa, exponent = np.frexp(np.abs(x))
    y = ARM_COEFFS[0]
    for coeff in ARM_COEFFS[1:]:
        y = y * mantissa + coeff
    return (y + F32(exponent)) * ONE_OVER_LOG2_10


def _reduce(x):
    """Split x into (significand - 1, exponent) with the significand in [0.75, 1.5)."""
    bits = float_to_bits(x)
    exponent = (bits & EXPONENT_MASK) >> 23
    if bits & 0x00400000:
        # Significand >= 1.5, so halve it by forcing the exponent to -1
        significand = bits_to_float((bits & MANTISSA_MASK) | 0x3F000000)
        fexp = F32(exponent - 126)
    else:
        significand = bits_to_float((bits & MANTISSA_MASK) | 0x3F800000)
        fexp = F32(exponent - 127)
    return significand - F32(1.0), fexp


def log10f_ebay_divides(x):
    """Rational approximation of log2 on the reduced significand."""
    a, b, c = F32(0.338953), F32(2.198599), F32(1.523692)
    s, fexp = _reduce(x)
    return (fexp + s * (a * s + b) / (s + c)) * ONE_OVER_LOG2_10


def log10f_ebay_multiplies(x):
    """Cubic approximation of log2 on the reduced significand."""
    a, b, c = F32(0.338531), F32(-0.741619), F32(1.445866)
    s, fexp = _reduce(x)
    return (fexp + ((a * s + b) * s + c) * s) * ONE_OVER_LOG2_10


class Log10fBenchmarkSuite(BenchmarkSuite):
    """float32 base 10 logarithm approximations."""

    name = "log10f"
    description = "Base 10 logarithm approximations for float32"
    types = NumericTypes(np.float32, np.float32, np.longdouble)
    default_range = (0.0, 65535.0)
    dummy_function = staticmethod(passthrough)
    candidates = [
        Candidate("#0", "numpy log10", log10f_std),
        Candidate("#1", "log2(x) / log2(10)", log10f_log2),
        Candidate("#2", "log2(x) ARM forum", log10f_arm),
        Candidate("#3", "log2(x) EBAY divides", log10f_ebay_divides),
        Candidate("#4", "log2(x) EBAY multiplies", log10f_ebay_multiplies),
    ]

    reference = staticmethod(log10f_reference)

    @classmethod
    def fixup_range(cls, input_range: tuple) -> tuple:
        return clamp_range_positive(input_range, np.float32)
