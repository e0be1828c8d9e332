"""
Inverse square root benchmarks - 1 / sqrt(x) approximations for float32.

See:
https://en.wikipedia.org/wiki/Fast_inverse_square_root
http://www.lomont.org/Math/Papers/2003/InvSqrt.pdf

All candidates assume positive, non-zero input.
"""

import numpy as np

from ...harness.runner import BenchmarkSuite, Candidate, passthrough
from ...harness.types import NumericTypes, clamp_range_positive
from ...instrumentation.bits import bits_to_float, float_to_bits

F32 = np.float32

# Lomont's constant, slightly better than the original 0x5F3759DF
QUAKE_MAGIC = 0x5F375A86


def invsqrtf_reference(x):
    """Inverse square root in storage precision."""
    return np.longdouble(1) / np.sqrt(np.longdouble(x))


def invsqrtf_std(x):
    """1 / numpy float32 square root."""
    return F32(1.0) / np.sqrt(x)


def _newton(u, xhalf):
    return u * (F32(1.5) - xhalf * u * u)


def invsqrtf_quake(x):
    """Magic constant estimate with one Newton step."""
    xhalf = F32(0.5) * x
    u = bits_to_float(QUAKE_MAGIC - (float_to_bits(x) >> 1))
    return _newton(u, xhalf)


def invsqrtf_quake_newton(x):
    """Magic constant estimate with two Newton steps."""
    xhalf = F32(0.5) * x
    u = bits_to_float(QUAKE_MAGIC - (float_to_bits(x) >> 1))
    return _newton(_newton(u, xhalf), xhalf)


class InvSqrtfBenchmarkSuite(BenchmarkSuite):
    """float32 inverse square root approximations."""

    name = "1 / sqrtf"
    description = "Inverse square root approximations for float32"
    types = NumericTypes(np.float32, np.float32, np.longdouble)
    default_range = (0.0, 2.0)
    dummy_function = staticmethod(passthrough)
    candidates = [
        Candidate("#0", "Reference", invsqrtf_std),
        Candidate("#1", "Quake3", invsqrtf_quake),
        Candidate("#2", "Quake3 + Newton", invsqrtf_quake_newton),
    ]

    reference = staticmethod(invsqrtf_reference)

    @classmethod
    def fixup_range(cls, input_range: tuple) -> tuple:
        return clamp_range_positive(input_range, np.float32)
