"""
Exponential benchmarks - e^x approximations for float32.

Candidates assume input in (-88, 88), where e^x stays finite in float32.
"""

import math

import numpy as np

from ...harness.runner import BenchmarkSuite, Candidate, passthrough
from ...harness.types import NumericTypes

F32 = np.float32

EXP_LIMIT = 88.0

# Chebyshev interpolant of e^r on the reduced range, monomial basis.
# See: https://www.pseudorandom.com/implementing-exp#section-22 (MIT licensed)
CHEBYSHEV_COEFFS = tuple(F32(c) for c in (
    1.000000000000000,
    1.000000000000000,
    0.500000000000002,
    0.166666666666680,
    0.041666666666727,
    0.008333333333342,
    0.001388888888388,
    1.984126978734782e-4,
    2.480158866546844e-5,
    2.755734045527853e-6,
    2.755715675968011e-7,
    2.504861486483735e-8,
    2.088459690899721e-9,
    1.632461784798319e-10,
))
CHEBYSHEV_LEADING = F32(1.143364767943110e-11)


def expf_reference(x):
    """e^x in storage precision."""
    return np.exp(np.longdouble(x))


def expf_std(x):
    """numpy float32 exp."""
    return np.exp(x)


def expf_chebyshev(x):
    """Range reduction by ln 2, then a degree 14 polynomial."""
    if x == 0:
        return F32(1.0)
    x0 = abs(x)
    k = math.ceil(float(x0) / math.log(2) - 0.5)
    r = F32(float(x0) - k * math.log(2))
    pn = CHEBYSHEV_LEADING
    for coeff in reversed(CHEBYSHEV_COEFFS):
        pn = pn * r + coeff
    pn = pn * F32(2.0 ** k)
    if x < 0:
        return F32(1.0) / pn
    return pn


class ExpfBenchmarkSuite(BenchmarkSuite):
    """float32 exponential approximations."""

    name = "e^x"
    description = "Exponential approximations for float32"
    types = NumericTypes(np.float32, np.float32, np.longdouble)
    default_range = (-EXP_LIMIT, EXP_LIMIT)
    dummy_function = staticmethod(passthrough)
    candidates = [
        Candidate("#0", "numpy exp", expf_std),
        Candidate("#1", "Pseudorandom monomial", expf_chebyshev),
    ]

    reference = staticmethod(expf_reference)

    @classmethod
    def fixup_range(cls, input_range: tuple) -> tuple:
        low, high = input_range
        return (
            min(max(float(low), -EXP_LIMIT), EXP_LIMIT),
            min(max(float(high), -EXP_LIMIT), EXP_LIMIT),
        )
