"""
Integer square root benchmarks - floor(sqrt(x)) for 32 bit unsigned input.

See:
https://en.wikipedia.org/wiki/Methods_of_computing_square_roots
Jack W. Crenshaw, "Math Toolkit for Real-Time Programming"

All candidates work on 32 bit values and return floor(sqrt(x)).
"""

import math

import numpy as np

from ...harness.runner import BenchmarkSuite, Candidate, passthrough
from ...harness.types import NumericTypes, clamp_range_integer
from ...instrumentation.bits import to_uint32


def sqrti_reference(x):
    """Exact integer square root."""
    return math.isqrt(int(x))


def sqrti_binomial(x):
    """Optimized binomial theorem (Dr. Dobb's, Algorithm Alley)."""
    x = int(x)
    if x < 2:
        return x
    l2 = 0
    u = x >> 2
    while u:
        l2 += 1
        u >>= 2
    u = 1 << l2
    v = u
    u2 = u << l2
    while l2:
        l2 -= 1
        v >>= 1
        n = to_uint32(((u + u + v) << l2) + u2)
        if n <= x:
            u += v
            u2 = n
    return u


def sqrti_abacus(x):
    """Abacus algorithm, Martin Guy @ UKC, June 1985."""
    op = int(x)
    res = 0
    # Highest power of four <= the argument
    one = 1 << 30
    while one > op:
        one >>= 2
    while one != 0:
        if op >= res + one:
            op -= res + one
            res += one << 1
        res >>= 1
        one >>= 2
    return res


def sqrti_crenshaw(x):
    """Jack W. Crenshaw, Embedded Systems Programming, 1998."""
    x = int(x)
    rem = 0
    root = 0
    for _ in range(16):
        root <<= 1
        rem = to_uint32((rem << 2) | (x >> 30))
        x = to_uint32(x << 2)
        if root < rem:
            rem -= root | 1
            root += 2
    return root >> 1


def sqrti_fosler(x):
    """Ross M. Fosler, Microchip application note AN91040."""
    x = int(x)
    res = 0
    add = 0x8000
    for _ in range(16):
        temp = res | add
        if x >= temp * temp:
            res = temp
        add >>= 1
    return res


def sqrti_muntsinger(x):
    """Tristan Muntsinger, bit by bit guess refinement."""
    n = int(x)
    c = 0x8000
    g = 0x8000
    while True:
        if g * g > n:
            g ^= c
        c >>= 1
        if c == 0:
            return g
        g |= c


class SqrtiBenchmarkSuite(BenchmarkSuite):
    """32 bit integer square root algorithms."""

    name = "sqrti"
    description = "Integer square root algorithms for uint32"
    types = NumericTypes(np.uint32, np.uint32, np.float64)
    default_range = (0, 0xFFFFFFFF)
    dummy_function = staticmethod(passthrough)
    candidates = [
        Candidate("#0", "Reference", sqrti_reference),
        Candidate("#1", "Optimized binomial theorem", sqrti_binomial),
        Candidate("#2", "Abacus algorithm", sqrti_abacus),
        Candidate("#3", "Crenshaw Embedded 1998", sqrti_crenshaw),
        Candidate("#4", "Fosler Microchip", sqrti_fosler),
        Candidate("#5", "Tristan Muntsinger", sqrti_muntsinger),
    ]

    reference = staticmethod(sqrti_reference)

    @classmethod
    def fixup_range(cls, input_range: tuple) -> tuple:
        return clamp_range_integer(input_range, np.uint32)
