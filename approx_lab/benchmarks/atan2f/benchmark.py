"""
Arctangent benchmarks - atan2(y, x) approximations for float32 pairs.

Samples are ``(y, x)`` pairs placed on concentric circles around the origin,
so each record's values are ordered by circle, not by position in the range.
"""

import math

import numpy as np

from ...harness.inputs import circles_xy
from ...harness.runner import BenchmarkSuite, Candidate, first_of_pair
from ...harness.types import NumericTypes, PairOf

F32 = np.float32

QUARTER_PI = F32(math.pi / 4)
THREE_QUARTER_PI = F32(3 * math.pi / 4)
# Keeps the ratio finite at y == 0
EPSILON = F32(1e-10)


def atan2_reference(yx):
    """atan2 in storage precision."""
    y, x = yx
    return np.arctan2(y, x)


def atan2_std(yx):
    """numpy float32 arctan2."""
    y, x = yx
    return np.arctan2(y, x)


def atan2_polynomial(yx):
    """Octant reduction and a cubic in r, max error about 0.01 rad."""
    y, x = yx
    abs_y = abs(y) + EPSILON
    if x >= 0:
        r = (x - abs_y) / (x + abs_y)
        angle = QUARTER_PI
    else:
        r = (x + abs_y) / (abs_y - x)
        angle = THREE_QUARTER_PI
    angle = angle + (F32(0.1963) * r * r - F32(0.9817)) * r
    if y < 0:
        return -angle
    return angle


class Atan2fBenchmarkSuite(BenchmarkSuite):
    """float32 two-argument arctangent approximations."""

    name = "atan2(y,x)"
    description = "Two-argument arctangent approximations for float32"
    types = NumericTypes(PairOf(np.float32), np.float32, np.float64)
    default_range = ((-1.0, -1.0), (1.0, 1.0))
    generator = staticmethod(circles_xy)
    dummy_function = staticmethod(first_of_pair)
    candidates = [
        Candidate("#0", "numpy arctan2", atan2_std),
        Candidate("#1", "Cubic octant approximation", atan2_polynomial),
    ]

    reference = staticmethod(atan2_reference)
