"""
Instrumentation module for approximation benchmarking.

Provides timing utilities, error statistics and bit reinterpretation helpers.
"""

from .timing import (
    DiscardSink,
    Timer,
    timed,
)

from .statistics import (
    ErrorStatistics,
    median_select,
    reduce_errors,
    sample_stddev,
    sum_of_squares,
)

from .bits import (
    bits_to_float,
    float_to_bits,
    float_to_signed_bits,
    to_uint32,
)

__all__ = [
    # Timing
    "DiscardSink",
    "Timer",
    "timed",
    # Statistics
    "ErrorStatistics",
    "median_select",
    "reduce_errors",
    "sample_stddev",
    "sum_of_squares",
    # Bits
    "bits_to_float",
    "float_to_bits",
    "float_to_signed_bits",
    "to_uint32",
]
