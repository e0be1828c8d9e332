"""
Exponential benchmarks.
"""

from .benchmark import (
    ExpfBenchmarkSuite,
    expf_chebyshev,
    expf_reference,
    expf_std,
)

__all__ = [
    "ExpfBenchmarkSuite",
    "expf_chebyshev",
    "expf_reference",
    "expf_std",
]
