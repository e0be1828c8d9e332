"""
Arctangent benchmarks.
"""

from .benchmark import (
    Atan2fBenchmarkSuite,
    atan2_polynomial,
    atan2_reference,
    atan2_std,
)

__all__ = [
    "Atan2fBenchmarkSuite",
    "atan2_polynomial",
    "atan2_reference",
    "atan2_std",
]
