"""
Inverse square root benchmarks.
"""

from .benchmark import (
    InvSqrtfBenchmarkSuite,
    invsqrtf_quake,
    invsqrtf_quake_newton,
    invsqrtf_reference,
    invsqrtf_std,
)

__all__ = [
    "InvSqrtfBenchmarkSuite",
    "invsqrtf_quake",
    "invsqrtf_quake_newton",
    "invsqrtf_reference",
    "invsqrtf_std",
]
