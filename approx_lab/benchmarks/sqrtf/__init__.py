"""
Square root benchmarks - float32 sqrt approximations.
"""

from .benchmark import (
    SqrtfBenchmarkSuite,
    sqrtf_bisect,
    sqrtf_intel_soc,
    sqrtf_intel_soc_bakhshali,
    sqrtf_log2_babylonian,
    sqrtf_log2_bias,
    sqrtf_log2_bias_babylonian,
    sqrtf_log2_bias_bakhshali,
    sqrtf_newton_converge,
    sqrtf_quake_halley,
    sqrtf_quake_newton,
    sqrtf_reference,
    sqrtf_std,
    sqrtf_taylor3,
)

__all__ = [
    "SqrtfBenchmarkSuite",
    "sqrtf_bisect",
    "sqrtf_intel_soc",
    "sqrtf_intel_soc_bakhshali",
    "sqrtf_log2_babylonian",
    "sqrtf_log2_bias",
    "sqrtf_log2_bias_babylonian",
    "sqrtf_log2_bias_bakhshali",
    "sqrtf_newton_converge",
    "sqrtf_quake_halley",
    "sqrtf_quake_newton",
    "sqrtf_reference",
    "sqrtf_std",
    "sqrtf_taylor3",
]
