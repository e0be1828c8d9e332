"""
Logarithm benchmarks.
"""

from .benchmark import (
    Log10fBenchmarkSuite,
    log10f_arm,
    log10f_ebay_divides,
    log10f_ebay_multiplies,
    log10f_log2,
    log10f_reference,
    log10f_std,
)

__all__ = [
    "Log10fBenchmarkSuite",
    "log10f_arm",
    "log10f_ebay_divides",
    "log10f_ebay_multiplies",
    "log10f_log2",
    "log10f_reference",
    "log10f_std",
]
