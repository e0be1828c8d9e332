"""
Integer square root benchmarks.
"""

from .benchmark import (
    SqrtiBenchmarkSuite,
    sqrti_abacus,
    sqrti_binomial,
    sqrti_crenshaw,
    sqrti_fosler,
    sqrti_muntsinger,
    sqrti_reference,
)

__all__ = [
    "SqrtiBenchmarkSuite",
    "sqrti_abacus",
    "sqrti_binomial",
    "sqrti_crenshaw",
    "sqrti_fosler",
    "sqrti_muntsinger",
    "sqrti_reference",
]
