"""
approx-lab - Speed and precision benchmarks for numeric approximations.

Times fast-math substitutes for standard functions (square root, inverse
square root, logarithm, exponential, integer square root, atan2) and scores
them against a high precision reference.

Key modules:
- instrumentation: Timing, error statistics and bit reinterpretation helpers
- harness: Benchmark harness, result model, input generators and reporting
- benchmarks: Candidate suites, one per approximated function
- scenarios: Registry of selectable suites
"""

__version__ = "0.1.0"

from . import instrumentation
from . import harness
from . import benchmarks
from . import scenarios

__all__ = [
    "instrumentation",
    "harness",
    "benchmarks",
    "scenarios",
]
