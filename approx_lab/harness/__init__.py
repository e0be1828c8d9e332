"""
Benchmark harness for approximation experiments.

Provides the timing harness, the result data model, input generators and
reporting capabilities.
"""

from .types import (
    NumericTypes,
    PairOf,
    clamp_range_integer,
    clamp_range_positive,
    normalize_range,
)

from .inputs import (
    GENERATORS,
    circles_xy,
    linear_sweep,
    random_scatter_xy,
    seeded_scatter_xy,
)

from .result import (
    ErrorSeries,
    ResultRecord,
    ResultSet,
)

from .runner import (
    DEFAULT_LOOP_COUNT,
    BenchmarkSuite,
    Candidate,
    Harness,
    HarnessConfig,
)

from .reporter import (
    ChartReporter,
    ConsoleReporter,
    HTMLReporter,
    JSONReporter,
)

__all__ = [
    # Types
    "NumericTypes",
    "PairOf",
    "clamp_range_integer",
    "clamp_range_positive",
    "normalize_range",
    # Inputs
    "GENERATORS",
    "circles_xy",
    "linear_sweep",
    "random_scatter_xy",
    "seeded_scatter_xy",
    # Results
    "ErrorSeries",
    "ResultRecord",
    "ResultSet",
    # Runner
    "DEFAULT_LOOP_COUNT",
    "BenchmarkSuite",
    "Candidate",
    "Harness",
    "HarnessConfig",
    # Reporter
    "ChartReporter",
    "ConsoleReporter",
    "HTMLReporter",
    "JSONReporter",
]
