"""
Suite definitions for approximation benchmarking.

Maps the names accepted on the command line to benchmark suites:
1. sqrtf     - float32 square root
2. invsqrtf  - float32 inverse square root
3. log10f    - float32 base 10 logarithm
4. expf      - float32 exponential
5. sqrti     - uint32 integer square root
6. atan2f    - float32 two-argument arctangent
"""

from dataclasses import dataclass
from typing import Optional

from ..benchmarks.atan2f import Atan2fBenchmarkSuite
from ..benchmarks.expf import ExpfBenchmarkSuite
from ..benchmarks.invsqrtf import InvSqrtfBenchmarkSuite
from ..benchmarks.log10f import Log10fBenchmarkSuite
from ..benchmarks.sqrtf import SqrtfBenchmarkSuite
from ..benchmarks.sqrti import SqrtiBenchmarkSuite
from ..harness.runner import BenchmarkSuite, HarnessConfig


@dataclass
class SuiteDefinition:
    """Definition of a selectable benchmark suite."""

    name: str
    suite_class: type
    description: str = ""

    @property
    def default_range(self) -> tuple:
        return self.suite_class.default_range

    @property
    def candidate_count(self) -> int:
        return len(self.suite_class.candidates)

    def create(
        self,
        sample_count: int = 10000,
        input_range: Optional[tuple] = None,
        config: Optional[HarnessConfig] = None,
    ) -> BenchmarkSuite:
        """Instantiate the suite, using the default range unless one is given."""
        return self.suite_class(input_range=input_range, sample_count=sample_count, config=config)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "suite": self.suite_class.name,
            "description": self.description or self.suite_class.description,
            "default_range": self.default_range,
            "candidates": self.candidate_count,
        }


# ============================================================================
# Suite Registry
# ============================================================================

ALL_SUITES = {
    "sqrtf": SuiteDefinition("sqrtf", SqrtfBenchmarkSuite, "float32 square root"),
    "invsqrtf": SuiteDefinition("invsqrtf", InvSqrtfBenchmarkSuite, "float32 inverse square root"),
    "log10f": SuiteDefinition("log10f", Log10fBenchmarkSuite, "float32 base 10 logarithm"),
    "expf": SuiteDefinition("expf", ExpfBenchmarkSuite, "float32 exponential"),
    "sqrti": SuiteDefinition("sqrti", SqrtiBenchmarkSuite, "uint32 integer square root"),
    "atan2f": SuiteDefinition("atan2f", Atan2fBenchmarkSuite, "float32 atan2(y, x)"),
}


def get_suite(name: str) -> Optional[SuiteDefinition]:
    """Get a suite definition by name."""
    return ALL_SUITES.get(name)


def list_suites() -> list[str]:
    """List all available suite names."""
    return list(ALL_SUITES.keys())
