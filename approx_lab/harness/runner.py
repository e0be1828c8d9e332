"""
Benchmark harness for timing and scoring approximation functions.

A ``Harness`` owns a fixed set of input samples and the reference values
computed from them. It calibrates the cost of walking the sample buffer once,
then times and scores any number of candidate functions against the
reference. ``BenchmarkSuite`` groups a reference and its candidates and runs
them all through one harness.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional

import numpy as np

from ..instrumentation.statistics import sample_stddev
from ..instrumentation.timing import DiscardSink, timed
from .inputs import InputGenerator, linear_sweep
from .result import ErrorSeries, ResultRecord, ResultSet
from .types import NumericTypes, normalize_range

logger = logging.getLogger(__name__)

DEFAULT_LOOP_COUNT = 10
MIN_SAMPLE_COUNT = 2

# Type alias for candidate and reference functions
NumericFn = Callable[[Any], Any]


def passthrough(x):
    """Calibration stand-in that returns its sample unchanged."""
    return x


def first_of_pair(xy):
    """Calibration stand-in for pair-valued samples."""
    return xy[0]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class HarnessConfig:
    """Configuration shared by every harness a run creates."""

    loop_count: int = DEFAULT_LOOP_COUNT
    verbose: bool = False

    def __post_init__(self):
        # At least one timed pass over the samples
        self.loop_count = max(int(self.loop_count), 1)

    @classmethod
    def from_env(cls, **overrides) -> "HarnessConfig":
        """Build a config from APPROX_* environment variables.

        Keyword arguments that are not None take precedence.
        """
        values = {
            "loop_count": int(os.getenv("APPROX_LOOP_COUNT", DEFAULT_LOOP_COUNT)),
            "verbose": _env_flag("APPROX_VERBOSE"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "loop_count": self.loop_count,
            "verbose": self.verbose,
        }


@dataclass(frozen=True)
class Candidate:
    """One function under evaluation within a suite."""

    name: str
    description: str
    function: NumericFn


class Harness:
    """Times and scores candidate functions against a reference function.

    Construction normalizes the range, clamps the sample count to at least
    two, generates the samples, computes reference values in storage
    precision and runs the calibration pass. ``overhead_ns`` and every
    record's ``call_ns`` are totals over ``loop_count`` passes of all samples.
    """

    def __init__(
        self,
        suite_name: str,
        input_range: tuple,
        sample_count: int,
        reference: NumericFn,
        *,
        types: Optional[NumericTypes] = None,
        generator: InputGenerator = linear_sweep,
        config: Optional[HarnessConfig] = None,
        dummy_function: Optional[NumericFn] = None,
    ):
        self.suite_name = suite_name
        self.types = types or NumericTypes()
        self.config = config or HarnessConfig()
        self.loop_count = self.config.loop_count

        low, high = normalize_range(tuple(input_range))
        self.input_range = (self.types.to_input(low), self.types.to_input(high))

        requested = max(int(sample_count), MIN_SAMPLE_COUNT)
        self._samples = tuple(self.types.to_input(v) for v in generator(self.input_range, requested))
        self.sample_count = len(self._samples)

        reference_values = np.array(
            [self.types.to_storage(reference(self.types.widen(x))) for x in self._samples],
            dtype=self.types.storage_dtype,
        )
        reference_values.setflags(write=False)
        self._reference = reference_values

        self._sink = DiscardSink()
        self.overhead_ns = self._calibrate(dummy_function)
        logger.debug(
            "%s: calibrated %d samples x %d loops, overhead %d ns",
            suite_name, self.sample_count, self.loop_count, self.overhead_ns,
        )

    @property
    def samples(self) -> tuple:
        """Input samples, in generation order."""
        return self._samples

    @property
    def reference_values(self) -> np.ndarray:
        """Read-only reference values in storage precision."""
        return self._reference

    def _calibrate(self, dummy_function: Optional[NumericFn]) -> int:
        """Time walking the sample buffer without any candidate computation."""
        samples = self._samples
        sink = self._sink
        with timed(f"{self.suite_name} calibration") as timer:
            if dummy_function is None:
                for _ in range(self.loop_count):
                    for x in samples:
                        sink.value = x
            else:
                for _ in range(self.loop_count):
                    for x in samples:
                        sink.value = dummy_function(x)
        sink.writes += self.loop_count * len(samples)
        return timer.elapsed_ns

    def _time(self, name: str, candidate: NumericFn) -> int:
        """Total nanoseconds for ``loop_count`` passes of ``candidate`` over all samples."""
        samples = self._samples
        sink = self._sink
        with timed(name) as timer:
            for _ in range(self.loop_count):
                for x in samples:
                    sink.value = candidate(x)
        sink.writes += self.loop_count * len(samples)
        return timer.elapsed_ns

    def run(self, name: str, description: str, candidate: NumericFn) -> ResultRecord:
        """Time ``candidate``, then score it against the reference values."""
        call_ns = self._time(name, candidate)

        dtype = self.types.storage_dtype
        outputs = np.array([self.types.to_storage(candidate(x)) for x in self._samples], dtype=dtype)
        outputs.setflags(write=False)

        reference = self._reference
        absolute = np.abs(outputs - reference)
        # Zero reference values contribute no relative error
        ratio = np.divide(outputs, reference, out=np.ones_like(outputs), where=reference != 0)
        relative = np.abs(1 - ratio)

        record = ResultRecord(
            suite_name=self.suite_name,
            name=name,
            description=description,
            input_range=self.input_range,
            sample_count=self.sample_count,
            values=outputs,
            absolute_errors=ErrorSeries.from_values(absolute, dtype=dtype),
            relative_errors=ErrorSeries.from_values(relative, dtype=dtype),
            stddev=sample_stddev(absolute),
            call_ns=call_ns,
            overhead_ns=self.overhead_ns,
            loop_count=self.loop_count,
        )
        logger.debug("%s %s: call %d ns, %.2f ns/call", self.suite_name, name, call_ns, record.ns_per_call)
        return record


class BenchmarkSuite:
    """A reference function and the candidates compared against it.

    Subclasses set ``name``, ``types``, ``default_range`` and ``candidates``
    and implement ``reference`` as a static method. ``fixup_range`` clamps a
    requested range into the domain the candidates accept.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    types: ClassVar[NumericTypes] = NumericTypes()
    default_range: ClassVar[tuple] = (0.0, 1.0)
    candidates: ClassVar[list[Candidate]] = []
    generator: ClassVar[InputGenerator] = staticmethod(linear_sweep)
    dummy_function: ClassVar[Optional[NumericFn]] = None

    def __init__(
        self,
        input_range: Optional[tuple] = None,
        sample_count: int = 10000,
        config: Optional[HarnessConfig] = None,
        generator: Optional[InputGenerator] = None,
    ):
        requested = self.default_range if input_range is None else input_range
        self.input_range = self.fixup_range(normalize_range(tuple(requested)))
        self.sample_count = sample_count
        self.config = config or HarnessConfig()
        self._generator = generator or self.generator

    @staticmethod
    def reference(x):
        raise NotImplementedError

    @classmethod
    def fixup_range(cls, input_range: tuple) -> tuple:
        """Clamp ``input_range`` into the suite's input domain."""
        return input_range

    def build_harness(self) -> Harness:
        """Create the harness every candidate of this suite runs on."""
        return Harness(
            self.name,
            self.input_range,
            self.sample_count,
            self.reference,
            types=self.types,
            generator=self._generator,
            config=self.config,
            dummy_function=self.dummy_function,
        )

    def run_all(self) -> ResultSet:
        """Run every candidate in declaration order."""
        if self.config.verbose:
            print(f"\nRunning suite: {self.name}")
            print(f"  Input range: {self.input_range}")
            print(f"  Samples: {self.sample_count}")
            print(f"  Loops: {self.config.loop_count}")

        harness = self.build_harness()
        results = ResultSet()

        for i, candidate in enumerate(self.candidates):
            if self.config.verbose:
                print(f"  [{i + 1}/{len(self.candidates)}] {candidate.name} {candidate.description}...", end="", flush=True)
            record = harness.run(candidate.name, candidate.description, candidate.function)
            results.append(record)
            if self.config.verbose:
                print(f" {record.ns_per_call:.1f} ns/call")

        return results
