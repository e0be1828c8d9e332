"""
Result data model for approximation benchmarks.

A ``ResultRecord`` is produced once per candidate by ``Harness.run`` and is
never mutated afterwards. A ``ResultSet`` keeps records in evaluation order,
which is also the column order of every report.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

import numpy as np

from ..instrumentation.statistics import ErrorStatistics, reduce_errors


def _frozen_array(values, dtype=None) -> np.ndarray:
    array = np.array(values, dtype=dtype)
    array.setflags(write=False)
    return array


def _plain(value):
    """Convert numpy scalars and tuples to JSON friendly values."""
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    return value


@dataclass(frozen=True)
class ErrorSeries:
    """Per-sample errors plus the summary scalars derived from all of them."""

    values: np.ndarray
    minimum: float
    maximum: float
    mean: float
    median: float
    variance: float

    @classmethod
    def from_values(cls, values, dtype=None) -> "ErrorSeries":
        array = _frozen_array(values, dtype=dtype)
        stats = reduce_errors(array)
        return cls(
            values=array,
            minimum=stats.minimum,
            maximum=stats.maximum,
            mean=stats.mean,
            median=stats.median,
            variance=stats.variance,
        )

    @property
    def statistics(self) -> ErrorStatistics:
        return ErrorStatistics(self.minimum, self.maximum, self.mean, self.median, self.variance)

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = self.statistics.to_dict()
        data["values"] = [float(v) for v in self.values]
        return data


@dataclass(frozen=True)
class ResultRecord:
    """Outcome of benchmarking one candidate against the suite reference.

    ``call_ns`` and ``overhead_ns`` are both totals over ``loop_count`` passes
    of ``sample_count`` samples, so they can be subtracted directly.
    """

    suite_name: str
    name: str
    description: str
    input_range: tuple
    sample_count: int
    values: np.ndarray
    absolute_errors: ErrorSeries
    relative_errors: ErrorSeries
    stddev: float
    call_ns: int
    overhead_ns: int
    loop_count: int = 1

    @property
    def net_ns(self) -> int:
        """Candidate time with the loop and fetch overhead removed."""
        return self.call_ns - self.overhead_ns

    @property
    def ns_per_call(self) -> float:
        """Overhead-corrected time of a single candidate call."""
        return self.net_ns / (self.sample_count * self.loop_count)

    @property
    def overhead_ns_per_call(self) -> float:
        """Estimated loop and fetch overhead per call (already subtracted)."""
        return self.overhead_ns / (self.sample_count * self.loop_count)

    def to_dict(self) -> dict:
        """Convert result to dictionary for serialization."""
        return {
            "suite_name": self.suite_name,
            "name": self.name,
            "description": self.description,
            "input_range": _plain(tuple(self.input_range)),
            "sample_count": self.sample_count,
            "loop_count": self.loop_count,
            "values": [float(v) for v in self.values],
            "absolute_errors": self.absolute_errors.to_dict(),
            "relative_errors": self.relative_errors.to_dict(),
            "stddev": float(self.stddev),
            "call_ns": self.call_ns,
            "overhead_ns": self.overhead_ns,
            "ns_per_call": self.ns_per_call,
        }


class ResultSet:
    """Ordered collection of records from one suite.

    Records share suite name, input range and sample count; the first record
    is treated as authoritative for that suite-level context.
    """

    def __init__(self, records: Optional[Sequence[ResultRecord]] = None):
        self._records: list[ResultRecord] = list(records or [])

    def append(self, record: ResultRecord) -> None:
        """Add a record at the end of the set."""
        self._records.append(record)

    def __iter__(self) -> Iterator[ResultRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ResultRecord:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    @property
    def records(self) -> list[ResultRecord]:
        return list(self._records)

    @property
    def first(self) -> ResultRecord:
        if not self._records:
            raise ValueError("result set is empty")
        return self._records[0]

    @property
    def suite_name(self) -> str:
        return self.first.suite_name

    @property
    def input_range(self) -> tuple:
        return self.first.input_range

    @property
    def sample_count(self) -> int:
        return self.first.sample_count

    @property
    def overhead_ns_per_call(self) -> float:
        return self.first.overhead_ns_per_call

    def to_dict(self) -> dict:
        """Convert the set to a dictionary for serialization."""
        if not self._records:
            return {"suite_name": None, "results": []}
        return {
            "suite_name": self.suite_name,
            "input_range": _plain(tuple(self.input_range)),
            "sample_count": self.sample_count,
            "overhead_ns_per_call": self.overhead_ns_per_call,
            "results": [r.to_dict() for r in self._records],
        }

    def save(self, path: Path) -> None:
        """Save results to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
