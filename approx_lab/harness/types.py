"""
Numeric type configuration for benchmark suites.

A suite names three types explicitly: the candidate input type, the
candidate output type and the wider storage type reference values and
errors are kept in. Conversions between them are spelled out here rather
than left to implicit promotion.
"""

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np


class PairOf:
    """Converter for pair-valued inputs such as ``(y, x)`` for atan2."""

    def __init__(self, element_type: Callable[[Any], Any]):
        self.element_type = element_type

    def __call__(self, value) -> tuple:
        first, second = value
        return (self.element_type(first), self.element_type(second))

    def __eq__(self, other) -> bool:
        return isinstance(other, PairOf) and other.element_type is self.element_type

    def __hash__(self) -> int:
        return hash((PairOf, self.element_type))

    def __repr__(self) -> str:
        return f"PairOf({getattr(self.element_type, '__name__', self.element_type)})"


def _type_name(converter) -> str:
    if isinstance(converter, PairOf):
        return repr(converter)
    return getattr(converter, "__name__", repr(converter))


@dataclass(frozen=True)
class NumericTypes:
    """Input, output and storage types of a suite."""

    input_type: Callable[[Any], Any] = np.float64
    output_type: Callable[[Any], Any] = np.float64
    storage_type: Callable[[Any], Any] = np.longdouble

    @property
    def storage_dtype(self) -> np.dtype:
        """numpy dtype used for reference, output and error arrays."""
        return np.dtype(self.storage_type)

    @property
    def is_pair_input(self) -> bool:
        return isinstance(self.input_type, PairOf)

    def to_input(self, value):
        return self.input_type(value)

    def to_output(self, value):
        return self.output_type(value)

    def to_storage(self, value):
        return self.storage_type(value)

    def widen(self, sample):
        """Convert an input sample to storage precision, component-wise for pairs."""
        if self.is_pair_input:
            first, second = sample
            return (self.storage_type(first), self.storage_type(second))
        return self.storage_type(sample)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "input_type": _type_name(self.input_type),
            "output_type": _type_name(self.output_type),
            "storage_type": _type_name(self.storage_type),
        }


def normalize_range(input_range: tuple) -> tuple:
    """Return ``input_range`` ordered so that low <= high.

    Scalar ranges are swapped when reversed; pair ranges are ordered
    component by component.
    """
    low, high = input_range
    if isinstance(low, tuple) and isinstance(high, tuple):
        return (
            tuple(min(a, b) for a, b in zip(low, high)),
            tuple(max(a, b) for a, b in zip(low, high)),
        )
    if low > high:
        return (high, low)
    return (low, high)


def clamp_range_positive(input_range: tuple, dtype=np.float32) -> tuple:
    """Clamp both bounds into ``[smallest normal, max]`` of ``dtype``.

    Suites whose candidates assume strictly positive input use this to keep
    zero and negative bounds out of the sample set.
    """
    info = np.finfo(dtype)
    tiny, largest = float(info.tiny), float(info.max)

    def clamp(value):
        if value <= 0:
            return tiny
        return min(float(value), largest)

    low, high = input_range
    return (clamp(low), clamp(high))


def clamp_range_integer(input_range: tuple, dtype=np.uint32) -> tuple:
    """Clamp both bounds into the representable range of an integer ``dtype``."""
    info = np.iinfo(dtype)
    low, high = input_range
    return (
        min(max(int(low), int(info.min)), int(info.max)),
        min(max(int(high), int(info.min)), int(info.max)),
    )
