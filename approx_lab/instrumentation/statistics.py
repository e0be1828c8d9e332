"""
Error statistics for approximation benchmarking.

Two conventions live side by side here and must stay that way:

- ``reduce_errors`` reports the biased (population) variance,
  ``sum(e^2) / N - mean^2``.
- ``sample_stddev`` uses Bessel's correction, ``sqrt(sum(e^2) / (N - 1))``.

The median is a selection of the element at index ``N // 2``, so for an even
number of values it is the upper of the two middle elements, not their
average.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class ErrorStatistics:
    """Summary scalars of an error series."""

    minimum: float
    maximum: float
    mean: float
    median: float
    variance: float

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "minimum": float(self.minimum),
            "maximum": float(self.maximum),
            "mean": float(self.mean),
            "median": float(self.median),
            "variance": float(self.variance),
        }


def _as_array(values: ArrayLike) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1 or array.size == 0:
        raise ValueError("error series must be a non-empty one dimensional sequence")
    return array


def sum_of_squares(values: ArrayLike):
    """Sum of squared values."""
    array = _as_array(values)
    return np.sum(array * array)


def median_select(values: ArrayLike):
    """Element at index ``N // 2`` after a partial ordering."""
    array = _as_array(values)
    k = array.size // 2
    return np.partition(array, k)[k]


def reduce_errors(values: ArrayLike) -> ErrorStatistics:
    """Reduce an error series to min, max, mean, median and biased variance."""
    array = _as_array(values)
    n = array.size
    mean = np.sum(array) / n
    return ErrorStatistics(
        minimum=np.min(array),
        maximum=np.max(array),
        mean=mean,
        median=median_select(array),
        variance=sum_of_squares(array) / n - mean * mean,
    )


def sample_stddev(values: ArrayLike):
    """Bessel-corrected root mean square, ``sqrt(sum(e^2) / (N - 1))``."""
    array = _as_array(values)
    if array.size < 2:
        raise ValueError("sample standard deviation needs at least two values")
    return np.sqrt(sum_of_squares(array) / (array.size - 1))
