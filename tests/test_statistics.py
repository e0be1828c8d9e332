import math

import numpy as np
import pytest

from approx_lab.instrumentation.statistics import (
    median_select,
    reduce_errors,
    sample_stddev,
    sum_of_squares,
)


def test_median_picks_upper_middle_for_even_length() -> None:
    assert median_select([1.0, 2.0, 3.0, 4.0]) == 3.0
    assert median_select([4.0, 1.0, 3.0, 2.0]) == 3.0


def test_median_of_odd_length() -> None:
    assert median_select([9.0, 1.0, 5.0]) == 5.0


def test_reduce_errors_uses_population_variance() -> None:
    stats = reduce_errors([1.0, 3.0, 5.0, 7.0, 9.0])

    assert stats.minimum == 1.0
    assert stats.maximum == 9.0
    assert stats.mean == 5.0
    assert stats.median == 5.0
    assert stats.variance == pytest.approx(8.0)


def test_sample_stddev_is_bessel_corrected_rms() -> None:
    values = [1.0, 3.0, 5.0, 7.0, 9.0]

    assert sum_of_squares(values) == 165.0
    assert sample_stddev(values) == pytest.approx(math.sqrt(165.0 / 4))


def test_constant_series_has_zero_variance() -> None:
    stats = reduce_errors(np.ones(7))
    assert stats.variance == 0.0
    assert stats.minimum == stats.maximum == stats.mean == stats.median == 1.0


def test_empty_series_is_rejected() -> None:
    with pytest.raises(ValueError):
        reduce_errors([])
    with pytest.raises(ValueError):
        sample_stddev([1.0])


def test_statistics_to_dict_has_plain_floats() -> None:
    data = reduce_errors(np.array([0.5, 1.5], dtype=np.longdouble)).to_dict()
    assert set(data) == {"minimum", "maximum", "mean", "median", "variance"}
    assert all(type(v) is float for v in data.values())
