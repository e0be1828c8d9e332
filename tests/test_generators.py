import math

import numpy as np
import pytest

from approx_lab.harness.inputs import (
    circles_xy,
    linear_sweep,
    random_scatter_xy,
    seeded_scatter_xy,
)
from approx_lab.harness.types import (
    NumericTypes,
    PairOf,
    clamp_range_integer,
    clamp_range_positive,
    normalize_range,
)


def test_linear_sweep_includes_both_ends() -> None:
    assert linear_sweep((0.0, 1.0), 5) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_linear_sweep_integer_range_stays_integral() -> None:
    values = linear_sweep((0, 10), 4)
    assert values == [0, 3, 6, 10]
    assert all(isinstance(v, int) for v in values)


def test_linear_sweep_accepts_numpy_integers() -> None:
    values = linear_sweep((np.uint32(0), np.uint32(0xFFFFFFFF)), 3)
    assert values == [0, 0x7FFFFFFF, 0xFFFFFFFF]


def test_circles_start_at_origin_and_fill_steps_squared() -> None:
    values = circles_xy(((-1.0, -1.0), (1.0, 1.0)), 12)

    # trunc(sqrt(11)) == 3 circles of 3 points
    assert len(values) == 10
    assert values[0] == (0.0, 0.0)
    x, y = values[7]
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(0.0)
    radii = [math.hypot(x, y) for x, y in values[1:]]
    assert max(radii) == pytest.approx(1.0)


def test_circles_radius_uses_shorter_side() -> None:
    values = circles_xy(((0.0, 0.0), (4.0, 2.0)), 5)
    assert max(math.hypot(x, y) for x, y in values) == pytest.approx(1.0)


def test_random_scatter_stays_in_rectangle() -> None:
    values = random_scatter_xy(((-2.0, 0.0), (2.0, 1.0)), 50, seed=3)

    assert len(values) == 50
    assert values[0] == (0.0, 0.0)
    for x, y in values[1:]:
        assert -2.0 <= x <= 2.0
        assert 0.0 <= y <= 1.0


def test_seeded_scatter_is_reproducible() -> None:
    generate = seeded_scatter_xy(11)
    assert generate(((0.0, 0.0), (1.0, 1.0)), 8) == generate(((0.0, 0.0), (1.0, 1.0)), 8)


def test_normalize_range_swaps_reversed_bounds() -> None:
    assert normalize_range((10.0, 1.0)) == (1.0, 10.0)
    assert normalize_range(((1.0, -1.0), (-1.0, 1.0))) == ((-1.0, -1.0), (1.0, 1.0))


def test_clamp_positive_range() -> None:
    tiny = float(np.finfo(np.float32).tiny)
    largest = float(np.finfo(np.float32).max)

    assert clamp_range_positive((-5.0, 10.0)) == (tiny, 10.0)
    assert clamp_range_positive((0.0, 1e40)) == (tiny, largest)


def test_clamp_integer_range() -> None:
    assert clamp_range_integer((-3, 2 ** 40)) == (0, 0xFFFFFFFF)


def test_pair_types_convert_component_wise() -> None:
    types = NumericTypes(PairOf(np.float32), np.float32, np.float64)

    y, x = types.to_input((0.5, -0.25))
    assert isinstance(y, np.float32) and isinstance(x, np.float32)
    wide = types.widen((y, x))
    assert all(isinstance(v, np.float64) for v in wide)
    assert types.is_pair_input
    assert types.to_dict()["input_type"] == "PairOf(float32)"
