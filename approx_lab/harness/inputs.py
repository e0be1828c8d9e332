"""
Input sample generators.

Every generator follows the same contract, ``generate(range, count)`` returns
an ordered sequence of ``count`` inputs drawn from ``range``. The harness
converts the raw values to the suite's input type.

Only ``linear_sweep`` keeps the "sample i sits at position i of the range"
correspondence that line charts rely on. The XY generators scatter points
over a rectangle or onto circles.
"""

import math
from typing import Callable, Optional, Sequence

import numpy as np

InputGenerator = Callable[[tuple, int], Sequence]


def linear_sweep(input_range: tuple, count: int) -> list:
    """Evenly spaced samples from low to high, both ends included.

    ``value[i] = low + (high - low) * i / (count - 1)``. Integer ranges use
    floor division so every sample stays an exact integer.
    """
    low, high = input_range
    if count < 2:
        return [low] * count
    span = high - low
    if isinstance(low, (int, np.integer)) and isinstance(high, (int, np.integer)):
        low, span = int(low), int(span)
        return [low + (span * i) // (count - 1) for i in range(count)]
    return [low + (span * i) / (count - 1) for i in range(count)]


def random_scatter_xy(input_range: tuple, count: int, seed: Optional[int] = None) -> list:
    """``(0, 0)`` followed by ``count - 1`` uniform points in the range rectangle."""
    (x_low, y_low), (x_high, y_high) = input_range
    rng = np.random.default_rng(seed)
    xs = rng.uniform(x_low, x_high, size=max(count - 1, 0))
    ys = rng.uniform(y_low, y_high, size=max(count - 1, 0))
    values = [(0.0, 0.0)]
    values.extend((float(x), float(y)) for x, y in zip(xs, ys))
    return values


def seeded_scatter_xy(seed: int) -> InputGenerator:
    """``random_scatter_xy`` bound to a fixed seed, for reproducible reports."""

    def generate(input_range: tuple, count: int) -> list:
        return random_scatter_xy(input_range, count, seed=seed)

    generate.__name__ = f"random_scatter_xy_seed{seed}"
    return generate


def circles_xy(input_range: tuple, count: int) -> list:
    """``(0, 0)`` followed by concentric circles around the origin.

    ``steps = trunc(sqrt(count - 1))`` circles with ``steps`` points each, so
    the result holds ``1 + steps ** 2`` samples, which can be fewer than
    ``count``. The radius step is half the shorter side of the range divided
    by ``steps``.
    """
    (x_a, y_a), (x_b, y_b) = input_range
    x_range = abs(x_b - x_a)
    y_range = abs(y_b - y_a)
    values = [(0.0, 0.0)]
    steps = math.trunc(math.sqrt(max(count - 1, 0)))
    if steps == 0:
        return values
    step_r = (0.5 * min(x_range, y_range)) / steps
    step_t = (2.0 * math.pi) / steps
    for ri in range(1, steps + 1):
        r = ri * step_r
        for ti in range(steps):
            t = ti * step_t
            values.append((r * math.cos(t), r * math.sin(t)))
    return values


GENERATORS = {
    "linear": linear_sweep,
    "random": random_scatter_xy,
    "circles": circles_xy,
}
