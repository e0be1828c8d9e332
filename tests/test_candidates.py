import math

import numpy as np
import pytest

from approx_lab.benchmarks.atan2f import atan2_polynomial, atan2_reference, atan2_std
from approx_lab.benchmarks.expf import expf_chebyshev, expf_reference, expf_std
from approx_lab.benchmarks.invsqrtf import invsqrtf_quake, invsqrtf_quake_newton, invsqrtf_std
from approx_lab.benchmarks.log10f import (
    log10f_arm,
    log10f_ebay_divides,
    log10f_ebay_multiplies,
    log10f_log2,
    log10f_std,
)
from approx_lab.benchmarks.sqrtf import (
    sqrtf_bisect,
    sqrtf_intel_soc,
    sqrtf_intel_soc_bakhshali,
    sqrtf_log2_babylonian,
    sqrtf_log2_bias,
    sqrtf_log2_bias_babylonian,
    sqrtf_log2_bias_bakhshali,
    sqrtf_newton_converge,
    sqrtf_quake_halley,
    sqrtf_quake_newton,
    sqrtf_std,
    sqrtf_taylor3,
)
from approx_lab.benchmarks.sqrti import (
    sqrti_abacus,
    sqrti_binomial,
    sqrti_crenshaw,
    sqrti_fosler,
    sqrti_muntsinger,
    sqrti_reference,
)

F32 = np.float32

POSITIVE_INPUTS = [0.25, 0.5, 1.0, 2.0, 3.0, 100.0, 12345.0, 65535.0]


def _relative_error(actual, expected) -> float:
    return abs(1.0 - float(actual) / float(expected))


@pytest.mark.parametrize(
    "fn, tolerance",
    [
        (sqrtf_std, 1e-6),
        (sqrtf_log2_bias, 0.1),
        (sqrtf_log2_babylonian, 1e-3),
        (sqrtf_log2_bias_babylonian, 1e-3),
        (sqrtf_log2_bias_bakhshali, 5e-3),
        (sqrtf_quake_newton, 2e-3),
        (sqrtf_quake_halley, 1e-3),
        (sqrtf_intel_soc, 0.1),
        (sqrtf_intel_soc_bakhshali, 5e-3),
        (sqrtf_taylor3, 1e-3),
        (sqrtf_newton_converge, 1e-6),
    ],
)
def test_sqrtf_candidates_within_tolerance(fn, tolerance) -> None:
    for x in POSITIVE_INPUTS:
        assert _relative_error(fn(F32(x)), math.sqrt(x)) < tolerance, (fn.__name__, x)


def test_sqrtf_bisect_meets_its_accuracy() -> None:
    for x in [1.0, 2.0, 100.0, 65535.0]:
        assert abs(float(sqrtf_bisect(F32(x))) - math.sqrt(x)) < 0.01


def test_sqrtf_newton_terminates_on_tiny_input() -> None:
    tiny = np.finfo(np.float32).tiny
    assert _relative_error(sqrtf_newton_converge(tiny), math.sqrt(float(tiny))) < 1e-5


@pytest.mark.parametrize(
    "fn, tolerance",
    [
        (invsqrtf_std, 1e-6),
        (invsqrtf_quake, 2e-3),
        (invsqrtf_quake_newton, 1e-5),
    ],
)
def test_invsqrtf_candidates_within_tolerance(fn, tolerance) -> None:
    for x in [0.01, 0.25, 0.5, 1.0, 1.5, 2.0]:
        assert _relative_error(fn(F32(x)), 1.0 / math.sqrt(x)) < tolerance, (fn.__name__, x)


@pytest.mark.parametrize(
    "fn, tolerance",
    [
        (log10f_std, 1e-6),
        (log10f_log2, 1e-6),
        (log10f_arm, 5e-3),
        (log10f_ebay_divides, 1e-3),
        (log10f_ebay_multiplies, 2e-3),
    ],
)
def test_log10f_candidates_within_tolerance(fn, tolerance) -> None:
    for x in POSITIVE_INPUTS:
        assert abs(float(fn(F32(x))) - math.log10(x)) < tolerance, (fn.__name__, x)


@pytest.mark.parametrize("fn", [expf_std, expf_chebyshev])
def test_expf_candidates_within_tolerance(fn) -> None:
    for x in [-80.0, -10.0, -1.0, -0.1, 0.0, 0.5, 1.0, 10.0, 80.0]:
        assert _relative_error(fn(F32(x)), math.exp(x)) < 1e-5, (fn.__name__, x)


def test_expf_reference_is_exponential() -> None:
    assert float(expf_reference(1.0)) == pytest.approx(math.e)


@pytest.mark.parametrize("fn, tolerance", [(atan2_std, 1e-6), (atan2_polynomial, 0.02)])
def test_atan2_candidates_cover_all_quadrants(fn, tolerance) -> None:
    for i in range(16):
        angle = -math.pi + (i + 0.5) * (2 * math.pi / 16)
        y, x = math.sin(angle), math.cos(angle)
        actual = float(fn((F32(y), F32(x))))
        expected = float(atan2_reference((np.float64(y), np.float64(x))))
        assert abs(actual - expected) < tolerance, (fn.__name__, y, x)


@pytest.mark.parametrize(
    "fn",
    [sqrti_binomial, sqrti_abacus, sqrti_crenshaw, sqrti_fosler, sqrti_muntsinger],
)
def test_integer_sqrt_is_exact(fn) -> None:
    values = [0, 1, 2, 3, 4, 15, 16, 17, 99, 100, 65535, 65536, 2 ** 31, 0xFFFFFFFE, 0xFFFFFFFF]
    values += [n * n for n in (255, 4096, 65535)]
    values += [n * n - 1 for n in (255, 4096, 65535)]
    for x in values:
        assert fn(np.uint32(x)) == sqrti_reference(x), (fn.__name__, x)
