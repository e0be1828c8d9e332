import numpy as np
import pytest

from approx_lab.benchmarks.atan2f import Atan2fBenchmarkSuite
from approx_lab.benchmarks.expf import ExpfBenchmarkSuite
from approx_lab.benchmarks.sqrtf import SqrtfBenchmarkSuite
from approx_lab.benchmarks.sqrti import SqrtiBenchmarkSuite
from approx_lab.harness.runner import HarnessConfig
from approx_lab.scenarios import ALL_SUITES, get_suite, list_suites

FAST = HarnessConfig(loop_count=1)


def test_registry_lists_every_suite() -> None:
    assert list_suites() == ["sqrtf", "invsqrtf", "log10f", "expf", "sqrti", "atan2f"]
    assert get_suite("nope") is None

    definition = get_suite("sqrtf")
    assert definition.suite_class is SqrtfBenchmarkSuite
    assert definition.candidate_count == 12
    assert definition.to_dict()["default_range"] == (0.0, 65535.0)


@pytest.mark.parametrize("name", list(ALL_SUITES))
def test_every_suite_runs_all_candidates(name: str) -> None:
    definition = get_suite(name)
    suite = definition.create(sample_count=17, config=FAST)

    with np.errstate(all="ignore"):
        results = suite.run_all()

    assert len(results) == definition.candidate_count
    for record in results:
        assert record.sample_count == 17
        assert len(record.values) == 17
        assert len(record.absolute_errors) == 17
        assert record.loop_count == 1


def test_sqrtf_range_is_clamped_to_positive() -> None:
    suite = SqrtfBenchmarkSuite(input_range=(-10.0, 4.0), sample_count=4, config=FAST)
    low, high = suite.input_range
    assert low == float(np.finfo(np.float32).tiny)
    assert high == 4.0


def test_expf_range_is_clamped_to_finite_results() -> None:
    suite = ExpfBenchmarkSuite(input_range=(-1000.0, 1000.0), sample_count=4, config=FAST)
    assert suite.input_range == (-88.0, 88.0)


def test_sqrti_candidates_are_exact_over_the_full_range() -> None:
    results = SqrtiBenchmarkSuite(sample_count=257, config=FAST).run_all()

    assert results.input_range == (0, 0xFFFFFFFF)
    for record in results:
        assert record.absolute_errors.maximum == 0, record.description


def test_atan2_uses_circle_samples() -> None:
    suite = Atan2fBenchmarkSuite(sample_count=100, config=FAST)
    harness = suite.build_harness()

    # 1 + trunc(sqrt(99)) ** 2
    assert harness.sample_count == 82
    assert harness.samples[0] == (0.0, 0.0)
    assert all(isinstance(v, np.float32) for v in harness.samples[1])
