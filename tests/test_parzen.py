import math
import random

import pytest

from tpeopt.parzen import ParzenEstimatorBuilder
from tpeopt.range import Range


def _build(xs, start=-5.0, end=5.0):
    return ParzenEstimatorBuilder().build(xs, Range(start, end))


def test_prior_kernel_at_midpoint_without_data():
    est = _build([])
    assert len(est.kernels) == 1
    assert est.kernels[0].mean == 0.0


def test_kernel_means_sorted_and_include_prior():
    est = _build([3.0, -4.0, 1.0])
    assert [k.mean for k in est.kernels] == [-4.0, 0.0, 1.0, 3.0]


def test_bandwidths_are_bounded_by_range():
    r = Range(-5.0, 5.0)
    est = ParzenEstimatorBuilder().build([0.1 * i for i in range(-40, 40)], r)
    for k in est.kernels:
        assert r.width() / 100 <= k.stddev <= r.width()


def test_duplicate_values_keep_positive_bandwidth():
    est = _build([2.0, 2.0, 2.0])
    assert all(k.stddev > 0 for k in est.kernels)


def test_acceptance_probability_in_unit_interval():
    est = _build([-4.9, 4.9, 0.0])
    assert 0.0 < est.p_accept <= 1.0


def test_density_integrates_to_one():
    est = _build([-3.0, -2.5, 1.0, 4.0])
    steps = 4000
    h = 10.0 / steps
    total = sum(math.exp(est.log_pdf(-5.0 + (i + 0.5) * h)) for i in range(steps)) * h
    assert total == pytest.approx(1.0, abs=1e-3)


def test_density_higher_near_observations():
    est = _build([3.0, 3.1, 2.9, 3.05])
    assert est.log_pdf(3.0) > est.log_pdf(-4.0)


def test_samples_within_range():
    r = Range(0.0, 1.0)
    est = ParzenEstimatorBuilder().build([0.0, 0.99, 0.5], r)
    rng = random.Random(5)
    assert all(r.contains(est.sample(rng)) for _ in range(500))


def test_samples_concentrate_near_observations():
    est = _build([4.0] * 40)
    rng = random.Random(2)
    samples = [est.sample(rng) for _ in range(1000)]
    near = sum(1 for s in samples if s > 2.0)
    assert near > len(samples) / 2


def test_sampling_is_reproducible_with_seed():
    est = _build([1.0, -2.0])
    a = [est.sample(random.Random(9)) for _ in range(3)]
    b = [est.sample(random.Random(9)) for _ in range(3)]
    assert a == b