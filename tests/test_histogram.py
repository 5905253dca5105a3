import random
from collections import Counter

import pytest

from tpeopt.histogram import HistogramEstimator, HistogramEstimatorBuilder
from tpeopt.range import Range


def _build(xs, cardinality):
    return HistogramEstimatorBuilder().build(xs, Range(0.0, float(cardinality)))


def test_probabilities_sum_to_one():
    est = _build([0.0, 0.0, 2.0, 1.0, 2.0], 4)
    assert sum(est.probabilities) == pytest.approx(1.0)
    assert len(est.probabilities) == 4


def test_no_observations_gives_uniform():
    est = _build([], 5)
    assert len(set(est.probabilities)) == 1
    assert sum(est.probabilities) == pytest.approx(1.0)


def test_observed_bins_are_heavier():
    est = _build([1.0, 1.0, 1.0, 2.0], 3)
    p = est.probabilities
    assert p[1] > p[2] > p[0]


def test_every_bin_keeps_positive_mass():
    est = _build([0.0] * 50, 3)
    assert all(p > 0 for p in est.probabilities)


def test_fractional_width_rounds_up_cardinality():
    est = HistogramEstimatorBuilder().build([], Range(0.0, 2.5))
    assert len(est.probabilities) == 3


def test_log_pdf_uses_bin_of_value():
    est = _build([1.0, 1.0], 3)
    assert est.log_pdf(1.7) == est.log_pdf(1.0) == est.probabilities[1]
    assert est.log_pdf(0.2) == est.probabilities[0]


def test_value_beyond_bins_rejected():
    with pytest.raises(ValueError):
        _build([5.0], 3)
    est = _build([], 3)
    with pytest.raises(ValueError):
        est.log_pdf(3.0)


def test_samples_are_bin_indices():
    est = _build([0.0, 2.0], 3)
    rng = random.Random(1)
    samples = [est.sample(rng) for _ in range(300)]
    assert set(samples) <= {0.0, 1.0, 2.0}
    assert all(s.is_integer() for s in samples)


def test_sampling_follows_probabilities():
    est = _build([2.0] * 30, 3)
    rng = random.Random(3)
    counts = Counter(est.sample(rng) for _ in range(2000))
    assert counts[2.0] > counts[0.0]
    assert counts[2.0] > counts[1.0]


def test_sampling_is_reproducible_with_seed():
    est = HistogramEstimator((0.2, 0.3, 0.5))
    a = [est.sample(random.Random(11)) for _ in range(5)]
    b = [est.sample(random.Random(11)) for _ in range(5)]
    assert a == b