"""Histogram based density estimation for categorical parameters."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass

from .density_estimation import DensityEstimator, DensityEstimatorBuilder
from .range import Range


def _bin_index(x: float, cardinality: int) -> int:
    index = max(0, math.floor(x))
    if index >= cardinality:
        raise ValueError(f"value {x} falls outside of the {cardinality} histogram bins")
    return index


class HistogramEstimatorBuilder(DensityEstimatorBuilder):
    """Builds :class:`HistogramEstimator` instances."""

    def build(self, xs: Iterable[float], param_range: Range) -> "HistogramEstimator":
        values = list(xs)
        cardinality = math.ceil(param_range.width())
        weight = 1.0 / (len(values) + cardinality)
        probabilities = [weight] * cardinality
        for x in values:
            probabilities[_bin_index(x, cardinality)] += weight
        return HistogramEstimator(tuple(probabilities))


@dataclass(frozen=True)
class HistogramEstimator(DensityEstimator):
    """Histogram over category indices, smoothed with one pseudo-count per bin.

    Observed values are category indices, not the raw category values.
    """

    probabilities: tuple[float, ...]

    def log_pdf(self, x: float) -> float:
        """Return the probability of the bin that holds ``x``."""
        return self.probabilities[_bin_index(x, len(self.probabilities))]

    def sample(self, rng: random.Random) -> float:
        indices = range(len(self.probabilities))
        return float(rng.choices(indices, weights=self.probabilities)[0])