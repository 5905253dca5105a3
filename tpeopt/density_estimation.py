"""Interfaces for probability density estimators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from .range import Range


class DensityEstimator(ABC):
    """Estimates the density of a sample and draws from the estimated distribution."""

    @abstractmethod
    def log_pdf(self, x: float) -> float:
        """Estimate the log probability density at ``x``."""

    @abstractmethod
    def sample(self, rng: random.Random) -> float:
        """Draw one value using ``rng``."""

    def sample_iter(self, rng: random.Random) -> Iterator[float]:
        """Yield an endless stream of samples drawn with ``rng``."""
        while True:
            yield self.sample(rng)


class DensityEstimatorBuilder(ABC):
    """Builds density estimators from observed values."""

    @abstractmethod
    def build(self, xs: Iterable[float], param_range: Range) -> DensityEstimator:
        """Build an estimator from the values ``xs`` lying in ``param_range``."""