"""Parzen window density estimation for numerical parameters."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .density_estimation import DensityEstimator, DensityEstimatorBuilder
from .range import Range

_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


@dataclass(frozen=True)
class _Normal:
    mean: float
    stddev: float

    def log_pdf(self, x: float) -> float:
        z = (x - self.mean) / self.stddev
        return -0.5 * z * z - math.log(self.stddev) - _LOG_SQRT_2PI

    def cdf(self, x: float) -> float:
        return 0.5 * math.erfc(-(x - self.mean) / (self.stddev * math.sqrt(2.0)))


def _bandwidths(means: Sequence[float], param_range: Range) -> list[float]:
    n = len(means)
    prevs = [param_range.start, *means[:-1]]
    succs = [*means[1:], param_range.end]
    stddevs = [max(curr - prev, succ - curr) for prev, curr, succ in zip(prevs, means, succs)]
    if n >= 2:
        stddevs[0] = means[1] - means[0]
        stddevs[-1] = means[-1] - means[-2]
    max_stddev = param_range.width()
    min_stddev = max_stddev / min(100.0, 1.0 + n)
    return [min(max(sd, min_stddev), max_stddev) for sd in stddevs]


def _logsumexp(xs: Sequence[float]) -> float:
    max_x = max(xs)
    return math.log(sum(math.exp(x - max_x) for x in xs)) + max_x


class ParzenEstimatorBuilder(DensityEstimatorBuilder):
    """Builds :class:`ParzenEstimator` instances."""

    def build(self, xs: Iterable[float], param_range: Range) -> "ParzenEstimator":
        prior = (param_range.start + param_range.end) * 0.5
        means = sorted([*xs, prior])
        kernels = tuple(
            _Normal(mean, stddev)
            for mean, stddev in zip(means, _bandwidths(means, param_range))
        )
        p_accept = sum(
            k.cdf(param_range.end) - k.cdf(param_range.start) for k in kernels
        ) / len(kernels)
        return ParzenEstimator(kernels, param_range, p_accept)


@dataclass(frozen=True)
class ParzenEstimator(DensityEstimator):
    """Mixture of normal kernels truncated to the parameter range."""

    kernels: tuple[_Normal, ...]
    param_range: Range
    p_accept: float

    def log_pdf(self, x: float) -> float:
        offset = math.log(1.0 / len(self.kernels) / self.p_accept)
        return _logsumexp([k.log_pdf(x) + offset for k in self.kernels])

    def sample(self, rng: random.Random) -> float:
        while True:
            kernel = rng.choice(self.kernels)
            draw = rng.gauss(kernel.mean, kernel.stddev)
            if self.param_range.contains(draw):
                return draw