"""Single-parameter optimizer based on the Tree-structured Parzen Estimator."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from itertools import islice
from typing import NamedTuple

from .density_estimation import DensityEstimatorBuilder
from .histogram import HistogramEstimatorBuilder
from .parzen import ParzenEstimatorBuilder
from .range import Range

DEFAULT_GAMMA = 0.1
DEFAULT_CANDIDATES = 24


def make_range(start: float, end: float) -> Range:
    """Create a half-open range ``[start, end)``."""
    return Range(start, end)


def categorical_range(cardinality: int) -> Range:
    """Create the range of a categorical parameter with ``cardinality`` choices."""
    return Range(0.0, float(cardinality))


def parzen_estimator() -> ParzenEstimatorBuilder:
    """Return a builder of Parzen estimators, suited to numerical parameters."""
    return ParzenEstimatorBuilder()


def histogram_estimator() -> HistogramEstimatorBuilder:
    """Return a builder of histogram estimators, suited to categorical parameters."""
    return HistogramEstimatorBuilder()


class BuildError(ValueError):
    """Raised when optimizer settings are invalid."""


class GammaOutOfRangeError(BuildError):
    """``gamma`` lies outside ``[0.0, 1.0]``."""

    def __init__(self) -> None:
        super().__init__("the value of `gamma` must be in the range from 0.0 to 1.0")


class ZeroCandidatesError(BuildError):
    """``candidates`` is not a positive integer."""

    def __init__(self) -> None:
        super().__init__("the value of `candidates` must be a positive integer")


class TellError(ValueError):
    """Raised when an evaluation result is rejected."""


class ParamOutOfRangeError(TellError):
    """The told parameter lies outside the optimizer's range."""

    def __init__(self, param: float, param_range: Range) -> None:
        super().__init__(
            f"the parameter value {param} is out of the range {param_range}"
        )
        self.param = param
        self.param_range = param_range


class NanValueError(TellError):
    """The told objective value is NaN."""

    def __init__(self) -> None:
        super().__init__("NaN value is not allowed")


class _Trial(NamedTuple):
    param: float
    value: float


def _ordered_key(x: float) -> tuple[int, float]:
    # NaN sorts above every other value.
    return (1, 0.0) if math.isnan(x) else (0, x)


@dataclass
class TpeOptimizerBuilder:
    """Settings from which :class:`TpeOptimizer` instances are built."""

    gamma: float = DEFAULT_GAMMA
    candidates: int = DEFAULT_CANDIDATES

    def build(
        self, estimator_builder: DensityEstimatorBuilder, param_range: Range
    ) -> "TpeOptimizer":
        """Build an optimizer with these settings."""
        return TpeOptimizer(
            estimator_builder,
            param_range,
            gamma=self.gamma,
            candidates=self.candidates,
        )


class TpeOptimizer:
    """Searches for the value of one parameter that minimises an objective.

    Use one optimizer per parameter when tuning several at once.
    """

    def __init__(
        self,
        estimator_builder: DensityEstimatorBuilder,
        param_range: Range,
        gamma: float = DEFAULT_GAMMA,
        candidates: int = DEFAULT_CANDIDATES,
    ) -> None:
        if not 0.0 <= gamma <= 1.0:
            raise GammaOutOfRangeError()
        if candidates < 1:
            raise ZeroCandidatesError()
        self.estimator_builder = estimator_builder
        self.param_range = param_range
        self.gamma = gamma
        self.candidates = int(candidates)
        self._trials: list[_Trial] = []
        self._is_sorted = False

    def ask(self, rng: random.Random) -> float:
        """Return the next parameter value to evaluate."""
        if not self._is_sorted:
            self._trials.sort(key=lambda t: _ordered_key(t.value))
            self._is_sorted = True

        split_point = math.ceil(len(self._trials) * self.gamma)
        superiors = self._trials[:split_point]
        inferiors = self._trials[split_point:]

        superior = self.estimator_builder.build(
            (t.param for t in superiors if math.isfinite(t.param)), self.param_range
        )
        inferior = self.estimator_builder.build(
            (t.param for t in inferiors if math.isfinite(t.param)), self.param_range
        )

        best_key: tuple[int, float] | None = None
        best_param = math.nan
        for candidate in islice(superior.sample_iter(rng), self.candidates):
            ei = superior.log_pdf(candidate) - inferior.log_pdf(candidate)
            key = _ordered_key(ei)
            if best_key is None or key >= best_key:
                best_key = key
                best_param = candidate
        return best_param

    def tell(self, param: float, value: float) -> None:
        """Record the objective ``value`` obtained with ``param``.

        ``param`` may be NaN when the parameter was not used in the evaluation.
        """
        if math.isnan(value):
            raise NanValueError()
        if not (math.isnan(param) or self.param_range.contains(param)):
            raise ParamOutOfRangeError(param, self.param_range)
        self._trials.append(_Trial(float(param), float(value)))
        self._is_sorted = False

    def trials(self) -> list[tuple[float, float]]:
        """Return every told ``(param, value)`` pair, in no particular order."""
        return [(t.param, t.value) for t in self._trials]