# tpeopt

A small hyperparameter optimizer based on TPE (Tree-structured Parzen
Estimator), written in pure Python with no dependencies. Each `TpeOptimizer`
handles one parameter and searches for the value that minimizes your
objective. To tune several parameters at once, make one optimizer for each.

## Install

```
pip install tpeopt
```

## Usage

Optimizing a function with one numerical and one categorical parameter:

```python
import random

from tpeopt.optimizer import (
    TpeOptimizer,
    categorical_range,
    histogram_estimator,
    make_range,
    parzen_estimator,
)

choices = [1, 10, 100]
optim_x = TpeOptimizer(parzen_estimator(), make_range(-5.0, 5.0))
optim_y = TpeOptimizer(histogram_estimator(), categorical_range(len(choices)))

def objective(x: float, y: int) -> float:
    return x ** 2 + y

rng = random.Random(0)
best = float("inf")
for _ in range(100):
    x = optim_x.ask(rng)
    y = optim_y.ask(rng)
    v = objective(x, choices[int(y)])
    optim_x.tell(x, v)
    optim_y.tell(y, v)
    best = min(best, v)

print(best)
```

`ask(rng)` takes a `random.Random` instance, so runs with the same seed and
the same told results are reproducible.

### Parameter ranges

- `make_range(start, end)` builds a `tpeopt.range.Range`, the half-open
  interval `[start, end)`. It raises `NonFiniteRangeError` if the width is not
  finite and `EmptyRangeError` if `start >= end`; both derive from
  `RangeError`, a `ValueError`.
- `categorical_range(n)` is the same as `make_range(0.0, n)`. Values told to a
  categorical optimizer are category indices, not the raw choices.
- A `Range` has `start` and `end` attributes, `width()`, `contains(v)`, and
  prints as `start..end`.

### Estimators

- `parzen_estimator()` returns a `ParzenEstimatorBuilder`, for numerical
  parameters: a mixture of normal kernels, one per observation plus one at the
  middle of the range, truncated to the range.
- `histogram_estimator()` returns a `HistogramEstimatorBuilder`, for
  categorical parameters: a histogram over category indices with one
  pseudo-count per category.

Custom estimators can be plugged in by subclassing `DensityEstimatorBuilder`
and `DensityEstimator` from `tpeopt.density_estimation`.

### Settings

`gamma` (default `0.1`) is the fraction of the best observations treated as
"good"; it must be between 0.0 and 1.0, otherwise `GammaOutOfRangeError` is
raised. `candidates` (default `24`) is how many values are sampled for each
`ask`; it must be positive, otherwise `ZeroCandidatesError` is raised. Both
errors derive from `BuildError`.

They can be passed to `TpeOptimizer` directly or through a
`TpeOptimizerBuilder`:

```python
from tpeopt.optimizer import TpeOptimizerBuilder, make_range, parzen_estimator

optim = TpeOptimizerBuilder(gamma=0.2, candidates=50).build(
    parzen_estimator(), make_range(0.0, 1.0)
)
```

### Telling results

`tell(param, value)` records an evaluation:

- A NaN `value` raises `NanValueError`.
- A `param` outside the range raises `ParamOutOfRangeError`.
- Pass `float("nan")` as `param` when the parameter was not used in that
  evaluation, for example in a conditional search space.

Both errors derive from `TellError`, a `ValueError`.

### Saving and restoring state

`trials()` returns a list of every `(param, value)` pair that has been told.
The order may not match the order of the `tell` calls. Tell the pairs again to
a fresh optimizer to restore its state:

```python
import json

from tpeopt.optimizer import TpeOptimizer, make_range, parzen_estimator

saved = json.dumps(optim.trials())

restored = TpeOptimizer(parzen_estimator(), make_range(0.0, 1.0))
for param, value in json.loads(saved):
    restored.tell(param, value)
```

## What it does not do

tpeopt is a library only. It has no command-line tool and does not speak any
benchmark or solver protocol, and it does not store trials anywhere itself;
saving and loading them is left to you, as shown above.

## Running the tests

```
pip install -e ".[test]"
pytest
```