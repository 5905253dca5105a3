"""Hyperparameter optimization using the Tree-structured Parzen Estimator."""

__version__ = "0.2.0"

__all__ = ["density_estimation", "histogram", "optimizer", "parzen", "range"]