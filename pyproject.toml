[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpeopt"
version = "0.2.0"
description = "Hyperparameter optimization with the Tree-structured Parzen Estimator (TPE)"
requires-python = ">=3.10"
dependencies = []
keywords = ["hyperparameter", "optimization", "tpe", "parzen", "bayesian-optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tpeopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
