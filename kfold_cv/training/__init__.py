"""
sklearn adapters for the cross-validation engine.

The engine itself only sees the Trainable / Metric protocols; everything in
this package is one concrete way of satisfying them.
"""
from .sklearn_family import (
    DatasetInfo,
    SklearnFamily,
    WeightedSklearnFamily,
    make_family,
)
from .metrics import Accuracy, MeanSquaredError, R2, RankIC
from .result import CVResult

__all__ = [
    "DatasetInfo",
    "SklearnFamily",
    "WeightedSklearnFamily",
    "make_family",
    "Accuracy",
    "MeanSquaredError",
    "R2",
    "RankIC",
    "CVResult",
]
