# kfold_cv/cv/protocols.py
"""
Collaborator contracts consumed by KFoldCV.

A model family is the base configuration fold models are built from. It is
trained once per fold and never mutated by the engine:

    Trainable          train(xs, ys, *args, **kwargs) -> model
    WeightedTrainable  + train_weighted(xs, ys, weights, *args, **kwargs) -> model

A metric scores a trained model on a validation view:

    Metric             evaluate(model, xs, ys) -> float

Whether higher or lower is better is up to the metric.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Trainable(Protocol):
    def train(self, xs: np.ndarray, ys: np.ndarray, *args, **kwargs) -> Any:
        ...


@runtime_checkable
class WeightedTrainable(Trainable, Protocol):
    def train_weighted(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        weights: np.ndarray,
        *args,
        **kwargs,
    ) -> Any:
        ...


@runtime_checkable
class Metric(Protocol):
    def evaluate(self, model: Any, xs: np.ndarray, ys: np.ndarray) -> float:
        ...


def supports_weighted_training(base: Any) -> bool:
    """Static capability of the model family, not of the data."""
    return isinstance(base, WeightedTrainable)
