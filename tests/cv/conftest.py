# tests/cv/conftest.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import pytest


@dataclass
class StubModel:
    fold: int
    xs: np.ndarray
    ys: np.ndarray
    weights: Optional[np.ndarray] = None


class RecordingFamily:
    """Unweighted family; remembers every train call."""

    def __init__(self, fail_on: Optional[int] = None):
        self.calls: list[dict[str, Any]] = []
        self.fail_on = fail_on

    def _record(self, kind, xs, ys, weights, args, kwargs) -> StubModel:
        fold = len(self.calls)
        if self.fail_on is not None and fold == self.fail_on:
            raise ValueError(f"training blew up on call {fold}")
        self.calls.append(
            dict(kind=kind, xs=xs, ys=ys, weights=weights, args=args, kwargs=kwargs)
        )
        return StubModel(fold=fold, xs=xs, ys=ys, weights=weights)

    def train(self, xs, ys, *args, **kwargs):
        return self._record("unweighted", xs, ys, None, args, kwargs)


class RecordingWeightedFamily(RecordingFamily):
    def train_weighted(self, xs, ys, weights, *args, **kwargs):
        return self._record("weighted", xs, ys, weights, args, kwargs)


class FoldIndexMetric:
    """Scores every fold with the index of the train call that produced the model."""

    def __init__(self):
        self.calls: list[tuple] = []

    def evaluate(self, model, xs, ys) -> float:
        self.calls.append((model, xs, ys))
        return float(model.fold)


@pytest.fixture
def family() -> RecordingFamily:
    return RecordingFamily()


@pytest.fixture
def weighted_family() -> RecordingWeightedFamily:
    return RecordingWeightedFamily()


@pytest.fixture
def failing_family():
    def _make(fail_on: int) -> RecordingFamily:
        return RecordingFamily(fail_on=fail_on)

    return _make


@pytest.fixture
def fold_metric() -> FoldIndexMetric:
    return FoldIndexMetric()


@pytest.fixture
def toy_data():
    """
    10 samples, 2 dims. Column j of xs is (j, 100 + j); label j is j.
    """
    n = 10
    xs = np.vstack([np.arange(n, dtype=float), 100.0 + np.arange(n)])
    ys = np.arange(n)
    return xs, ys
