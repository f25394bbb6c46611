# kfold_cv/training/metrics.py
from __future__ import annotations

import numpy as np
from scipy.stats import spearmanr
from sklearn.metrics import accuracy_score, mean_squared_error, r2_score

from kfold_cv.training.sklearn_family import as_samples, as_targets


class PredictionMetric:
    """
    Metric over ``model.predict`` on a validation view.

    Subclasses only define the score of (y_true, y_pred).
    """

    def evaluate(self, model, xs: np.ndarray, ys: np.ndarray) -> float:
        preds = model.predict(as_samples(xs))
        return float(self.score(as_targets(ys), preds))

    def score(self, y_true: np.ndarray, y_pred: np.ndarray) -> float:
        raise NotImplementedError


class Accuracy(PredictionMetric):
    """Higher is better."""

    def score(self, y_true, y_pred) -> float:
        return accuracy_score(y_true, y_pred)


class MeanSquaredError(PredictionMetric):
    """Lower is better."""

    def score(self, y_true, y_pred) -> float:
        return mean_squared_error(y_true, y_pred)


class R2(PredictionMetric):
    def score(self, y_true, y_pred) -> float:
        return r2_score(y_true, y_pred)


class RankIC(PredictionMetric):
    """
    Spearman rank correlation between predictions and labels.

    Contract:
    - 1-D labels only
    - empty or constant inputs score NaN
    """

    def score(self, y_true, y_pred) -> float:
        if len(y_pred) == 0:
            return float("nan")

        ic, _ = spearmanr(y_pred, y_true)
        return float(ic)
