# kfold_cv/cv/k_fold_cv.py
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from kfold_cv import logs
from kfold_cv.cv.dataset import CVDataset
from kfold_cv.cv.geometry import FoldGeometry
from kfold_cv.cv.model_holder import ModelHolder
from kfold_cv.cv.partitioner import AugmentedBuffer, FoldPartitioner
from kfold_cv.cv.protocols import Metric, Trainable, supports_weighted_training
from kfold_cv.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class KFoldCV:
    """
    KFoldCV（FINAL / FROZEN）

    Semantics:
    - the dataset is split into k contiguous folds
    - every fold is used once for validation, the rest for training
    - evaluate() returns the mean of the k validation scores
    - the model trained on the LAST fold is retained (not the best one)

    Contract:
    - features are dims × samples, labels / weights one entry per sample
    - augmented buffers are built once here and are read-only afterwards
    - weighted training is used iff weights were supplied AND the model
      family implements ``train_weighted``; decided once, at construction
    - collaborator errors propagate and abort the pass; the previously
      retained model (if any) is left untouched
    """

    def __init__(
        self,
        base: Trainable,
        metric: Metric,
        k: int,
        xs,
        ys,
        weights=None,
        *,
        inst: Instrumentation | None = None,
    ):
        self.base = base
        self.metric = metric
        self.k = k
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

        dataset = CVDataset(xs, ys, weights)
        # rejects k < 2 and k > n
        self.partitioner = FoldPartitioner(k, dataset.n_samples)

        self.xs: AugmentedBuffer = self.partitioner.prepare(dataset.features)
        self.ys: AugmentedBuffer = self.partitioner.prepare(dataset.labels)
        self.weights: Optional[AugmentedBuffer] = (
            self.partitioner.prepare(dataset.weights) if dataset.has_weights else None
        )

        self.weighted = self.weights is not None and supports_weighted_training(base)
        if self.weights is not None and not self.weighted:
            logs.warning(
                f"[KFoldCV] {type(base).__name__} does not support weighted "
                f"training, sample weights are ignored"
            )

        self.fold_scores: Optional[np.ndarray] = None
        self._holder = ModelHolder()

        g = self.geometry
        logs.info(
            f"[KFoldCV] k={g.k} n={g.n_samples} bin_size={g.bin_size} "
            f"last_bin_size={g.last_bin_size} weighted={self.weighted}"
        )

    @classmethod
    def from_estimator(
        cls,
        estimator,
        metric: Metric,
        k: int,
        xs,
        ys,
        *,
        num_classes: Optional[int] = None,
        dataset_info=None,
        weights=None,
        inst: Instrumentation | None = None,
    ) -> "KFoldCV":
        """
        Shorthand constructor: build the sklearn model family from an
        unfitted estimator plus num_classes / dataset_info.
        """
        from kfold_cv.training.sklearn_family import make_family

        base = make_family(estimator, num_classes=num_classes, dataset_info=dataset_info)
        return cls(base, metric, k, xs, ys, weights, inst=inst)

    @property
    def geometry(self) -> FoldGeometry:
        return self.partitioner.geometry

    @property
    def model(self) -> Any:
        """Model trained on the last fold of the latest completed pass."""
        return self._holder.access()

    # ------------------------------------------------------------------
    # Evaluation pass
    # ------------------------------------------------------------------
    def evaluate(self, *args, **kwargs) -> float:
        """
        Run k train/evaluate rotations and return the mean score.

        ``args`` / ``kwargs`` are forwarded verbatim to every train call.
        """
        scores = np.empty(self.k, dtype=float)
        self.inst.progress.start("KFoldCV", self.k)

        for i in range(self.k):
            try:
                model = self._train_fold(i, args, kwargs)
                scores[i] = self._evaluate_fold(i, model)
            except Exception as e:
                logs.error(f"[KFoldCV] fold {i}/{self.k} failed: {type(e).__name__}: {e}")
                raise

            logs.info(f"[KFoldCV] fold={i} score={scores[i]:.6f}")
            self.inst.metrics.record(f"fold_{i}/score", scores[i])
            self.inst.progress.update("KFoldCV", i + 1, self.k)

            if i == self.k - 1:
                self._holder.retain(model)

        mean = float(np.mean(scores))
        self.fold_scores = scores

        self.inst.metrics.record("mean_score", mean)
        self.inst.progress.done("KFoldCV")
        logs.info(f"[KFoldCV] mean score={mean:.6f}")
        return mean

    def _train_fold(self, i: int, args: tuple, kwargs: dict) -> Any:
        xs = self.partitioner.training_view(self.xs, i)
        ys = self.partitioner.training_view(self.ys, i)

        with self.inst.timer(f"fold_{i}/train"):
            if self.weighted:
                weights = self.partitioner.training_view(self.weights, i)
                return self.base.train_weighted(xs, ys, weights, *args, **kwargs)
            return self.base.train(xs, ys, *args, **kwargs)

    def _evaluate_fold(self, i: int, model: Any) -> float:
        xs = self.partitioner.validation_view(self.xs, i)
        ys = self.partitioner.validation_view(self.ys, i)

        with self.inst.timer(f"fold_{i}/evaluate"):
            return float(self.metric.evaluate(model, xs, ys))
