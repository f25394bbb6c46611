# kfold_cv/training/sklearn_family.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from sklearn.base import clone
from sklearn.compose import ColumnTransformer
from sklearn.pipeline import Pipeline, make_pipeline
from sklearn.preprocessing import OneHotEncoder
from sklearn.utils.validation import has_fit_parameter

from kfold_cv.utils.errors import DimensionMismatchError, InvalidConfigurationError


def as_samples(xs: np.ndarray) -> np.ndarray:
    """dims × samples → samples × dims (a transposed view, no copy)."""
    return xs.T if xs.ndim == 2 else xs.reshape(-1, 1)


def as_targets(ys: np.ndarray) -> np.ndarray:
    return ys.T if ys.ndim == 2 else ys


@dataclass(frozen=True)
class DatasetInfo:
    """
    Per-dimension type information of the feature buffer.

    Categorical dimensions hold integer category codes and are one-hot
    encoded before reaching the estimator.
    """

    dimensionality: int
    categorical_dims: Tuple[int, ...] = ()

    def __post_init__(self):
        bad = [d for d in self.categorical_dims if not 0 <= d < self.dimensionality]
        if bad:
            raise InvalidConfigurationError(
                f"categorical dims {bad} out of range for dimensionality={self.dimensionality}"
            )

    def is_categorical(self, dim: int) -> bool:
        return dim in self.categorical_dims


class SklearnFamily:
    """
    SklearnFamily（unweighted）

    Responsibility:
    - hold the base configuration: an unfitted estimator + num_classes / dataset_info
    - train(xs, ys, **params) -> a freshly fitted clone

    Contract:
    - the base estimator is never fitted
    - keyword extra args are hyperparameters applied through set_params
    """

    def __init__(
        self,
        estimator,
        *,
        num_classes: Optional[int] = None,
        dataset_info: Optional[DatasetInfo] = None,
    ):
        if num_classes is not None and num_classes < 1:
            raise InvalidConfigurationError(f"num_classes must be positive, got {num_classes}")

        self.estimator = estimator
        self.num_classes = num_classes
        self.dataset_info = dataset_info

    def train(self, xs: np.ndarray, ys: np.ndarray, **params):
        self._check(xs, ys)
        model = self._build(params)
        model.fit(as_samples(xs), as_targets(ys))
        return model

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _build(self, params: dict):
        model = clone(self.estimator)
        if params:
            model.set_params(**params)

        info = self.dataset_info
        if info is not None and info.categorical_dims:
            encoder = ColumnTransformer(
                [
                    (
                        "categorical",
                        OneHotEncoder(handle_unknown="ignore"),
                        list(info.categorical_dims),
                    )
                ],
                remainder="passthrough",
            )
            model = make_pipeline(encoder, model)

        return model

    def _check(self, xs: np.ndarray, ys: np.ndarray) -> None:
        info = self.dataset_info
        if info is not None:
            dims = xs.shape[0] if xs.ndim == 2 else 1
            if dims != info.dimensionality:
                raise DimensionMismatchError(
                    f"features have {dims} dimensions, dataset_info expects {info.dimensionality}"
                )

        if self.num_classes is not None:
            labels = np.asarray(ys)
            if not np.issubdtype(labels.dtype, np.number):
                raise InvalidConfigurationError("class labels must be integers")
            if not np.all(np.equal(np.mod(labels, 1), 0)):
                raise InvalidConfigurationError("class labels must be integers")
            if labels.size and (labels.min() < 0 or labels.max() >= self.num_classes):
                raise InvalidConfigurationError(
                    f"class labels must lie in [0, {self.num_classes})"
                )


class WeightedSklearnFamily(SklearnFamily):
    """
    SklearnFamily for estimators whose fit() accepts sample_weight.
    """

    def train_weighted(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        weights: np.ndarray,
        **params,
    ):
        self._check(xs, ys)
        model = self._build(params)

        if isinstance(model, Pipeline):
            step = model.steps[-1][0]
            fit_params = {f"{step}__sample_weight": weights}
        else:
            fit_params = {"sample_weight": weights}

        model.fit(as_samples(xs), as_targets(ys), **fit_params)
        return model


def make_family(
    estimator,
    *,
    num_classes: Optional[int] = None,
    dataset_info: Optional[DatasetInfo] = None,
) -> SklearnFamily:
    """
    Pick the family class from the estimator's fit() signature.
    """
    family_cls = (
        WeightedSklearnFamily
        if has_fit_parameter(estimator, "sample_weight")
        else SklearnFamily
    )
    return family_cls(estimator, num_classes=num_classes, dataset_info=dataset_info)
