# kfold_cv/cv/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from kfold_cv.utils.errors import DimensionMismatchError


def n_columns(buffer: np.ndarray) -> int:
    """Samples live on the last axis (columns of a d × n matrix, entries of a row)."""
    return int(buffer.shape[-1]) if buffer.ndim > 0 else 0


def assert_data_consistency(xs: np.ndarray, ys: np.ndarray) -> None:
    if xs.ndim not in (1, 2):
        raise DimensionMismatchError(
            f"features must be a row or a dims × samples matrix, got ndim={xs.ndim}"
        )
    if n_columns(xs) != n_columns(ys):
        raise DimensionMismatchError(
            f"number of samples ({n_columns(xs)}) does not match "
            f"number of labels ({n_columns(ys)})"
        )


def assert_weights_consistency(xs: np.ndarray, weights: np.ndarray) -> None:
    if weights.ndim != 1:
        raise DimensionMismatchError(
            f"weights must be one value per sample, got shape {weights.shape}"
        )
    if n_columns(xs) != n_columns(weights):
        raise DimensionMismatchError(
            f"number of samples ({n_columns(xs)}) does not match "
            f"number of weights ({n_columns(weights)})"
        )


@dataclass(frozen=True)
class CVDataset:
    """
    CVDataset（FROZEN）

    features : dims × samples (a 1-D buffer is a single dimension)
    labels   : one entry per sample on the last axis
    weights  : optional, one entry per sample; an empty buffer means "no weights"

    Column order is the original sample order and decides fold membership.
    """

    features: np.ndarray
    labels: np.ndarray
    weights: Optional[np.ndarray] = None

    def __post_init__(self):
        xs = np.asarray(self.features)
        ys = np.asarray(self.labels)
        assert_data_consistency(xs, ys)

        weights = None
        if self.weights is not None:
            weights = np.asarray(self.weights)
            if weights.size == 0:
                weights = None
            else:
                assert_weights_consistency(xs, weights)

        object.__setattr__(self, "features", xs)
        object.__setattr__(self, "labels", ys)
        object.__setattr__(self, "weights", weights)

    @property
    def n_samples(self) -> int:
        return n_columns(self.features)

    @property
    def has_weights(self) -> bool:
        return self.weights is not None
