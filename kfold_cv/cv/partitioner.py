# kfold_cv/cv/partitioner.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from kfold_cv.cv.dataset import n_columns
from kfold_cv.cv.geometry import FoldGeometry
from kfold_cv.utils.errors import DimensionMismatchError


@dataclass(frozen=True)
class AugmentedBuffer:
    """
    A read-only buffer holding the original n columns followed by a copy of
    the first ``augmentation_size`` columns.
    """

    data: np.ndarray
    n_samples: int

    @property
    def original(self) -> np.ndarray:
        return self.data[..., : self.n_samples]

    @property
    def n_augmented(self) -> int:
        return n_columns(self.data) - self.n_samples


class FoldPartitioner:
    """
    FoldPartitioner（FINAL）

    Responsibility:
    - build the augmented buffer once per dataset buffer
    - answer "training / validation view of fold i" with numpy views

    Contract:
    - views are slices on the last axis, never copies
    - views are read-only and keep the augmented buffer alive
    """

    def __init__(self, k: int, n_samples: int):
        self.geometry = FoldGeometry.compute(k, n_samples)

    @property
    def k(self) -> int:
        return self.geometry.k

    def prepare(self, buffer) -> AugmentedBuffer:
        source = np.asarray(buffer)
        g = self.geometry

        if n_columns(source) != g.n_samples:
            raise DimensionMismatchError(
                f"buffer has {n_columns(source)} samples, partition expects {g.n_samples}"
            )

        if g.k == 2:
            # the two folds tile the data exactly
            data = source.copy()
        else:
            data = np.concatenate(
                [source, source[..., : g.augmentation_size]], axis=-1
            )

        data.flags.writeable = False
        return AugmentedBuffer(data=data, n_samples=g.n_samples)

    def training_view(self, buffer: AugmentedBuffer, i: int) -> np.ndarray:
        start = self.geometry.training_start(i)
        return buffer.data[..., start: start + self.geometry.training_size(i)]

    def validation_view(self, buffer: AugmentedBuffer, i: int) -> np.ndarray:
        start = self.geometry.validation_start(i)
        return buffer.data[..., start: start + self.geometry.validation_size(i)]

    def fold_columns(self, i: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        Original column indices (training, validation) of fold i.
        """
        g = self.geometry
        train_start = g.training_start(i)
        valid_start = g.validation_start(i)

        train = np.arange(train_start, train_start + g.training_size(i)) % g.n_samples
        valid = np.arange(valid_start, valid_start + g.validation_size(i))
        return train, valid
