# kfold_cv/cv/geometry.py
from __future__ import annotations

from dataclasses import dataclass

from kfold_cv.utils.errors import InvalidConfigurationError


@dataclass(frozen=True)
class FoldGeometry:
    """
    FoldGeometry（FINAL / FROZEN）

    Index arithmetic for k contiguous folds over n samples:

        bin_size             = n // k
        training_subset_size = bin_size * (k - 1)
        last_bin_size        = n - (k - 1) * bin_size   (>= bin_size)

    Validation folds:
        fold 0     -> [training_subset_size, n)        size last_bin_size
        fold i > 0 -> [bin_size*(i-1), bin_size*i)     size bin_size

    The remainder n % k is absorbed by fold 0, so fold 0 is the only fold
    whose validation size may differ.

    Training folds start where their validation fold ends (fold 0 starts at
    column 0) and span every other column, wrapping past n into the
    duplicated prefix of the augmented buffer. The last fold wraps the most,
    reading up to column n + (k - 2) * bin_size.
    """

    k: int
    n_samples: int
    bin_size: int
    training_subset_size: int
    last_bin_size: int

    @classmethod
    def compute(cls, k: int, n_samples: int) -> "FoldGeometry":
        if k < 2:
            raise InvalidConfigurationError("KFoldCV: k should not be less than 2")

        bin_size = n_samples // k
        if bin_size == 0:
            raise InvalidConfigurationError(
                f"KFoldCV: k={k} is larger than the number of samples ({n_samples})"
            )

        training_subset_size = bin_size * (k - 1)
        return cls(
            k=k,
            n_samples=n_samples,
            bin_size=bin_size,
            training_subset_size=training_subset_size,
            last_bin_size=n_samples - training_subset_size,
        )

    # ------------------------------------------------------------------
    # Augmentation
    # ------------------------------------------------------------------
    @property
    def augmentation_size(self) -> int:
        """Columns of the prefix duplicated at the end of the buffer (0 for k == 2)."""
        return self.training_subset_size - self.bin_size

    @property
    def augmented_length(self) -> int:
        return self.n_samples + self.augmentation_size

    # ------------------------------------------------------------------
    # Per-fold spans
    # ------------------------------------------------------------------
    def validation_start(self, i: int) -> int:
        self._check_fold(i)
        # Use as close to the beginning of the dataset as we can.
        return self.training_subset_size if i == 0 else self.bin_size * (i - 1)

    def validation_size(self, i: int) -> int:
        self._check_fold(i)
        return self.last_bin_size if i == 0 else self.bin_size

    def training_start(self, i: int) -> int:
        self._check_fold(i)
        return self.bin_size * i

    def training_size(self, i: int) -> int:
        # Every column outside validation fold i. Equals training_subset_size
        # when k divides n, and last_bin_size + (k - 2) * bin_size for the
        # last fold. When k does not divide n the middle folds read n mod k
        # columns more than training_subset_size, so no column is left out
        # of both their training and validation sets.
        return self.n_samples - self.validation_size(i)

    def _check_fold(self, i: int) -> None:
        if not 0 <= i < self.k:
            raise IndexError(f"fold index {i} out of range for k={self.k}")
