import numpy as np
import pytest

from kfold_cv.cv.dataset import CVDataset
from kfold_cv.utils.errors import DimensionMismatchError


def test_dataset_counts_samples_on_last_axis():
    ds = CVDataset(np.zeros((3, 8)), np.zeros(8))

    assert ds.n_samples == 8
    assert not ds.has_weights


def test_dataset_accepts_lists():
    ds = CVDataset([1.0, 2.0, 3.0], [0, 1, 0], [1.0, 1.0, 2.0])

    assert isinstance(ds.features, np.ndarray)
    assert ds.has_weights


def test_empty_weights_mean_no_weights():
    ds = CVDataset(np.zeros((2, 4)), np.zeros(4), np.array([]))

    assert ds.weights is None


def test_label_count_mismatch():
    with pytest.raises(DimensionMismatchError):
        CVDataset(np.zeros((2, 5)), np.zeros(4))


def test_weight_count_mismatch():
    with pytest.raises(DimensionMismatchError):
        CVDataset(np.zeros((2, 5)), np.zeros(5), np.ones(6))


def test_weights_must_be_one_per_sample():
    with pytest.raises(DimensionMismatchError):
        CVDataset(np.zeros((2, 5)), np.zeros(5), np.ones((2, 5)))


def test_features_must_be_at_most_2d():
    with pytest.raises(DimensionMismatchError):
        CVDataset(np.zeros((2, 2, 5)), np.zeros(5))
