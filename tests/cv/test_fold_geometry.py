from __future__ import annotations

import pytest

from kfold_cv.cv.geometry import FoldGeometry
from kfold_cv.utils.errors import InvalidConfigurationError


def test_geometry_n10_k5():
    g = FoldGeometry.compute(5, 10)

    assert g.bin_size == 2
    assert g.training_subset_size == 8
    assert g.last_bin_size == 2
    assert g.augmentation_size == 6
    assert g.augmented_length == 16


def test_geometry_remainder_goes_to_fold_zero():
    g = FoldGeometry.compute(5, 13)

    assert g.bin_size == 2
    assert g.training_subset_size == 8
    assert g.last_bin_size == 5

    assert g.validation_size(0) == 5
    assert [g.validation_size(i) for i in range(1, 5)] == [2, 2, 2, 2]


def test_k_less_than_two_is_rejected():
    with pytest.raises(InvalidConfigurationError):
        FoldGeometry.compute(1, 10)

    with pytest.raises(InvalidConfigurationError):
        FoldGeometry.compute(0, 10)


def test_k_larger_than_n_is_rejected():
    with pytest.raises(InvalidConfigurationError):
        FoldGeometry.compute(6, 5)


def test_k_equal_n_is_leave_one_out():
    g = FoldGeometry.compute(4, 4)

    assert g.bin_size == 1
    assert [g.validation_size(i) for i in range(4)] == [1, 1, 1, 1]
    assert [g.training_size(i) for i in range(4)] == [3, 3, 3, 3]


def test_k_two_needs_no_augmentation():
    g = FoldGeometry.compute(2, 9)

    assert g.augmentation_size == 0
    assert g.augmented_length == 9
    assert (g.validation_start(0), g.validation_size(0)) == (4, 5)
    assert (g.validation_start(1), g.validation_size(1)) == (0, 4)
    assert (g.training_start(0), g.training_size(0)) == (0, 4)
    assert (g.training_start(1), g.training_size(1)) == (4, 5)


@pytest.mark.parametrize("n", [2, 3, 7, 10, 11, 17, 32])
def test_fold_size_invariants(n):
    for k in range(2, n + 1):
        g = FoldGeometry.compute(k, n)

        assert g.last_bin_size >= g.bin_size
        assert sum(g.validation_size(i) for i in range(k)) == n

        last = k - 1
        assert g.training_size(last) == g.last_bin_size + (k - 2) * g.bin_size
        assert g.training_size(0) == g.training_subset_size

        for i in range(k):
            # every training span fits in the augmented buffer
            assert g.training_start(i) + g.training_size(i) <= g.augmented_length


def test_fold_index_out_of_range():
    g = FoldGeometry.compute(3, 9)

    with pytest.raises(IndexError):
        g.validation_start(3)

    with pytest.raises(IndexError):
        g.training_size(-1)
