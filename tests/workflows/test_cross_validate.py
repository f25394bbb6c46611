from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from kfold_cv.config.cv_config import DataConfig, ModelConfig
from kfold_cv.observability.instrumentation import Instrumentation
from kfold_cv.utils.errors import InvalidConfigurationError, UserInputError
from kfold_cv.workflows.cross_validate import build_buffers, run_cross_validation


def test_regression_run(regression_csv, make_config):
    cfg = make_config(data={"path": str(regression_csv), "feature_columns": ["x1", "x2"]})

    result = run_cross_validation(cfg, run_id="test")

    assert result.k == 5
    assert len(result.fold_scores) == 5
    assert result.mean_score == pytest.approx(np.mean(result.fold_scores))
    assert result.mean_score < 0.05
    assert result.model.coef_.shape == (2,)


def test_weighted_run_records_timeline(regression_csv, make_config):
    cfg = make_config(
        data={
            "path": str(regression_csv),
            "feature_columns": ["x1", "x2"],
            "weight_column": "w",
        },
        cv={"k": 3},
    )
    inst = Instrumentation(enabled=True)

    result = run_cross_validation(cfg, inst=inst)

    assert len(result.fold_scores) == 3
    assert "fold_2/train" in inst.timeline
    assert inst.metrics.metrics["mean_score"] == pytest.approx(result.mean_score)


def test_classification_with_categorical_column(classification_csv, make_config):
    cfg = make_config(
        cv={"k": 4, "metric": "accuracy"},
        data={"path": str(classification_csv), "label_column": "label"},
        model={
            "family": "logistic",
            "task_type": "classification",
            "params": {"C": 100.0},
            "num_classes": 2,
            "categorical_columns": ["color"],
        },
    )

    result = run_cross_validation(cfg)

    assert result.mean_score == pytest.approx(1.0)


def test_build_buffers_layout():
    df = pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0], "y": [0, 1, 0]})

    xs, ys, weights, info = build_buffers(
        df, DataConfig(path="x.csv", label_column="y"), ModelConfig()
    )

    assert xs.shape == (2, 3)
    assert xs[1].tolist() == [4.0, 5.0, 6.0]
    assert ys.tolist() == [0, 1, 0]
    assert weights is None
    assert info is None


def test_missing_dataset(make_config, tmp_path):
    cfg = make_config(data={"path": str(tmp_path / "missing.csv")})

    with pytest.raises(UserInputError):
        run_cross_validation(cfg)


def test_missing_column(regression_csv, make_config):
    cfg = make_config(data={"path": str(regression_csv), "label_column": "nope"})

    with pytest.raises(UserInputError):
        run_cross_validation(cfg)


def test_k_larger_than_dataset(regression_csv, make_config):
    cfg = make_config(data={"path": str(regression_csv)}, cv={"k": 1000})

    with pytest.raises(InvalidConfigurationError):
        run_cross_validation(cfg)
