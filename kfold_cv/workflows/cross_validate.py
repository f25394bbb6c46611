# kfold_cv/workflows/cross_validate.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple
from uuid import uuid4

import numpy as np
import pandas as pd

from kfold_cv import logs
from kfold_cv.config.app_config import AppConfig
from kfold_cv.config.cv_config import DataConfig, ModelConfig
from kfold_cv.cv.k_fold_cv import KFoldCV
from kfold_cv.observability.instrumentation import Instrumentation
from kfold_cv.training.registry import resolve_estimator, resolve_metric
from kfold_cv.training.result import CVResult
from kfold_cv.training.sklearn_family import DatasetInfo
from kfold_cv.utils.errors import UserInputError


def load_frame(cfg: DataConfig) -> pd.DataFrame:
    path = Path(cfg.path)
    if not path.exists():
        raise UserInputError(f"Dataset not found: {path}")

    df = pd.read_csv(path)

    required = [cfg.label_column] + ([cfg.weight_column] if cfg.weight_column else [])
    missing = [c for c in required + list(cfg.feature_columns or []) if c not in df.columns]
    if missing:
        raise UserInputError(f"Columns missing from {path.name}: {missing}")

    if cfg.drop_na:
        before = len(df)
        df = df.dropna().reset_index(drop=True)
        if len(df) < before:
            logs.info(f"[Data] dropped {before - len(df)} rows with NaN")

    return df


def build_buffers(
    df: pd.DataFrame,
    data_cfg: DataConfig,
    model_cfg: ModelConfig,
) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray], Optional[DatasetInfo]]:
    """
    DataFrame (samples × columns) → dims × samples feature buffer,
    label row, optional weight row, optional DatasetInfo.

    Row order of the CSV is kept: it decides fold membership.
    """
    excluded = {data_cfg.label_column, data_cfg.weight_column}
    feature_columns = data_cfg.feature_columns or [
        c for c in df.columns if c not in excluded
    ]

    unknown = [c for c in model_cfg.categorical_columns if c not in feature_columns]
    if unknown:
        raise UserInputError(f"Categorical columns are not features: {unknown}")

    features = df[feature_columns].copy()
    for col in model_cfg.categorical_columns:
        features[col] = features[col].astype("category").cat.codes

    xs = features.to_numpy(dtype=float).T

    labels = df[data_cfg.label_column]
    if model_cfg.task_type == "classification" and not pd.api.types.is_numeric_dtype(labels):
        codes, _ = pd.factorize(labels, sort=True)
        ys = codes
    else:
        ys = labels.to_numpy()

    weights = (
        df[data_cfg.weight_column].to_numpy(dtype=float)
        if data_cfg.weight_column
        else None
    )

    info = None
    if model_cfg.categorical_columns:
        info = DatasetInfo(
            dimensionality=len(feature_columns),
            categorical_dims=tuple(
                feature_columns.index(c) for c in model_cfg.categorical_columns
            ),
        )

    return xs, ys, weights, info


@logs.catch(msg="cross validation failed", log_time=True)
def run_cross_validation(
    cfg: AppConfig,
    *,
    inst: Instrumentation | None = None,
    run_id: str | None = None,
) -> CVResult:
    run_id = run_id or uuid4().hex[:8]
    inst = inst if inst is not None else Instrumentation(enabled=cfg.cv.instrumentation)

    logs.info(f"[CrossValidate] START run_id={run_id} data={cfg.data.path}")

    df = load_frame(cfg.data)
    xs, ys, weights, info = build_buffers(df, cfg.data, cfg.model)

    estimator = resolve_estimator(cfg.model.family, cfg.model.task_type, cfg.model.params)
    metric = resolve_metric(cfg.cv.metric)

    cv = KFoldCV.from_estimator(
        estimator,
        metric,
        cfg.cv.k,
        xs,
        ys,
        num_classes=cfg.model.num_classes,
        dataset_info=info,
        weights=weights,
        inst=inst,
    )
    mean_score = cv.evaluate()

    inst.generate_timeline_report(run_id)
    logs.info(f"[CrossValidate] DONE run_id={run_id} mean={mean_score:.6f}")

    return CVResult(
        model=cv.model,
        mean_score=mean_score,
        fold_scores=tuple(float(s) for s in cv.fold_scores),
        k=cv.k,
    )
