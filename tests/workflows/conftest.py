# tests/workflows/conftest.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from kfold_cv.config import AppConfig


@pytest.fixture
def regression_csv(tmp_path: Path) -> Path:
    rng = np.random.default_rng(7)
    n = 60
    df = pd.DataFrame(
        {
            "x1": rng.normal(size=n),
            "x2": rng.normal(size=n),
            "w": rng.uniform(0.5, 1.5, size=n),
        }
    )
    df["target"] = 2.0 * df["x1"] - 0.5 * df["x2"] + 0.05 * rng.normal(size=n)

    path = tmp_path / "regression.csv"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def classification_csv(tmp_path: Path) -> Path:
    n = 48
    colors = np.array(["red", "green", "blue"])[np.arange(n) % 3]
    df = pd.DataFrame(
        {
            "size": np.linspace(0.0, 1.0, n),
            "color": colors,
            "label": np.where(colors == "green", "yes", "no"),
        }
    )

    path = tmp_path / "classification.csv"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def make_config(tmp_path: Path):
    def _make(**sections) -> AppConfig:
        raw = {
            "log": {"dir": str(tmp_path / "logs")},
            "cv": {"k": 5, "metric": "mse"},
            "data": {"path": "", "label_column": "target"},
            "model": {"family": "ridge", "params": {"alpha": 0.1}},
        }
        for name, values in sections.items():
            raw[name].update(values)
        return AppConfig(**raw)

    return _make
