# kfold_cv/config/cv_config.py
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class CVConfig(BaseModel):
    """
    CVConfig（FINAL）

    k is validated by the engine, not here, so a bad k surfaces as
    InvalidConfigurationError at construction time.
    """

    k: int = 5
    metric: str = "mse"
    instrumentation: bool = True


class DataConfig(BaseModel):
    path: str
    label_column: str
    feature_columns: Optional[List[str]] = None
    weight_column: Optional[str] = None
    drop_na: bool = True


class ModelConfig(BaseModel):
    family: str = "ridge"
    task_type: Literal["regression", "classification"] = "regression"
    params: Dict[str, Any] = Field(default_factory=dict)
    num_classes: Optional[int] = None
    categorical_columns: List[str] = Field(default_factory=list)
