# kfold_cv/training/registry.py
from typing import Any, Callable, Dict, Tuple

from sklearn.ensemble import RandomForestClassifier, RandomForestRegressor
from sklearn.linear_model import (
    LinearRegression,
    LogisticRegression,
    Ridge,
    SGDClassifier,
    SGDRegressor,
)
from sklearn.neighbors import KNeighborsClassifier, KNeighborsRegressor

from kfold_cv.training.metrics import (
    Accuracy,
    MeanSquaredError,
    PredictionMetric,
    R2,
    RankIC,
)
from kfold_cv.utils.errors import UserInputError

_ESTIMATOR_REGISTRY: Dict[Tuple[str, str], Callable[..., Any]] = {
    ("linear", "regression"): LinearRegression,
    ("ridge", "regression"): Ridge,
    ("sgd", "regression"): SGDRegressor,
    ("random_forest", "regression"): RandomForestRegressor,
    ("knn", "regression"): KNeighborsRegressor,
    ("logistic", "classification"): LogisticRegression,
    ("sgd", "classification"): SGDClassifier,
    ("random_forest", "classification"): RandomForestClassifier,
    ("knn", "classification"): KNeighborsClassifier,
}

_METRIC_REGISTRY: Dict[str, Callable[[], PredictionMetric]] = {
    "accuracy": Accuracy,
    "mse": MeanSquaredError,
    "r2": R2,
    "rank_ic": RankIC,
}


def resolve_estimator(family: str, task_type: str, params: Dict[str, Any] | None = None):
    key = (family, task_type)

    if key not in _ESTIMATOR_REGISTRY:
        available = ", ".join(str(k) for k in _ESTIMATOR_REGISTRY)
        raise UserInputError(f"No estimator for {key}. Available: {available}")

    return _ESTIMATOR_REGISTRY[key](**(params or {}))


def resolve_metric(name: str) -> PredictionMetric:
    if name not in _METRIC_REGISTRY:
        available = ", ".join(_METRIC_REGISTRY)
        raise UserInputError(f"No metric named {name!r}. Available: {available}")

    return _METRIC_REGISTRY[name]()
