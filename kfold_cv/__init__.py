#!filepath: kfold_cv/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import (
    CrossValidationError,
    InvalidConfigurationError,
    DimensionMismatchError,
    UninitializedModelError,
)
from .config.app_config import AppConfig
from .cv.k_fold_cv import KFoldCV
from .cv.dataset import CVDataset

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "KFoldCV", "CVDataset",
    "CrossValidationError",
    "InvalidConfigurationError",
    "DimensionMismatchError",
    "UninitializedModelError",
]
