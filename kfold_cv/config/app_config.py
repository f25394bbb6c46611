#!filepath: kfold_cv/config/app_config.py
import os

import yaml
from pydantic import BaseModel
from dotenv import load_dotenv

from .log_config import LogConfig
from .cv_config import CVConfig, DataConfig, ModelConfig


def project_root() -> str:
    """
    kfold_cv/config/app_config.py → kfold_cv/config → kfold_cv → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    cv: CVConfig
    data: DataConfig
    model: ModelConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env

        - default: kfold_cv/config/base.yml
        - does not depend on the current working directory
        - KFOLD_CV_K / KFOLD_CV_LOG_LEVEL override the file
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        k = os.getenv("KFOLD_CV_K")
        if k:
            raw.setdefault("cv", {})["k"] = int(k)

        level = os.getenv("KFOLD_CV_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        return cls(**raw)
