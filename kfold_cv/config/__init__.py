from .app_config import AppConfig
from .log_config import LogConfig
from .cv_config import CVConfig, DataConfig, ModelConfig

__all__ = ["AppConfig", "LogConfig", "CVConfig", "DataConfig", "ModelConfig"]
