"""Configuration management"""

from .app_config import AppConfig
from .config_loader import ConfigError, ConfigLoader

__all__ = ["AppConfig", "ConfigError", "ConfigLoader"]
