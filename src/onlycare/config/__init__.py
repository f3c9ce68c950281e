"""
Configuration management with typed Pydantic models.

Provides YAML configuration loading with environment interpolation.
"""

from onlycare.config.loader import default_config, load_config
from onlycare.config.settings import (
    AppConfig,
    ExportConfig,
    ExportFormat,
    LoggingConfig,
    NormalizationConfig,
)

__all__ = [
    "AppConfig",
    "ExportConfig",
    "ExportFormat",
    "LoggingConfig",
    "NormalizationConfig",
    "default_config",
    "load_config",
]
