"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
Every section is optional; an empty file yields the defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from onlycare.config.settings import (
    AppConfig,
    ExportConfig,
    ExportFormat,
    LoggingConfig,
    NormalizationConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _as_bool(value: Any) -> bool:
    """Read a YAML flag that may have become a string through interpolation."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config root must be a mapping, got {type(data).__name__} in {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def default_config() -> AppConfig:
    """Configuration with every option at its default."""
    return AppConfig()


def load_config(
    config_path: Path | None = None,
    base_path: Path | None = None,
) -> AppConfig:
    """
    Load application configuration from YAML file(s).

    Recognized sections: ``logging`` (level, json), ``normalization``
    (strict_records) and ``export`` (root, format).

    Args:
        config_path: Path to the main configuration file. None returns defaults.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated AppConfig instance.

    Raises:
        FileNotFoundError: If a given config file does not exist.
        ValueError: If a value is invalid.
    """
    if config_path is None and base_path is None:
        return default_config()

    base_data: dict[str, Any] = {}
    if base_path is not None:
        if not base_path.exists():
            msg = f"Base config not found: {base_path}"
            raise FileNotFoundError(msg)
        base_data = load_yaml(base_path)

    main_data: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            msg = f"Config not found: {config_path}"
            raise FileNotFoundError(msg)
        main_data = load_yaml(config_path)

    merged = _deep_merge(base_data, main_data)

    logging_data = merged.get("logging") or {}
    logging_config = LoggingConfig(
        level=str(logging_data.get("level", "INFO")),
        json_output=_as_bool(logging_data.get("json", False)),
    )

    normalization_data = merged.get("normalization") or {}
    normalization_config = NormalizationConfig(
        strict_records=_as_bool(normalization_data.get("strict_records", False)),
    )

    export_data = merged.get("export") or {}
    export_format = str(export_data.get("format", "csv")).lower()
    try:
        fmt = ExportFormat(export_format)
    except ValueError:
        allowed = ", ".join(f.value for f in ExportFormat)
        msg = f"export.format must be one of {allowed}, got: {export_format!r}"
        raise ValueError(msg) from None
    export_config = ExportConfig(
        output_root=Path(export_data.get("root", "./output")),
        format=fmt,
    )

    return AppConfig(
        logging=logging_config,
        normalization=normalization_config,
        export=export_config,
    )
