"""
Typed configuration models using Pydantic.

All runtime options are defined here with explicit typing and validation.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExportFormat(str, Enum):
    """File format for exported entity tables."""

    CSV = "csv"
    JSON = "json"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Minimum log level")
    json_output: bool = Field(
        default=False, description="Emit JSON log lines instead of console output"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a known logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class NormalizationConfig(BaseModel):
    """Batch normalization behaviour."""

    model_config = ConfigDict(frozen=True)

    strict_records: bool = Field(
        default=False,
        description="Fail on the first undecodable record instead of skipping it",
    )


class ExportConfig(BaseModel):
    """Export output configuration."""

    model_config = ConfigDict(frozen=True)

    output_root: Path = Field(
        default=Path("./output"), description="Root directory for exported tables"
    )
    format: ExportFormat = Field(default=ExportFormat.CSV)

    def path_for(self, name: str) -> Path:
        """Default export path for a table name."""
        return self.output_root / f"{name}.{self.format.value}"

    def resolve_path(self, name: str, output: Path | None = None) -> Path:
        """
        Export path for a table name, honouring an explicit ``output``.

        An ``output`` with a file suffix is used as-is. An existing
        directory or a suffix-less path is the directory the table is
        written into, using the configured format. Without ``output`` the
        table goes under ``output_root``.
        """
        if output is None:
            return self.path_for(name)
        if output.suffix and not output.is_dir():
            return output
        return output / f"{name}.{self.format.value}"


class AppConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
