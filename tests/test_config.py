"""Tests for configuration system."""

from pathlib import Path

import pytest

from onlycare.config import (
    AppConfig,
    ExportConfig,
    ExportFormat,
    LoggingConfig,
    default_config,
    load_config,
)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_level_normalized(self) -> None:
        """Levels are stored upper-case."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Unknown levels are rejected."""
        with pytest.raises(ValueError, match="Log level must be one of"):
            LoggingConfig(level="chatty")


class TestExportConfig:
    """Tests for ExportConfig."""

    def test_path_for(self) -> None:
        """Default paths combine root, name and format."""
        config = ExportConfig(output_root=Path("out"), format=ExportFormat.JSON)
        assert config.path_for("transactions") == Path("out/transactions.json")

    def test_resolve_path_without_output(self) -> None:
        """No explicit output falls back to the configured root."""
        config = ExportConfig(output_root=Path("out"), format=ExportFormat.JSON)
        assert config.resolve_path("user") == Path("out/user.json")

    def test_resolve_path_file(self, tmp_path: Path) -> None:
        """An output with a suffix is used unchanged."""
        config = ExportConfig(format=ExportFormat.JSON)
        target = tmp_path / "users.csv"
        assert config.resolve_path("user", target) == target

    def test_resolve_path_directory(self, tmp_path: Path) -> None:
        """Directories and suffix-less paths get the configured file name."""
        config = ExportConfig(format=ExportFormat.JSON)
        assert config.resolve_path("user", tmp_path) == tmp_path / "user.json"
        assert config.resolve_path("user", tmp_path / "new") == tmp_path / "new" / "user.json"


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_defaults_without_file(self) -> None:
        """No file means default configuration."""
        config = load_config()
        assert config == default_config()
        assert config.logging.level == "INFO"
        assert config.normalization.strict_records is False
        assert config.export.format is ExportFormat.CSV

    def test_load_full_config(self, tmp_path: Path) -> None:
        """All sections are read."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            """
logging:
  level: debug
  json: true
normalization:
  strict_records: true
export:
  root: exports
  format: json
""",
            encoding="utf-8",
        )
        config = load_config(config_path)
        assert isinstance(config, AppConfig)
        assert config.logging.level == "DEBUG"
        assert config.logging.json_output is True
        assert config.normalization.strict_records is True
        assert config.export.output_root == Path("exports")
        assert config.export.format is ExportFormat.JSON

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file yields defaults."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("", encoding="utf-8")
        assert load_config(config_path) == default_config()

    def test_env_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """${VAR} and ${VAR:default} are substituted."""
        monkeypatch.setenv("ONLYCARE_LOG_LEVEL", "warning")
        monkeypatch.delenv("ONLYCARE_STRICT", raising=False)
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            """
logging:
  level: ${ONLYCARE_LOG_LEVEL}
normalization:
  strict_records: ${ONLYCARE_STRICT:true}
""",
            encoding="utf-8",
        )
        config = load_config(config_path)
        assert config.logging.level == "WARNING"
        assert config.normalization.strict_records is True

    def test_base_config_inheritance(self, tmp_path: Path) -> None:
        """The main file overrides the base file key by key."""
        base = tmp_path / "base.yaml"
        base.write_text(
            "logging:\n  level: ERROR\n  json: true\nexport:\n  root: base-out\n",
            encoding="utf-8",
        )
        main = tmp_path / "main.yaml"
        main.write_text("logging:\n  level: INFO\n", encoding="utf-8")
        config = load_config(main, base_path=base)
        assert config.logging.level == "INFO"
        assert config.logging.json_output is True
        assert config.export.output_root == Path("base-out")

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing config file is an error."""
        with pytest.raises(FileNotFoundError, match="Config not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_format(self, tmp_path: Path) -> None:
        """Unknown export formats are rejected."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("export:\n  format: xlsx\n", encoding="utf-8")
        with pytest.raises(ValueError, match="export.format must be one of"):
            load_config(config_path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """A YAML list at the root is rejected."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Config root must be a mapping"):
            load_config(config_path)

    def test_config_is_frozen(self) -> None:
        """Loaded configs are immutable."""
        config = default_config()
        with pytest.raises(ValueError):
            config.logging.level = "DEBUG"  # type: ignore[misc]
