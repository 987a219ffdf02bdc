"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from statly.config import (
    Config,
    ConfigError,
    LoggingConfig,
    default_config_paths,
    load_config,
)


class TestDefaultConfig:
    """Test default configuration values."""

    def test_default_editor(self):
        config = Config()
        assert config.editor.encoding == "utf-8"

    def test_default_widget_enabled(self):
        assert Config().widget.enabled is True

    def test_default_logging(self):
        config = Config()
        assert config.logging.level == "INFO"
        assert config.logging.level_number == 20
        assert config.log_path is None

    def test_log_path_expands_user(self):
        config = Config(logging=LoggingConfig(log_path="~/.statly/statly.log"))
        assert "~" not in str(config.log_path)

    def test_search_paths(self):
        paths = default_config_paths()
        assert paths[0] == Path.cwd() / "statly.toml"
        assert paths[1] == Path.home() / ".statly" / "statly.toml"


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.toml")
        assert config == Config()

    def test_full_file(self, tmp_path: Path):
        path = tmp_path / "statly.toml"
        path.write_text(
            '[editor]\nencoding = "latin-1"\n\n'
            "[widget]\nenabled = false\n\n"
            '[logging]\nlevel = "debug"\nlog_path = "/tmp/statly.log"\n'
        )
        config = load_config(path)
        assert config.editor.encoding == "latin-1"
        assert config.widget.enabled is False
        assert config.logging.level == "DEBUG"
        assert config.log_path == Path("/tmp/statly.log")

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        path = tmp_path / "statly.toml"
        path.write_text("[widget]\nenabled = true\n")
        config = load_config(path)
        assert config.editor.encoding == "utf-8"
        assert config.logging.level == "INFO"

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "statly.toml"
        path.write_text("[editor\nencoding = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_unknown_encoding(self, tmp_path: Path):
        path = tmp_path / "statly.toml"
        path.write_text('[editor]\nencoding = "no-such-codec"\n')
        with pytest.raises(ConfigError, match="encoding"):
            load_config(path)

    def test_unknown_log_level(self, tmp_path: Path):
        path = tmp_path / "statly.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n')
        with pytest.raises(ConfigError, match="log level"):
            load_config(path)

    def test_searches_current_directory(self, tmp_path: Path, monkeypatch):
        (tmp_path / "statly.toml").write_text("[widget]\nenabled = false\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().widget.enabled is False
