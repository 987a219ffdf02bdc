"""Tests for CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from click.testing import CliRunner

from statly.__main__ import cli


class TestCLI:
    """Test CLI commands."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Statly" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_stats_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "--help"])
        assert result.exit_code == 0
        assert "FILES" in result.output

    def test_stats_text_file(self, text_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", str(text_file)])
        assert result.exit_code == 0
        assert result.output.strip() == f"{text_file}: 500:11 / 500 B"

    def test_stats_several_files(self, text_file: Path, binary_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", str(text_file), str(binary_file)])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == [
            f"{text_file}: 500:11 / 500 B",
            f"{binary_file}: 0:0 / 2.0 KB",
        ]

    def test_stats_missing_file(self, tmp_path: Path, text_file: Path):
        runner = CliRunner()
        missing = tmp_path / "missing.txt"
        result = runner.invoke(cli, ["stats", str(missing), str(text_file)])
        assert result.exit_code == 1
        assert "No such file" in result.output
        assert "500:11 / 500 B" in result.output

    def test_stats_requires_files(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["stats"])
        assert result.exit_code != 0

    def test_stats_uses_configured_encoding(self, tmp_path: Path, binary_file: Path):
        config_path = tmp_path / "statly.toml"
        config_path.write_text('[editor]\nencoding = "latin-1"\n')
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--config", str(config_path), "stats", str(binary_file)],
        )
        assert result.exit_code == 0
        assert "2048:1 / 2.0 KB" in result.output

    def test_bad_config(self, tmp_path: Path):
        config_path = tmp_path / "statly.toml"
        config_path.write_text("[editor\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config_path), "stats", "x"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_log_file_configured(self, tmp_path: Path, text_file: Path):
        log_path = tmp_path / "logs" / "statly.log"
        config_path = tmp_path / "statly.toml"
        config_path.write_text(f'[logging]\nlevel = "DEBUG"\nlog_path = "{log_path}"\n')
        runner = CliRunner()
        try:
            result = runner.invoke(
                cli, ["--config", str(config_path), "stats", str(text_file)],
            )
            assert result.exit_code == 0
            for handler in logging.getLogger("statly").handlers:
                handler.flush()
            assert "Opened" in log_path.read_text(encoding="utf-8")
        finally:
            statly_logger = logging.getLogger("statly")
            for handler in list(statly_logger.handlers):
                statly_logger.removeHandler(handler)
                handler.close()
            statly_logger.setLevel(logging.NOTSET)

    def test_no_log_file_gets_null_handler(self, text_file: Path):
        statly_logger = logging.getLogger("statly")
        runner = CliRunner()
        try:
            runner.invoke(cli, ["stats", str(text_file)])
            runner.invoke(cli, ["stats", str(text_file)])
            null_handlers = [
                h for h in statly_logger.handlers if isinstance(h, logging.NullHandler)
            ]
            assert len(null_handlers) == 1
        finally:
            for handler in list(statly_logger.handlers):
                statly_logger.removeHandler(handler)
            statly_logger.setLevel(logging.NOTSET)

    def test_open_launches_tui(self, monkeypatch, text_file: Path):
        from statly.tui.app import StatlyApp

        launched = []
        monkeypatch.setattr(StatlyApp, "run", lambda self: launched.append(self))
        runner = CliRunner()
        result = runner.invoke(cli, ["open", str(text_file)])
        assert result.exit_code == 0
        assert len(launched) == 1
        assert launched[0]._editor.selected_file.path == text_file.resolve()

    def test_open_missing_file(self, monkeypatch, tmp_path: Path):
        from statly.tui.app import StatlyApp

        monkeypatch.setattr(StatlyApp, "run", lambda self: None)
        runner = CliRunner()
        result = runner.invoke(cli, ["open", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "No such file" in result.output

    def test_no_subcommand_launches_empty_tui(self, monkeypatch):
        from statly.tui.app import StatlyApp

        launched = []
        monkeypatch.setattr(StatlyApp, "run", lambda self: launched.append(self))
        runner = CliRunner()
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert launched[0]._editor.open_files == []
