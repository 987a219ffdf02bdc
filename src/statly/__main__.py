"""CLI entry point for Statly."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from statly import __version__
from statly.config import Config, ConfigError, load_config
from statly.editor import EditorManager
from statly.exceptions import EditorError

logger = logging.getLogger("statly")


def _configure_logging(config: Config) -> None:
    """Route the ``statly`` logger to the configured log file, if any.

    Without a log file the logger gets a ``NullHandler`` so records never
    fall through to stderr underneath the TUI.
    """
    logger.setLevel(config.logging.level_number)
    log_path = config.log_path
    if log_path is None:
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
    ))
    logger.addHandler(handler)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="statly")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to statly.toml configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Statly: character, line and size stats for the file you are editing.

    When invoked without a subcommand, launches the editor TUI with no
    files open.
    """
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    _configure_logging(config)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        _launch_tui(config, [])


@cli.command(name="open")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.pass_context
def open_files(ctx: click.Context, files: tuple[Path, ...]) -> None:
    """Open FILES in the editor TUI."""
    _launch_tui(ctx.obj["config"], list(files))


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_context
def stats(ctx: click.Context, files: tuple[Path, ...]) -> None:
    """Print the status line for each of FILES and exit."""
    from statly.tui.widgets import FileStatsWidgetFactory

    config: Config = ctx.obj["config"]
    editor = EditorManager(encoding=config.editor.encoding)
    widget = FileStatsWidgetFactory().create_widget(editor)
    widget.install(None)
    failed = False
    try:
        for path in files:
            try:
                editor.open(path)
            except EditorError as e:
                click.echo(f"Error: {e}", err=True)
                failed = True
                continue
            click.echo(f"{path}: {widget.get_text()}")
    finally:
        widget.dispose()
    if failed:
        sys.exit(1)


def _launch_tui(config: Config, files: list[Path]) -> None:
    """Open *files* and run the Statly TUI."""
    from statly.tui.app import StatlyApp

    editor = EditorManager(encoding=config.editor.encoding)
    for path in files:
        try:
            editor.open(path)
        except EditorError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    if files:
        editor.open(files[0])

    app = StatlyApp(editor, config=config)
    app.run()


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
