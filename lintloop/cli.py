"""Command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from textual.logging import TextualHandler

from lintloop import __version__
from lintloop.constants.values import APP_DESCRIPTION
from lintloop.errors import CatalogError
from lintloop.models.state.app_settings import ConfigError, FixerSettings
from lintloop.models.state.config_manager import ConfigManager
from lintloop.pipeline.catalog import discover

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help=APP_DESCRIPTION)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[Path], verbose: bool) -> None:
    """Route log records to a file, or to Textual devtools by default."""
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        handler = TextualHandler()
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_settings(config: Optional[Path], overrides: dict[str, Any]) -> FixerSettings:
    """Load the settings file, then apply flags the user passed."""
    return ConfigManager.load(config).with_overrides(overrides)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lintloop {__version__}")
        raise typer.Exit(code=0)


@app.command()
def run(
    root_dir: Optional[Path] = typer.Option(None, "--dir", help="Root directory to scan. [default: .]"),
    max_retries: Optional[int] = typer.Option(None, "--max-retries", help="Attempts per file. [default: 5]"),
    lint_command: Optional[str] = typer.Option(
        None,
        "--lint-cmd",
        help="Lint command; {{filepath}} is replaced with the file path. [default: golangci-lint run {{filepath}}]",
    ),
    ollama_url: Optional[str] = typer.Option(None, "--ollama-url", help="Patch service base URL."),
    model: Optional[str] = typer.Option(None, "--model", help="Model name sent to the patch service."),
    file_extension: Optional[str] = typer.Option(None, "--ext", help="File extension to collect. [default: .go]"),
    code_language: Optional[str] = typer.Option(None, "--language", help="Fence tag of returned code. [default: go]"),
    stream: Optional[bool] = typer.Option(None, "--stream/--no-stream", help="Request a streamed response."),
    deadline: Optional[float] = typer.Option(None, "--deadline", help="Per-file deadline in seconds. [default: 300]"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings file. [default: .lintloop.yaml if present]"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to this file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Fix every matching file under --dir until its lint passes or attempts run out."""
    configure_logging(log_file, verbose)

    overrides: dict[str, Any] = {
        "root_dir": str(root_dir) if root_dir is not None else None,
        "max_retries": max_retries,
        "lint_command": lint_command,
        "ollama_url": ollama_url,
        "model": model,
        "file_extension": file_extension,
        "code_language": code_language,
        "stream": stream,
        "worker_deadline_seconds": deadline,
    }
    try:
        settings = build_settings(config, overrides)
    except (ConfigError, ValueError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    try:
        records = discover(settings.root_dir, settings.file_extension)
    except CatalogError as exc:
        logger.error("File discovery failed: %s", exc)
        typer.secho(f"Error collecting files: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    from lintloop.app import LintLoopApp

    LintLoopApp(settings, records).run()


def main() -> None:
    app()


__all__ = [
    "app",
    "build_settings",
    "configure_logging",
    "main",
]
