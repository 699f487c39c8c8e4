"""
Command line interface for the cozy application scripts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from . import __version__
from .build import open_compiler, run_build
from .config import BuildConfig, ConfigError, get_settings, load_answer_overrides, load_build_config
from .scaffold import ScaffoldAssets, ScaffoldReport, initialize_app
from .util import console

app = typer.Typer(help="Create and build cozy applications.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
DEFAULT_BUILD_CONFIG = Path("cozy.build.toml")


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_existing_file(value: Optional[Path]) -> Optional[Path]:
    """Ensure an optional file path exists and return it absolute."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Path must be a file, got directory: {resolved}")
    return resolved


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show cozy-scripts version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]cozy-scripts[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]cozy-scripts[/] is ready. Run [cyan]cozy-scripts init path/to/my-app[/] "
            "to create an application.",
        )


@app.command()
def init(
    app_path: Path = typer.Argument(
        ...,
        help="Directory the application is created in.",
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Application name (defaults to the directory name).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print the received answers.",
    ),
    answers: Optional[Path] = typer.Option(
        None,
        "--answers",
        "-a",
        help="TOML/JSON file of answers, to skip the questions.",
        callback=_resolve_existing_file,
    ),
    templates: Optional[Path] = typer.Option(
        None,
        "--templates",
        help="Alternative template directory (must contain an 'app' folder).",
    ),
) -> None:
    """
    Ask for the application metadata and create a vanilla cozy application.
    """
    target = app_path.expanduser().resolve()
    app_name = name or target.name

    overrides = None
    if answers is not None:
        try:
            overrides = load_answer_overrides(answers).answers
        except ConfigError as exc:
            console.print(f"[bold red]Answers file error:[/] {exc}")
            raise typer.Exit(code=1) from exc

    def _fatal(error: BaseException) -> None:
        raise typer.Exit(code=1) from error

    logger.info("Initializing %s in %s", app_name, target)
    report = initialize_app(
        target,
        app_name,
        verbose,
        _fatal,
        answer_source=overrides,
        assets=ScaffoldAssets.resolve(templates),
        console=console,
    )
    if report is not None and verbose:
        _print_scaffold_report(report)


@app.command()
def build(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Build configuration TOML (defaults to ./{DEFAULT_BUILD_CONFIG} when present).",
        callback=_resolve_existing_file,
    ),
    webpack: Optional[str] = typer.Option(
        None,
        "--webpack",
        help="Bundler command (overrides COZY_WEBPACK_BIN).",
    ),
) -> None:
    """
    Build the application once with the bundler.
    """
    if config is None and DEFAULT_BUILD_CONFIG.exists():
        config = DEFAULT_BUILD_CONFIG.resolve()

    try:
        build_config = load_build_config(config) if config else BuildConfig()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc

    with open_compiler(build_config, executable=webpack) as compiler:
        stats = run_build(compiler, console=console)
    if stats is None:
        raise typer.Exit(code=1)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
