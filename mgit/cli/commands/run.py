"""Run command - apply git commands to a list of directories."""

from __future__ import annotations

from pathlib import Path

import typer

from mgit import __version__
from mgit.cli.context import build_context
from mgit.core.errors import ErrorCode
from mgit.git.multi import MultiRepoOperator
from mgit.git.repository import discover_working_copy
from mgit.output.report import ConsoleReporter
from mgit.services.batch import BUILTIN_ALIASES, COMMANDS, BatchService, expand_commands

_COMMAND_HELP = (
    "One of: " + ", ".join((*COMMANDS, *BUILTIN_ALIASES)) + " (comma-separated to chain)."
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def run(
    command: str = typer.Argument(..., help=_COMMAND_HELP),
    directories: list[str] | None = typer.Argument(
        None,
        help="Working copies to operate on (default: the one containing the current directory).",
        show_default=False,
    ),
    commit_msg: str | None = typer.Option(
        None,
        "-m",
        "--commit_msg",
        "--commit-msg",
        help="Commit message. [default: Automatic commit]",
        show_default=False,
    ),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Exit non-zero when a git command fails.",
        show_default=False,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: $MGIT_CONFIG or ~/.config/mgit/config.toml).",
        show_default=False,
    ),
    version: bool = typer.Option(  # pyright: ignore[reportUnusedParameter]
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Run git commands across several working copies."""
    ctx = build_context(config)
    cfg = ctx.config

    targets = directories or list(cfg.directories)
    if not targets:
        targets = [str(discover_working_copy(Path(".")))]

    strict_mode = cfg.strict if strict is None else strict
    message = cfg.commit_message if commit_msg is None else commit_msg

    reporter = ConsoleReporter(ctx.console, status_width=cfg.status_width, strict=strict_mode)
    operator = MultiRepoOperator(targets, reporter=reporter)
    summary = BatchService(operator=operator, console=ctx.console).run(
        expand_commands([command], cfg.aliases),
        message,
    )

    if strict_mode and summary.failed:
        raise typer.Exit(code=int(ErrorCode.COMMAND_ERROR))
