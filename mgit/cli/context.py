from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from mgit.core.config import Config, load_config_or_default
from mgit.core.errors import ErrorCode
from mgit.core.result import Err
from mgit.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    config_result = load_config_or_default(config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(config=config_result.value, console=RichConsole())
