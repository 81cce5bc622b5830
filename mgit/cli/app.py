from __future__ import annotations

import typer

from mgit.cli.commands.run import run

# A single command: `mgit <command> [dir ...]`, no subcommand group.
app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(no_args_is_help=True)(run)


def main() -> None:
    app()
