"""Subprocess execution with Result-based error handling.

Commands are always argument vectors run without a shell, in the target
directory as the child's working directory. Paths and messages with
spaces or shell metacharacters therefore reach the program untouched.

Usage:
    result = execute(["git", "status"], cwd=Path("repo"))
    match result.outcome():
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mgit.core.result import Err, Ok, Result

__all__ = ["CommandResult", "ExternalCommandError", "execute"]


def _format_command(command: tuple[str, ...]) -> str:
    cmd_str = " ".join(command[:3])
    if len(command) > 3:
        cmd_str += " ..."
    return cmd_str


@dataclass(frozen=True, slots=True)
class ExternalCommandError:
    """A command that exited non-zero (or could not be started).

    Attributes:
        command: The command that was executed.
        returncode: Exit code, -1 if the process never started.
        stderr: Standard error (empty when attached to the terminal).
        stdout: Whatever standard output was captured before the failure.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str
    stdout: str = ""

    def __str__(self) -> str:
        return f"{_format_command(self.command)} failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Everything a finished command produced.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, -1 if the process never started.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0

    def outcome(self) -> Result[str, ExternalCommandError]:
        """Ok(stdout) on exit 0, Err(ExternalCommandError) otherwise."""
        if self.ok:
            return Ok(self.stdout)
        return Err(
            ExternalCommandError(
                command=self.command,
                returncode=self.returncode,
                stderr=self.stderr,
                stdout=self.stdout,
            )
        )


def execute(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
    *,
    interactive: bool = False,
) -> CommandResult:
    """Run a command to completion.

    No timeout is applied: a command waiting on a credential prompt
    blocks until the user answers it.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).
        interactive: Inherit the terminal for stdin/stdout/stderr instead of
            capturing. Output then goes straight to the user and the result
            carries empty text.

    Returns:
        The CommandResult. Spawn failures (missing binary, bad cwd) are
        reported as returncode -1 with the OS message as stderr.
    """
    command = tuple(cmd)
    try:
        if interactive:
            proc = subprocess.run(cmd, cwd=str(cwd), env=env, check=False)
            return CommandResult(command=command, returncode=proc.returncode)

        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return CommandResult(command=command, returncode=-1, stderr=str(e))

    return CommandResult(
        command=command,
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )
