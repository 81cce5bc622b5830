"""Run a sequence of commands over the operator's directories.

A command is applied to every directory before the next command starts:
`fullpush` over a and b runs add(a), add(b), commit(a), commit(b),
push(a), push(b).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from mgit.git.multi import DirectoryReport, MultiRepoOperator
from mgit.output.console import ConsoleProtocol

__all__ = [
    "BUILTIN_ALIASES",
    "COMMANDS",
    "BatchService",
    "BatchSummary",
    "expand_commands",
]

COMMANDS = ("status", "pull", "push", "add", "commit")

BUILTIN_ALIASES: dict[str, tuple[str, ...]] = {
    "fullpush": ("add", "commit", "push"),
    "fullsync": ("add", "commit", "pull", "push"),
}


def expand_commands(
    names: Sequence[str],
    aliases: Mapping[str, Sequence[str]] | None = None,
) -> list[str]:
    """Turn command arguments into the list of commands to run.

    Each argument may hold several comma-separated names. Aliases expand
    in place and may refer to other aliases; user aliases override the
    built-in ones. Names that are neither commands nor aliases are kept
    as-is so the caller can report them, and so is an argument holding no
    name at all.
    """
    table: dict[str, Sequence[str]] = {**BUILTIN_ALIASES, **(aliases or {})}
    expanded: list[str] = []

    def expand(name: str, seen: frozenset[str]) -> None:
        if name in table and name not in seen:
            for inner in table[name]:
                expand(inner, seen | {name})
            return
        expanded.append(name)

    for arg in names:
        parts = [name.strip() for name in arg.split(",") if name.strip()]
        if not parts:
            expanded.append(arg)
        for name in parts:
            expand(name, frozenset())
    return expanded


@dataclass
class BatchSummary:
    """What a batch run did.

    Attributes:
        reports: Every directory report, in execution order
        unknown: Command names that were rejected
    """

    reports: list[DirectoryReport] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        """Number of git commands that exited non-zero."""
        return sum(1 for r in self.reports if r.failed)

    @property
    def commands_run(self) -> int:
        return sum(1 for r in self.reports if r.kind.ran_command)


class BatchService:
    """Dispatch command names to a MultiRepoOperator.

    An unknown command is reported on the console and skipped; the
    commands after it still run.
    """

    def __init__(self, *, operator: MultiRepoOperator, console: ConsoleProtocol) -> None:
        self._operator = operator
        self._console = console

    def run(self, commands: Sequence[str], message: str) -> BatchSummary:
        summary = BatchSummary()
        for command in commands:
            match command:
                case "status":
                    summary.reports.extend(self._operator.status())
                case "pull":
                    summary.reports.extend(self._operator.pull())
                case "push":
                    summary.reports.extend(self._operator.push())
                case "add":
                    summary.reports.extend(self._operator.add_all())
                case "commit":
                    summary.reports.extend(self._operator.commit_all(message))
                case _:
                    self._console.error(f"command '{command}' is invalid. Use --help for details")
                    summary.unknown.append(command)
        return summary
