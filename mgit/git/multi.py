"""Run one git operation across many working copies.

The operator walks its directories in the order given, one at a time,
and classifies each directory into a DirectoryReport. It knows nothing
about colors or terminals: a Reporter is told when a directory starts
(so terminal-attached commands can be announced before they print) and
when it finishes.

Usage:
    from mgit.git.multi import MultiRepoOperator

    operator = MultiRepoOperator(["website", "dotfiles"])
    for report in operator.status():
        print(f"{report.directory}: {report.kind}")
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from mgit.core.result import Err, Ok, Result
from mgit.git.repository import (
    Cleanliness,
    GitRunner,
    GitRunnerProtocol,
    Repository,
    is_git_repo,
)
from mgit.platform.process import ExternalCommandError

__all__ = [
    "DirectoryReport",
    "MultiRepoOperator",
    "NullReporter",
    "Operation",
    "ReportKind",
    "Reporter",
]


class Operation(Enum):
    """A per-directory git operation."""

    PULL = "pull"
    PUSH = "push"
    STATUS = "status"
    ADD = "add"
    COMMIT = "commit"

    def __str__(self) -> str:
        return self.value

    @property
    def is_interactive(self) -> bool:
        """True if the git command is attached to the terminal."""
        return self in (Operation.PUSH, Operation.ADD, Operation.COMMIT)


class ReportKind(Enum):
    """How one directory ended up for one operation."""

    NOT_A_REPOSITORY = "Not a git repository"
    CLEAN = "Clean"
    DIRTY = "Dirty"
    NOTHING_TO_ADD = "nothing to add"
    NOTHING_TO_COMMIT = "nothing to commit"
    DONE = "done"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value

    @property
    def ran_command(self) -> bool:
        """True if a git command (other than the status check) was run."""
        return self in (ReportKind.DONE, ReportKind.FAILED)


@dataclass(frozen=True, slots=True)
class DirectoryReport:
    """Result of one operation in one directory.

    Attributes:
        directory: The directory exactly as it was given
        operation: The operation that was applied
        kind: Classification of the outcome
        output: Captured output of the git command (may be empty, also on failure)
        error: The command error if kind is FAILED
    """

    directory: str
    operation: Operation
    kind: ReportKind
    output: str = ""
    error: ExternalCommandError | None = None

    @property
    def failed(self) -> bool:
        return self.kind is ReportKind.FAILED


class Reporter(Protocol):
    """Receives progress from a MultiRepoOperator."""

    def started(self, directory: str, operation: Operation) -> None:
        """Called right before a git command runs in ``directory``."""
        ...

    def finished(self, report: DirectoryReport) -> None:
        """Called once per directory with its final report."""
        ...


class NullReporter:
    """Reporter that discards everything."""

    def started(self, directory: str, operation: Operation) -> None:
        pass

    def finished(self, report: DirectoryReport) -> None:
        pass


def _from_outcome(
    directory: str,
    operation: Operation,
    outcome: Result[str, ExternalCommandError],
) -> DirectoryReport:
    match outcome:
        case Ok(stdout):
            return DirectoryReport(directory, operation, ReportKind.DONE, output=stdout)
        case Err(error):
            return DirectoryReport(
                directory,
                operation,
                ReportKind.FAILED,
                output=error.stdout,
                error=error,
            )


class MultiRepoOperator:
    """Applies git operations to an ordered list of directories.

    Every operation visits every directory, in order, even when an
    earlier one failed. A directory that is not a git working copy is
    reported and skipped without running any git command in it.

    Attributes:
        directories: Directories as given (duplicates kept)
    """

    def __init__(
        self,
        directories: Sequence[str | Path],
        *,
        runner: GitRunnerProtocol | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.directories: tuple[str, ...] = tuple(str(d) for d in directories)
        self._runner = runner or GitRunner()
        self._reporter = reporter or NullReporter()

    def is_git_repo(self, directory: str | Path) -> bool:
        return is_git_repo(directory)

    def pull(self) -> list[DirectoryReport]:
        return self._each(Operation.PULL, self._pull_one)

    def push(self) -> list[DirectoryReport]:
        return self._each(Operation.PUSH, self._push_one)

    def status(self) -> list[DirectoryReport]:
        return self._each(Operation.STATUS, self._status_one)

    def add_all(self) -> list[DirectoryReport]:
        """Stage everything in each dirty repository."""
        return self._each(Operation.ADD, self._add_all_one)

    def commit_all(self, message: str) -> list[DirectoryReport]:
        """Commit all tracked changes in each dirty repository."""
        return self._each(Operation.COMMIT, lambda d: self._commit_all_one(d, message))

    # -------------------------------------------------------------------------
    # Per-directory steps
    # -------------------------------------------------------------------------

    def _each(
        self,
        operation: Operation,
        step: Callable[[str], DirectoryReport],
    ) -> list[DirectoryReport]:
        reports: list[DirectoryReport] = []
        for directory in self.directories:
            if not is_git_repo(directory):
                report = DirectoryReport(directory, operation, ReportKind.NOT_A_REPOSITORY)
            else:
                report = step(directory)
            self._reporter.finished(report)
            reports.append(report)
        return reports

    def _repo(self, directory: str) -> Repository:
        return Repository(Path(directory), self._runner)

    def _pull_one(self, directory: str) -> DirectoryReport:
        self._reporter.started(directory, Operation.PULL)
        return _from_outcome(directory, Operation.PULL, self._repo(directory).pull())

    def _push_one(self, directory: str) -> DirectoryReport:
        self._reporter.started(directory, Operation.PUSH)
        return _from_outcome(directory, Operation.PUSH, self._repo(directory).push())

    def _status_one(self, directory: str) -> DirectoryReport:
        state = self._repo(directory).cleanliness()
        kind = ReportKind.CLEAN if state is Cleanliness.CLEAN else ReportKind.DIRTY
        return DirectoryReport(directory, Operation.STATUS, kind)

    def _add_all_one(self, directory: str) -> DirectoryReport:
        repo = self._repo(directory)
        if repo.is_clean():
            return DirectoryReport(directory, Operation.ADD, ReportKind.NOTHING_TO_ADD)
        self._reporter.started(directory, Operation.ADD)
        return _from_outcome(directory, Operation.ADD, repo.add_all())

    def _commit_all_one(self, directory: str, message: str) -> DirectoryReport:
        repo = self._repo(directory)
        if repo.is_clean():
            return DirectoryReport(directory, Operation.COMMIT, ReportKind.NOTHING_TO_COMMIT)
        self._reporter.started(directory, Operation.COMMIT)
        return _from_outcome(directory, Operation.COMMIT, repo.commit_all(message))
