"""Render operator reports as console lines.

One line per directory, starting with the directory name. The status
report pads the name so the colons line up; every other operation uses
a plain "<directory>: " prefix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mgit.core.config import DEFAULT_STATUS_WIDTH
from mgit.git.multi import DirectoryReport, Operation, ReportKind
from mgit.output.console import Style

if TYPE_CHECKING:
    from mgit.output.console import ConsoleProtocol

__all__ = ["ConsoleReporter", "status_label"]

_KIND_STYLES: dict[ReportKind, Style] = {
    ReportKind.NOT_A_REPOSITORY: Style.ERROR,
    ReportKind.DIRTY: Style.ERROR,
    ReportKind.CLEAN: Style.SUCCESS,
    ReportKind.NOTHING_TO_ADD: Style.SUCCESS,
    ReportKind.NOTHING_TO_COMMIT: Style.SUCCESS,
}

_ANNOUNCEMENTS: dict[Operation, str] = {
    Operation.PUSH: "pushing...",
    Operation.ADD: "adding...",
    Operation.COMMIT: "committing...",
}


def status_label(directory: str, width: int = DEFAULT_STATUS_WIDTH) -> str:
    """Pad ``directory`` so the following colon sits at column ``width``.

    At least one space is always added.
    """
    return directory + " " * max(1, width - len(directory))


class ConsoleReporter:
    """Reporter that prints each directory's outcome as it happens.

    Terminal-attached commands (push, add, commit) are announced before
    they run, so whatever git writes to the terminal appears under the
    right directory. In strict mode a failed command also prints its
    exit code and stderr.
    """

    def __init__(
        self,
        console: ConsoleProtocol,
        *,
        status_width: int = DEFAULT_STATUS_WIDTH,
        strict: bool = False,
    ) -> None:
        self._console = console
        self._status_width = status_width
        self._strict = strict

    def started(self, directory: str, operation: Operation) -> None:
        announcement = _ANNOUNCEMENTS.get(operation)
        if announcement is not None:
            self._console.labeled(directory, announcement)

    def finished(self, report: DirectoryReport) -> None:
        style = _KIND_STYLES.get(report.kind)
        if style is not None:
            self._console.labeled(self._label(report), str(report.kind), style)
        elif report.operation.is_interactive:
            # prefix already printed by started()
            output = report.output.rstrip("\n")
            if output:
                self._console.print(output)
        else:
            self._console.labeled(report.directory, report.output.rstrip("\n"))

        if self._strict and report.error is not None:
            self._console.error(f"{report.directory}: {report.error}")
            stderr = report.error.stderr.strip()
            if stderr:
                self._console.print(stderr, Style.DIM)

    def _label(self, report: DirectoryReport) -> str:
        if report.operation is Operation.STATUS:
            return status_label(report.directory, self._status_width)
        return report.directory
