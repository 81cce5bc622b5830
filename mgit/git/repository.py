"""Single working copy: validation, cleanliness and git calls.

Usage:
    repo = Repository(Path("/path/to/repo"))
    if not repo.exists():
        print("Not a git repository")
    elif repo.cleanliness() is Cleanliness.DIRTY:
        match repo.commit_all("Automatic commit"):
            case Ok(_):
                print("committed")
            case Err(e):
                print(f"commit failed: {e}")
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Protocol

from mgit.core.result import Result
from mgit.platform.process import CommandResult, ExternalCommandError, execute

__all__ = [
    "Cleanliness",
    "GitRunner",
    "GitRunnerProtocol",
    "Repository",
    "cleanliness",
    "discover_working_copy",
    "is_git_repo",
]

_REQUIRED_DIRS = ("objects", "branches", "refs")
_REQUIRED_FILES = ("config", "HEAD")

_NOTHING_TO_COMMIT = re.compile(r"^nothing to commit", re.IGNORECASE)
# Older git prefixed every status line with "# "
_BRANCH_AHEAD = re.compile(r"^(# )?Your branch is ahead of", re.IGNORECASE)


def is_git_repo(path: Path | str) -> bool:
    """Check that a directory is a git working copy.

    All of .git, .git/objects, .git/branches and .git/refs must be
    directories and .git/config, .git/HEAD must be files. Evaluated on
    every call, never cached.
    """
    git_dir = Path(path) / ".git"
    if not git_dir.is_dir():
        return False
    for name in _REQUIRED_DIRS:
        if not (git_dir / name).is_dir():
            return False
    for name in _REQUIRED_FILES:
        if not (git_dir / name).is_file():
            return False
    return True


class Cleanliness(Enum):
    """Whether a working copy has anything to add, commit or push."""

    CLEAN = "Clean"
    DIRTY = "Dirty"

    def __str__(self) -> str:
        return self.value


def cleanliness(status: CommandResult) -> Cleanliness:
    """Classify the captured output of `git status`.

    Clean iff the last output line starts with "nothing to commit" and no
    line reports the branch as ahead of its upstream. A failed status
    command is Dirty.
    """
    if not status.ok:
        return Cleanliness.DIRTY

    lines = status.stdout.splitlines()
    if not lines or not _NOTHING_TO_COMMIT.match(lines[-1]):
        return Cleanliness.DIRTY
    if any(_BRANCH_AHEAD.match(line) for line in lines):
        return Cleanliness.DIRTY
    return Cleanliness.CLEAN


class GitRunnerProtocol(Protocol):
    """Runs git subcommands inside a directory.

    Tests substitute a stub that records argument vectors.
    """

    def capture(self, args: list[str], cwd: Path) -> CommandResult:
        """Run `git <args>` with stdout/stderr captured."""
        ...

    def interactive(self, args: list[str], cwd: Path) -> CommandResult:
        """Run `git <args>` attached to the terminal."""
        ...


class GitRunner:
    """GitRunnerProtocol backed by real subprocesses.

    Captured commands run with LC_ALL=C so their messages can be matched.
    """

    def __init__(self, binary: str = "git") -> None:
        self.binary = binary

    def capture(self, args: list[str], cwd: Path) -> CommandResult:
        env = {**os.environ, "LC_ALL": "C"}
        return execute([self.binary, *args], cwd=cwd, env=env)

    def interactive(self, args: list[str], cwd: Path) -> CommandResult:
        return execute([self.binary, *args], cwd=cwd, interactive=True)


class Repository:
    """Git operations on one working copy.

    Attributes:
        path: Path to the working copy root (the directory holding .git)
    """

    def __init__(self, path: Path, runner: GitRunnerProtocol | None = None) -> None:
        self.path = path
        self._runner = runner or GitRunner()

    def exists(self) -> bool:
        """Check if this is a valid git working copy."""
        return is_git_repo(self.path)

    def status(self) -> CommandResult:
        """Run `git status` and return the captured result."""
        return self._runner.capture(["status"], cwd=self.path)

    def cleanliness(self) -> Cleanliness:
        return cleanliness(self.status())

    def is_clean(self) -> bool:
        return self.cleanliness() is Cleanliness.CLEAN

    def pull(self) -> Result[str, ExternalCommandError]:
        """Pull from upstream, returning git's output."""
        return self._runner.capture(["pull"], cwd=self.path).outcome()

    def push(self) -> Result[str, ExternalCommandError]:
        """Push to upstream. Credential prompts go to the terminal."""
        return self._runner.interactive(["push"], cwd=self.path).outcome()

    def add_all(self) -> Result[str, ExternalCommandError]:
        """Stage everything below the working copy root."""
        return self._runner.interactive(["add", "."], cwd=self.path).outcome()

    def commit_all(self, message: str) -> Result[str, ExternalCommandError]:
        """Commit all tracked changes with the given message."""
        return self._runner.interactive(["commit", "-a", "-m", message], cwd=self.path).outcome()


def discover_working_copy(cwd: Path, runner: GitRunnerProtocol | None = None) -> Path:
    """Root of the working copy containing ``cwd``.

    Asks git for the repository metadata directory and takes its parent.
    Falls back to "." when git does not know the directory, which the
    operator then reports as not a repository. A relative answer from git
    is resolved against ``cwd``.
    """
    result = (runner or GitRunner()).capture(["rev-parse", "--git-dir"], cwd=cwd)
    git_dir = result.stdout.strip()
    if not result.ok or not git_dir:
        return Path(".")
    root = Path(git_dir).parent
    return root if root.is_absolute() else cwd / root
