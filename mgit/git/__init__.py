"""Git operations module.

- Repository: validation, cleanliness and git calls for one working copy
- MultiRepoOperator: one operation over an ordered list of directories

Usage:
    from mgit.git import MultiRepoOperator

    operator = MultiRepoOperator(["website", "dotfiles"])
    operator.add_all()
    operator.commit_all("Automatic commit")
    operator.push()
"""

from mgit.git.multi import (
    DirectoryReport,
    MultiRepoOperator,
    NullReporter,
    Operation,
    Reporter,
    ReportKind,
)
from mgit.git.repository import (
    Cleanliness,
    GitRunner,
    GitRunnerProtocol,
    Repository,
    cleanliness,
    discover_working_copy,
    is_git_repo,
)

__all__ = [
    # Repository
    "Cleanliness",
    "GitRunner",
    "GitRunnerProtocol",
    "Repository",
    "cleanliness",
    "discover_working_copy",
    "is_git_repo",
    # Multi
    "DirectoryReport",
    "MultiRepoOperator",
    "NullReporter",
    "Operation",
    "Reporter",
    "ReportKind",
]
