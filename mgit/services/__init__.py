"""Services orchestrating the git layer for the CLI."""

from .batch import BUILTIN_ALIASES, COMMANDS, BatchService, BatchSummary, expand_commands

__all__ = [
    "BUILTIN_ALIASES",
    "COMMANDS",
    "BatchService",
    "BatchSummary",
    "expand_commands",
]
