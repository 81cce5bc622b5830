"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .report import ConsoleReporter, status_label

__all__ = [
    "ConsoleProtocol",
    "ConsoleReporter",
    "MockConsole",
    "RichConsole",
    "Style",
    "status_label",
]
