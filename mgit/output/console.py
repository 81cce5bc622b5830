"""Console output abstraction.

Core code classifies outcomes; this module is where a classification
becomes a color. ConsoleProtocol has a Rich implementation for the
terminal and a mock that records output for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()  # Clean, nothing to add/commit
    ERROR = auto()  # Dirty, not a repository, failures
    DIM = auto()  # Secondary detail (captured stderr)

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output.

    Messages are plain text: directory names and git output are never
    interpreted as markup.
    """

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def labeled(self, label: str, message: str, style: Style = Style.DEFAULT) -> None:
        """Print "<label>: <message>" with only the message styled."""
        ...

    def error(self, message: str) -> None:
        """Print an error message to standard error."""
        ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        # Messages stay on one line and :emoji: codes are printed as-is
        self._console = Console(highlight=False, soft_wrap=True, emoji=False)
        self._err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "bold green",
            Style.ERROR: "bold red",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        self._console.print(message, style=rich_style or None, markup=False)

    def labeled(self, label: str, message: str, style: Style = Style.DEFAULT) -> None:
        from rich.text import Text

        text = Text(f"{label}: ")
        text.append(message, style=self._style_map.get(style, ""))
        self._console.print(text)

    def error(self, message: str) -> None:
        from rich.text import Text

        text = Text("error:", style="bold red")
        text.append(f" {message}")
        self._err_console.print(text)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def labeled(self, label: str, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(f"{label}: {message}", style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
