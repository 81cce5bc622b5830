"""Result values for explicit error handling.

Operations that can fail for ordinary reasons (a git command exiting
non-zero, a config file with bad syntax) return ``Ok(value)`` or
``Err(error)`` instead of raising, so a batch over many directories never
has to unwind through try/except.

Usage:
    match runner.capture(["pull"], cwd=path).outcome():
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"{error} ({error.stderr.strip()})")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
