"""Data models for function documentation extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """Syntactic category of a single script line."""

    COMMENT = "comment"
    INLINE_START = "inline_start"  # header with the body's "{" on the same line
    BARE_START = "bare_start"  # header, "{" expected on the next line
    OPEN_BRACE = "open_brace"
    OTHER = "other"


@dataclass(frozen=True)
class FilterCriterion:
    """Which functions to emit and how to display their names."""

    target_name: str | None = None  # Exact match on the declared name
    prefix: str = ""  # e.g. "cmd_"; stripped from displayed names

    def display_name(self, name: str) -> str | None:
        """Return the name to display, or None if the function is filtered out."""
        if self.target_name and name != self.target_name:
            return None
        if self.prefix:
            if not name.startswith(self.prefix):
                return None
            return name[len(self.prefix) :]
        return name


@dataclass
class FunctionRecord:
    """A confirmed function header and the comment block above it."""

    name: str  # Display name (prefix already stripped)
    comment: str = ""  # Joined block, continuation lines indented
