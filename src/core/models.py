"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Trigger:
    """A request to run tests.

    The same type serves as a pattern (authored in the configuration) and as
    a query (received from the editor). In a pattern, a missing file or line
    matches anything.
    """

    command: str
    file: Optional[str] = None
    line: Optional[int] = None

    def __str__(self) -> str:
        parts = [self.command]
        if self.file is not None:
            parts.append(self.file)
        text = " ".join(parts)
        if self.line is not None:
            text = f"{text}:{self.line}"
        return text


class VarSource(Enum):
    """Where a variable takes its value from."""

    FILE = "file"
    LINE = "line"
    CURRENT_OR_ABOVE_LINE_CONTENT = "currentOrAboveLineContent"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Var:
    """A named value extracted from known values via a one-group regex."""

    name: str
    source: VarSource
    filter: re.Pattern
    raw_filter: str


@dataclass(frozen=True)
class Action:
    """Compiled configuration rule used by the rule table."""

    trigger: Trigger
    run: str
    vars: Tuple[Var, ...] = ()
    # Compiled form of trigger.file when the author wrote a regex.
    file_pattern: Optional[re.Pattern] = None


@dataclass(frozen=True)
class LineSignal:
    """A line of text received from the pipe."""

    text: str


@dataclass(frozen=True)
class ExitSignal:
    """Request to stop the dispatch loop."""


Signal = Union[LineSignal, ExitSignal]
