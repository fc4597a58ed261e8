"""Ports (interfaces) used by the dispatch loop.

Ports define the minimal contracts for the execution adapter so that the
core can be reused with different process backends.
"""

from __future__ import annotations

from typing import Protocol


class CommandRunner(Protocol):
    """Executes a resolved shell command."""

    def run(self, command: str) -> int:
        """Run the command and return its exit code."""
        ...
