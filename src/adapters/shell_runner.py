"""Shell execution adapter.

Implements the core CommandRunner port by running commands through the
user's shell in the current directory.
"""

from __future__ import annotations

import logging
import subprocess

LOGGER = logging.getLogger(__name__)

# Conventional shell exit status for "command not found".
LAUNCH_FAILURE_EXIT_CODE = 127


class ShellRunner:
    """Thin subprocess wrapper that satisfies the CommandRunner contract."""

    def run(self, command: str) -> int:
        """Run the command, inheriting stdio, and return its exit code."""

        try:
            completed = subprocess.run(command, shell=True, check=False)
        except OSError:
            LOGGER.exception("Cannot start command %r", command)
            return LAUNCH_FAILURE_EXIT_CODE
        return completed.returncode
