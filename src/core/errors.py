"""Error types shared by the core and adapters.

User errors carry a short message plus an actionable hint. They are reported
for a single trigger and never stop the listener.
"""

from __future__ import annotations


class UserError(Exception):
    """An error caused by user input or configuration."""

    def __init__(self, message: str, guidance: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.guidance = guidance

    def __str__(self) -> str:
        return self.message


class ConfigNotFoundError(UserError):
    """The configuration file does not exist."""


class ConfigParseError(UserError):
    """The configuration file exists but cannot be read or understood."""


class ConfigExistsError(UserError):
    """Refusing to overwrite an existing configuration file."""


class InvalidTriggerError(UserError):
    """A line received from the pipe does not encode a trigger."""


class NoMatchingActionError(UserError):
    """No configured action matches the received trigger."""


class VariableError(UserError):
    """A configured variable could not be computed."""


class CaptureCountError(VariableError):
    """A variable filter does not contain exactly one capture group."""


class UnsupportedVarSourceError(VariableError):
    """The variable source is known but not implemented yet."""


class PipeError(RuntimeError):
    """The named pipe could not be created, opened, or deleted."""
