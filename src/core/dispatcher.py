"""Dispatch loop consuming signals from the channel.

This module is integration-agnostic. It only relies on the CommandRunner
port for execution, enabling other process backends without changes here.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from core.errors import UserError
from core.models import ExitSignal, LineSignal
from core.ports import CommandRunner
from core.rules_engine import Configuration
from core.signals import SignalChannel
from core.trigger import parse_trigger

LOGGER = logging.getLogger(__name__)


def format_user_error(error: UserError) -> str:
    """Return the message and hint of a user error as printable text."""

    if error.guidance:
        return f"Error: {error.message}\n\n{error.guidance}"
    return f"Error: {error.message}"


class Dispatcher:
    """Turns received lines into commands and hands them to the runner."""

    def __init__(
        self,
        configuration: Configuration,
        runner: CommandRunner,
        output: Callable[[str], None] = print,
    ) -> None:
        self._configuration = configuration
        self._runner = runner
        self._output = output

    def handle_line(self, text: str) -> Optional[int]:
        """Process one line from the pipe and return the exit code, if any ran."""

        if not text.strip():
            return None

        try:
            trigger = parse_trigger(text)
            command = self._configuration.resolve(trigger)
        except UserError as error:
            # Per-trigger errors are reported, the loop keeps listening.
            LOGGER.info("Cannot handle line %r: %s", text, error)
            self._output(format_user_error(error))
            return None

        self._output(command)
        exit_code = self._runner.run(command)
        LOGGER.info("Command %r exited with %s", command, exit_code)
        return exit_code

    def run(self, channel: SignalChannel) -> None:
        """Consume signals until the first exit signal arrives."""

        try:
            while True:
                signal = channel.receive()
                if isinstance(signal, ExitSignal):
                    LOGGER.info("Exit signal received")
                    return
                if isinstance(signal, LineSignal):
                    self.handle_line(signal.text)
        finally:
            channel.close()
