"""Ctrl-C adapter.

Converts SIGINT into an ExitSignal on the channel so the dispatch loop sees
interrupts and pipe input as one event stream.
"""

from __future__ import annotations

import logging
import signal
from typing import Any, Callable

from core.models import ExitSignal
from core.signals import SignalChannel

LOGGER = logging.getLogger(__name__)


def handle(channel: SignalChannel) -> Callable[[int, Any], None]:
    """Install a SIGINT handler that sends one ExitSignal to the channel.

    Must be called from the main thread. Later interrupts are ignored.
    """

    fired = False

    def _on_interrupt(signum: int, frame: Any) -> None:
        nonlocal fired
        if fired:
            return
        fired = True
        channel.send(ExitSignal())

    signal.signal(signal.SIGINT, _on_interrupt)
    LOGGER.debug("SIGINT handler installed")
    return _on_interrupt
