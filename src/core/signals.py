"""Signal channel merging pipe input and interrupts into one stream."""

from __future__ import annotations

import queue
import threading
from typing import Optional

from core.models import Signal


class SignalChannel:
    """Unbounded multi-producer, single-consumer queue of signals.

    Backed by queue.SimpleQueue because its put() is reentrant and may be
    called from a signal handler while the consumer is blocked in get().
    """

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[Signal]" = queue.SimpleQueue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, signal: Signal) -> bool:
        """Enqueue a signal. Returns False once the consumer has gone away."""

        if self._closed.is_set():
            return False
        self._queue.put(signal)
        return True

    def receive(self, timeout: Optional[float] = None) -> Signal:
        """Block until a signal is available.

        Raises queue.Empty if a timeout is given and expires.
        """

        return self._queue.get(timeout=timeout)

    def close(self) -> None:
        """Called by the consumer when it stops receiving."""

        self._closed.set()
