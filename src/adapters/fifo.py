"""Named pipe adapter.

Manages the FIFO editors write triggers into and runs the background thread
that forwards each received line to the signal channel.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
from pathlib import Path
from typing import TextIO, Union

from core.errors import PipeError
from core.models import ExitSignal, LineSignal
from core.signals import SignalChannel

LOGGER = logging.getLogger(__name__)

PIPE_NAME = ".tertestrial.pipe"


class Pipe:
    """A FIFO pipe at a fixed filesystem path."""

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)

    def __repr__(self) -> str:
        return f"Pipe({str(self.filepath)!r})"

    def create(self) -> None:
        try:
            os.mkfifo(self.filepath, 0o700)
        except OSError as exc:
            raise PipeError(f"cannot create pipe {self.filepath}: {exc}") from exc

    def delete(self) -> None:
        try:
            self.filepath.unlink()
        except OSError as exc:
            raise PipeError(f"cannot delete pipe {self.filepath}: {exc}") from exc

    def exists(self) -> bool:
        return self.filepath.exists()

    def ensure(self) -> None:
        """Create the pipe, or reuse an existing one if it really is a FIFO."""

        if not self.exists():
            self.create()
            return
        try:
            mode = os.stat(self.filepath).st_mode
        except OSError as exc:
            raise PipeError(f"cannot inspect pipe {self.filepath}: {exc}") from exc
        if not stat.S_ISFIFO(mode):
            raise PipeError(f"{self.filepath} exists but is not a named pipe")

    def open(self) -> TextIO:
        """Open the pipe for reading. Blocks until a writer connects."""

        try:
            return open(self.filepath, "r", encoding="utf-8")
        except OSError as exc:
            raise PipeError(f"cannot open pipe {self.filepath}: {exc}") from exc


def in_dir(dirpath: Union[str, Path], name: str = PIPE_NAME) -> Pipe:
    """Return the pipe located in the given directory."""

    return Pipe(Path(dirpath) / name)


def _read_until_closed(pipe: Pipe, channel: SignalChannel) -> bool:
    """Read one writer session. Returns False when the thread should stop."""

    try:
        handle = pipe.open()
    except PipeError:
        LOGGER.exception("Pipe listener cannot open %s", pipe.filepath)
        channel.send(ExitSignal())
        return False

    read_failed = False
    with handle:
        try:
            for line in handle:
                if not channel.send(LineSignal(line.rstrip("\r\n"))):
                    return False
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error("error reading line: %s", exc)
            read_failed = True
    if read_failed:
        # Sent after closing so the next writer waits for the reopened reader.
        return channel.send(ExitSignal())
    # End of stream: the writer closed its end, wait for the next one.
    return True


def _listen_loop(pipe: Pipe, channel: SignalChannel) -> None:
    while not channel.closed:
        if not _read_until_closed(pipe, channel):
            break
    LOGGER.debug("Pipe listener for %s stopped", pipe.filepath)


def listen(pipe: Pipe, channel: SignalChannel) -> threading.Thread:
    """Start a daemon thread forwarding pipe lines to the channel.

    The thread is not joined; it ends with the process or after the consumer
    closes the channel and the next line arrives.
    """

    thread = threading.Thread(
        target=_listen_loop,
        args=(pipe, channel),
        name="tertestrial-pipe-listener",
        daemon=True,
    )
    thread.start()
    return thread
