"""Application entry point for the tertestrial test runner."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings
from adapters import config_file, fifo, interrupt
from adapters.shell_runner import ShellRunner
from adapters.table_formatting import print_actions
from core.config import LoggingConfig
from core.dispatcher import Dispatcher, format_user_error
from core.errors import PipeError, UserError
from core.signals import SignalChannel

NAME = "TERTESTRIAL"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: LoggingConfig) -> None:
    enabled = config.enabled or bool(settings.LOG_LEVEL)
    if not enabled:
        return

    level_name = (settings.LOG_LEVEL or config.level).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.file_enabled:
        path = config.file_path
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _run() -> int:
    _print_banner()
    try:
        configuration = config_file.load(settings.CONFIG_PATH)
    except UserError as error:
        print(format_user_error(error), file=sys.stderr)
        return 1

    _configure_logging(configuration.logging)
    logger = logging.getLogger(__name__)
    logger.info("Starting tertestrial with %s actions", len(configuration.actions))

    pipe = fifo.Pipe(settings.PIPE_PATH)
    try:
        # An existing FIFO is reused, e.g. after a crash.
        pipe.ensure()
    except PipeError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    channel = SignalChannel()
    interrupt.handle(channel)
    fifo.listen(pipe, channel)

    dispatcher = Dispatcher(configuration, ShellRunner())
    print("Tertestrial is online, Ctrl-C to exit")
    logger.info("Listening on %s", pipe.filepath)
    dispatcher.run(channel)

    print("\nSee you later!")
    try:
        pipe.delete()
    except PipeError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


def _setup() -> int:
    try:
        config_file.create(settings.CONFIG_PATH)
    except UserError as error:
        print(format_user_error(error), file=sys.stderr)
        return 1
    print(f"Created {settings.CONFIG_PATH}")
    return 0


def _actions() -> int:
    try:
        configuration = config_file.load(settings.CONFIG_PATH)
    except UserError as error:
        print(format_user_error(error), file=sys.stderr)
        return 1
    print_actions(configuration)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tertestrial")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Listen for triggers and run tests (default)")
    subparsers.add_parser("setup", help="Create an example configuration file")
    subparsers.add_parser("actions", help="Show the configured actions")

    args = parser.parse_args(argv)
    if args.command == "setup":
        return _setup()
    if args.command == "actions":
        return _actions()
    return _run()


if __name__ == "__main__":
    sys.exit(main())
