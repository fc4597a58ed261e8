"""Configuration file adapter.

Reads and creates the JSON configuration file. Parsing into domain objects
happens in core.rules_engine.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from core.errors import ConfigExistsError, ConfigNotFoundError, ConfigParseError
from core.rules_engine import Configuration, build_configuration

LOGGER = logging.getLogger(__name__)

CONFIG_NAME = ".testconfig.json"

DEFAULT_CONFIG = r"""{
  "actions": [
    {
      "trigger": { "command": "testAll" },
      "run": "echo test all files"
    },

    {
      "trigger": {
        "command": "testFile",
        "file": "\\.rs$"
      },
      "run": "echo testing file {{file}}"
    },

    {
      "trigger": {
        "command": "testFunction",
        "file": "\\.ext$"
      },
      "run": "echo testing file {{file}} at line {{line}}"
    }
  ]
}
"""


def load(path: Union[str, Path]) -> Configuration:
    """Load and validate the configuration file."""

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(
            "Configuration file not found",
            f'Tertestrial requires a configuration file named "{path.name}" in the current directory. '
            'Please run "tertestrial setup" to create one.',
        ) from exc
    except ValueError as exc:
        raise ConfigParseError(f"Cannot parse configuration file: {exc}", "") from exc
    except OSError as exc:
        raise ConfigParseError(f"Cannot open configuration file: {exc}", "") from exc

    configuration = build_configuration(data)
    LOGGER.info("%s actions loaded from %s", len(configuration.actions), path)
    return configuration


def create(path: Union[str, Path]) -> None:
    """Write the example configuration file."""

    path = Path(path)
    if path.exists():
        raise ConfigExistsError(
            f"Configuration file {path.name} already exists",
            "Delete or rename it if you want to start over with the example configuration.",
        )
    try:
        path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    except OSError as exc:
        raise ConfigParseError(f"cannot create configuration file: {exc}", "") from exc
