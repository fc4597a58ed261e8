"""Action compilation and trigger resolution logic (core domain)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Tuple

from core.config import LoggingConfig
from core.errors import ConfigParseError, NoMatchingActionError
from core.models import Action, Trigger, Var, VarSource
from core.templating import format_run
from core.trigger import compile_file_pattern, matches

LOGGER = logging.getLogger(__name__)

_SCHEMA_HINT = 'The configuration file must look like {"actions": [{"trigger": {"command": "testAll"}, "run": "..."}]}'


def _compile(pattern: str, where: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigParseError(f"invalid regular expression {pattern!r} in {where}: {exc}", "") from exc


def _build_trigger(raw: Any, where: str) -> Trigger:
    if not isinstance(raw, dict):
        raise ConfigParseError(f"{where} has no trigger", _SCHEMA_HINT)
    command = raw.get("command")
    if not isinstance(command, str) or not command:
        raise ConfigParseError(f"trigger of {where} has no command", _SCHEMA_HINT)
    file = raw.get("file")
    if file is not None and not isinstance(file, str):
        raise ConfigParseError(f"trigger file of {where} must be a string", _SCHEMA_HINT)
    line = raw.get("line")
    if line is not None and (isinstance(line, bool) or not isinstance(line, int) or line < 0):
        raise ConfigParseError(f"trigger line of {where} must be a non-negative integer", _SCHEMA_HINT)
    return Trigger(command=command, file=file, line=line)


def _build_var(raw: Any, where: str) -> Var:
    if not isinstance(raw, dict):
        raise ConfigParseError(f"variables of {where} must be objects", _SCHEMA_HINT)
    name = raw.get("name")
    raw_filter = raw.get("filter")
    if not isinstance(name, str) or not name:
        raise ConfigParseError(f"a variable of {where} has no name", _SCHEMA_HINT)
    if not isinstance(raw_filter, str):
        raise ConfigParseError(f"variable {name!r} of {where} has no filter", _SCHEMA_HINT)
    try:
        source = VarSource(raw.get("source"))
    except ValueError as exc:
        known = ", ".join(item.value for item in VarSource)
        raise ConfigParseError(
            f"variable {name!r} of {where} has unknown source {raw.get('source')!r}",
            f"Valid sources are: {known}",
        ) from exc
    return Var(
        name=name,
        source=source,
        filter=_compile(raw_filter, f"variable {name!r} of {where}"),
        raw_filter=raw_filter,
    )


def build_actions(raw_actions: Iterable[Any]) -> List[Action]:
    """Validate action configs and compile their regex patterns.

    This keeps per-trigger matching minimal and reports configuration
    mistakes once, at load time.
    """

    compiled: List[Action] = []
    for index, raw in enumerate(raw_actions, start=1):
        where = f"action #{index}"
        if not isinstance(raw, dict):
            raise ConfigParseError(f"{where} must be an object", _SCHEMA_HINT)
        trigger = _build_trigger(raw.get("trigger"), where)
        run = raw.get("run")
        if not isinstance(run, str):
            raise ConfigParseError(f"{where} has no run command", _SCHEMA_HINT)
        raw_vars = raw.get("vars") or []
        if not isinstance(raw_vars, list):
            raise ConfigParseError(f"vars of {where} must be a list", _SCHEMA_HINT)
        file_pattern = None
        if trigger.file is not None:
            try:
                file_pattern = compile_file_pattern(trigger.file)
            except re.error as exc:
                raise ConfigParseError(
                    f"invalid regular expression {trigger.file!r} in trigger of {where}: {exc}", ""
                ) from exc
        compiled.append(
            Action(
                trigger=trigger,
                run=run,
                vars=tuple(_build_var(item, where) for item in raw_vars),
                file_pattern=file_pattern,
            )
        )
    return compiled


@dataclass(frozen=True)
class Configuration:
    """Ordered rule table. The first matching action wins."""

    actions: Tuple[Action, ...]
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def resolve(self, query: Trigger) -> str:
        """Return the fully substituted command for the given trigger."""

        for action in self.actions:
            if matches(action, query):
                LOGGER.debug("Trigger %s matched action %s", query, action.trigger)
                return format_run(action, query)
        raise NoMatchingActionError(
            f"cannot determine command for trigger: {query}",
            "Please make sure that this trigger is listed in your configuration file",
        )


def build_configuration(data: Any) -> Configuration:
    """Build a Configuration from the decoded JSON document."""

    if not isinstance(data, Mapping):
        raise ConfigParseError("configuration must be a JSON object", _SCHEMA_HINT)
    raw_actions = data.get("actions")
    if not isinstance(raw_actions, list):
        raise ConfigParseError("configuration has no \"actions\" list", _SCHEMA_HINT)
    try:
        logging_config = LoggingConfig.from_dict(data.get("logging"))
    except (AttributeError, TypeError, ValueError) as exc:
        raise ConfigParseError(f"invalid \"logging\" section: {exc}", "") from exc
    return Configuration(actions=tuple(build_actions(raw_actions)), logging=logging_config)
