"""Trigger decoding and matching (core domain)."""

from __future__ import annotations

import json
import re
from typing import Optional

from core.errors import InvalidTriggerError
from core.models import Action, Trigger

_TRIGGER_HINT = 'Triggers look like {"command": "testFile", "file": "foo_test.py", "line": 12}'


def parse_trigger(text: str) -> Trigger:
    """Decode one line received from the pipe into a Trigger."""

    try:
        data = json.loads(text)
    except ValueError as exc:
        raise InvalidTriggerError(f"cannot parse trigger {text!r}: {exc}", _TRIGGER_HINT) from exc

    if not isinstance(data, dict):
        raise InvalidTriggerError(f"trigger must be a JSON object: {text!r}", _TRIGGER_HINT)

    command = data.get("command")
    if not isinstance(command, str) or not command:
        raise InvalidTriggerError(f"trigger has no command: {text!r}", _TRIGGER_HINT)

    file = data.get("file")
    if file is not None and not isinstance(file, str):
        raise InvalidTriggerError(f"trigger file must be a string: {text!r}", _TRIGGER_HINT)

    line = data.get("line")
    # bool is an int subclass, reject it explicitly.
    if line is not None and (isinstance(line, bool) or not isinstance(line, int) or line < 0):
        raise InvalidTriggerError(
            f"trigger line must be a non-negative integer: {text!r}", _TRIGGER_HINT
        )

    return Trigger(command=command, file=file, line=line)


def is_literal(pattern: str) -> bool:
    """Return True when the pattern contains no regex metacharacters."""

    return re.escape(pattern) == pattern


def compile_file_pattern(pattern: Optional[str]) -> Optional[re.Pattern]:
    """Compile a trigger file pattern, or return None for literals."""

    if pattern is None or is_literal(pattern):
        return None
    return re.compile(pattern)


def matches(action: Action, query: Trigger) -> bool:
    """Return True if the action's trigger pattern matches the query.

    Matching logic:
    - command must be equal (case-sensitive).
    - A pattern without a file or line accepts any query value for that field.
    - A literal file pattern is compared exactly, a regex file pattern is
      searched in the query file.
    - A line pattern is compared exactly.
    """

    pattern = action.trigger
    if pattern.command != query.command:
        return False

    if pattern.file is not None:
        if query.file is None:
            return False
        if action.file_pattern is not None:
            if not action.file_pattern.search(query.file):
                return False
        elif pattern.file != query.file:
            return False

    if pattern.line is not None and pattern.line != query.line:
        return False

    return True
