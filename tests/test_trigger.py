from __future__ import annotations

import pytest

from core.errors import InvalidTriggerError
from core.models import Action, Trigger
from core.trigger import compile_file_pattern, matches, parse_trigger


def _action(command: str, file: "str | None" = None, line: "int | None" = None) -> Action:
    return Action(
        trigger=Trigger(command=command, file=file, line=line),
        run="run",
        file_pattern=compile_file_pattern(file),
    )


def test_parse_trigger_with_all_fields() -> None:
    trigger = parse_trigger('{"command": "testFunction", "file": "foo_test.py", "line": 12}')
    assert trigger == Trigger(command="testFunction", file="foo_test.py", line=12)


def test_parse_trigger_command_only() -> None:
    assert parse_trigger('{"command": "testAll"}') == Trigger(command="testAll")


@pytest.mark.parametrize(
    "text",
    [
        "testAll",
        "[]",
        '{"file": "foo.py"}',
        '{"command": "testFile", "file": 3}',
        '{"command": "testFunction", "line": -1}',
        '{"command": "testFunction", "line": "2"}',
        '{"command": "testFunction", "line": true}',
    ],
)
def test_parse_trigger_rejects_invalid_lines(text: str) -> None:
    with pytest.raises(InvalidTriggerError) as excinfo:
        parse_trigger(text)
    assert excinfo.value.guidance


def test_command_must_match_exactly() -> None:
    action = _action("testAll")
    assert matches(action, Trigger(command="testAll"))
    assert not matches(action, Trigger(command="testall"))
    assert not matches(action, Trigger(command="testFile"))


def test_missing_pattern_fields_are_wildcards() -> None:
    action = _action("testFunction")
    assert matches(action, Trigger(command="testFunction"))
    assert matches(action, Trigger(command="testFunction", file="a.py", line=4))


def test_literal_file_is_compared_exactly() -> None:
    action = _action("testFile", file="filename")
    assert action.file_pattern is None
    assert matches(action, Trigger(command="testFile", file="filename"))
    assert not matches(action, Trigger(command="testFile", file="other filename"))
    assert not matches(action, Trigger(command="testFile"))


def test_regex_file_is_searched() -> None:
    action = _action("testFile", file=r"\.rs$")
    assert action.file_pattern is not None
    assert matches(action, Trigger(command="testFile", file="src/main.rs"))
    assert not matches(action, Trigger(command="testFile", file="src/main.rs.bak"))


def test_line_requires_equal_query_line() -> None:
    action = _action("testFunction", file="filename", line=2)
    assert matches(action, Trigger(command="testFunction", file="filename", line=2))
    assert not matches(action, Trigger(command="testFunction", file="filename", line=3))
    assert not matches(action, Trigger(command="testFunction", file="filename"))


def test_trigger_display() -> None:
    assert str(Trigger(command="testAll")) == "testAll"
    assert str(Trigger(command="testFile", file="a.py")) == "testFile a.py"
    assert str(Trigger(command="testFunction", file="a.py", line=3)) == "testFunction a.py:3"
