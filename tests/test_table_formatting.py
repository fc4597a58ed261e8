from __future__ import annotations

from rich.console import Console

from adapters.table_formatting import format_actions, print_actions
from core.rules_engine import build_configuration


def test_actions_table_lists_triggers_and_runs() -> None:
    config = build_configuration(
        {
            "actions": [
                {"trigger": {"command": "testAll"}, "run": "make test"},
                {"trigger": {"command": "testFile", "file": "[a-z]+\\.py$"}, "run": "pytest {{file}}"},
            ]
        }
    )
    table = format_actions(config)
    assert [column.header for column in table.columns] == ["TRIGGER", "RUN"]
    assert table.row_count == 2

    console = Console(record=True, width=120)
    print_actions(config, console=console)
    text = console.export_text()
    assert "testFile [a-z]+\\.py$" in text
    assert "pytest {{file}}" in text
