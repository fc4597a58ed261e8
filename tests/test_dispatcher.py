from __future__ import annotations

from core.dispatcher import Dispatcher
from core.models import ExitSignal, LineSignal
from core.rules_engine import build_configuration
from core.signals import SignalChannel


class FakeRunner:
    def __init__(self, exit_code: int = 0) -> None:
        self.commands: list[str] = []
        self._exit_code = exit_code

    def run(self, command: str) -> int:
        self.commands.append(command)
        return self._exit_code


def _configuration():
    return build_configuration(
        {
            "actions": [
                {"trigger": {"command": "testAll"}, "run": "make test"},
                {"trigger": {"command": "testFile"}, "run": "pytest {{file}}"},
            ]
        }
    )


def _dispatcher(runner: FakeRunner, output: list[str]) -> Dispatcher:
    return Dispatcher(_configuration(), runner, output=output.append)


def test_handle_line_runs_resolved_command() -> None:
    runner = FakeRunner(exit_code=3)
    output: list[str] = []
    exit_code = _dispatcher(runner, output).handle_line('{"command": "testFile", "file": "a.py"}')

    assert exit_code == 3
    assert runner.commands == ["pytest a.py"]
    assert output == ["pytest a.py"]


def test_unknown_trigger_prints_message_and_hint() -> None:
    runner = FakeRunner()
    output: list[str] = []
    assert _dispatcher(runner, output).handle_line('{"command": "testFunction"}') is None

    assert runner.commands == []
    assert "cannot determine command for trigger: testFunction" in output[0]
    assert "Please make sure that this trigger is listed" in output[0]


def test_blank_lines_are_ignored() -> None:
    runner = FakeRunner()
    output: list[str] = []
    assert _dispatcher(runner, output).handle_line("   ") is None
    assert output == []


def test_run_stops_at_first_exit_and_survives_errors() -> None:
    runner = FakeRunner()
    output: list[str] = []
    channel = SignalChannel()
    channel.send(LineSignal("not json"))
    channel.send(LineSignal('{"command": "testAll"}'))
    channel.send(LineSignal('{"command": "testFile", "file": "b.py"}'))
    channel.send(ExitSignal())
    channel.send(LineSignal('{"command": "testAll"}'))

    _dispatcher(runner, output).run(channel)

    assert runner.commands == ["make test", "pytest b.py"]
    assert output[0].startswith("Error: cannot parse trigger")
    assert channel.closed
