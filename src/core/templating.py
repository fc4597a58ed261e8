"""Placeholder substitution for action run templates."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Mapping

from core.models import Action, Trigger, Var
from core.variables import resolve_var


def build_values(trigger: Trigger, variables: Iterable[Var]) -> Dict[str, str]:
    """Return all placeholder values for a trigger.

    Variables are evaluated in declaration order into the same mapping, so a
    variable sees the trigger values and every variable declared before it.
    """

    values: Dict[str, str] = {"command": trigger.command}
    if trigger.file is not None:
        values["file"] = trigger.file
    if trigger.line is not None:
        values["line"] = str(trigger.line)
    for var in variables:
        values[var.name] = resolve_var(var, values)
    return values


def replace_placeholder(text: str, name: str, value: str) -> str:
    """Replace every {{name}} in text, tolerating whitespace inside the braces."""

    pattern = re.compile(r"\{\{\s*" + re.escape(name) + r"\s*\}\}")
    # A callable keeps backslashes in the value literal.
    return pattern.sub(lambda _: value, text)


def render(template: str, values: Mapping[str, str]) -> str:
    """Substitute known placeholders; unknown ones stay as literal text."""

    rendered = template
    for name, value in values.items():
        rendered = replace_placeholder(rendered, name, value)
    return rendered


def format_run(action: Action, trigger: Trigger) -> str:
    """Return the action's run template filled in for the given trigger."""

    return render(action.run, build_values(trigger, action.vars))
