"""Variable resolution (core domain).

Each VarSource maps to one resolver function. Adding a source means adding
an enum member and one entry in _RESOLVERS.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping

from core.errors import CaptureCountError, UnsupportedVarSourceError, VariableError
from core.models import Var, VarSource

_FILTER_HINT = "filters in the Tertestrial configuration file can only contain one capture group"


def _resolve_file(var: Var, values: Mapping[str, str]) -> str:
    groups = var.filter.groups
    if groups != 1:
        raise CaptureCountError(f"found {groups} capture groups in filter {var.raw_filter!r}", _FILTER_HINT)

    text = values.get("file")
    if text is None:
        raise VariableError(
            f"variable {var.name!r} needs a file but the trigger has none",
            "Only use file variables in actions whose trigger specifies a file",
        )

    found = var.filter.search(text)
    if found is None:
        raise VariableError(
            f"filter {var.raw_filter!r} of variable {var.name!r} does not match file {text!r}",
            "Please adjust the filter so that it matches all files this action handles",
        )
    return found.group(1) or ""


def _unsupported(var: Var, values: Mapping[str, str]) -> str:
    raise UnsupportedVarSourceError(
        f"variable source {var.source} is not supported yet (variable {var.name!r})",
        "Please use the \"file\" source for now",
    )


_RESOLVERS: Dict[VarSource, Callable[[Var, Mapping[str, str]], str]] = {
    VarSource.FILE: _resolve_file,
    VarSource.LINE: _unsupported,
    VarSource.CURRENT_OR_ABOVE_LINE_CONTENT: _unsupported,
}


def resolve_var(var: Var, values: Mapping[str, str]) -> str:
    """Compute the value of one variable from the values known so far."""

    return _RESOLVERS[var.source](var, values)
