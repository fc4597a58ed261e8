from __future__ import annotations

import re

import pytest

from core.errors import CaptureCountError, UnsupportedVarSourceError, VariableError
from core.models import Var, VarSource
from core.variables import resolve_var


def _var(pattern: str, source: VarSource = VarSource.FILE) -> Var:
    return Var(name="module", source=source, filter=re.compile(pattern), raw_filter=pattern)


def test_file_source_extracts_single_group() -> None:
    assert resolve_var(_var(r"(\w+)_test\.rs"), {"file": "foo_test.rs"}) == "foo"


@pytest.mark.parametrize("pattern", [r"\w+_test\.rs", r"(\w+)_(test)\.rs"])
def test_file_source_requires_exactly_one_group(pattern: str) -> None:
    with pytest.raises(CaptureCountError) as excinfo:
        resolve_var(_var(pattern), {"file": "foo_test.rs"})
    assert "one capture group" in excinfo.value.guidance


def test_capture_count_checked_even_without_match() -> None:
    with pytest.raises(CaptureCountError):
        resolve_var(_var(r"nomatch"), {"file": "foo_test.rs"})


def test_file_source_reports_non_matching_filter() -> None:
    with pytest.raises(VariableError) as excinfo:
        resolve_var(_var(r"(\w+)\.py$"), {"file": "foo_test.rs"})
    assert "does not match" in excinfo.value.message


def test_file_source_without_file() -> None:
    with pytest.raises(VariableError):
        resolve_var(_var(r"(\w+)"), {"command": "testAll"})


@pytest.mark.parametrize("source", [VarSource.LINE, VarSource.CURRENT_OR_ABOVE_LINE_CONTENT])
def test_reserved_sources_are_unsupported(source: VarSource) -> None:
    with pytest.raises(UnsupportedVarSourceError):
        resolve_var(_var(r"(\w+)", source), {"file": "foo.rs", "line": "3"})


def test_capture_count_checked_before_file_lookup() -> None:
    with pytest.raises(CaptureCountError):
        resolve_var(_var(r"(\w+)_(test)"), {"command": "testAll"})
