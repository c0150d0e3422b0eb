"""Tests for intset.diagnostics: error formatting and actionable hints."""

from __future__ import annotations

from intset.diagnostics import format_error_with_hint, format_hint
from intset.errors import IntSetCapacityError, IntSetConfigError, IntSetError


def test_hint_for_capacity_error_names_required_size() -> None:
    exc = IntSetCapacityError("full", capacity=2, requested=3)
    hint = format_hint(exc)
    assert hint is not None
    assert "--capacity 3" in hint
    assert "set.max_size" in hint


def test_hint_for_missing_project_root() -> None:
    exc = IntSetConfigError("Could not find intset.toml by walking upward from start path.")
    hint = format_hint(exc)
    assert hint is not None
    assert "version = 1" in hint


def test_hint_for_bad_operand() -> None:
    hint = format_hint(IntSetConfigError("'x' is not an integer"))
    assert hint is not None
    assert "commas" in hint


def test_no_hint_for_other_errors() -> None:
    assert format_hint(IntSetConfigError("Unsupported config version: 2 (expected 1).")) is None
    assert format_hint(IntSetError("generic")) is None
    assert format_hint(ValueError("x")) is None


def test_format_error_with_hint() -> None:
    exc = IntSetCapacityError("cannot add 3: set is at capacity (2)", capacity=2, requested=3)
    out = format_error_with_hint(exc)
    lines = out.splitlines()
    assert lines[0] == "error: cannot add 3: set is at capacity (2)"
    assert lines[1].startswith("hint: ")


def test_format_error_without_hint_is_single_line() -> None:
    out = format_error_with_hint(IntSetError("boom"))
    assert out == "error: boom"


def test_format_error_falls_back_to_repr() -> None:
    out = format_error_with_hint(IntSetError())
    assert out == "error: IntSetError()"
