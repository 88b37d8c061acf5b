"""Tests for exceptions module."""

from __future__ import annotations

from undoable_set.exceptions import (
    HistoryEmptyError,
    InvalidElementError,
    UndoableSetError,
)


def test_history_empty_default_message():
    err = HistoryEmptyError()
    assert str(err) == "no action traced"
    assert isinstance(err, UndoableSetError)


def test_history_empty_to_dict():
    d = HistoryEmptyError().to_dict()
    assert d == {"error": "HISTORY_EMPTY", "message": "no action traced"}


def test_invalid_element_is_type_error():
    err = InvalidElementError("x")
    assert isinstance(err, TypeError)
    assert isinstance(err, UndoableSetError)
    assert "str" in str(err)


def test_invalid_element_to_dict():
    d = InvalidElementError(1.5).to_dict()
    assert d["error"] == "INVALID_ELEMENT"
    assert d["value"] == "1.5"
    assert d["type"] == "float"


def test_base_to_dict_uses_class_name():
    d = UndoableSetError("boom").to_dict()
    assert d == {"error": "UndoableSetError", "message": "boom"}
