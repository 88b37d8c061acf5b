"""Shared fixtures for undoable-set tests."""

from __future__ import annotations

import pytest

from undoable_set import HistoryRecorder, IntSet, UndoableSet


@pytest.fixture
def int_set() -> IntSet:
    """Fresh, empty IntSet."""
    return IntSet()


@pytest.fixture
def recorder(int_set: IntSet) -> HistoryRecorder:
    """Recorder bound to the ``int_set`` fixture."""
    return HistoryRecorder(int_set)


@pytest.fixture
def undoable() -> UndoableSet:
    """Fresh UndoableSet with an empty history."""
    return UndoableSet()
