"""undoable-set — an integer set with a LIFO undo history.

Built by delegation: ``UndoableSet`` owns an ``IntSet`` and a
``HistoryRecorder`` and forwards every call explicitly.
"""

from __future__ import annotations

from .domain import (
    ACTION_ADAPTER,
    Action,
    AddValue,
    DeleteValue,
    IntSet,
    ValueObject,
    apply_action,
)
from .exceptions import HistoryEmptyError, InvalidElementError, UndoableSetError
from .history import HistoryRecorder
from .ports import IHistoryRecorder
from .undoable import UndoableSet, new_undoable_set

__all__: list[str] = [
    # Composition
    "UndoableSet",
    "new_undoable_set",
    # Domain
    "IntSet",
    "Action",
    "AddValue",
    "DeleteValue",
    "ACTION_ADAPTER",
    "ValueObject",
    "apply_action",
    # History
    "HistoryRecorder",
    "IHistoryRecorder",
    # Exceptions
    "UndoableSetError",
    "HistoryEmptyError",
    "InvalidElementError",
]
