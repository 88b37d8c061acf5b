"""Exception hierarchy for undoable-set.

All exceptions inherit from ``UndoableSetError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class UndoableSetError(Exception):
    """Root exception for the undoable-set package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class HistoryEmptyError(UndoableSetError):
    """Raised by ``undo()`` when no traced action remains.

    An empty history is terminal for the caller: nothing is retried and
    neither the set nor the history is modified.
    """

    def __init__(self, message: str = "no action traced") -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "HISTORY_EMPTY",
            "message": self.message,
        }


class InvalidElementError(UndoableSetError, TypeError):
    """Raised when a non-integer element is offered to a set.

    ``bool`` is rejected even though it subclasses ``int``.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"IntSet elements must be int, got {type(value).__name__}: {value!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ELEMENT",
            "message": str(self),
            "value": repr(self.value),
            "type": type(self.value).__name__,
        }
