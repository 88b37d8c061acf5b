"""UndoableSet — an IntSet that records the inverse of every mutating call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .domain.actions import AddValue, DeleteValue
from .domain.int_set import IntSet
from .history.recorder import HistoryRecorder

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .domain.actions import Action

logger = logging.getLogger("undoable_set.undoable")


class UndoableSet:
    """Composition of an ``IntSet`` and a ``HistoryRecorder``.

    Both components are created here and never handed out. The recorder is
    bound to the inner set, so ``undo()`` mutates that set directly instead
    of going back through ``add``/``delete``: forward calls are recorded,
    replayed actions are not.

    The inverse of the *call* is recorded, not the inverse of its effect.
    Adding a value that is already a member still records ``DeleteValue``,
    so a following ``undo()`` removes it.

    Usage::

        s = UndoableSet()
        s.add(1)
        s.add(2)
        s.delete(1)   # {2}

        s.undo()      # {1, 2}
        s.undo()      # {1}
        s.undo()      # {}
        s.undo()      # raises HistoryEmptyError
    """

    def __init__(self) -> None:
        self._set = IntSet()
        self._history = HistoryRecorder(self._set)

    def add(self, x: int) -> None:
        """Insert *x* and record ``DeleteValue(x)``."""
        self._set.add(x)
        self._history.trace(AddValue(value=x).inverse())
        logger.debug("add(%d) recorded, history depth %d", x, self._history.depth)

    def delete(self, x: int) -> None:
        """Remove *x* and record ``AddValue(x)``."""
        self._set.delete(x)
        self._history.trace(DeleteValue(value=x).inverse())
        logger.debug("delete(%d) recorded, history depth %d", x, self._history.depth)

    def undo(self) -> Action:
        """Reverse the most recent ``add``/``delete`` call.

        Returns:
            The action that was applied to the set.

        Raises:
            HistoryEmptyError: If there is nothing left to undo.
        """
        return self._history.undo()

    # ── Read-only views ──────────────────────────────────────────

    def contains(self, x: int) -> bool:
        return self._set.contains(x)

    def snapshot(self) -> frozenset[int]:
        return self._set.snapshot()

    @property
    def history_depth(self) -> int:
        """Number of calls that can still be undone."""
        return self._history.depth

    @property
    def can_undo(self) -> bool:
        return not self._history.is_empty

    def __contains__(self, x: object) -> bool:
        return x in self._set

    def __len__(self) -> int:
        return len(self._set)

    def __iter__(self) -> Iterator[int]:
        return iter(self._set)

    def __repr__(self) -> str:
        members = ", ".join(str(x) for x in self._set)
        return (
            f"{type(self).__name__}({{{members}}}, "
            f"history_depth={self._history.depth})"
        )


def new_undoable_set() -> UndoableSet:
    """Return an empty ``UndoableSet`` with an empty history."""
    return UndoableSet()
