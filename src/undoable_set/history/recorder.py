"""HistoryRecorder — LIFO stack of actions replayed against one IntSet."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.actions import apply_action
from ..exceptions import HistoryEmptyError
from ..ports.undo import IHistoryRecorder

if TYPE_CHECKING:
    from ..domain.actions import Action
    from ..domain.int_set import IntSet

logger = logging.getLogger("undoable_set.history")


class HistoryRecorder(IHistoryRecorder):
    """Concrete recorder bound to the set its actions affect.

    Actions are opaque here: the recorder only stores them and hands them
    to ``apply_action`` together with the bound set.

    Usage::

        target = IntSet()
        history = HistoryRecorder(target)
        history.trace(DeleteValue(value=5))

        history.undo()  # removes 5 from ``target``
        history.undo()  # raises HistoryEmptyError
    """

    def __init__(self, target: IntSet) -> None:
        self._target = target
        self._actions: list[Action] = []

    def trace(self, action: Action) -> None:
        """Push *action* onto the history."""
        self._actions.append(action)

    def undo(self) -> Action:
        """Pop the most recent action and apply it to the bound set.

        Returns:
            The action that was applied.

        Raises:
            HistoryEmptyError: If the history is empty. Nothing is modified.
        """
        if not self._actions:
            logger.debug("Undo requested on empty history")
            raise HistoryEmptyError

        action = self._actions.pop()
        apply_action(action, self._target)
        logger.debug("Replayed %r, %d action(s) left", action, len(self._actions))
        return action

    @property
    def depth(self) -> int:
        return len(self._actions)

    @property
    def is_empty(self) -> bool:
        return not self._actions

    def peek(self) -> Action | None:
        """Return the action the next ``undo()`` would apply, or *None*."""
        return self._actions[-1] if self._actions else None

    def actions(self) -> tuple[Action, ...]:
        """Return the recorded actions, oldest first (copy)."""
        return tuple(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(depth={len(self._actions)})"
