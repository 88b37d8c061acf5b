"""IHistoryRecorder — port for a LIFO stack of reversal actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.actions import Action


@runtime_checkable
class IHistoryRecorder(Protocol):
    """
    Port for recording reversal actions and replaying them in LIFO order.

    A recorder is bound to the set its actions affect. Replaying an action
    mutates that set directly and must never record a new action.
    """

    def trace(self, action: Action) -> None:
        """Append *action* to the history."""
        ...

    def undo(self) -> Action:
        """Pop the most recent action, apply it and return it.

        Raises:
            HistoryEmptyError: If nothing has been traced.
        """
        ...

    def __len__(self) -> int:
        """Number of actions still available for undo."""
        ...
