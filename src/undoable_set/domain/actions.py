"""Reversal actions recorded by ``UndoableSet``.

An action is one immutable reversal step, tagged by ``kind``:

* ``AddValue(value=x)``: applying it inserts *x* into the target set.
* ``DeleteValue(value=x)``: applying it removes *x* from the target set.

``Action`` is a pydantic discriminated union, so recorded history can be
validated from plain dicts through ``ACTION_ADAPTER``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, TypeAlias

from pydantic import Field, TypeAdapter

from .value_object import ValueObject

if TYPE_CHECKING:
    from .int_set import IntSet


class AddValue(ValueObject):
    """Insert ``value`` into the target set when applied."""

    kind: Literal["add"] = "add"
    value: int

    def inverse(self) -> DeleteValue:
        return DeleteValue(value=self.value)


class DeleteValue(ValueObject):
    """Remove ``value`` from the target set when applied."""

    kind: Literal["delete"] = "delete"
    value: int

    def inverse(self) -> AddValue:
        return AddValue(value=self.value)


Action: TypeAlias = Annotated[AddValue | DeleteValue, Field(discriminator="kind")]

ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


def apply_action(action: Action, target: IntSet) -> None:
    """Apply *action* directly to *target*.

    *target* is the raw set; nothing here records history.
    """
    match action:
        case AddValue(value=value):
            target.add(value)
        case DeleteValue(value=value):
            target.delete(value)
        case _:
            raise TypeError(f"Unknown action: {action!r}")
