"""Domain primitives: the integer set and its reversal actions."""

from __future__ import annotations

from .actions import ACTION_ADAPTER, Action, AddValue, DeleteValue, apply_action
from .int_set import IntSet, check_element
from .value_object import ValueObject

__all__: list[str] = [
    "ACTION_ADAPTER",
    "Action",
    "AddValue",
    "DeleteValue",
    "IntSet",
    "ValueObject",
    "apply_action",
    "check_element",
]
