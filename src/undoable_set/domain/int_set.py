"""IntSet — membership-only collection of unique integers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import InvalidElementError

if TYPE_CHECKING:
    from collections.abc import Iterator


def check_element(x: object) -> int:
    """Return *x* if it is a plain ``int``, else raise ``InvalidElementError``."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise InvalidElementError(x)
    return x


class IntSet:
    """A mutable set of integers.

    ``add`` and ``delete`` are idempotent: asking for the state the element
    is already in is a silent no-op.

    Usage::

        s = IntSet()
        s.add(3)
        s.add(3)  # no effect
        assert 3 in s
        s.delete(4)  # no effect
    """

    def __init__(self) -> None:
        self._data: dict[int, None] = {}

    def add(self, x: int) -> None:
        """Insert *x* if absent."""
        self._data[check_element(x)] = None

    def delete(self, x: int) -> None:
        """Remove *x* if present."""
        self._data.pop(check_element(x), None)

    def contains(self, x: int) -> bool:
        return x in self._data

    def snapshot(self) -> frozenset[int]:
        """Return an immutable copy of the current members."""
        return frozenset(self._data)

    def __contains__(self, x: object) -> bool:
        return x in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._data))

    def __repr__(self) -> str:
        members = ", ".join(str(x) for x in self)
        return f"{type(self).__name__}({{{members}}})"
