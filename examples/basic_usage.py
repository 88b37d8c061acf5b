"""
Basic usage of UndoableSet.

Walks through recording, LIFO undo, and the repeated-add case where
undo removes a value the second ``add`` never inserted.
"""

import logging

from undoable_set import HistoryEmptyError, new_undoable_set


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    s = new_undoable_set()
    s.add(1)
    s.add(2)
    s.delete(1)
    print("after add(1), add(2), delete(1):", s)

    while s.can_undo:
        action = s.undo()
        print(f"undo applied {action!r}:", s)

    # ── Repeated add ─────────────────────────────────────────────
    s.add(5)
    s.add(5)
    s.undo()
    print("add(5) twice, then one undo:", s)

    s.undo()
    try:
        s.undo()
    except HistoryEmptyError as exc:
        print("nothing left:", exc.to_dict())


if __name__ == "__main__":
    main()
