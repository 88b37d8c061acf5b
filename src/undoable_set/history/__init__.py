"""Undo history — recording and replaying reversal actions."""

from .recorder import HistoryRecorder

__all__ = [
    "HistoryRecorder",
]
