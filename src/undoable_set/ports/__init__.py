from .undo import IHistoryRecorder

__all__ = [
    "IHistoryRecorder",
]
